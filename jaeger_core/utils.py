from __future__ import absolute_import

import datetime
import time

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def now_micros():
    """Returns the current wall clock as integer microseconds since epoch."""
    return int(time.time() * 1000000)


def timestamp_micros(value=None):
    """Normalizes a timestamp to integer microseconds since epoch.

    :param value: ``None`` for the current time, an ``int`` already in
        microseconds, a ``float`` in seconds (as returned by ``time.time()``),
        or a :class:`datetime.datetime`. Naive datetimes are taken as UTC.
    :rtype: int
    """
    if value is None:
        return now_micros()
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool):
        raise TypeError('unsupported timestamp type: bool')
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value * 1000000)
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        delta = value - _EPOCH
        return (delta.days * 86400 + delta.seconds) * 1000000 + \
            delta.microseconds
    raise TypeError('unsupported timestamp type: %s' % type(value).__name__)
