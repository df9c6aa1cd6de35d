from __future__ import absolute_import

import logging
from typing import Union

import opentracing
from opentracing import logs as ext_logs
from opentracing.ext import tags as ext_tags

from .errors import SpanAlreadyFinished
from .utils import now_micros, timestamp_micros

logger = logging.getLogger('jaeger_tracing')

TagValue = Union[str, int, float, bool]

BAGGAGE_EVENT = 'baggage'


class Span(opentracing.Span):
    """Mutable record of one traced unit of work.

    Times are integer microseconds since epoch. The span holds its
    :class:`SpanContext`; baggage changes come back from
    :meth:`add_baggage_item` as a new context. Only the OpenTracing
    :meth:`set_baggage_item` swaps the span's own context.

    :param operation_name: name of the operation represented by the span.
    :param context: the :class:`~jaeger_core.span_context.SpanContext`.
    :param references: causal links, a sequence of
        :class:`opentracing.Reference`. Frozen at construction.
    :param start_time: explicit start in microseconds; defaults to now.
    :param reporter: optional object with a ``report_span(span)`` method,
        called on the first :meth:`finish`.
    :param strict: when true, :meth:`log_kv`, :meth:`add_baggage_item` and
        :meth:`finish` with log records raise :class:`SpanAlreadyFinished`
        on a finished span.
    """

    def __init__(self, operation_name, context, references=None,
                 start_time=None, reporter=None, strict=True):
        super(Span, self).__init__(tracer=None, context=context)
        self._operation_name = operation_name
        self._start_time = now_micros() if start_time is None else start_time
        self._finish_time = None
        self._duration = None
        self._span_kind = ''
        self._tags = {}
        self._logs = []
        self._references = tuple(references or ())
        self._reporter = reporter
        self._strict = strict

    @property
    def operation_name(self):
        return self._operation_name

    def overwrite_operation_name(self, operation_name):
        self._operation_name = operation_name

    def set_operation_name(self, operation_name):
        self.overwrite_operation_name(operation_name)
        return self

    @property
    def start_time(self):
        return self._start_time

    @property
    def finish_time(self):
        return self._finish_time

    @property
    def duration(self):
        """Microseconds between start and finish, ``None`` until finished."""
        return self._duration

    @property
    def span_kind(self):
        return self._span_kind

    @property
    def tags(self):
        return dict(self._tags)

    @property
    def logs(self):
        return list(self._logs)

    @property
    def references(self):
        return self._references

    @property
    def reporter(self):
        return self._reporter

    @property
    def strict(self):
        return self._strict

    @property
    def is_finished(self):
        return self._finish_time is not None

    def finish(self, finish_time=None, log_records=None):
        """Marks the end of the span.

        Every call recomputes :attr:`finish_time` and :attr:`duration`; the
        reporter only sees the span on the first call.

        :param finish_time: microseconds (or any value accepted by
            :func:`~jaeger_core.utils.timestamp_micros`); defaults to now.
        :param log_records: mappings with ``fields`` and an optional
            ``timestamp``, appended to the logs. Subject to the same
            finished-span rule as :meth:`log_kv`.
        """
        first = not self.is_finished
        if log_records and not first:
            self._check_not_finished('finish')
        self._finish_time = timestamp_micros(finish_time)
        self._duration = self._finish_time - self._start_time
        for record in log_records or ():
            self._append_log(record.get('fields') or {},
                             record.get('timestamp'))
        if not first:
            logger.debug('span %r finished again, not re-reported',
                         self._operation_name)
            return
        if self._reporter is not None:
            self._reporter.report_span(self)

    def set_tag(self, key, value):
        if key == ext_tags.SPAN_KIND:
            self._span_kind = value
        self._tags[key] = value
        return self

    def log_kv(self, key_values, timestamp=None):
        """Appends a structured log entry.

        :param key_values: mapping of field names to values.
        :param timestamp: ``int`` microseconds, ``float`` seconds or a
            :class:`datetime.datetime`; defaults to now.
        """
        self._check_not_finished('log_kv')
        self._append_log(key_values, timestamp)
        return self

    def add_baggage_item(self, key, value):
        """Records a ``baggage`` log entry and returns a new context holding
        the item. :attr:`context` itself is left as it was.

        :rtype: SpanContext
        """
        self._check_not_finished('add_baggage_item')
        self._append_log({'event': BAGGAGE_EVENT, 'key': key, 'value': value})
        return self.context.with_baggage_item(key, value)

    def set_baggage_item(self, key, value):
        """OpenTracing entry point for baggage. Unlike
        :meth:`add_baggage_item`, the span adopts the new context, so later
        :meth:`get_baggage_item` calls and child spans see the item.

        :rtype: Span
        """
        self._context = self.add_baggage_item(key, value)
        return self

    def get_baggage_item(self, key):
        return self.context.get_baggage_item(key)

    def serialize(self):
        """Returns a snapshot of the span built at call time."""
        return {
            'operation_name': self._operation_name,
            'start_time': self._start_time,
            'finish_time': self._finish_time,
            'span_kind': self._span_kind,
            'span_context': self.context,
            'duration': self._duration,
            'logs': [
                {'timestamp': log['timestamp'], 'fields': dict(log['fields'])}
                for log in self._logs
            ],
            'tags': dict(self._tags),
            'references': list(self._references),
        }

    def __exit__(self, exc_type, exc_val, exc_tb):
        Span._on_error(self, exc_type, exc_val, exc_tb)
        self.finish()

    @staticmethod
    def _on_error(span, exc_type, exc_val, exc_tb):
        """Tags *span* with the exception raised in a ``with`` block.

        A span finished inside the block is left untouched, so the caller's
        exception is never replaced by :class:`SpanAlreadyFinished`.
        """
        if not isinstance(span, Span):
            opentracing.Span._on_error(span, exc_type, exc_val, exc_tb)
            return
        if not exc_val:
            return
        if span.is_finished:
            logger.debug('span %r already finished, error %r not recorded',
                         span.operation_name, exc_val)
            return
        span.set_tag(ext_tags.ERROR, True)
        span._append_log({
            ext_logs.EVENT: ext_tags.ERROR,
            ext_logs.MESSAGE: str(exc_val),
            ext_logs.ERROR_OBJECT: exc_val,
            ext_logs.ERROR_KIND: exc_type,
            ext_logs.STACK: exc_tb,
        })

    def _append_log(self, fields, timestamp=None):
        self._logs.append({
            'timestamp': timestamp_micros(timestamp),
            'fields': dict(fields),
        })

    def _check_not_finished(self, operation):
        if not self.is_finished:
            return
        if self._strict:
            raise SpanAlreadyFinished(self, operation)
        logger.debug('%s() on finished span %r', operation,
                     self._operation_name)

    def __repr__(self):
        return 'Span(operation_name=%r, context=%r, start_time=%r, ' \
            'finish_time=%r)' % (self._operation_name, self.context,
                                 self._start_time, self._finish_time)
