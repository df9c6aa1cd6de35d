from __future__ import absolute_import

import types

import opentracing

SAMPLED_FLAG = 0x01
DEBUG_FLAG = 0x02


class SpanContext(opentracing.SpanContext):
    """Immutable identity of a span: trace/span ids, flags and baggage.

    Baggage is never changed in place. :meth:`with_baggage_item` returns a new
    context, so contexts already handed out keep their values.
    """

    def __init__(self, trace_id=None, span_id=None, parent_id=None, flags=0,
                 baggage=None):
        self.trace_id = trace_id
        self.span_id = span_id
        self.parent_id = parent_id
        self.flags = flags
        self._baggage = types.MappingProxyType(dict(baggage or {}))

    @property
    def baggage(self):
        """Read-only view of the baggage items."""
        return self._baggage

    @property
    def is_sampled(self):
        return self.flags & SAMPLED_FLAG == SAMPLED_FLAG

    @property
    def is_debug(self):
        return self.flags & DEBUG_FLAG == DEBUG_FLAG

    def get_baggage_item(self, key):
        return self._baggage.get(key)

    def with_baggage_item(self, key, value):
        """Returns a copy of this context with *key* set to *value*.

        A ``None`` value removes the key from the copy.
        """
        baggage = dict(self._baggage)
        if value is None:
            baggage.pop(key, None)
        else:
            baggage[key] = value
        return SpanContext(
            trace_id=self.trace_id,
            span_id=self.span_id,
            parent_id=self.parent_id,
            flags=self.flags,
            baggage=baggage,
        )

    def to_dict(self):
        return {
            'trace_id': self.trace_id,
            'span_id': self.span_id,
            'parent_id': self.parent_id,
            'flags': self.flags,
            'baggage': dict(self._baggage),
        }

    def __repr__(self):
        return 'SpanContext(trace_id=%r, span_id=%r, parent_id=%r, flags=%r)' % (
            self.trace_id, self.span_id, self.parent_id, self.flags)
