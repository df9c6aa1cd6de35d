class SpanAlreadyFinished(Exception):
    """Raised when a finished :class:`~jaeger_core.span.Span` is mutated.

    Only strict spans raise it; see the ``strict`` argument of the span.
    """

    def __init__(self, span, operation):
        self.span = span
        self.operation = operation
        super(SpanAlreadyFinished, self).__init__(
            '%s() called on finished span %r' % (operation, span.operation_name))
