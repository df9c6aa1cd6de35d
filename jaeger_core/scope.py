from __future__ import absolute_import

import opentracing

from .span import Span


class Scope(opentracing.Scope):
    """A scope formalizes the activation and deactivation of a :class:`Span`,
    usually from a CPU standpoint. A :class:`Span` may be extant (not yet
    finished) while not active, for instance the client side of an RPC
    blocked on IO. A scope defines when a given :class:`Span` is scheduled
    and on the path.
    :param manager: the :class:`ScopeManager` that created this :class:`Scope`.
    :type manager: ScopeManager
    :param span: the :class:`Span` used for this :class:`Scope`.
    :type span: Span
    :param finish_on_close: whether :meth:`close()` also finishes *span*.
    :type finish_on_close: bool
    """
    def __init__(self, manager, span, finish_on_close):
        """Initializes a scope for *span*."""
        super(Scope, self).__init__(manager, span)
        self._finish_on_close = finish_on_close
        self._closed = False

    @property
    def finish_on_close(self):
        return self._finish_on_close

    def close(self):
        """Marks the end of the active period for this :class:`Scope`,
        removing it from :attr:`ScopeManager.active` and finishing the span
        if the scope was activated with ``finish_on_close``.
        Closing an already closed scope does nothing.
        """
        if self._closed:
            return
        self._closed = True
        self._manager.del_active(self)
        if self._finish_on_close:
            self._span.finish()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Calls :meth:`close()` when the execution is outside the Python
        Context Manager.
        If exception has occurred during execution, it is automatically logged
        and added as a tag to the :class:`Span`.
        :attr:`~opentracing.ext.tags.ERROR` will also be set to `True`.
        The scope is closed even if recording the error fails.
        """
        try:
            Span._on_error(self.span, exc_type, exc_val, exc_tb)
        finally:
            self.close()

    def __repr__(self):
        return 'Scope(span=%r, finish_on_close=%r)' % (
            self._span, self._finish_on_close)
