from __future__ import absolute_import

import logging

import opentracing

from .scope import Scope

logger = logging.getLogger('jaeger_tracing')


class ScopeManager(opentracing.ScopeManager):
    """The :class:`ScopeManager` abstracts both the activation of
    a :class:`Span` and access to an active :class:`Span`/:class:`Scope`.

    Active scopes are kept on a stack; the most recent activation is the
    active one. An instance belongs to a single execution context (one
    request or task) and does no locking.
    """
    def __init__(self):
        self._stack = []

    def activate(self, span, finish_on_close):
        """Makes a :class:`Span` active.
        :param span: the :class:`Span` that should become active.
        :param finish_on_close: whether :class:`Span` should be automatically
            finished when :meth:`Scope.close()` is called.
        :rtype: Scope
        :return: a :class:`Scope` to control the end of the active period for
            *span*. It is a programming error to neglect to call
            :meth:`Scope.close()` on the returned instance.
        """
        scope = Scope(self, span, finish_on_close)
        self._stack.append(scope)
        logger.debug('activated %r, depth %d', scope, len(self._stack))
        return scope

    @property
    def active(self):
        """Returns the currently active :class:`Scope` which can be used to access the
        currently active :attr:`Scope.span`.
        :rtype: Scope
        :return: the :class:`Scope` that is active, or ``None`` if not
            available.
        """
        if not self._stack:
            return None
        return self._stack[-1]

    def del_active(self, scope):
        """Removes *scope* from the stack, wherever it sits.

        The span is not finished here; :meth:`Scope.close()` takes care of
        ``finish_on_close``.
        :rtype: bool
        :return: ``True`` if *scope* was on the stack.
        """
        for i in range(len(self._stack) - 1, -1, -1):
            if self._stack[i] is scope:
                del self._stack[i]
                logger.debug('deactivated %r, depth %d', scope,
                             len(self._stack))
                return True
        return False

    def __len__(self):
        return len(self._stack)

    def __bool__(self):
        # an empty manager is still a manager
        return True
