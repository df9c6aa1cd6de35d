from __future__ import absolute_import

import logging
import os

from .reporter import CompositeReporter, LoggingReporter, NullReporter
from .scope_manager import ScopeManager
from .span import Span

logger = logging.getLogger('jaeger_tracing')

ENV_STRICT_FINISH = 'JAEGER_STRICT_FINISH'

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


def _parse_bool(value, name):
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError('%s must be a boolean, got %r' % (name, value))


class Config(object):
    """Wraps a YAML-style configuration dictionary.

    Example::

        config = Config({
            'service_name': 'billing',
            'logging': True,
            'strict_finish': False,
        })
        span = config.create_span('charge', SpanContext(trace_id=1, span_id=1))
    """

    def __init__(self, config, service_name=None):
        self.config = config
        self._service_name = config.get('service_name', service_name)
        if not self._service_name:
            raise ValueError('service_name required in the config or param')
        self._reporter = None

    @property
    def service_name(self):
        return self._service_name

    @property
    def logging(self):
        return _parse_bool(self.config.get('logging', False), 'logging')

    @property
    def strict_finish(self):
        if 'strict_finish' in self.config:
            return _parse_bool(self.config['strict_finish'], 'strict_finish')
        if ENV_STRICT_FINISH in os.environ:
            return _parse_bool(os.environ[ENV_STRICT_FINISH],
                               ENV_STRICT_FINISH)
        return True

    def create_reporter(self):
        """Returns the reporter for spans created by this config.

        The ``reporter`` entry of the dictionary is used when present,
        otherwise spans are dropped. With ``logging`` on, spans are logged
        as well. Built once and reused.
        """
        if self._reporter is not None:
            return self._reporter
        reporter = self.config.get('reporter') or NullReporter()
        if self.logging:
            reporter = CompositeReporter(reporter, LoggingReporter(logger))
        logger.debug('service %s using reporter %r', self.service_name,
                     reporter)
        self._reporter = reporter
        return reporter

    def create_scope_manager(self):
        return ScopeManager()

    def create_span(self, operation_name, context, references=None,
                    start_time=None):
        return Span(
            operation_name,
            context,
            references=references,
            start_time=start_time,
            reporter=self.create_reporter(),
            strict=self.strict_finish,
        )
