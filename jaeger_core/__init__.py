from __future__ import absolute_import

from opentracing import Reference, child_of, follows_from  # noqa

from .config import Config  # noqa
from .errors import SpanAlreadyFinished  # noqa
from .reporter import (  # noqa
    CompositeReporter,
    InMemoryReporter,
    LoggingReporter,
    NullReporter,
)
from .scope import Scope  # noqa
from .scope_manager import ScopeManager  # noqa
from .span import Span  # noqa
from .span_context import SpanContext  # noqa

__version__ = '0.1.0'
