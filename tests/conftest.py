import pytest

from jaeger_core import InMemoryReporter, ScopeManager, Span, SpanContext


@pytest.fixture
def context():
    return SpanContext(trace_id=1, span_id=2, parent_id=None, flags=1,
                       baggage={'user': 'alice'})


@pytest.fixture
def reporter():
    return InMemoryReporter()


@pytest.fixture
def span(context, reporter):
    return Span('test', context, [], reporter=reporter)


@pytest.fixture
def scope_manager():
    return ScopeManager()
