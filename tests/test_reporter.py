import logging
from unittest import mock

from jaeger_core import (
    CompositeReporter,
    InMemoryReporter,
    LoggingReporter,
    NullReporter,
    Span,
)


def test_null_reporter(span):
    reporter = NullReporter()
    reporter.report_span(span)
    reporter.close()


def test_in_memory_reporter(context):
    reporter = InMemoryReporter()
    span = Span('test', context, [], reporter=reporter)
    span.finish()

    spans = reporter.get_spans()
    assert spans == [span]
    spans.clear()
    assert reporter.get_spans() == [span]


def test_logging_reporter(span, caplog):
    reporter = LoggingReporter()
    with caplog.at_level(logging.INFO, logger='jaeger_tracing'):
        reporter.report_span(span)
    assert 'Reporting span' in caplog.text
    assert "'operation_name': 'test'" in caplog.text


def test_logging_reporter_custom_logger(span):
    logger = mock.MagicMock()
    LoggingReporter(logger=logger).report_span(span)
    logger.info.assert_called_once()


def test_composite_reporter(span):
    first = mock.MagicMock()
    second = mock.MagicMock()
    reporter = CompositeReporter(first, second)

    reporter.report_span(span)
    reporter.close()

    first.report_span.assert_called_once_with(span)
    second.report_span.assert_called_once_with(span)
    first.close.assert_called_once_with()
    second.close.assert_called_once_with()
