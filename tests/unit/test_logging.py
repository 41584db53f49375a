"""Unit tests for structured logging."""

import json
import logging

import pytest

from ssp_operator.observability.logging import (
    CorrelationIDFilter,
    HealthProbeFilter,
    OperatorLogger,
    StructuredFormatter,
    get_correlation_id,
    set_correlation_id,
    setup_structured_logging,
)


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="ssp_operator.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_formats_structured_fields(self):
        record = _record(
            "SSP test-ssp rejected",
            resource_name="test-ssp",
            namespace="test-ns",
            allowed=False,
            correlation_id="abc12345",
        )

        data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "SSP test-ssp rejected"
        assert data["resource_name"] == "test-ssp"
        assert data["namespace"] == "test-ns"
        assert data["allowed"] is False
        assert data["correlation_id"] == "abc12345"
        assert "operation" not in data


class TestFilters:
    def test_correlation_filter_uses_context(self):
        set_correlation_id("fixed-id")
        record = _record("hello")

        assert CorrelationIDFilter().filter(record) is True
        assert record.correlation_id == "fixed-id"
        assert get_correlation_id() == "fixed-id"

    def test_health_probe_filter(self):
        probe_filter = HealthProbeFilter()

        assert probe_filter.filter(_record("GET /healthz 200")) is False
        assert probe_filter.filter(_record("Validating SSP")) is True
        assert HealthProbeFilter(False).filter(_record("GET /healthz 200")) is True


class TestOperatorLogger:
    def test_rejection_logged_as_warning(self, caplog):
        caplog.set_level(logging.INFO, logger="ssp_operator.test")

        OperatorLogger("ssp_operator.test").log_admission_decision(
            "SSP", "test-ssp", "test-ns", "CREATE", allowed=False, reason="duplicate"
        )

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "SSP test-ssp rejected: duplicate"
        assert record.reason == "duplicate"

    def test_acceptance_logged_as_info(self, caplog):
        caplog.set_level(logging.INFO, logger="ssp_operator.test")

        OperatorLogger("ssp_operator.test").log_admission_decision(
            "SSP", "test-ssp", "test-ns", "UPDATE", allowed=True
        )

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.allowed is True

    def test_admission_start_sets_correlation_id(self, caplog):
        caplog.set_level(logging.INFO, logger="ssp_operator.test")

        corr_id = OperatorLogger("ssp_operator.test").log_admission_start(
            "SSP", "test-ssp", "test-ns", "CREATE", correlation_id="req-1"
        )

        assert corr_id == "req-1"
        assert get_correlation_id() == "req-1"
        assert "operation: CREATE" in caplog.records[-1].getMessage()


class TestSetupStructuredLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configures_root_and_webhook_loggers(self):
        setup_structured_logging(log_level="DEBUG", webhook_log_level="WARNING")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("ssp_operator.webhooks").level == logging.WARNING
        assert logging.getLogger("kopf").level == logging.WARNING

    def test_plain_formatting(self):
        setup_structured_logging(
            enable_json_formatting=False, correlation_id_enabled=False
        )

        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, StructuredFormatter)
        assert not any(isinstance(f, CorrelationIDFilter) for f in handler.filters)
