"""
Test suite for logging configuration and correlation ID propagation.

System role: Verification of observability wiring
"""

import logging

import pytest

from coursehub.configs.observability import ObservabilitySettings
from coursehub.observability import (
    configure_logging,
    correlation_scope,
    get_correlation_id,
    set_correlation_id,
)
from coursehub.observability.correlation import clear_correlation_id
from coursehub.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def reset_correlation_id():
    yield
    clear_correlation_id()


class TestCorrelationId:
    def test_set_generates_when_missing(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value

    def test_set_keeps_given_value(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"

    def test_clear(self) -> None:
        set_correlation_id("abc")
        clear_correlation_id()

        assert get_correlation_id() is None

    def test_blank_and_long_values_are_normalized(self) -> None:
        assert set_correlation_id("   ") != ""
        assert len(set_correlation_id("x" * 500)) == 128

    def test_scope_restores_previous_value(self) -> None:
        set_correlation_id("outer")

        with correlation_scope("inner") as bound:
            assert bound == "inner"
            assert get_correlation_id() == "inner"

        assert get_correlation_id() == "outer"


class TestCorrelationIdFilter:
    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

    def test_attaches_current_id(self) -> None:
        set_correlation_id("req-1")
        record = self._record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-1"

    def test_placeholder_outside_request(self) -> None:
        record = self._record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.usefixtures("restore_root_logger")
    def test_applies_levels_and_single_handler(self) -> None:
        configure_logging(ObservabilitySettings(level="debug", sql_level="error"))
        configure_logging(ObservabilitySettings(level="warning", sql_level="error"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
