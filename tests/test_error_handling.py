"""
Unit tests for outcome reporting and error types.
"""

import logging

from pixelpicker.error_handling import (
    ConfigDecodeError,
    ConfigError,
    ErrorCategory,
    ErrorSeverity,
    OperationOutcome,
    report_outcome
)


LOGGER_NAME = "pixelpicker.tests.outcome"


class TestOperationOutcome:
    """Test OperationOutcome construction."""

    def test_ok_outcome(self):
        outcome = OperationOutcome.ok("save", "Saved")

        assert outcome.success
        assert bool(outcome) is True
        assert outcome.category is None
        assert outcome.timestamp is not None

    def test_failure_outcome(self):
        error = OSError("disk full")
        outcome = OperationOutcome.failure("save", ErrorCategory.WRITE, "Failed", exception=error)

        assert not outcome
        assert outcome.category == ErrorCategory.WRITE
        assert outcome.severity == ErrorSeverity.HIGH
        assert outcome.exception is error
        assert not outcome.is_cold_start

    def test_cold_start(self):
        outcome = OperationOutcome.ok("load", "Not found, using defaults", cold_start=True)

        assert outcome.success
        assert outcome.is_cold_start
        assert outcome.category is None


class TestReportOutcome:
    """Test the logging sink."""

    def test_success_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            report_outcome(logging.getLogger(LOGGER_NAME), OperationOutcome.ok("load", "Loaded it"))

        assert caplog.records[-1].levelno == logging.INFO
        assert caplog.records[-1].getMessage() == "Loaded it"

    def test_low_severity_logged_at_info(self, caplog):
        outcome = OperationOutcome.failure(
            "load", ErrorCategory.READ, "Minor read hiccup", severity=ErrorSeverity.LOW
        )
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            report_outcome(logging.getLogger(LOGGER_NAME), outcome)

        assert caplog.records[-1].levelno == logging.INFO

    def test_failure_logged_at_error_with_exception(self, caplog):
        outcome = OperationOutcome.failure(
            "save", ErrorCategory.WRITE, "Failed to save", exception=PermissionError("denied")
        )
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            returned = report_outcome(logging.getLogger(LOGGER_NAME), outcome)

        assert returned is outcome
        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].getMessage() == "Failed to save: denied"


class TestErrors:
    """Test exception types."""

    def test_decode_error_is_config_error(self):
        assert issubclass(ConfigDecodeError, ConfigError)

    def test_decode_error_position_in_message(self):
        error = ConfigDecodeError("Malformed", line=3, column=7)
        assert str(error) == "Malformed (line 3, column 7)"

    def test_decode_error_without_position(self):
        assert str(ConfigDecodeError("Root is not an object")) == "Root is not an object"
