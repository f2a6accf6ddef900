"""
Outcome values for load/save operations and the logging sink that consumes them.

Load and save report what happened through an OperationOutcome rather than by
raising, so a broken config file or a read-only disk never takes down the
application.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional


class ErrorSeverity(IntEnum):
    """Error severity levels."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class ErrorCategory(Enum):
    """Error categories for load/save failures."""
    READ = "read"
    DECODE = "decode"
    SERIALIZATION = "serialization"
    DIRECTORY = "directory"
    WRITE = "write"


@dataclass
class OperationOutcome:
    """
    Result of a load or save operation.

    Attributes:
        operation: Name of the operation ("load" or "save")
        success: Whether the operation completed
        message: Human-readable description
        category: Failure category, None on success
        severity: Failure severity, None on success
        exception: The underlying exception, if any
        cold_start: True when a load found no config file and kept the defaults
        timestamp: When the outcome was recorded
    """
    operation: str
    success: bool
    message: str
    category: Optional[ErrorCategory] = None
    severity: Optional[ErrorSeverity] = None
    exception: Optional[BaseException] = None
    cold_start: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def ok(cls, operation: str, message: str, cold_start: bool = False) -> 'OperationOutcome':
        """Create a successful outcome."""
        return cls(operation=operation, success=True, message=message, cold_start=cold_start)

    @classmethod
    def failure(cls, operation: str, category: ErrorCategory, message: str,
                exception: Optional[BaseException] = None,
                severity: ErrorSeverity = ErrorSeverity.HIGH) -> 'OperationOutcome':
        """Create a failed outcome."""
        return cls(
            operation=operation,
            success=False,
            message=message,
            category=category,
            severity=severity,
            exception=exception
        )

    @property
    def is_cold_start(self) -> bool:
        """True when a load found no config file at all."""
        return self.cold_start

    def __bool__(self) -> bool:
        return self.success


def report_outcome(logger: logging.Logger, outcome: OperationOutcome) -> OperationOutcome:
    """
    Write an outcome to the log and hand it back.

    Successes and low-severity failures go to info; everything else is an
    error.
    """
    if outcome.success or outcome.severity == ErrorSeverity.LOW:
        logger.info(outcome.message)
    elif outcome.exception is not None:
        logger.error(f"{outcome.message}: {outcome.exception}")
    else:
        logger.error(outcome.message)
    return outcome
