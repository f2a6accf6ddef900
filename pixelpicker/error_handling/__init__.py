"""
Error types and outcome reporting for the Pixel Picker configuration engine.

Load and save failures are never raised to callers; they are captured as
OperationOutcome values and written to the log. Only the pure text decoder
raises, with ConfigDecodeError.
"""

from .errors import ConfigError, ConfigDecodeError
from .outcome import ErrorCategory, ErrorSeverity, OperationOutcome, report_outcome

__all__ = [
    'ConfigError',
    'ConfigDecodeError',
    'ErrorCategory',
    'ErrorSeverity',
    'OperationOutcome',
    'report_outcome'
]
