"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for date formatting failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Coarse error categorization.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        ARGUMENT: Caller passed a value of an unsupported type
        DATE: Date input had the right type but no valid instant
        CONFIGURATION: Formatter was built without a usable template
        LOCALE: Locale data could not be resolved (never raised)
    """

    ARGUMENT = "argument"
    DATE = "date"
    CONFIGURATION = "configuration"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument type errors
        2000-2999: Date value errors
        3000-3999: Configuration errors
        4000-4999: Locale resolution failures (logged, not raised)
    """

    # Argument type errors (1000-1999)
    FORMAT_NOT_STRING = 1001
    DATE_TYPE_UNSUPPORTED = 1002
    LOCALE_CODE_NOT_STRING = 1003
    LOCALE_DATA_TYPE_INVALID = 1004
    FORMATTER_NAME_INVALID = 1005
    FORMATTER_NOT_CALLABLE = 1006
    FORMATS_TYPE_INVALID = 1007
    PAD_VALUE_NOT_INTEGER = 1008

    # Date value errors (2000-2999)
    DATE_STRING_INVALID = 2001
    TIMESTAMP_INVALID = 2002
    DATE_OUT_OF_RANGE = 2003

    # Configuration errors (3000-3999)
    TEMPLATE_MISSING = 3001

    # Locale resolution failures (4000-4999)
    LOCALE_NOT_FOUND = 4001
    LOCALE_DATA_MALFORMED = 4002
    LOCALE_CODE_INVALID = 4003

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.ARGUMENT
            case 2:
                return ErrorCategory.DATE
            case 3:
                return ErrorCategory.CONFIGURATION
            case _:
                return ErrorCategory.LOCALE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_name: Argument that caused the error (type errors)
        expected_type: Expected type description (type errors)
        received_type: Actual type received (type errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[FORMAT_NOT_STRING]: Argument `format` must be a string
              = argument: format
              = expected: str
              = received: int

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
