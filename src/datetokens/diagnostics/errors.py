"""datetokens exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the matching builtin exception
(TypeError, ValueError, LookupError) so callers can catch either.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateTokensError(Exception):
    """Base exception for all datetokens errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateTokensError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class DateArgumentTypeError(DateTokensError, TypeError):
    """Argument of an unsupported type.

    Raised for a non-string format, a date of unrecognized shape (including
    None), and misuse of the locale and registry APIs. Never recovered
    locally.
    """


class InvalidDateError(DateTokensError, ValueError):
    """Date input has an accepted type but denotes no valid instant.

    Raised for unparsable ISO 8601 strings and for timestamps that are not
    finite or fall outside the representable range.

    Attributes:
        input_value: The value that failed to normalize
    """

    def __init__(self, message: str | Diagnostic, *, input_value: object = None) -> None:
        """Initialize InvalidDateError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The value that failed to normalize
        """
        super().__init__(message)
        self.input_value = input_value


class MissingTemplateError(DateTokensError, LookupError):
    """Formatter built by create_formatter() has no usable template.

    Attributes:
        locale_code: Locale that was active when the lookup failed
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize MissingTemplateError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: Locale that was active when the lookup failed
        """
        super().__init__(message)
        self.locale_code = locale_code


class FormatterNameError(DateTokensError, ValueError):
    """Named formatter registered under an empty name."""
