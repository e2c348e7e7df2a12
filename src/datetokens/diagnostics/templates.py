"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


def _type_name(value: object) -> str:
    return type(value).__name__


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short and gives tests one place to check wording.
    """

    # ------------------------------------------------------------------
    # Argument type errors
    # ------------------------------------------------------------------

    @staticmethod
    def format_not_string(value: object) -> Diagnostic:
        """Dispatcher received a non-string format argument.

        Args:
            value: The rejected format argument

        Returns:
            Diagnostic for FORMAT_NOT_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_NOT_STRING,
            message="Argument `format` must be a string",
            hint="Pass a token template such as 'YYYY-MM-dd' or a registered formatter name",
            argument_name="format",
            expected_type="str",
            received_type=_type_name(value),
        )

    @staticmethod
    def date_type_unsupported(value: object) -> Diagnostic:
        """Date input is not one of the accepted representations.

        Args:
            value: The rejected date argument

        Returns:
            Diagnostic for DATE_TYPE_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.DATE_TYPE_UNSUPPORTED,
            message=(
                "Argument `date` must be a datetime, date, "
                "Unix timestamp in milliseconds or ISO 8601 string"
            ),
            hint="Omit the argument to format the current instant",
            argument_name="date",
            expected_type="datetime | date | int | float | Decimal | str",
            received_type=_type_name(value),
        )

    @staticmethod
    def locale_code_not_string(value: object) -> Diagnostic:
        """set_locale() received a non-string code."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CODE_NOT_STRING,
            message="Argument `code` must be a string",
            argument_name="code",
            expected_type="str",
            received_type=_type_name(value),
        )

    @staticmethod
    def locale_data_type_invalid(value: object) -> Diagnostic:
        """set_locale() received data that is not a LocaleData record."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_TYPE_INVALID,
            message="Argument `data` must be a LocaleData instance",
            hint="Build locale tables with datetokens.LocaleData(...)",
            argument_name="data",
            expected_type="LocaleData",
            received_type=_type_name(value),
        )

    @staticmethod
    def formatter_name_not_string(value: object) -> Diagnostic:
        """register() received a non-string name."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NAME_INVALID,
            message="Formatter name must be a string",
            argument_name="name",
            expected_type="str",
            received_type=_type_name(value),
        )

    @staticmethod
    def formatter_name_empty() -> Diagnostic:
        """register() received an empty name."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NAME_INVALID,
            message="Formatter name must not be empty",
            hint="An empty name would shadow the empty template",
            argument_name="name",
        )

    @staticmethod
    def formatter_not_callable(name: str, value: object) -> Diagnostic:
        """register() received something that cannot format an instant.

        Args:
            name: Name the caller tried to register
            value: The rejected formatter

        Returns:
            Diagnostic for FORMATTER_NOT_CALLABLE
        """
        msg = f"Formatter '{name}' must be callable, a template string or a locale mapping"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_CALLABLE,
            message=msg,
            argument_name="formatter",
            expected_type="Callable[[datetime], str] | str | Mapping[str, str]",
            received_type=_type_name(value),
        )

    @staticmethod
    def formats_type_invalid(value: object) -> Diagnostic:
        """create_formatter() received neither a mapping nor a template."""
        return Diagnostic(
            code=DiagnosticCode.FORMATS_TYPE_INVALID,
            message="Argument `formats` must be a template string or a mapping of locale to template",
            hint="Example: {'en': 'MMMM d, YYYY', 'default': 'YYYY-MM-dd'}",
            argument_name="formats",
            expected_type="str | Mapping[str, str]",
            received_type=_type_name(value),
        )

    @staticmethod
    def pad_value_not_integer(value: object) -> Diagnostic:
        """pad() received a non-integer value or width."""
        return Diagnostic(
            code=DiagnosticCode.PAD_VALUE_NOT_INTEGER,
            message="pad() accepts integers only",
            expected_type="int",
            received_type=_type_name(value),
        )

    # ------------------------------------------------------------------
    # Date value errors
    # ------------------------------------------------------------------

    @staticmethod
    def date_string_invalid(value: str) -> Diagnostic:
        """Date string could not be parsed as ISO 8601.

        Args:
            value: The unparsable string

        Returns:
            Diagnostic for DATE_STRING_INVALID
        """
        msg = f"Invalid date string '{value}': not ISO 8601 format"
        return Diagnostic(
            code=DiagnosticCode.DATE_STRING_INVALID,
            message=msg,
            hint="Use a form like '2024-07-23', '2024-07-23T14:35:45' or '2024-07-23T14:35:45+02:00'",
        )

    @staticmethod
    def timestamp_invalid(value: object, reason: str) -> Diagnostic:
        """Numeric date is not a representable Unix timestamp.

        Args:
            value: The rejected number
            reason: Why conversion failed

        Returns:
            Diagnostic for TIMESTAMP_INVALID
        """
        msg = f"Invalid Unix timestamp {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TIMESTAMP_INVALID,
            message=msg,
            hint="Timestamps are milliseconds since 1970-01-01T00:00:00Z",
        )

    @staticmethod
    def date_out_of_range(value: object) -> Diagnostic:
        """Date cannot be placed in the platform-local zone."""
        msg = f"Date {value!r} is outside the range of the local time zone"
        return Diagnostic(
            code=DiagnosticCode.DATE_OUT_OF_RANGE,
            message=msg,
            hint="Pass a timezone-aware datetime to skip local conversion",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def template_missing(locale_code: str) -> Diagnostic:
        """Formatter built by create_formatter() has no usable template.

        Args:
            locale_code: Locale active at the time of the call

        Returns:
            Diagnostic for TEMPLATE_MISSING
        """
        msg = f"No template for locale '{locale_code}' and no 'default' template"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_MISSING,
            message=msg,
            hint="Add a 'default' entry to the formats mapping",
        )

    # ------------------------------------------------------------------
    # Locale resolution failures
    # ------------------------------------------------------------------

    @staticmethod
    def locale_not_found(locale_code: str) -> Diagnostic:
        """No loader knows the requested locale."""
        msg = f"Locale data for '{locale_code}' not found"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint="Pass LocaleData explicitly: set_locale(code, data)",
            severity="warning",
        )

    @staticmethod
    def locale_data_malformed(locale_code: str, reason: str) -> Diagnostic:
        """A loader found locale data but it failed validation."""
        msg = f"Locale data for '{locale_code}' is malformed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MALFORMED,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def locale_code_invalid(locale_code: str) -> Diagnostic:
        """Locale code does not have a BCP 47 shape."""
        msg = f"Invalid locale code '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CODE_INVALID,
            message=msg,
            hint="Use codes like 'en', 'pl' or 'pt-BR'",
            severity="warning",
        )
