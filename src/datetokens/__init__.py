"""datetokens - Locale-aware date formatting with token templates.

Formats dates from templates such as ``"YYYY-MM-dd HH:mm"`` using a fixed
token table, a per-process active locale, and user-registered named
formatters.

Public API:
    format_date - Format a date with a template or a registered name
    set_locale / get_locale - Switch and query the active locale
    register / list_names - Manage named formatters
    create_formatter - Build a reusable per-locale formatter
    tokens - Evaluate single tokens (``tokens.YYYY(date)``)
    pad - Zero-pad an integer
    DateFormatter - Independent formatting context (locale + named formatters)
    LocaleData - Month, weekday and meridiem name tables for one language

Exceptions:
    DateTokensError - Base exception
    DateArgumentTypeError - Unsupported argument type (also a TypeError)
    InvalidDateError - Unparsable date string or bad timestamp (also a ValueError)
    MissingTemplateError - No template for the active locale (also a LookupError)
    FormatterNameError - Empty formatter name (also a ValueError)

Example:
    >>> from datetokens import format_date, set_locale
    >>> format_date("YYYY-MMMM-DDD", "2024-07-23T14:35:45+02:00")
    '2024-July-Tuesday'
    >>> set_locale("pl")
    'pl'
    >>> format_date("DDD, MMMM d, YYYY", "2024-07-23T14:35:45+02:00")
    'wtorek, lipiec 23, 2024'

Python 3.13+. Depends on Babel for CLDR locale data.
"""

from .diagnostics import (
    DateArgumentTypeError,
    DateTokensError,
    Diagnostic,
    DiagnosticCode,
    FormatterNameError,
    InvalidDateError,
    MissingTemplateError,
)
from .localization import LocaleData, LocaleLoader, LocaleStore
from .runtime import (
    CompiledTemplate,
    DateFormatter,
    Instant,
    compile_template,
    create_formatter,
    format_date,
    get_default_formatter,
    get_locale,
    list_names,
    normalize_date,
    pad,
    register,
    set_locale,
    tokens,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datetokens")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompiledTemplate",
    "DateArgumentTypeError",
    "DateFormatter",
    "DateTokensError",
    "Diagnostic",
    "DiagnosticCode",
    "FormatterNameError",
    "Instant",
    "InvalidDateError",
    "LocaleData",
    "LocaleLoader",
    "LocaleStore",
    "MissingTemplateError",
    "__version__",
    "compile_template",
    "create_formatter",
    "format_date",
    "get_default_formatter",
    "get_locale",
    "list_names",
    "normalize_date",
    "pad",
    "register",
    "set_locale",
    "tokens",
]
