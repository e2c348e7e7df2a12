"""DateFormatter: the formatting context and public dispatcher.

A DateFormatter owns one LocaleStore and one FormatterRegistry, so locale
and named-formatter state are explicit and can be isolated per test or per
application component. The package-level functions (datetokens.format_date,
datetokens.set_locale, ...) delegate to a default instance created at import
time.

Dispatch order for format_date(format, date):
    1. format must be a str
    2. date is normalized (omitted means now)
    3. a registered name short-circuits to its formatter
    4. otherwise format is compiled as a token template and rendered

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeAlias
from collections.abc import Callable, Mapping

from datetokens.constants import BUILTIN_FORMATS, DEFAULT_LOCALE, DEFAULT_TEMPLATE_KEY
from datetokens.diagnostics import (
    DateArgumentTypeError,
    ErrorTemplate,
    MissingTemplateError,
)
from datetokens.localization.loading import LocaleLoader
from datetokens.localization.store import LocaleStore
from datetokens.localization.types import LocaleCode, LocaleData
from datetokens.runtime.normalizer import DateInput, normalize_date
from datetokens.runtime.registry import FormatterRegistry
from datetokens.runtime.tokenizer import compile_template
from datetokens.runtime.tokens import TokenAccessor
from datetokens.runtime.value_types import OMITTED, NamedFormatter, Omitted

__all__ = [
    "DateFormatter",
    "FormatterFunction",
    "create_formatter",
    "format_date",
    "get_default_formatter",
    "get_locale",
    "list_names",
    "register",
    "set_locale",
    "tokens",
]

FormatterFunction: TypeAlias = Callable[..., str]
"""Formatter returned by create_formatter(): ``formatter(date=<now>) -> str``."""

FormatSpec: TypeAlias = str | Mapping[LocaleCode, str]
"""A single template, or templates keyed by locale code plus "default"."""


class DateFormatter:
    """Formatting context: active locale, named formatters, dispatcher.

    Not thread-safe: set_locale() and register() mutate shared state.

    Attributes:
        tokens: Token accessor bound to this context's active locale

    Example:
        >>> fmt = DateFormatter()
        >>> fmt.format_date("YYYY-MM-dd", "2024-07-23T14:35:45+02:00")
        '2024-07-23'
        >>> fmt.set_locale("pl")
        'pl'
        >>> fmt.format_date("DDD, MMMM d, YYYY", "2024-07-23T14:35:45+02:00")
        'wtorek, lipiec 23, 2024'
        >>> fmt.register("year", lambda instant: str(instant.year))
        >>> fmt.format_date("year", "2024-07-23")
        '2024'
    """

    __slots__ = ("_formatters", "_locales", "tokens")

    def __init__(
        self,
        locale: LocaleCode = DEFAULT_LOCALE,
        locale_data: LocaleData | None = None,
        *,
        loader: LocaleLoader | None = None,
        builtins: bool = True,
    ) -> None:
        """Initialize formatting context.

        Args:
            locale: Starting locale code (default: "en")
            locale_data: Starting locale tables; resolved via loader if omitted
            loader: Locale data source for set_locale(code) without data
            builtins: Pre-register ISODate, ISOTime, ISODateTime, ISODateTimeTZ
        """
        self._locales = LocaleStore(locale, locale_data, loader=loader)
        self._formatters = FormatterRegistry()
        self.tokens = TokenAccessor(lambda: self._locales.data)

        if builtins:
            for name, template in BUILTIN_FORMATS:
                self.register(name, template)

    # ------------------------------------------------------------------
    # Locale
    # ------------------------------------------------------------------

    @property
    def locale_store(self) -> LocaleStore:
        """Active-locale state owned by this context."""
        return self._locales

    @property
    def locale_data(self) -> LocaleData:
        """Tables of the active locale."""
        return self._locales.data

    def set_locale(self, code: LocaleCode | None = None, data: LocaleData | None = None) -> LocaleCode:
        """Switch locale; see LocaleStore.set_locale(). Returns the active code."""
        return self._locales.set_locale(code, data)

    def get_locale(self) -> LocaleCode:
        """Return the active locale code."""
        return self._locales.get_locale()

    # ------------------------------------------------------------------
    # Named formatters
    # ------------------------------------------------------------------

    @property
    def formatters(self) -> FormatterRegistry:
        """Named formatter registry owned by this context."""
        return self._formatters

    def register(self, name: str, formatter: NamedFormatter | FormatSpec) -> None:
        """Register a named formatter.

        Args:
            name: Exact format argument that selects this formatter
            formatter: Callable receiving the normalized Instant, or a
                template / locale mapping turned into one by
                create_formatter()

        Raises:
            DateArgumentTypeError: If name is not a string, or formatter is
                neither callable nor a valid template spec
            FormatterNameError: If name is empty
        """
        if isinstance(formatter, (str, Mapping)):
            try:
                formatter = self.create_formatter(formatter)
            except DateArgumentTypeError:
                raise DateArgumentTypeError(
                    ErrorTemplate.formatter_not_callable(str(name), formatter)
                ) from None
        self._formatters.register(name, formatter)

    def list_names(self) -> list[str]:
        """Registered formatter names in registration order."""
        return self._formatters.list_names()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def create_formatter(self, formats: FormatSpec) -> FormatterFunction:
        """Build a reusable formatter that picks its template per locale.

        The template is chosen at each call: ``formats[active_locale]`` if
        present, else ``formats["default"]``. A plain string is used for
        every locale. The mapping is copied, so later changes to it have no
        effect.

        Args:
            formats: Template string, or mapping of locale code to template
                with an optional "default" entry

        Returns:
            ``formatter(date=<now>) -> str``

        Raises:
            DateArgumentTypeError: If formats is neither a string nor a
                mapping of strings to strings

        Example:
            >>> fmt = DateFormatter()
            >>> long_date = fmt.create_formatter({"en": "MMMM d, YYYY", "default": "YYYY-MM-dd"})
            >>> long_date("2024-07-23T10:00:00+00:00")
            'July 23, 2024'
        """
        if isinstance(formats, str):
            templates: dict[LocaleCode, str] = {DEFAULT_TEMPLATE_KEY: formats}
        elif isinstance(formats, Mapping) and all(
            isinstance(key, str) and isinstance(value, str) for key, value in formats.items()
        ):
            templates = dict(formats)
        else:
            raise DateArgumentTypeError(ErrorTemplate.formats_type_invalid(formats))

        def formatter(date: DateInput | Omitted = OMITTED) -> str:
            locale_code = self._locales.get_locale()
            template = templates.get(locale_code)
            if template is None:
                template = templates.get(DEFAULT_TEMPLATE_KEY)
            if template is None:
                raise MissingTemplateError(
                    ErrorTemplate.template_missing(locale_code), locale_code=locale_code
                )
            return compile_template(template).render(normalize_date(date), self._locales.data)

        return formatter

    def format_date(self, format: str, date: DateInput | Omitted | None = OMITTED) -> str:  # noqa: A002
        """Format a date with a token template or a registered formatter name.

        Args:
            format: Token template (e.g. "YYYY-MM-dd") or registered name
            date: Date input (see normalize_date); omit for now

        Returns:
            Formatted string, or a named formatter's return value unchanged

        Raises:
            DateArgumentTypeError: If format is not a string or date has an
                unsupported type (None included)
            InvalidDateError: If date is an unparsable string or an invalid
                timestamp

        Examples:
            >>> fmt = DateFormatter()
            >>> fmt.format_date("YYYY-MMMM-DDD-HH-mm-ss", "2024-07-23T14:35:45.123+02:00")
            '2024-July-Tuesday-14-35-45'
            >>> fmt.format_date("YY-M-D", "2024-07-23T14:35:45.123+02:00")
            '24-7-Tu'
        """
        if not isinstance(format, str):
            raise DateArgumentTypeError(ErrorTemplate.format_not_string(format))

        instant = normalize_date(date)

        named = self._formatters.get(format)
        if named is not None:
            return named(instant)

        return compile_template(format).render(instant, self._locales.data)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"DateFormatter(locale={self.get_locale()!r}, "
            f"formatters={len(self._formatters)})"
        )


# ============================================================================
# DEFAULT CONTEXT
# ============================================================================

_default_formatter = DateFormatter()

tokens: TokenAccessor = _default_formatter.tokens
"""Token accessor bound to the default context."""


def get_default_formatter() -> DateFormatter:
    """Return the context used by the package-level functions."""
    return _default_formatter


def format_date(format: str, date: DateInput | Omitted | None = OMITTED) -> str:  # noqa: A002
    """Format with the default context. See DateFormatter.format_date()."""
    return _default_formatter.format_date(format, date)


def set_locale(code: LocaleCode | None = None, data: LocaleData | None = None) -> LocaleCode:
    """Switch the default context's locale. See LocaleStore.set_locale()."""
    return _default_formatter.set_locale(code, data)


def get_locale() -> LocaleCode:
    """Return the default context's active locale code."""
    return _default_formatter.get_locale()


def register(name: str, formatter: NamedFormatter | FormatSpec) -> None:
    """Register a named formatter on the default context."""
    _default_formatter.register(name, formatter)


def list_names() -> list[str]:
    """Named formatters of the default context, in registration order."""
    return _default_formatter.list_names()


def create_formatter(formats: FormatSpec) -> FormatterFunction:
    """Build a per-locale formatter bound to the default context."""
    return _default_formatter.create_formatter(formats)
