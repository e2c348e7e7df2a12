"""Locale data loading infrastructure.

Provides the protocol for locale data loaders, the bundled-module and CLDR
implementations, a chain combinator, and the result type used to report
load attempts without raising.

Components:
    LocaleLoader - Protocol for resolving LocaleData by code (structural typing)
    ModuleLocaleLoader - Imports ``<package>.<code>`` and reads its LOCALE attribute
    BabelLocaleLoader - Builds LocaleData from CLDR via Babel
    ChainLocaleLoader - Tries loaders in order, first hit wins
    LocaleLoadResult - Immutable result of a single load attempt
    load_locale - Runs a loader and folds every failure into a result

Loader contract:
    load() returns LocaleData, raises LookupError when the source does not
    know the code, and raises ValueError/TypeError (or ImportError for a
    broken module) when the source exists but is malformed.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from babel import UnknownLocaleError

from datetokens.constants import LOCALE_MODULE_ATTRIBUTE, LOCALE_MODULE_PACKAGE
from datetokens.diagnostics import Diagnostic, ErrorTemplate
from datetokens.enums import LoadStatus
from datetokens.locale_utils import get_babel_locale, is_valid_locale_code, locale_candidates
from datetokens.localization.types import LocaleCode, LocaleData

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LocaleLoader",
    # Concrete loaders
    "ModuleLocaleLoader",
    "BabelLocaleLoader",
    "ChainLocaleLoader",
    "default_loader",
    # Load result
    "LocaleLoadResult",
    "load_locale",
]

logger = logging.getLogger(__name__)

# CLDR weekday keys run Monday=0 .. Sunday=6; LocaleData tables start on Sunday.
_CLDR_SUNDAY_FIRST: tuple[int, ...] = (6, 0, 1, 2, 3, 4, 5)


class LocaleLoader(Protocol):
    """Protocol for resolving locale data by code.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, tables):
        ...         self.tables = tables
        ...     def load(self, locale):
        ...         return self.tables[locale]  # KeyError is a LookupError
        ...     def describe_source(self, locale):
        ...         return f"dict:{locale}"
        ...
        >>> store = LocaleStore(loader=DictLoader({"pl": POLISH}))
    """

    def load(self, locale: LocaleCode) -> LocaleData:
        """Resolve locale data.

        Args:
            locale: Locale code (e.g., 'en', 'pl', 'pt-BR')

        Returns:
            Validated LocaleData

        Raises:
            LookupError: If this source does not know the locale
            ValueError: If the source data is malformed
            TypeError: If the source holds something other than LocaleData
        """

    def describe_source(self, locale: LocaleCode) -> str:
        """Return human-readable source description for diagnostics."""
        return f"<loader>/{locale}"


@dataclass(frozen=True, slots=True)
class ModuleLocaleLoader:
    """Loads locale data from importable Python modules.

    Resolves ``<package>.<candidate>`` for each candidate of the locale
    code (``pt-BR`` tries ``pt-BR``, ``pt_BR``, then ``pt``) and returns the
    module's ``LOCALE`` attribute.

    Attributes:
        package: Dotted package holding one module per locale code
    """

    package: str = LOCALE_MODULE_PACKAGE

    def describe_source(self, locale: LocaleCode) -> str:
        """Return the first module path tried for a locale."""
        return f"{self.package}.{locale_candidates(locale)[0]}"

    def load(self, locale: LocaleCode) -> LocaleData:
        """Import the locale module and return its data.

        Raises:
            LookupError: If no candidate module exists
            TypeError: If the module's LOCALE attribute is not LocaleData
            ImportError: If a module exists but fails to import
            ValueError: If the code could not name a module
        """
        if not is_valid_locale_code(locale):
            msg = f"Invalid locale code '{locale}'"
            raise ValueError(msg)

        for candidate in locale_candidates(locale):
            module_name = f"{self.package}.{candidate}"
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                # Only "this module does not exist" means not found; a missing
                # import inside an existing locale module is a broken module.
                if e.name != module_name:
                    raise
                continue

            data = getattr(module, LOCALE_MODULE_ATTRIBUTE, None)
            if not isinstance(data, LocaleData):
                msg = (
                    f"{module_name}.{LOCALE_MODULE_ATTRIBUTE} must be LocaleData, "
                    f"got {type(data).__name__}"
                )
                raise TypeError(msg)
            return data

        msg = f"No locale module for '{locale}' in {self.package}"
        raise LookupError(msg)


@dataclass(frozen=True, slots=True)
class BabelLocaleLoader:
    """Builds locale data from the CLDR database shipped with Babel.

    Uses stand-alone month and weekday names, which is the grammatical form
    a lone MMMM or DDD token should print (Polish "lipiec", not "lipca").
    The two-letter weekday table uses the CLDR "short" width when present.
    """

    def describe_source(self, locale: LocaleCode) -> str:
        """Return a description of the CLDR source."""
        return f"cldr:{locale}"

    def load(self, locale: LocaleCode) -> LocaleData:
        """Resolve locale data from CLDR.

        Raises:
            LookupError: If CLDR has no data for the locale
            ValueError: If the locale code cannot be parsed
        """
        try:
            babel_locale = get_babel_locale(locale)
        except UnknownLocaleError as e:
            msg = f"CLDR has no data for '{locale}': {e}"
            raise LookupError(msg) from e

        months = babel_locale.months["stand-alone"]
        days = babel_locale.days["stand-alone"]
        wide_days = days["wide"]
        short_days = days["abbreviated"]
        min_days = days.get("short") or {k: v[:2] for k, v in short_days.items()}

        periods = babel_locale.periods
        am = str(periods.get("am", "AM"))
        pm = str(periods.get("pm", "PM"))

        return LocaleData(
            name=str(babel_locale.display_name or locale),
            months=tuple(str(months["wide"][m]) for m in range(1, 13)),
            months_short=tuple(str(months["abbreviated"][m]) for m in range(1, 13)),
            weekdays=tuple(str(wide_days[d]) for d in _CLDR_SUNDAY_FIRST),
            weekdays_short=tuple(str(short_days[d]) for d in _CLDR_SUNDAY_FIRST),
            weekdays_min=tuple(str(min_days[d]) for d in _CLDR_SUNDAY_FIRST),
            meridiem_lower=(am.lower(), pm.lower()),
            meridiem_upper=(am.upper(), pm.upper()),
        )


@dataclass(frozen=True, slots=True)
class ChainLocaleLoader:
    """Tries loaders in order and returns the first hit.

    A loader that does not know the code (LookupError) passes the request
    on. Any other failure stops the chain: data that exists but is broken
    is reported rather than papered over by a later source.

    Attributes:
        loaders: Loaders in priority order
    """

    loaders: Sequence[LocaleLoader]

    def describe_source(self, locale: LocaleCode) -> str:
        """Describe every source in the chain."""
        return " -> ".join(loader.describe_source(locale) for loader in self.loaders)

    def load(self, locale: LocaleCode) -> LocaleData:
        """Return data from the first loader that knows the locale.

        Raises:
            LookupError: If no loader knows the locale
        """
        for loader in self.loaders:
            try:
                return loader.load(locale)
            except LookupError:
                logger.debug("Locale '%s' not in %s", locale, loader.describe_source(locale))
        msg = f"No loader knows locale '{locale}'"
        raise LookupError(msg)


def default_loader() -> ChainLocaleLoader:
    """Bundled locale modules first, CLDR second."""
    return ChainLocaleLoader((ModuleLocaleLoader(), BabelLocaleLoader()))


@dataclass(frozen=True, slots=True)
class LocaleLoadResult:
    """Result of resolving locale data for one code.

    Attributes:
        locale: Requested locale code
        status: Load status (success, not_found, error)
        data: Resolved data if status is SUCCESS, None otherwise
        error: Exception raised by the loader, if any
        diagnostic: Structured description of the failure, if any
        source: Human-readable source description
    """

    locale: LocaleCode
    status: LoadStatus
    data: LocaleData | None = None
    error: Exception | None = None
    diagnostic: Diagnostic | None = None
    source: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if locale data resolved."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no source knew the locale."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if a source was found but broken."""
        return self.status == LoadStatus.ERROR


def load_locale(loader: LocaleLoader, locale: LocaleCode) -> LocaleLoadResult:
    """Resolve locale data, folding every failure into the result.

    Never raises for resolution problems. LookupError from the loader means
    NOT_FOUND; any other exception (a broken module, a malformed table, a
    custom loader failing) comes back as ERROR.

    Args:
        loader: Loader to consult
        locale: Requested locale code

    Returns:
        LocaleLoadResult describing the outcome
    """
    source = loader.describe_source(locale) if is_valid_locale_code(locale) else None

    if source is None:
        return LocaleLoadResult(
            locale=locale,
            status=LoadStatus.ERROR,
            diagnostic=ErrorTemplate.locale_code_invalid(locale),
        )

    try:
        data = loader.load(locale)
    except LookupError as e:
        return LocaleLoadResult(
            locale=locale,
            status=LoadStatus.NOT_FOUND,
            error=e,
            diagnostic=ErrorTemplate.locale_not_found(locale),
            source=source,
        )
    except Exception as e:  # noqa: BLE001 - any other loader failure is a broken source
        return LocaleLoadResult(
            locale=locale,
            status=LoadStatus.ERROR,
            error=e,
            diagnostic=ErrorTemplate.locale_data_malformed(locale, str(e)),
            source=source,
        )

    return LocaleLoadResult(locale=locale, status=LoadStatus.SUCCESS, data=data, source=source)
