"""Active locale state.

LocaleStore holds exactly one active locale code and its LocaleData. It is
owned by a DateFormatter rather than living in module globals, so tests
and embedding applications can keep independent stores.

Resolution failures never raise: the store logs them, leaves its state
untouched and keeps reporting the previously active code.

Python 3.13+.
"""

from __future__ import annotations

import logging

from datetokens.constants import DEFAULT_LOCALE
from datetokens.diagnostics import (
    DateArgumentTypeError,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)
from datetokens.localization.loading import (
    LocaleLoader,
    LocaleLoadResult,
    default_loader,
    load_locale,
)
from datetokens.localization.types import LocaleCode, LocaleData

__all__ = ["LocaleStore"]

logger = logging.getLogger(__name__)

_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)


class LocaleStore:
    """Mutable holder of the active locale code and data.

    Not thread-safe: concurrent set_locale() calls need external locking.

    Example:
        >>> store = LocaleStore()
        >>> store.get_locale()
        'en'
        >>> store.set_locale("pl")
        'pl'
        >>> store.set_locale("zz")  # unknown, state unchanged
        'pl'
    """

    __slots__ = ("_code", "_data", "_last_result", "_loader")

    def __init__(
        self,
        code: LocaleCode = DEFAULT_LOCALE,
        data: LocaleData | None = None,
        *,
        loader: LocaleLoader | None = None,
    ) -> None:
        """Initialize the store and install the starting locale eagerly.

        Args:
            code: Starting locale code
            data: Starting locale data. When omitted, resolved through the
                loader; if that fails the store falls back to English.
            loader: Locale data source (default: bundled modules, then CLDR)
        """
        self._loader: LocaleLoader = loader if loader is not None else default_loader()
        self._last_result: LocaleLoadResult | None = None

        if data is None:
            result = self._resolve(code)
            if result.data is None:
                from datetokens.locales.en import LOCALE as ENGLISH  # noqa: PLC0415

                logger.warning("Starting locale '%s' unavailable, using '%s'", code, DEFAULT_LOCALE)
                code, data = DEFAULT_LOCALE, ENGLISH
            else:
                data = result.data

        self._code: LocaleCode = code
        self._data: LocaleData = data

    @property
    def data(self) -> LocaleData:
        """Active locale data."""
        return self._data

    @property
    def loader(self) -> LocaleLoader:
        """Locale data source consulted by set_locale()."""
        return self._loader

    @property
    def last_result(self) -> LocaleLoadResult | None:
        """Outcome of the most recent loader lookup, for diagnostics."""
        return self._last_result

    def get_locale(self) -> LocaleCode:
        """Return the active locale code."""
        return self._code

    def set_locale(
        self,
        code: LocaleCode | None = None,
        data: LocaleData | None = None,
    ) -> LocaleCode:
        """Switch the active locale.

        Args:
            code: Locale code to activate. None makes this a pure read.
            data: Locale tables to install directly. When given, no lookup
                happens and ``code`` becomes active unconditionally.

        Returns:
            The active locale code after the call. On a failed lookup this
            is the code that was active before, not the requested one.

        Raises:
            DateArgumentTypeError: If code is not a string or data is not
                LocaleData (caller errors, unlike resolution failures)
        """
        if code is None:
            return self._code

        if not isinstance(code, str):
            raise DateArgumentTypeError(ErrorTemplate.locale_code_not_string(code))

        if data is not None:
            if not isinstance(data, LocaleData):
                raise DateArgumentTypeError(ErrorTemplate.locale_data_type_invalid(data))
            self._install(code, data)
            return self._code

        result = self._resolve(code)
        if result.data is not None:
            self._install(code, result.data)
        return self._code

    def _resolve(self, code: LocaleCode) -> LocaleLoadResult:
        result = load_locale(self._loader, code)
        self._last_result = result
        if not result.is_success:
            logger.warning(
                "Locale '%s' not loaded (%s): %s. Keeping '%s'",
                code,
                result.status,
                _LOG_FORMATTER.format(result.diagnostic) if result.diagnostic else "",
                getattr(self, "_code", DEFAULT_LOCALE),
            )
        return result

    def _install(self, code: LocaleCode, data: LocaleData) -> None:
        logger.debug("Active locale: %s -> %s", self._code, code)
        self._code = code
        self._data = data

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleStore(locale={self._code!r})"
