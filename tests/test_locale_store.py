"""Tests for LocaleStore: active locale state and silent resolution failure."""

import logging
from pathlib import Path

import pytest

from datetokens import DateArgumentTypeError, DateFormatter, LocaleStore
from datetokens.locales.en import LOCALE as ENGLISH
from datetokens.locales.pl import LOCALE as POLISH
from datetokens.localization import ModuleLocaleLoader
from tests.strategies.locales import DictLoader, FailingLoader, make_locale_data


class TestInitialState:
    """A new store has an eagerly installed locale."""

    def test_defaults_to_english(self) -> None:
        """en is active with the bundled tables."""
        store = LocaleStore()
        assert store.get_locale() == "en"
        assert store.data is ENGLISH

    def test_starting_locale_resolved(self) -> None:
        """A starting code is resolved through the loader."""
        store = LocaleStore("pl")
        assert store.get_locale() == "pl"
        assert store.data is POLISH

    def test_starting_data_used_directly(self) -> None:
        """Explicit data skips the loader."""
        loader = DictLoader({})
        custom = make_locale_data(name="Custom")
        store = LocaleStore("zz", custom, loader=loader)
        assert store.get_locale() == "zz"
        assert store.data is custom
        assert loader.requests == []

    def test_unknown_starting_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unresolvable starting code leaves English active."""
        with caplog.at_level(logging.WARNING, logger="datetokens.localization.store"):
            store = LocaleStore("xx", loader=DictLoader({}))
        assert store.get_locale() == "en"
        assert store.data is ENGLISH
        assert "Starting locale 'xx' unavailable" in caplog.text


class TestSetLocale:
    """Switching the active locale."""

    def test_no_arguments_is_pure_read(self) -> None:
        """set_locale() returns the code and changes nothing."""
        loader = DictLoader({})
        store = LocaleStore(loader=loader, data=ENGLISH)
        assert store.set_locale() == "en"
        assert store.data is ENGLISH
        assert loader.requests == []

    def test_resolved_through_loader(self) -> None:
        """A known code installs both code and data."""
        store = LocaleStore()
        assert store.set_locale("pl") == "pl"
        assert store.get_locale() == "pl"
        assert store.data is POLISH
        assert store.last_result is not None
        assert store.last_result.is_success

    def test_explicit_data_installed_without_lookup(self) -> None:
        """Supplied data is installed and the code becomes active."""
        loader = DictLoader({})
        store = LocaleStore(data=ENGLISH, loader=loader)
        custom = make_locale_data(months=[f"M{i}" for i in range(1, 13)])
        assert store.set_locale("custom", custom) == "custom"
        assert store.data is custom
        assert loader.requests == []

    def test_cldr_locale(self) -> None:
        """Codes without a bundled module come from CLDR."""
        store = LocaleStore()
        assert store.set_locale("de") == "de"
        assert store.data.weekdays[2] == "Dienstag"

    def test_debug_log_on_switch(self, caplog: pytest.LogCaptureFixture) -> None:
        """Locale switches log at DEBUG."""
        store = LocaleStore()
        with caplog.at_level(logging.DEBUG, logger="datetokens.localization.store"):
            store.set_locale("pl")
        assert "Active locale: en -> pl" in caplog.text


class TestSilentFailure:
    """Resolution failures leave state untouched and never raise."""

    def test_unknown_code(self, caplog: pytest.LogCaptureFixture) -> None:
        """Returns the previously active code."""
        store = LocaleStore()
        store.set_locale("pl")
        with caplog.at_level(logging.WARNING, logger="datetokens.localization.store"):
            assert store.set_locale("xx") == "pl"
        assert store.get_locale() == "pl"
        assert store.data is POLISH
        assert store.last_result is not None
        assert store.last_result.is_not_found
        assert "Locale 'xx' not loaded (not_found)" in caplog.text
        assert "Keeping 'pl'" in caplog.text
        assert "LOCALE_NOT_FOUND: Locale data for 'xx' not found" in caplog.text

    def test_malformed_source(self) -> None:
        """A loader that finds broken data is treated like a miss."""
        store = LocaleStore(data=ENGLISH, loader=FailingLoader(ValueError("bad table")))
        assert store.set_locale("pl") == "en"
        assert store.data is ENGLISH
        assert store.last_result is not None
        assert store.last_result.is_error

    def test_loader_raising_runtime_error(self) -> None:
        """An unexpected loader exception leaves the previous locale active."""
        store = LocaleStore("pl", POLISH, loader=FailingLoader(RuntimeError("loader crashed")))
        assert store.set_locale("de") == "pl"
        assert store.data is POLISH
        assert store.last_result is not None
        assert store.last_result.is_error
        assert isinstance(store.last_result.error, RuntimeError)

    def test_module_failing_at_import(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A locale module that raises while executing is not propagated."""
        package = tmp_path / "dt_broken_locales"
        package.mkdir()
        (package / "__init__.py").write_text("")
        (package / "xx.py").write_text("LOCALE = undefined_name\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        formatter = DateFormatter(loader=ModuleLocaleLoader("dt_broken_locales"))
        assert formatter.set_locale("xx") == "en"
        assert formatter.locale_data is ENGLISH

        store = LocaleStore("xx", loader=ModuleLocaleLoader("dt_broken_locales"))
        assert store.get_locale() == "en"
        assert store.last_result is not None
        assert store.last_result.is_error

    def test_invalid_code_shape(self) -> None:
        """Codes that could not name a locale are ignored."""
        store = LocaleStore()
        assert store.set_locale("../../etc") == "en"
        assert store.last_result is not None
        assert store.last_result.is_error


class TestCallerErrors:
    """Wrong argument types are not resolution failures."""

    @pytest.mark.parametrize("code", [123, b"pl", ["pl"]])
    def test_non_string_code(self, code: object) -> None:
        """Non-string codes raise DateArgumentTypeError."""
        with pytest.raises(DateArgumentTypeError, match="Argument `code` must be a string"):
            LocaleStore().set_locale(code)  # type: ignore[arg-type]

    def test_data_of_wrong_type(self) -> None:
        """Data must be a LocaleData record."""
        with pytest.raises(DateArgumentTypeError, match="LocaleData instance"):
            LocaleStore().set_locale("pl", {"months": []})  # type: ignore[arg-type]

    def test_repr(self) -> None:
        """repr names the active code."""
        assert repr(LocaleStore()) == "LocaleStore(locale='en')"
