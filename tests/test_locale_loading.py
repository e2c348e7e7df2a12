"""Tests for locale loaders and load_locale()."""

import logging
import uuid
from pathlib import Path

import pytest

from datetokens.diagnostics import DiagnosticCode
from datetokens.enums import LoadStatus
from datetokens.locale_utils import is_valid_locale_code, locale_candidates, normalize_locale
from datetokens.locales.en import LOCALE as ENGLISH
from datetokens.locales.pl import LOCALE as POLISH
from datetokens.localization import (
    BabelLocaleLoader,
    ChainLocaleLoader,
    LocaleLoadResult,
    ModuleLocaleLoader,
    default_loader,
    load_locale,
)
from tests.strategies.locales import DictLoader, FailingLoader


@pytest.fixture
def locale_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Importable package with one good and several broken locale modules."""
    name = f"dt_locales_{uuid.uuid4().hex}"
    package = tmp_path / name
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "xx.py").write_text(
        "from datetokens.locales.pl import LOCALE\n", encoding="utf-8"
    )
    (package / "wrongtype.py").write_text("LOCALE = {'months': []}\n", encoding="utf-8")
    (package / "noattr.py").write_text("NAME = 'nothing here'\n", encoding="utf-8")
    (package / "badimport.py").write_text(
        "import dt_module_that_does_not_exist\n", encoding="utf-8"
    )
    (package / "badtable.py").write_text(
        "from datetokens import LocaleData\n"
        "LOCALE = LocaleData(months=(), months_short=(), weekdays=(), weekdays_short=(),\n"
        "                    weekdays_min=(), meridiem_lower=(), meridiem_upper=())\n",
        encoding="utf-8",
    )
    (package / "nameerror.py").write_text("LOCALE = undefined_name\n", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


class TestLocaleUtils:
    """Locale code helpers."""

    def test_normalize(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("pt-BR") == "pt_BR"
        assert normalize_locale("en") == "en"

    @pytest.mark.parametrize("code", ["en", "pl", "pt-BR", "zh_Hant_TW", "ast"])
    def test_valid_codes(self, code: str) -> None:
        """Language plus optional subtags."""
        assert is_valid_locale_code(code)

    @pytest.mark.parametrize("code", ["", "e", "../etc", "en.US", "en-", "english", "12"])
    def test_invalid_codes(self, code: str) -> None:
        """Anything that could not name a module is rejected."""
        assert not is_valid_locale_code(code)

    def test_candidates(self) -> None:
        """Most specific first, bare language last, no duplicates."""
        assert locale_candidates("pt-BR") == ("pt-BR", "pt_BR", "pt")
        assert locale_candidates("zh_Hant_TW") == ("zh_Hant_TW", "zh_Hant", "zh")
        assert locale_candidates("en") == ("en",)


class TestModuleLocaleLoader:
    """Bundled and caller-supplied locale modules."""

    def test_bundled_modules(self) -> None:
        """en and pl ship with the package."""
        loader = ModuleLocaleLoader()
        assert loader.load("en") is ENGLISH
        assert loader.load("pl") is POLISH

    def test_region_falls_back_to_language(self) -> None:
        """pl-PL resolves to the pl module."""
        assert ModuleLocaleLoader().load("pl-PL") is POLISH
        assert ModuleLocaleLoader().load("en_GB") is ENGLISH

    def test_unknown_code_is_lookup_error(self) -> None:
        """No module means not found."""
        with pytest.raises(LookupError, match="No locale module for 'de'"):
            ModuleLocaleLoader().load("de")

    def test_invalid_code_is_value_error(self) -> None:
        """Codes that could escape the package are refused before import."""
        with pytest.raises(ValueError, match="Invalid locale code"):
            ModuleLocaleLoader().load("../etc")

    def test_custom_package(self, locale_package: str) -> None:
        """A caller-supplied package is searched instead."""
        assert ModuleLocaleLoader(locale_package).load("xx") is POLISH

    def test_wrong_attribute_type(self, locale_package: str) -> None:
        """LOCALE must be LocaleData."""
        with pytest.raises(TypeError, match="must be LocaleData, got dict"):
            ModuleLocaleLoader(locale_package).load("wrongtype")

    def test_missing_attribute(self, locale_package: str) -> None:
        """A module without LOCALE is malformed, not absent."""
        with pytest.raises(TypeError, match="got NoneType"):
            ModuleLocaleLoader(locale_package).load("noattr")

    def test_broken_import_propagates(self, locale_package: str) -> None:
        """A missing dependency inside a locale module is not 'not found'."""
        with pytest.raises(ImportError):
            ModuleLocaleLoader(locale_package).load("badimport")

    def test_runtime_failure_propagates(self, locale_package: str) -> None:
        """Errors raised while a locale module executes reach load_locale()."""
        with pytest.raises(NameError):
            ModuleLocaleLoader(locale_package).load("nameerror")

    def test_describe_source(self) -> None:
        """The first module tried is reported."""
        assert ModuleLocaleLoader().describe_source("pt-BR") == "datetokens.locales.pt-BR"


class TestBabelLocaleLoader:
    """Locale tables built from CLDR."""

    def test_english_matches_bundled_tables(self) -> None:
        """CLDR English agrees with the bundled module."""
        data = BabelLocaleLoader().load("en")
        assert data.months == ENGLISH.months
        assert data.weekdays == ENGLISH.weekdays
        assert data.weekdays_short == ENGLISH.weekdays_short
        assert data.weekdays_min == ENGLISH.weekdays_min
        assert data.meridiem_upper == ("AM", "PM")
        assert data.meridiem_lower == ("am", "pm")

    def test_stand_alone_names(self) -> None:
        """Polish month names come in the nominative case."""
        data = BabelLocaleLoader().load("pl")
        assert data.months[6] == "lipiec"
        assert data.weekdays[2] == "wtorek"

    def test_weekdays_start_on_sunday(self) -> None:
        """CLDR Monday-first keys are reordered."""
        data = BabelLocaleLoader().load("de")
        assert data.weekdays[0] == "Sonntag"
        assert data.months[0] == "Januar"

    def test_bcp47_code(self) -> None:
        """Hyphenated codes are accepted."""
        data = BabelLocaleLoader().load("fr-CA")
        assert data.months[6] == "juillet"

    def test_meridiem_case(self) -> None:
        """Lowercase and uppercase tables are derived from CLDR periods."""
        data = BabelLocaleLoader().load("de")
        assert data.meridiem_lower == tuple(label.lower() for label in data.meridiem_lower)
        assert data.meridiem_upper == tuple(label.upper() for label in data.meridiem_upper)

    def test_unknown_locale_is_lookup_error(self) -> None:
        """CLDR has no data for xx."""
        with pytest.raises(LookupError, match="CLDR has no data for 'xx'"):
            BabelLocaleLoader().load("xx")

    def test_describe_source(self) -> None:
        """Source names the CLDR database."""
        assert BabelLocaleLoader().describe_source("de") == "cldr:de"


class TestChainLocaleLoader:
    """First loader that knows the code wins."""

    def test_first_hit_wins(self) -> None:
        """Later loaders are not consulted after a hit."""
        second = DictLoader({"pl": ENGLISH})
        chain = ChainLocaleLoader((DictLoader({"pl": POLISH}), second))
        assert chain.load("pl") is POLISH
        assert second.requests == []

    def test_lookup_error_passes_on(self, caplog: pytest.LogCaptureFixture) -> None:
        """A loader that does not know the code defers to the next one."""
        chain = ChainLocaleLoader((DictLoader({}), DictLoader({"pl": POLISH})))
        with caplog.at_level(logging.DEBUG, logger="datetokens.localization.loading"):
            assert chain.load("pl") is POLISH
        assert "Locale 'pl' not in dict:pl" in caplog.text

    def test_other_errors_stop_the_chain(self) -> None:
        """Broken data is reported, not hidden by a later source."""
        chain = ChainLocaleLoader(
            (FailingLoader(ValueError("bad table")), DictLoader({"pl": POLISH}))
        )
        with pytest.raises(ValueError, match="bad table"):
            chain.load("pl")

    def test_nobody_knows(self) -> None:
        """Exhausting the chain raises LookupError."""
        with pytest.raises(LookupError, match="No loader knows locale 'pl'"):
            ChainLocaleLoader((DictLoader({}),)).load("pl")

    def test_describe_source(self) -> None:
        """Sources are listed in order."""
        chain = ChainLocaleLoader((DictLoader({}), BabelLocaleLoader()))
        assert chain.describe_source("pl") == "dict:pl -> cldr:pl"

    def test_default_loader(self) -> None:
        """Bundled modules first, CLDR second."""
        loader = default_loader()
        assert isinstance(loader.loaders[0], ModuleLocaleLoader)
        assert isinstance(loader.loaders[1], BabelLocaleLoader)
        assert loader.load("pl") is POLISH
        assert loader.load("de").weekdays[0] == "Sonntag"


class TestLoadLocale:
    """load_locale() folds every failure into a LocaleLoadResult."""

    def test_success(self) -> None:
        """Resolved data is carried in the result."""
        result = load_locale(default_loader(), "pl")
        assert isinstance(result, LocaleLoadResult)
        assert result.is_success
        assert result.status == LoadStatus.SUCCESS
        assert result.data is POLISH
        assert result.error is None
        assert result.source == "datetokens.locales.pl -> cldr:pl"

    def test_not_found(self) -> None:
        """Unknown codes are NOT_FOUND with a warning diagnostic."""
        result = load_locale(default_loader(), "xx")
        assert result.is_not_found
        assert result.data is None
        assert isinstance(result.error, LookupError)
        assert result.diagnostic is not None
        assert result.diagnostic.code == DiagnosticCode.LOCALE_NOT_FOUND
        assert result.diagnostic.severity == "warning"

    @pytest.mark.parametrize(
        "module", ["wrongtype", "noattr", "badimport", "badtable", "nameerror"]
    )
    def test_malformed_module(self, locale_package: str, module: str) -> None:
        """Broken modules are ERROR, never raised."""
        result = load_locale(ModuleLocaleLoader(locale_package), module)
        assert result.is_error
        assert result.data is None
        assert result.error is not None
        assert result.diagnostic is not None
        assert result.diagnostic.code == DiagnosticCode.LOCALE_DATA_MALFORMED

    @pytest.mark.parametrize(
        "error", [RuntimeError("loader crashed"), OSError("disk gone"), ZeroDivisionError()]
    )
    def test_arbitrary_loader_error(self, error: Exception) -> None:
        """Any non-LookupError from a loader becomes ERROR."""
        result = load_locale(FailingLoader(error), "pl")
        assert result.status == LoadStatus.ERROR
        assert result.error is error
        assert result.source == "failing:pl"
        assert result.diagnostic is not None
        assert result.diagnostic.code == DiagnosticCode.LOCALE_DATA_MALFORMED

    def test_invalid_code(self) -> None:
        """Codes of the wrong shape never reach a loader."""
        loader = DictLoader({})
        result = load_locale(loader, "../etc")
        assert result.is_error
        assert result.source is None
        assert result.diagnostic is not None
        assert result.diagnostic.code == DiagnosticCode.LOCALE_CODE_INVALID
        assert loader.requests == []
