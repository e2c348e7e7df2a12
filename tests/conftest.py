"""Pytest configuration for the datetokens test suite.

Hypothesis profiles:
- dev: 500 examples per property (local default)
- ci: 50 examples, derandomized (selected when CI=true)
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE overrides the automatic choice:
    HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz run only under ``pytest -m fuzz``.

The package-level functions (format_date, set_locale, register) mutate the
default DateFormatter, so an autouse fixture snapshots and restores its
locale and named formatters around every test.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from datetokens import DateFormatter, get_default_formatter

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_ALL_PHASES, **_options)  # type: ignore[arg-type]


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else ci under CI, else dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE", "")
    if explicit in _PROFILES:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_default_formatter() -> Iterator[None]:
    """Snapshot and restore the default formatter's locale and registry."""
    default = get_default_formatter()
    code, data = default.get_locale(), default.locale_data
    saved = default.formatters.copy()

    yield

    default.set_locale(code, data)
    default.formatters.clear()
    for name in saved:
        formatter = saved.get(name)
        assert formatter is not None
        default.formatters.register(name, formatter)


@pytest.fixture
def formatter() -> DateFormatter:
    """Isolated formatting context with English locale and built-ins."""
    return DateFormatter()
