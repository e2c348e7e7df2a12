"""Locale data model, loaders and the active-locale store.

Exports:
    LocaleData: Name tables for one language
    LocaleStore: Active locale code and data
    LocaleLoader: Protocol for locale data sources
    ModuleLocaleLoader, BabelLocaleLoader, ChainLocaleLoader: Loader implementations
    LocaleLoadResult, load_locale: Non-raising load outcome reporting

Python 3.13+.
"""

from .loading import (
    BabelLocaleLoader,
    ChainLocaleLoader,
    LocaleLoader,
    LocaleLoadResult,
    ModuleLocaleLoader,
    default_loader,
    load_locale,
)
from .store import LocaleStore
from .types import LocaleCode, LocaleData

__all__ = [
    "BabelLocaleLoader",
    "ChainLocaleLoader",
    "LocaleCode",
    "LocaleData",
    "LocaleLoadResult",
    "LocaleLoader",
    "LocaleStore",
    "ModuleLocaleLoader",
    "default_loader",
    "load_locale",
]
