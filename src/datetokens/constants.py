"""Shared constants for datetokens.

Centralizes defaults used across the localization and runtime packages.
Placing constants here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Locale defaults: active locale at start-up, bundled locale package
- Padding: default widths for numeric tokens
- Formatter builder: fallback key for per-locale template mappings
- Built-in named formatters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "LOCALE_MODULE_PACKAGE",
    "LOCALE_MODULE_ATTRIBUTE",
    # Padding
    "DEFAULT_PAD_WIDTH",
    "MILLISECOND_PAD_WIDTH",
    # Formatter builder
    "DEFAULT_TEMPLATE_KEY",
    # Built-in named formatters
    "BUILTIN_FORMATS",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale active when a DateFormatter is created without an explicit locale.
# English data ships with the package and is installed eagerly.
DEFAULT_LOCALE: str = "en"

# Package searched by ModuleLocaleLoader: datetokens.locales.<code>
LOCALE_MODULE_PACKAGE: str = "datetokens.locales"

# Module attribute holding the LocaleData instance in a locale module.
LOCALE_MODULE_ATTRIBUTE: str = "LOCALE"

# ============================================================================
# PADDING
# ============================================================================

# Width used by pad() when none is given and by every two-digit token.
DEFAULT_PAD_WIDTH: int = 2

# Width of the ff (milliseconds) token.
MILLISECOND_PAD_WIDTH: int = 3

# ============================================================================
# FORMATTER BUILDER
# ============================================================================

# Key consulted by create_formatter() when the active locale has no template.
DEFAULT_TEMPLATE_KEY: str = "default"

# ============================================================================
# BUILT-IN NAMED FORMATTERS
# ============================================================================

# Registered on every DateFormatter unless builtins=False.
# Order matters: list_names() reports registration order.
BUILTIN_FORMATS: tuple[tuple[str, str], ...] = (
    ("ISODate", "YYYY-MM-dd"),
    ("ISOTime", "HH:mm:ss"),
    ("ISODateTime", "YYYY-MM-ddTHH:mm:ss"),
    ("ISODateTimeTZ", "YYYY-MM-ddTHH:mm:ssZ"),
)
