"""Locale utilities for locale code validation and normalization.

Centralizes locale format handling used by the loaders, so that "pt-BR",
"pt_BR" and "pt" resolve consistently.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_valid_locale_code",
    "locale_candidates",
    "normalize_locale",
]

# language[-_]subtag... where language is 2-3 letters and subtags are 1-8
# alphanumerics. Rejects anything that could escape a module path.
_LOCALE_CODE_RE = re.compile(r"[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{1,8})*")


def normalize_locale(locale_code: str) -> str:
    """Rewrite hyphenated codes with underscores, the form Babel and module names use.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("pl")
        'pl'
    """
    return locale_code.replace("-", "_")


def is_valid_locale_code(locale_code: str) -> bool:
    """Check that a locale code has a BCP-47 / POSIX shape.

    Example:
        >>> is_valid_locale_code("pt-BR")
        True
        >>> is_valid_locale_code("../etc")
        False
    """
    return _LOCALE_CODE_RE.fullmatch(locale_code) is not None


def locale_candidates(locale_code: str) -> tuple[str, ...]:
    """Return lookup keys for a locale code, most specific first.

    Tries the code as given, then its POSIX form, then progressively shorter
    prefixes down to the bare language. Duplicates are removed.

    Example:
        >>> locale_candidates("pt-BR")
        ('pt-BR', 'pt_BR', 'pt')
        >>> locale_candidates("en")
        ('en',)
    """
    normalized = normalize_locale(locale_code)
    candidates = [locale_code, normalized]
    parts = normalized.split("_")
    for end in range(len(parts) - 1, 0, -1):
        candidates.append("_".join(parts[:end]))
    return tuple(dict.fromkeys(candidates))


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel Locale.

    Hyphenated and underscored codes are both accepted.

    Raises:
        babel.UnknownLocaleError: If CLDR has no data for the code
        ValueError: If the code does not parse as a locale identifier

    Example:
        >>> get_babel_locale("pl-PL").language
        'pl'
    """
    # CLDR data is only needed once a non-bundled locale is requested
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
