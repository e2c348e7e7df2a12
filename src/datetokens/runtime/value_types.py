"""Core value types for the formatting runtime.

Defines the types shared by the token table, the tokenizer, the normalizer
and the named formatter registry:
    - Instant: The canonical, timezone-aware point in time
    - TokenValue: What a token extractor returns
    - TokenExtractor: Signature of a token extractor
    - NamedFormatter: Signature of a registered custom formatter

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias
from collections.abc import Callable
from datetime import datetime
from enum import Enum

from datetokens.localization.types import LocaleData

__all__ = [
    "OMITTED",
    "Instant",
    "NamedFormatter",
    "Omitted",
    "TokenExtractor",
    "TokenValue",
]


class Omitted(Enum):
    """Marker for an argument the caller did not pass.

    Distinct from None, which is a date value the normalizer rejects.
    """

    OMITTED = "omitted"


OMITTED = Omitted.OMITTED

Instant: TypeAlias = datetime
"""Timezone-aware datetime. Its utcoffset() is the offset every extractor reads."""

TokenValue: TypeAlias = str | int
"""Token result: int for unpadded numeric readings, str for padded or named ones."""

TokenExtractor: TypeAlias = Callable[[Instant, LocaleData], TokenValue]
"""Reads one field from an instant, using the active locale for names."""

NamedFormatter: TypeAlias = Callable[[Instant], str]
"""Custom formatter registered under a name; its return value is passed through unchanged."""
