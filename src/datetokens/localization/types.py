"""Types for the localization domain.

Provides the LocaleCode alias and the LocaleData record holding the name
tables every locale-dependent token reads from.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
from collections.abc import Sequence
from dataclasses import dataclass, fields

__all__ = [
    "LocaleCode",
    "LocaleData",
]

LocaleCode: TypeAlias = str
"""Locale code (e.g., 'en', 'pl', 'pt-BR')."""

# Required length of every table in LocaleData, by field name.
_TABLE_LENGTHS: dict[str, int] = {
    "months": 12,
    "months_short": 12,
    "weekdays": 7,
    "weekdays_short": 7,
    "weekdays_min": 7,
    "meridiem_lower": 2,
    "meridiem_upper": 2,
}


@dataclass(frozen=True, slots=True)
class LocaleData:
    """Name tables for one language or region.

    All tables are 0-based. Weekday tables start on Sunday, matching the
    index produced by the D/DD/DDD tokens. Meridiem tables hold the
    before-noon label first.

    Any sequence of strings is accepted on construction and stored as a
    tuple. Wrong lengths or non-string entries raise immediately, so a
    malformed table can never become active.

    Attributes:
        months: Full month names, January first (12)
        months_short: Abbreviated month names (12)
        weekdays: Full weekday names, Sunday first (7)
        weekdays_short: Three-letter weekday names (7)
        weekdays_min: Two-letter weekday names (7)
        meridiem_lower: Lowercase ("am", "pm") equivalents (2)
        meridiem_upper: Uppercase ("AM", "PM") equivalents (2)
        name: Human-readable language name (optional)

    Example:
        >>> data = LocaleData(
        ...     months=("January", ...), months_short=("Jan", ...),
        ...     weekdays=("Sunday", ...), weekdays_short=("Sun", ...),
        ...     weekdays_min=("Su", ...),
        ...     meridiem_lower=("am", "pm"), meridiem_upper=("AM", "PM"),
        ... )
    """

    months: Sequence[str]
    months_short: Sequence[str]
    weekdays: Sequence[str]
    weekdays_short: Sequence[str]
    weekdays_min: Sequence[str]
    meridiem_lower: Sequence[str]
    meridiem_upper: Sequence[str]
    name: str = ""

    def __post_init__(self) -> None:
        """Freeze tables into tuples and validate their shape.

        Raises:
            TypeError: If a table is a bare string or holds non-string entries
            ValueError: If a table does not have its required length
        """
        for table in fields(self):
            expected = _TABLE_LENGTHS.get(table.name)
            if expected is None:
                continue
            value = getattr(self, table.name)
            if isinstance(value, str) or not isinstance(value, Sequence):
                msg = f"LocaleData.{table.name} must be a sequence of strings, got {type(value).__name__}"
                raise TypeError(msg)
            frozen = tuple(value)
            if len(frozen) != expected:
                msg = f"LocaleData.{table.name} must have {expected} entries, got {len(frozen)}"
                raise ValueError(msg)
            for index, entry in enumerate(frozen):
                if not isinstance(entry, str):
                    msg = f"LocaleData.{table.name}[{index}] must be a string, got {type(entry).__name__}"
                    raise TypeError(msg)
            object.__setattr__(self, table.name, frozen)

    def month_name(self, month: int, *, short: bool = False) -> str:
        """Return the name of a 1-based month."""
        table = self.months_short if short else self.months
        return table[month - 1]

    def meridiem(self, hour: int, *, upper: bool) -> str:
        """Return the meridiem label for a 0-23 hour."""
        table = self.meridiem_upper if upper else self.meridiem_lower
        return table[0] if hour < 12 else table[1]
