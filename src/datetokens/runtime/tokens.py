"""Token table: token name to field extractor.

Every extractor takes the canonical Instant and the active LocaleData and
returns either an int (unpadded numeric reading) or a str (padded or named
reading). The result type is part of each token's contract; the tokenizer
only stringifies at render time.

Tokens:
    YYYY  full year (int)           YY    two-digit year (str)
    MMMM  month name                MMM   abbreviated month name
    MM    month 01-12 (str)         M     month 1-12 (int)
    DDD   weekday name              DD    three-letter weekday
    D     two-letter weekday
    dd    day 01-31 (str)           d     day 1-31 (int)
    HH    hour 00-23 (str)          H     hour 0-23 (int)
    hh    hour 01-12 (str)          h     hour 1-12 (int)
    mm    minute (str)              m     minute (int)
    ss    second (str)              s     second (int)
    ff    millisecond 000-999       f     millisecond (int)
    A     AM/PM by locale           a     am/pm by locale
    ZZ    offset +HHMM              Z     offset +HH:MM

Overlapping names (M, MM, MMM, MMMM) are disambiguated by the tokenizer's
longest-match rule, not here.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from datetokens.constants import MILLISECOND_PAD_WIDTH
from datetokens.localization.types import LocaleData
from datetokens.runtime.normalizer import DateInput, normalize_date
from datetokens.runtime.padding import pad
from datetokens.runtime.value_types import OMITTED, Instant, Omitted, TokenExtractor, TokenValue

__all__ = ["TOKENS", "TOKEN_NAMES_BY_LENGTH", "TokenAccessor", "weekday_index"]


def weekday_index(instant: Instant) -> int:
    """Weekday as an index into LocaleData weekday tables (0 = Sunday)."""
    return (instant.weekday() + 1) % 7


def _hour12(instant: Instant) -> int:
    return instant.hour % 12 or 12


def _milliseconds(instant: Instant) -> int:
    return instant.microsecond // 1000


def _offset(instant: Instant, separator: str) -> str:
    """Render utcoffset() as sign, hours, separator, minutes.

    utcoffset() is positive east of UTC already, so no sign flip is needed.
    Sub-minute offsets are truncated toward zero.
    """
    offset = instant.utcoffset()
    total_minutes = int(offset.total_seconds() / 60) if offset is not None else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{pad(hours)}{separator}{pad(minutes)}"


# Locale is unused by numeric tokens; the uniform signature keeps rendering simple.
_EXTRACTORS: dict[str, TokenExtractor] = {
    "YYYY": lambda instant, _: instant.year,
    "YY": lambda instant, _: pad(instant.year % 100),
    "MMMM": lambda instant, locale: locale.month_name(instant.month),
    "MMM": lambda instant, locale: locale.month_name(instant.month, short=True),
    "MM": lambda instant, _: pad(instant.month),
    "M": lambda instant, _: instant.month,
    "DDD": lambda instant, locale: locale.weekdays[weekday_index(instant)],
    "DD": lambda instant, locale: locale.weekdays_short[weekday_index(instant)],
    "D": lambda instant, locale: locale.weekdays_min[weekday_index(instant)],
    "dd": lambda instant, _: pad(instant.day),
    "d": lambda instant, _: instant.day,
    "HH": lambda instant, _: pad(instant.hour),
    "H": lambda instant, _: instant.hour,
    "hh": lambda instant, _: pad(_hour12(instant)),
    "h": lambda instant, _: _hour12(instant),
    "mm": lambda instant, _: pad(instant.minute),
    "m": lambda instant, _: instant.minute,
    "ss": lambda instant, _: pad(instant.second),
    "s": lambda instant, _: instant.second,
    "ff": lambda instant, _: pad(_milliseconds(instant), MILLISECOND_PAD_WIDTH),
    "f": lambda instant, _: _milliseconds(instant),
    "A": lambda instant, locale: locale.meridiem(instant.hour, upper=True),
    "a": lambda instant, locale: locale.meridiem(instant.hour, upper=False),
    "ZZ": lambda instant, _: _offset(instant, ""),
    "Z": lambda instant, _: _offset(instant, ":"),
}

TOKENS: Mapping[str, TokenExtractor] = MappingProxyType(_EXTRACTORS)
"""Read-only token table."""

TOKEN_NAMES_BY_LENGTH: tuple[tuple[int, frozenset[str]], ...] = tuple(
    (length, frozenset(name for name in TOKENS if len(name) == length))
    for length in sorted({len(name) for name in TOKENS}, reverse=True)
)
"""Token names grouped by length, longest first. Drives longest-match scanning."""


class TokenAccessor:
    """Attribute and item access to the token table, bound to a locale source.

    Lets callers building custom formatters evaluate single tokens:
    ``tokens.YYYY(date)`` or ``tokens["MMMM"](date)``. The date argument is
    normalized like the dispatcher's, and names resolve against whatever
    locale is active at call time.

    Example:
        >>> tokens.MMMM(datetime(2024, 7, 23, tzinfo=UTC))
        'July'
        >>> tokens.M(datetime(2024, 7, 23, tzinfo=UTC))
        7
    """

    __slots__ = ("_locale_source",)

    def __init__(self, locale_source: Callable[[], LocaleData]) -> None:
        """Initialize accessor.

        Args:
            locale_source: Returns the LocaleData active at call time
        """
        self._locale_source = locale_source

    def __getitem__(self, name: str) -> Callable[..., TokenValue]:
        """Return a callable evaluating token ``name``.

        Raises:
            KeyError: If name is not a token
        """
        extractor = TOKENS[name]
        locale_source = self._locale_source

        def evaluate(date: DateInput | Omitted = OMITTED) -> TokenValue:
            return extractor(normalize_date(date), locale_source())

        evaluate.__name__ = name
        evaluate.__qualname__ = f"tokens.{name}"
        return evaluate

    def __getattr__(self, name: str) -> Callable[..., TokenValue]:
        try:
            return self[name]
        except KeyError:
            msg = f"Unknown token '{name}'"
            raise AttributeError(msg) from None

    def __contains__(self, name: object) -> bool:
        return name in TOKENS

    def __iter__(self) -> Iterator[str]:
        return iter(TOKENS)

    def __len__(self) -> int:
        return len(TOKENS)

    def __dir__(self) -> list[str]:
        return sorted(TOKENS)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TokenAccessor(tokens={len(TOKENS)})"
