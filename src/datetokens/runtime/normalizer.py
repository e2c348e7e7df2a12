"""Date input normalization.

Turns every accepted date representation into an Instant: a timezone-aware
datetime whose utcoffset() all token extractors read.

Accepted inputs:
    - omitted: the current instant in the platform-local zone
    - aware datetime: used as is, keeping its own offset
    - naive datetime: interpreted as platform-local wall time
    - date: local midnight of that day
    - int / float / Decimal: Unix timestamp in milliseconds, shown in local time
    - str: ISO 8601 (datetime.fromisoformat, trailing "Z" accepted); strings
      without an offset, including date-only strings, are local time

Everything else, None included, is rejected with DateArgumentTypeError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias
import math
from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal

from datetokens.diagnostics import (
    DateArgumentTypeError,
    ErrorTemplate,
    InvalidDateError,
)
from datetokens.runtime.value_types import OMITTED, Instant, Omitted

__all__ = ["DateInput", "normalize_date"]

DateInput: TypeAlias = datetime | date | int | float | Decimal | str
"""Date representations accepted by normalize_date()."""

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def normalize_date(value: DateInput | Omitted | None = OMITTED) -> Instant:
    """Convert a date input into a timezone-aware Instant.

    Args:
        value: Date input; omit for the current instant

    Returns:
        Timezone-aware datetime

    Raises:
        DateArgumentTypeError: If value is None or of an unsupported type
        InvalidDateError: If a string is not ISO 8601, or a number is not a
            finite, representable millisecond timestamp

    Examples:
        >>> from datetime import timezone, timedelta
        >>> tz = timezone(timedelta(hours=2))
        >>> normalize_date(datetime(2024, 7, 23, 14, 35, tzinfo=tz)).utcoffset()
        datetime.timedelta(seconds=7200)
        >>> normalize_date(0).astimezone(UTC).year
        1970
        >>> normalize_date("2024-07-23T14:35:45+02:00").hour
        14
    """
    if value is OMITTED:
        return datetime.now().astimezone()

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise DateArgumentTypeError(ErrorTemplate.date_type_unsupported(value))

    if isinstance(value, datetime):
        return value if _is_aware(value) else _localize(value)

    if isinstance(value, date):
        return _localize(datetime.combine(value, time()))

    if isinstance(value, (int, float, Decimal)):
        return _from_timestamp_ms(value)

    if isinstance(value, str):
        return _from_iso_string(value)

    raise DateArgumentTypeError(ErrorTemplate.date_type_unsupported(value))


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def _localize(value: datetime) -> Instant:
    """Attach the platform-local offset to a naive datetime."""
    try:
        return value.astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(ErrorTemplate.date_out_of_range(value), input_value=value) from e


def _from_timestamp_ms(value: int | float | Decimal) -> Instant:
    if isinstance(value, int):
        finite = True
    else:
        try:
            finite = math.isfinite(value)
        except ValueError:  # signaling NaN
            finite = False
    if not finite:
        raise InvalidDateError(
            ErrorTemplate.timestamp_invalid(value, "not a finite number"),
            input_value=value,
        )

    try:
        milliseconds = value if isinstance(value, int) else float(value)
        utc = _EPOCH + timedelta(milliseconds=milliseconds)
        return utc.astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(
            ErrorTemplate.timestamp_invalid(value, "outside the supported date range"),
            input_value=value,
        ) from e


def _from_iso_string(value: str) -> Instant:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDateError(ErrorTemplate.date_string_invalid(value), input_value=value) from e
    return parsed if _is_aware(parsed) else _localize(parsed)
