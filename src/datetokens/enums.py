"""Enumerations for datetokens type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a locale data load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Locale data resolved and validated."""

    NOT_FOUND = "not_found"
    """No source knows the locale code."""

    ERROR = "error"
    """A source was found but its data is malformed, or the code is invalid."""

