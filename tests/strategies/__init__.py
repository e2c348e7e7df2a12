"""Hypothesis strategies for datetokens property-based testing.

Strategies are organized by domain:

- dates: Aware instants, naive datetimes, calendar dates, timestamps
- templates: Token names, literal text, numeric-only templates
- locales: LocaleData builders and in-memory loaders (not strategies)

Usage:
    from tests.strategies import aware_instants, numeric_templates
    from tests.strategies.locales import DictLoader, make_locale_data

Event-Emitting Strategies (HypoFuzz-Optimized):
    - instant_by_hour_boundary, offset_by_sign
"""

from .dates import (
    SCENARIO_INSTANT,
    SCENARIO_TIMESTAMP_MS,
    UTC_PLUS_2,
    aware_instants,
    calendar_dates,
    fixed_offsets,
    instant_by_hour_boundary,
    local_datetimes,
    offset_by_sign,
    timestamps_ms,
)
from .templates import (
    LITERAL_ALPHABET,
    NAME_TOKENS,
    NUMERIC_TOKENS,
    any_templates,
    literal_text,
    numeric_templates,
    token_names,
)

__all__ = [
    "LITERAL_ALPHABET",
    "NAME_TOKENS",
    "NUMERIC_TOKENS",
    "SCENARIO_INSTANT",
    "SCENARIO_TIMESTAMP_MS",
    "UTC_PLUS_2",
    "any_templates",
    "aware_instants",
    "calendar_dates",
    "fixed_offsets",
    "instant_by_hour_boundary",
    "literal_text",
    "local_datetimes",
    "numeric_templates",
    "offset_by_sign",
    "timestamps_ms",
    "token_names",
]
