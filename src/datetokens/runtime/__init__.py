"""Formatting runtime: padding, token table, tokenizer, normalizer, dispatcher.

Python 3.13+.
"""

from .context import (
    DateFormatter,
    FormatterFunction,
    create_formatter,
    format_date,
    get_default_formatter,
    get_locale,
    list_names,
    register,
    set_locale,
    tokens,
)
from .normalizer import DateInput, normalize_date
from .padding import pad
from .registry import FormatterRegistry
from .tokenizer import CompiledTemplate, Segment, TextSegment, TokenSegment, compile_template
from .tokens import TOKENS, TokenAccessor, weekday_index
from .value_types import OMITTED, Instant, NamedFormatter, Omitted, TokenExtractor, TokenValue

__all__ = [
    "OMITTED",
    "TOKENS",
    "CompiledTemplate",
    "DateFormatter",
    "DateInput",
    "FormatterFunction",
    "FormatterRegistry",
    "Instant",
    "NamedFormatter",
    "Omitted",
    "Segment",
    "TextSegment",
    "TokenAccessor",
    "TokenExtractor",
    "TokenSegment",
    "TokenValue",
    "compile_template",
    "create_formatter",
    "format_date",
    "get_default_formatter",
    "get_locale",
    "list_names",
    "normalize_date",
    "pad",
    "register",
    "set_locale",
    "tokens",
    "weekday_index",
]
