"""Format template tokenizer and compiled templates.

compile_template() scans a template left to right. At each position it
tries token names from longest to shortest and takes the first match; if
nothing matches, the character becomes literal text, merged with any
adjacent literal run. Letters that are not tokens are therefore copied
through, never rejected.

    >>> compile_template("YYYY-MM").segments
    (TokenSegment(name='YYYY'), TextSegment(text='-'), TokenSegment(name='MM'))

Compiled templates are cached for the life of the process, keyed by the
exact template string. The cache is unbounded: templates come from a small,
developer-authored set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias
import logging
from dataclasses import dataclass
from functools import cache

from datetokens.localization.types import LocaleData
from datetokens.runtime.tokens import TOKEN_NAMES_BY_LENGTH, TOKENS
from datetokens.runtime.value_types import Instant

__all__ = ["CompiledTemplate", "TextSegment", "Segment", "TokenSegment", "compile_template"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Text copied to the output verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class TokenSegment:
    """Reference to a token in the token table."""

    name: str


Segment: TypeAlias = TextSegment | TokenSegment


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Template split into literal and token segments.

    Attributes:
        source: Template string this was compiled from
        segments: Segments in output order; adjacent literals never occur
    """

    source: str
    segments: tuple[Segment, ...]

    @property
    def token_names(self) -> tuple[str, ...]:
        """Token names in the order they appear."""
        return tuple(seg.name for seg in self.segments if isinstance(seg, TokenSegment))

    def render(self, instant: Instant, locale: LocaleData) -> str:
        """Render against an instant and locale.

        Numeric token results are converted to decimal strings here and only
        here.

        Args:
            instant: Timezone-aware datetime
            locale: Locale tables for name tokens

        Returns:
            Formatted string
        """
        parts: list[str] = []
        for segment in self.segments:
            match segment:
                case TextSegment(text=text):
                    parts.append(text)
                case TokenSegment(name=name):
                    parts.append(str(TOKENS[name](instant, locale)))
        return "".join(parts)


def _match_token(template: str, position: int) -> str | None:
    """Longest token name starting at position, or None."""
    for length, names in TOKEN_NAMES_BY_LENGTH:
        candidate = template[position : position + length]
        if len(candidate) == length and candidate in names:
            return candidate
    return None


@cache
def compile_template(template: str) -> CompiledTemplate:
    """Compile a template string, reusing earlier results.

    Args:
        template: Format template such as "YYYY-MM-dd HH:mm"

    Returns:
        CompiledTemplate (the same object for repeated calls)

    Examples:
        >>> [s.name for s in compile_template("MMMM").segments]
        ['MMMM']
        >>> compile_template("Week").segments
        (TextSegment(text='Week'),)
        >>> compile_template("").segments
        ()
    """
    segments: list[Segment] = []
    literal: list[str] = []
    position = 0

    while position < len(template):
        name = _match_token(template, position)
        if name is None:
            literal.append(template[position])
            position += 1
            continue
        if literal:
            segments.append(TextSegment("".join(literal)))
            literal.clear()
        segments.append(TokenSegment(name))
        position += len(name)

    if literal:
        segments.append(TextSegment("".join(literal)))

    logger.debug("Compiled template %r into %d segments", template, len(segments))
    return CompiledTemplate(source=template, segments=tuple(segments))
