"""Rendering of diagnostics for terminals, log lines and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """How DiagnosticFormatter lays out a diagnostic."""

    RUST = "rust"
    """Headline plus ``= label: value`` detail lines (default)."""

    SIMPLE = "simple"
    """``CODE: message`` on one line, for log records."""

    JSON = "json"
    """One JSON object per diagnostic."""


# Detail label -> Diagnostic attribute, in output order.
_DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("argument", "argument_name"),
    ("expected", "expected_type"),
    ("received", "received_type"),
    ("help", "hint"),
)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic records (or the errors carrying them) into text.

    Attributes:
        output_format: Layout to produce
        sanitize: Cut free-text fields at max_content_length, for example
            when user-supplied date strings end up in log lines
        max_content_length: Limit applied when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.format_not_string(123))
        'FORMAT_NOT_STRING: Argument `format` must be a string'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        message = self._clip(diagnostic.message)
        details = self._details(diagnostic)

        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {message}"
            case OutputFormat.JSON:
                record: dict[str, str | int] = {
                    "code": diagnostic.code.name,
                    "code_value": diagnostic.code.value,
                    "category": str(diagnostic.code.category),
                    "message": message,
                    "severity": diagnostic.severity,
                }
                record.update({attr: value for _, attr, value in details})
                return json.dumps(record, ensure_ascii=False)
            case _:
                lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {message}"]
                lines.extend(f"  = {label}: {value}" for label, _, value in details)
                return "\n".join(lines)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(diagnostic) for diagnostic in diagnostics)

    def format_exception(self, error: BaseException) -> str:
        """Render an exception through its diagnostic when it carries one.

        Errors without a ``diagnostic`` attribute fall back to
        ``TypeName: message``.
        """
        diagnostic = getattr(error, "diagnostic", None)
        if isinstance(diagnostic, Diagnostic):
            return self.format(diagnostic)
        return f"{type(error).__name__}: {self._clip(str(error))}"

    def _details(self, diagnostic: Diagnostic) -> list[tuple[str, str, str]]:
        details: list[tuple[str, str, str]] = []
        for label, attr in _DETAIL_FIELDS:
            value = getattr(diagnostic, attr)
            if value:
                details.append((label, attr, self._clip(value) if attr == "hint" else value))
        return details

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
