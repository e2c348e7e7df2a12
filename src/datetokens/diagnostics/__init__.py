"""Diagnostic system for datetokens errors.

Provides structured error diagnostics with codes, hints and type details.
Inspired by Rust compiler diagnostics.

DiagnosticFormatter is public API for callers that report datetokens
errors themselves: OutputFormat.RUST for terminals, SIMPLE for log lines
(the locale store uses it for its warnings) and JSON for tooling.
format_all() joins several diagnostics and format_exception() renders any
raised error, falling back to ``TypeName: message`` for foreign exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DateArgumentTypeError,
    DateTokensError,
    FormatterNameError,
    InvalidDateError,
    MissingTemplateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateArgumentTypeError",
    "DateTokensError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatterNameError",
    "InvalidDateError",
    "MissingTemplateError",
    "OutputFormat",
]
