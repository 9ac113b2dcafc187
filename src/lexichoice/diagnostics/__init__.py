"""Diagnostic system for LexiChoice errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    FormattingError,
    InvalidIntervalError,
    InvalidLocaleError,
    LocaleError,
    MissingTranslationError,
    PluralSelectionError,
    TranslatorError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "InvalidIntervalError",
    "InvalidLocaleError",
    "LocaleError",
    "MissingTranslationError",
    "OutputFormat",
    "PluralSelectionError",
    "SourceSpan",
    "TranslatorError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
