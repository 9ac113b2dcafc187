"""Diagnostic codes, message spans and the Diagnostic record.

Every LexiChoice error and validation warning is described by one Diagnostic.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers, grouped by the stage that reports them:
        1000-1999: Lookup errors (missing translations)
        2000-2999: Selection errors (plural form selection)
        3000-3999: Syntax errors (interval grammar)
        4000-4999: Locale and formatting errors
        5000-5999: Validation warnings (plural message structure)
    """

    # Lookup errors (1000-1999)
    MISSING_TRANSLATION = 1001

    # Selection errors (2000-2999)
    PLURAL_FORM_NOT_FOUND = 2001

    # Syntax errors (3000-3999)
    INVALID_INTERVAL = 3001

    # Locale and formatting errors (4000-4999)
    INVALID_LOCALE = 4001
    UNKNOWN_LANGUAGE = 4002
    FORMATTING_FAILED = 4003
    CURRENCY_AMOUNT_NOT_INTEGER = 4004

    # Validation warnings (5000-5999)
    PLURAL_FORM_COUNT_MISMATCH = 5001
    DUPLICATE_INTERVAL = 5002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a problem inside a message string.

    Attributes:
        start: Offset of the first offending character (0-indexed)
        end: Offset just past the offending text
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Reject negative or inverted spans.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"span start cannot be negative, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"span end {self.end} precedes start {self.start}"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported problem, rendered by DiagnosticFormatter.

    Attributes:
        code: Unique error code
        message: One-sentence description
        span: Location inside the offending message text (optional)
        hint: How to fix the problem
        key: Translation key being resolved when the error occurred
        language: Language tag in effect when the error occurred
        severity: "error" for exceptions, "warning" for validation notes
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    key: str | None = None
    language: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """The bare message, without code or notes."""
        return self.message

    def format_error(self) -> str:
        """Multi-line rendering used as the exception message.

        Example output:
            error[MISSING_TRANSLATION]: Translation 'cart.title' not found for language 'pl'
              = key: cart.title
              = language: pl
              = help: Add the key to one of the translator's dictionaries

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
