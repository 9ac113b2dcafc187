"""Rendering of Diagnostic objects for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """How DiagnosticFormatter renders a Diagnostic."""

    RUST = "rust"  # multi-line, compiler style
    SIMPLE = "simple"  # "CODE: message"
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders diagnostics in one of the OutputFormat styles.

    Attributes:
        output_format: Rendering style
        sanitize: Cut message, key and hint text to max_content_length
        max_content_length: Length kept when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.invalid_interval("{1", 2)))
        INVALID_INTERVAL: '{1' is not a valid interval
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._as_dict(diagnostic), ensure_ascii=False)
            case _:
                return "\n".join(self._rust_lines(diagnostic))

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics.

        JSON output is one object per line; the other styles separate
        diagnostics with a blank line.
        """
        separator = "\n" if self.output_format is OutputFormat.JSON else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _rust_lines(self, diagnostic: Diagnostic) -> Iterator[str]:
        yield f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"
        if diagnostic.span is not None:
            yield f"  --> column {diagnostic.span.column}"
        for label, value in _notes(diagnostic):
            yield f"  = {label}: {self._clip(value)}"

    def _as_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        data: dict[str, object] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        if diagnostic.span is not None:
            data |= {
                "start": diagnostic.span.start,
                "end": diagnostic.span.end,
                "column": diagnostic.span.column,
            }
        data |= {("hint" if label == "help" else label): self._clip(value) for label, value in _notes(diagnostic)}
        return data

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."


def _notes(diagnostic: Diagnostic) -> Iterator[tuple[str, str]]:
    """Labelled optional fields, in display order."""
    for label, value in (
        ("key", diagnostic.key),
        ("language", diagnostic.language),
        ("help", diagnostic.hint),
    ):
        if value:
            yield label, value
