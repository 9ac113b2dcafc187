"""Result types returned by plural message validation.

A result holds errors (malformed intervals; the message cannot be resolved)
and warnings (the message resolves but probably not the way its translator
meant). Warnings never affect validity.

Python 3.13+.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]

# Content longer than this is cut when sanitizing output.
_SANITIZE_MAX_CONTENT_LENGTH: int = 100

_REDACTED = "[content redacted]"


def _display_content(content: str, *, sanitize: bool, redact: bool) -> str:
    if not sanitize:
        return content
    if redact:
        return _REDACTED
    if len(content) > _SANITIZE_MAX_CONTENT_LENGTH:
        return content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
    return content


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A segment that makes the message unusable.

    Attributes:
        code: DiagnosticCode name, e.g. "INVALID_INTERVAL"
        message: Human-readable description
        content: Text of the offending segment
        column: 1-indexed column inside the segment, when known
        segment: 0-indexed position of the segment in the message, when known

    content is translation text; pass sanitize=True to format() before
    writing it to shared logs.
    """

    code: str
    message: str
    content: str
    column: int | None = None
    segment: int | None = None

    def format(self, *, sanitize: bool = False, redact_content: bool = False) -> str:
        """One-line rendering.

        Args:
            sanitize: Cut content to 100 characters
            redact_content: With sanitize, hide content entirely

        Example:
            >>> ValidationError("INVALID_INTERVAL", "bad", "{1,2 apples", column=6).format()
            "[INVALID_INTERVAL] at column 6: bad (content: '{1,2 apples')"
        """
        where: list[str] = []
        if self.segment is not None:
            where.append(f"segment {self.segment}")
        if self.column is not None:
            where.append(f"column {self.column}")
        location = f" at {', '.join(where)}" if where else ""
        shown = _display_content(self.content, sanitize=sanitize, redact=redact_content)
        return f"[{self.code}]{location}: {self.message} (content: {shown!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """A structural problem that still resolves.

    Attributes:
        code: DiagnosticCode name, e.g. "PLURAL_FORM_COUNT_MISMATCH"
        message: Human-readable description
        context: Extra detail such as the duplicated interval
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        suffix = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{suffix}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Errors and warnings found in one plural message.

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid, result.error_count
        (True, 0)
    """

    errors: tuple[ValidationError, ...] = ()
    warnings: tuple[ValidationWarning, ...] = ()

    @classmethod
    def valid(cls) -> "ValidationResult":
        """A result with nothing to report."""
        return cls()

    @classmethod
    def collect(
        cls,
        errors: Iterable[ValidationError] = (),
        warnings: Iterable[ValidationWarning] = (),
    ) -> "ValidationResult":
        """Build a result from any iterables of issues."""
        return cls(tuple(errors), tuple(warnings))

    @property
    def is_valid(self) -> bool:
        """True if there are no errors."""
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def codes(self) -> frozenset[str]:
        """Codes of every error and warning."""
        return frozenset(issue.code for issue in (*self.errors, *self.warnings))

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Multi-line report, or a one-line pass message.

        Args:
            sanitize: Cut error content (see ValidationError.format)
            redact_content: With sanitize, hide error content entirely
            include_warnings: Append the warnings section
        """
        lines = list(self._report_lines(sanitize, redact_content, include_warnings))
        if not lines:
            return "Validation passed: no errors or warnings"
        return "\n".join(lines)

    def _report_lines(self, sanitize: bool, redact_content: bool, include_warnings: bool) -> Iterator[str]:
        if self.errors:
            yield f"Errors ({self.error_count}):"
            for error in self.errors:
                yield "  " + error.format(sanitize=sanitize, redact_content=redact_content)
        if include_warnings and self.warnings:
            yield f"Warnings ({self.warning_count}):"
            for warning in self.warnings:
                yield "  " + warning.format()
