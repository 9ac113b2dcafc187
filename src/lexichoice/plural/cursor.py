"""Immutable cursor for scanning interval expressions.

Python 3.13+. Zero external dependencies.

Design:
    - Cursor is a frozen dataclass; every advance() returns a new cursor
    - EOF is a state (is_eof), not a return value
    - Scanners return ParseResult[T] on success and None when the input
      does not start with the construct they recognize
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Cursor", "ParseResult"]

T = TypeVar("T")

_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position inside a source string.

    Example:
        >>> cursor = Cursor("[1,2]", 0)
        >>> cursor.current
        '['
        >>> cursor.advance().current
        '1'
        >>> cursor.pos  # unchanged
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def is_digit(self) -> bool:
        """True if the current character is an ASCII digit."""
        return not self.is_eof and self.source[self.pos] in _ASCII_DIGITS

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    @property
    def rest(self) -> str:
        """Unscanned remainder of the source."""
        return self.source[self.pos :]

    def starts_with(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip any Unicode whitespace.

        Example:
            >>> Cursor("  \\t1", 0).skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume char if it is the current character, else None."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Scanned value plus the cursor positioned after it.

    Example:
        >>> cursor = Cursor("{0} none", 0)
        >>> result = ParseResult("{", cursor.advance())
        >>> result.value
        '{'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
