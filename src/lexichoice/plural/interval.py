"""Explicit interval expressions (ISO 31-11 notation).

Grammar:
    interval := set | range
    set      := "{" number ("," number)* "}"
    range    := ("[" | "]") endpoint "," endpoint ("[" | "]")
    endpoint := number | "-Inf" | "+Inf" | "Inf"
    number   := "-"? digit+ ("." digit+)?

Whitespace is allowed around numbers, commas and delimiters. A left "["
and a right "]" are inclusive; a left "]" and a right "[" are exclusive.

Example:
    >>> interval_contains(5, "]1,19]")
    True
    >>> interval_contains(1, "]1,19]")
    False
    >>> parse_interval("[20, Inf]").contains(10**6)
    True

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias

from lexichoice.constants import INFINITY_TOKENS, RANGE_DELIMITERS, SET_CLOSE, SET_OPEN
from lexichoice.diagnostics import ErrorTemplate, InvalidIntervalError

from .cursor import Cursor, ParseResult

__all__ = [
    "Interval",
    "IntervalKind",
    "Number",
    "interval_contains",
    "parse_interval",
    "scan_interval",
]

Number: TypeAlias = int | float | Decimal

_OPENERS = SET_OPEN + RANGE_DELIMITERS

# Longest spelling first so "-Inf" is not read as "-" followed by "Inf".
_INFINITY_SPELLINGS = tuple(sorted(INFINITY_TOKENS, key=len, reverse=True))


class IntervalKind(StrEnum):
    """Shape of an interval expression."""

    SET = "set"
    RANGE = "range"


@dataclass(frozen=True, slots=True)
class Interval:
    """Parsed interval expression.

    Attributes:
        kind: SET for "{...}", RANGE for bracketed ranges
        source: Expression text as written, e.g. "]1,19]"
        members: Listed numbers of a SET (empty for ranges)
        left: Lower endpoint of a RANGE
        right: Upper endpoint of a RANGE
        left_inclusive: True for a left "["
        right_inclusive: True for a right "]"
    """

    kind: IntervalKind
    source: str
    members: tuple[float, ...] = ()
    left: float = -math.inf
    right: float = math.inf
    left_inclusive: bool = True
    right_inclusive: bool = True

    def __str__(self) -> str:
        return self.source

    def contains(self, number: Number) -> bool:
        """Test whether number lies in the interval.

        Set membership is numeric equality, so 0 matches "{0}" and 0.0 does
        too. NaN is contained in nothing.
        """
        value = float(number) if isinstance(number, Decimal) else number
        if isinstance(value, float) and math.isnan(value):
            return False

        match self.kind:
            case IntervalKind.SET:
                return any(value == member for member in self.members)
            case IntervalKind.RANGE:
                above = value >= self.left if self.left_inclusive else value > self.left
                below = value <= self.right if self.right_inclusive else value < self.right
                return above and below


def _fail(cursor: Cursor) -> InvalidIntervalError:
    diagnostic = ErrorTemplate.invalid_interval(cursor.source, cursor.pos)
    return InvalidIntervalError(diagnostic, interval=cursor.source, position=cursor.pos)


def _scan_number(cursor: Cursor) -> ParseResult[float] | None:
    """Scan -?digit+(.digit+)? at the cursor."""
    start = cursor
    if not cursor.is_eof and cursor.current == "-":
        cursor = cursor.advance()

    if not cursor.is_digit:
        return None
    while cursor.is_digit:
        cursor = cursor.advance()

    if not cursor.is_eof and cursor.current == ".":
        cursor = cursor.advance()
        if not cursor.is_digit:
            return None
        while cursor.is_digit:
            cursor = cursor.advance()

    return ParseResult(float(start.slice_to(cursor.pos)), cursor)


def _scan_endpoint(cursor: Cursor) -> ParseResult[float] | None:
    for spelling in _INFINITY_SPELLINGS:
        if cursor.starts_with(spelling):
            return ParseResult(INFINITY_TOKENS[spelling], cursor.advance(len(spelling)))
    return _scan_number(cursor)


def _starts_numeric(cursor: Cursor) -> bool:
    """True if the cursor sits on something that begins a number or infinity."""
    if cursor.is_digit:
        return True
    if cursor.peek() == "-" and cursor.advance().is_digit:
        return True
    return any(cursor.starts_with(spelling) for spelling in _INFINITY_SPELLINGS)


def _scan_set(cursor: Cursor) -> ParseResult[tuple[float, ...]]:
    cursor = cursor.advance()  # "{"
    members: list[float] = []
    while True:
        cursor = cursor.skip_whitespace()
        number = _scan_number(cursor)
        if number is None:
            raise _fail(cursor)
        members.append(number.value)
        cursor = number.cursor.skip_whitespace()

        if (closed := cursor.expect(SET_CLOSE)) is not None:
            return ParseResult(tuple(members), closed)
        if (after_comma := cursor.expect(",")) is None:
            raise _fail(cursor)
        cursor = after_comma


def _scan_range(cursor: Cursor) -> ParseResult[tuple[float, float, bool, bool]]:
    left_inclusive = cursor.current == "["
    cursor = cursor.advance().skip_whitespace()

    left = _scan_endpoint(cursor)
    if left is None:
        raise _fail(cursor)
    cursor = left.cursor.skip_whitespace()

    after_comma = cursor.expect(",")
    if after_comma is None:
        raise _fail(cursor)
    cursor = after_comma.skip_whitespace()

    right = _scan_endpoint(cursor)
    if right is None:
        raise _fail(cursor)
    cursor = right.cursor.skip_whitespace()

    if cursor.is_eof or cursor.current not in RANGE_DELIMITERS:
        raise _fail(cursor)
    right_inclusive = cursor.current == "]"
    return ParseResult((left.value, right.value, left_inclusive, right_inclusive), cursor.advance())


def scan_interval(segment: str) -> ParseResult[Interval] | None:
    """Scan an interval at the start of a plural message segment.

    Args:
        segment: Segment text, e.g. "]1,19] There are %count% apples"

    Returns:
        ParseResult whose cursor sits right after the closing delimiter, or
        None when the segment does not begin with an interval opener
        followed by a number (e.g. "[beta] label" or plain text).

    Raises:
        InvalidIntervalError: The segment begins like an interval but the
            expression is malformed, e.g. "{1,2 apples".
    """
    cursor = Cursor(segment, 0).skip_whitespace()
    if cursor.is_eof or cursor.current not in _OPENERS:
        return None
    if not _starts_numeric(cursor.advance().skip_whitespace()):
        return None

    start = cursor
    if cursor.current == SET_OPEN:
        members = _scan_set(cursor)
        end = members.cursor
        interval = Interval(
            kind=IntervalKind.SET,
            source=start.slice_to(end.pos),
            members=members.value,
        )
    else:
        bounds = _scan_range(cursor)
        end = bounds.cursor
        left, right, left_inclusive, right_inclusive = bounds.value
        interval = Interval(
            kind=IntervalKind.RANGE,
            source=start.slice_to(end.pos),
            left=left,
            right=right,
            left_inclusive=left_inclusive,
            right_inclusive=right_inclusive,
        )
    return ParseResult(interval, end)


def parse_interval(text: str) -> Interval:
    """Parse a complete interval expression.

    Surrounding whitespace is allowed; anything else after the expression
    is an error.

    Raises:
        InvalidIntervalError: If text is not a well-formed interval
    """
    result = scan_interval(text)
    if result is None:
        raise _fail(Cursor(text, 0).skip_whitespace())

    trailing = result.cursor.skip_whitespace()
    if not trailing.is_eof:
        raise _fail(trailing)
    return result.value


def interval_contains(number: Number, text: str) -> bool:
    """Test whether number lies in the interval written as text.

    Raises:
        InvalidIntervalError: If text is not a well-formed interval
    """
    return parse_interval(text).contains(number)
