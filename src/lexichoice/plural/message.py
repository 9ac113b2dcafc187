"""Plural message parsing and clause selection.

A plural message is a list of segments separated by "|":

    {0} There are no apples|{1} There is one apple|]1,19] There are %count% apples|[20,Inf] Many apples

Each trimmed segment is either an explicit clause (an interval followed by
display text) or a standard clause (optional one-character "s:" label
followed by display text). Selection tries explicit clauses in declaration
order, then picks the standard clause at the language's plural category index.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from lexichoice.constants import LABEL_SEPARATOR, SEGMENT_SEPARATOR
from lexichoice.diagnostics import ErrorTemplate, PluralSelectionError

from .interval import Interval, Number, scan_interval
from .rules import plural_category_index

__all__ = [
    "ExplicitClause",
    "PluralMessage",
    "parse_plural_message",
    "select_plural",
    "split_segments",
]

logger = logging.getLogger(__name__)

# "s: apple", "p:apples"; one word character only, so "Note: ..." is text
_LABEL_PATTERN = re.compile(rf"^\w{re.escape(LABEL_SEPARATOR)}\s*")


@dataclass(frozen=True, slots=True)
class ExplicitClause:
    """Segment bound to a literal numeric set or range."""

    interval: Interval
    text: str


@dataclass(frozen=True, slots=True)
class PluralMessage:
    """Classified segments of a plural message.

    Attributes:
        source: The raw message text
        segment_count: Number of "|"-separated segments
        explicit: Explicit clauses in declaration order
        standard: Standard clause texts (labels removed) in declaration order
    """

    source: str
    segment_count: int
    explicit: tuple[ExplicitClause, ...]
    standard: tuple[str, ...]

    def select(self, count: Number, language: str) -> str:
        """Pick the display text for count.

        Finite fractional counts are truncated toward zero before matching,
        so 1.5 selects the same clause as 1.

        Raises:
            PluralSelectionError: No explicit clause contains count, no
                standard clause exists at the category index, and the
                message has more than one segment.
        """
        whole = _whole(count)
        for clause in self.explicit:
            if clause.interval.contains(whole):
                logger.debug("Interval %s matched count %s", clause.interval, count)
                return clause.text

        index = plural_category_index(language, whole)
        if index < len(self.standard):
            logger.debug("Plural index %d selected for count %s (%s)", index, count, language)
            return self.standard[index]

        if self.segment_count == 1 and self.standard:
            return self.standard[0]

        diagnostic = ErrorTemplate.plural_form_not_found(self.source, count, language)
        raise PluralSelectionError(diagnostic, text=self.source, count=count, language=language)


def _whole(count: Number) -> Number:
    if isinstance(count, int) or not math.isfinite(count):
        return count
    return int(count)


def split_segments(text: str) -> list[str]:
    """Split on "|" and trim each segment."""
    return [segment.strip() for segment in text.split(SEGMENT_SEPARATOR)]


def _strip_label(segment: str) -> str:
    return _LABEL_PATTERN.sub("", segment, count=1)


def parse_plural_message(text: str) -> PluralMessage:
    """Classify every segment of a plural message.

    Raises:
        InvalidIntervalError: A segment starts like an interval but the
            interval is malformed
    """
    segments = split_segments(text)
    explicit: list[ExplicitClause] = []
    standard: list[str] = []

    for segment in segments:
        scanned = scan_interval(segment)
        if scanned is not None:
            explicit.append(ExplicitClause(scanned.value, scanned.cursor.rest.lstrip()))
        else:
            standard.append(_strip_label(segment))

    return PluralMessage(
        source=text,
        segment_count=len(segments),
        explicit=tuple(explicit),
        standard=tuple(standard),
    )


def select_plural(text: str, count: Number, language: str) -> str:
    """Select the segment of a plural message matching count.

    Args:
        text: Raw plural message
        count: Number being pluralized (int, float or Decimal)
        language: Language or locale tag for category selection

    Returns:
        Display text of the winning segment, placeholders untouched

    Raises:
        InvalidIntervalError: Malformed interval in a segment
        PluralSelectionError: No segment applies to count

    Example:
        >>> select_plural("{0} none|s: %count% apple|%count% apples", 0, "en")
        'none'
        >>> select_plural("{0} none|s: %count% apple|%count% apples", 3, "en")
        '%count% apples'
    """
    return parse_plural_message(text).select(count, language)
