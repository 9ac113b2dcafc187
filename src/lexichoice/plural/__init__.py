"""Plural form selection: interval expressions, rule table and message selection.

Python 3.13+. Zero external dependencies.
"""

from .interval import Interval, IntervalKind, Number, interval_contains, parse_interval, scan_interval
from .message import ExplicitClause, PluralMessage, parse_plural_message, select_plural, split_segments
from .rules import PluralFamily, plural_category_index, plural_family, plural_forms, plural_rule_key

__all__ = [
    "ExplicitClause",
    "Interval",
    "IntervalKind",
    "Number",
    "PluralFamily",
    "PluralMessage",
    "interval_contains",
    "parse_interval",
    "parse_plural_message",
    "plural_category_index",
    "plural_family",
    "plural_forms",
    "plural_rule_key",
    "scan_interval",
    "select_plural",
    "split_segments",
]
