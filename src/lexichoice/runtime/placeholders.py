"""Placeholder binding for resolved message text.

Placeholders are written %name% in message text. Arguments come either as
a mapping (named binding) or as a sequence (positional binding):

    >>> bind("Hello %name%", {"name": "Anna"})
    'Hello Anna'
    >>> bind("%a% and %b%", ["cats", "dogs"])
    'cats and dogs'

Positional values bind to the distinct tokens found in the text, in order
of first appearance. When the counts differ, binding stops at the shorter
of the two: extra tokens stay literal and extra values are ignored.

Substitution never fails. Placeholders without a value stay as written.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import math
import re
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from lexichoice.constants import PLACEHOLDER_DELIMITER

__all__ = [
    "PlaceholderArgs",
    "bind",
    "extract_placeholders",
    "normalize_placeholder",
    "prepare_placeholders",
    "stringify",
    "substitute",
]

PlaceholderArgs: TypeAlias = Mapping[str, object] | Sequence[object] | None

_TOKEN_PATTERN = re.compile(r"%[^%\s]+%")

_REPLACEMENT_PATTERN_CACHE_SIZE = 256


def normalize_placeholder(name: str) -> str:
    """Wrap a placeholder name as %name% unless it already is.

    Example:
        >>> normalize_placeholder("count")
        '%count%'
        >>> normalize_placeholder("%count%")
        '%count%'
    """
    delim = PLACEHOLDER_DELIMITER
    if len(name) >= 2 and name.startswith(delim) and name.endswith(delim):
        return name
    return f"{delim}{name}{delim}"


def extract_placeholders(text: str) -> tuple[str, ...]:
    """Distinct %token% placeholders in order of first appearance.

    Example:
        >>> extract_placeholders("%b% then %a% then %b% again")
        ('%b%', '%a%')
    """
    return tuple(dict.fromkeys(_TOKEN_PATTERN.findall(text)))


def stringify(value: object) -> str:
    """Render an argument value for insertion into text.

    Booleans render as "1" and "", integral floats drop the ".0" and None
    renders as an empty string.
    """
    match value:
        case None:
            return ""
        case bool():
            return "1" if value else ""
        case float() if math.isfinite(value) and value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def prepare_placeholders(
    text: str,
    args: PlaceholderArgs,
    *,
    reserved: frozenset[str] = frozenset(),
) -> dict[str, str]:
    """Build the token-to-value replacement table for text.

    Args:
        text: Message text the arguments will be bound into
        args: Mapping for named binding, sequence for positional binding
        reserved: Tokens skipped by positional binding because the caller
            fills them itself (e.g. %count%)

    Returns:
        Replacement table keyed by %token%

    Raises:
        TypeError: args is a str or bytes (ambiguous as a sequence) or
            neither a mapping nor a sequence
    """
    match args:
        case None:
            return {}
        case Mapping():
            return {normalize_placeholder(str(key)): stringify(value) for key, value in args.items()}
        case str() | bytes() | bytearray():
            msg = f"Placeholder arguments must be a mapping or a sequence of values, got {type(args).__name__}"
            raise TypeError(msg)
        case Sequence():
            tokens = [token for token in extract_placeholders(text) if token not in reserved]
            return {token: stringify(value) for token, value in zip(tokens, args, strict=False)}
        case _:
            msg = f"Placeholder arguments must be a mapping or a sequence of values, got {type(args).__name__}"
            raise TypeError(msg)


@functools.lru_cache(maxsize=_REPLACEMENT_PATTERN_CACHE_SIZE)
def _replacement_pattern(keys: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first: "%counter%" must win over "%count%" at the same offset.
    ordered = sorted(keys, key=len, reverse=True)
    return re.compile("|".join(re.escape(key) for key in ordered))


def substitute(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every key of replacements found in text in a single pass.

    Inserted values are never rescanned, so a value containing another
    placeholder is left alone. Empty keys are ignored.

    Example:
        >>> substitute("%a% %b%", {"%a%": "%b%", "%b%": "x"})
        '%b% x'
    """
    keys = tuple(sorted(key for key in replacements if key))
    if not keys:
        return text
    return _replacement_pattern(keys).sub(lambda match: replacements[match.group(0)], text)


def bind(text: str, args: PlaceholderArgs = None) -> str:
    """Substitute args into text. Never fails on missing values.

    Raises:
        TypeError: args has an unsupported type
    """
    return substitute(text, prepare_placeholders(text, args))
