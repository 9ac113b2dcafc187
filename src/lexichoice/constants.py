"""Shared constants for LexiChoice.

Centralized configuration constants used across the plural, runtime and
formatting packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Message syntax: Separators and delimiters of plural message strings
- Placeholders: Placeholder delimiter and the auto-injected count token
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: Fallbacks used by the formatting collaborators

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message syntax
    "SEGMENT_SEPARATOR",
    "SET_OPEN",
    "SET_CLOSE",
    "RANGE_DELIMITERS",
    "INFINITY_TOKENS",
    "LABEL_SEPARATOR",
    # Placeholders
    "PLACEHOLDER_DELIMITER",
    "COUNT_PLACEHOLDER",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEZONE",
    "DEFAULT_CURRENCY_SUB_UNIT",
]

# ============================================================================
# MESSAGE SYNTAX
# ============================================================================

# Plural messages are split into segments on this literal character.
SEGMENT_SEPARATOR: str = "|"

# Discrete set clause: {0} or {1,2,3}
SET_OPEN: str = "{"
SET_CLOSE: str = "}"

# Range clause delimiters (ISO 31-11): [a,b] ]a,b[ [a,b[ ]a,b]
RANGE_DELIMITERS: str = "[]"

# Endpoint spellings accepted for infinity, mapped to IEEE-754 values.
INFINITY_TOKENS: dict[str, float] = {
    "-Inf": float("-inf"),
    "+Inf": float("inf"),
    "Inf": float("inf"),
}

# Standard clauses may carry an ignored one-character "s:" label (e.g. "s: apple").
LABEL_SEPARATOR: str = ":"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

PLACEHOLDER_DELIMITER: str = "%"

# Injected by Translator.translate_plural(); overrides caller-supplied count.
COUNT_PLACEHOLDER: str = "%count%"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when the system locale cannot be determined.
DEFAULT_LOCALE: str = "en_US"

DEFAULT_TIMEZONE: str = "UTC"

# Divisor converting integer currency amounts (minor units) back into decimals.
DEFAULT_CURRENCY_SUB_UNIT: int = 100
