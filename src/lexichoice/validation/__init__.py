"""Validation utilities for plural messages.

Standalone checks that do not need a Translator instance.

Python 3.13+.
"""

from lexichoice.validation.message import validate_plural_message

__all__ = [
    "validate_plural_message",
]
