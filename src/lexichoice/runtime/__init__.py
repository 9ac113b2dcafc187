"""Runtime resolution: dictionaries, placeholder binding and the Translator.

Python 3.13+.
"""

from .dictionary import ArrayDictionary, CompositeDictionary, Dictionary, DictionaryEntry, is_dictionary
from .placeholders import (
    PlaceholderArgs,
    bind,
    extract_placeholders,
    normalize_placeholder,
    prepare_placeholders,
    substitute,
)
from .rwlock import RWLock
from .translator import MissingTranslation, Translator

__all__ = [
    "ArrayDictionary",
    "CompositeDictionary",
    "Dictionary",
    "DictionaryEntry",
    "MissingTranslation",
    "PlaceholderArgs",
    "RWLock",
    "Translator",
    "bind",
    "extract_placeholders",
    "normalize_placeholder",
    "prepare_placeholders",
    "is_dictionary",
    "substitute",
]
