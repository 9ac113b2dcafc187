"""LexiChoice - pluralized message resolution.

Looks up translation keys through a chain of dictionaries, picks the plural
form for a count (explicit ISO 31-11 intervals first, then per-language
plural rules) and substitutes %placeholders%.

Public API:
    Translator - Key lookup, plural selection and placeholder binding
    ArrayDictionary - In-memory dictionary
    CompositeDictionary - Ordered dictionary chain
    select_plural - Pick the clause of a plural message for a count
    plural_category_index - Plural rule table lookup
    interval_contains - Test a number against an interval expression
    bind - Substitute placeholders into text
    validate_plural_message - Check a plural message for a language
    Locale, LocaleFormatter - Babel-backed formatting collaborators

Exceptions:
    LocaleError - Base exception class
    MissingTranslationError - Key absent from every dictionary
    PluralSelectionError - No plural clause applies to the count
    InvalidIntervalError - Malformed interval expression
    InvalidLocaleError - Malformed or unknown locale tag
    FormattingError - Locale-aware formatting failed

Submodules:
    lexichoice.plural - Interval grammar, rule table, message selection
    lexichoice.runtime - Dictionaries, placeholders, Translator
    lexichoice.diagnostics - Diagnostic codes, templates and formatting
    lexichoice.formatting - Locale value object and formatter
"""

from .diagnostics import (
    FormattingError,
    InvalidIntervalError,
    InvalidLocaleError,
    LocaleError,
    MissingTranslationError,
    PluralSelectionError,
    TranslatorError,
)
from .formatting import Locale, LocaleFormatter
from .plural import interval_contains, plural_category_index, select_plural
from .runtime import (
    ArrayDictionary,
    CompositeDictionary,
    Dictionary,
    DictionaryEntry,
    MissingTranslation,
    Translator,
    bind,
)
from .validation import validate_plural_message

# Version information - populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("lexichoice")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArrayDictionary",
    "CompositeDictionary",
    "Dictionary",
    "DictionaryEntry",
    "FormattingError",
    "InvalidIntervalError",
    "InvalidLocaleError",
    "Locale",
    "LocaleError",
    "LocaleFormatter",
    "MissingTranslation",
    "MissingTranslationError",
    "PluralSelectionError",
    "Translator",
    "TranslatorError",
    "__version__",
    "bind",
    "interval_contains",
    "plural_category_index",
    "select_plural",
    "validate_plural_message",
]
