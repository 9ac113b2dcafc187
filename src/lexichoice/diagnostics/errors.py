"""LexiChoice exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Build diagnostics with ErrorTemplate.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from .codes import Diagnostic

__all__ = [
    "FormattingError",
    "InvalidIntervalError",
    "InvalidLocaleError",
    "LocaleError",
    "MissingTranslationError",
    "PluralSelectionError",
    "TranslatorError",
]


class LocaleError(Exception):
    """Base exception for all LexiChoice errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidIntervalError(LocaleError, ValueError):
    """Malformed interval expression in a plural message segment.

    Always surfaced, even by silent translators: it indicates corrupt
    message data rather than a missing translation.

    Attributes:
        interval: The text that failed to parse
        position: Offset inside the text where scanning failed
    """

    def __init__(self, message: str | Diagnostic, *, interval: str = "", position: int = 0) -> None:
        super().__init__(message)
        self.interval = interval
        self.position = position


class TranslatorError(LocaleError):
    """Error raised while resolving a translation."""


class MissingTranslationError(TranslatorError, LookupError):
    """Key absent from every dictionary in the chain.

    Raised only by non-silent translators. Silent translators return the
    key itself instead.

    Attributes:
        key: The translation key
        language: Language tag of the translator
    """

    def __init__(self, message: str | Diagnostic, *, key: str, language: str) -> None:
        super().__init__(message)
        self.key = key
        self.language = language


class PluralSelectionError(TranslatorError):
    """No plural clause applies to the count.

    Raised when no explicit interval matches, no standard clause exists at
    the computed category index, and the message has more than one segment.

    Attributes:
        text: The raw plural message
        count: The count being pluralized
        language: Language tag used for category selection
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        text: str,
        count: int | float | Decimal,
        language: str,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.count = count
        self.language = language


class InvalidLocaleError(LocaleError, ValueError):
    """Locale tag is malformed or cannot be resolved.

    Attributes:
        locale_code: The rejected locale or language code
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str) -> None:
        super().__init__(message)
        self.locale_code = locale_code


class FormattingError(LocaleError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value callers may render instead of the
    formatted output.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        super().__init__(message)
        self.fallback_value = fallback_value
