"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Message text is truncated in diagnostics to keep log lines bounded.
_MAX_QUOTED_TEXT: int = 80


def _quote(text: str) -> str:
    if len(text) > _MAX_QUOTED_TEXT:
        text = text[:_MAX_QUOTED_TEXT] + "..."
    return repr(text)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Callers build a Diagnostic through one of these factories and pass it to
    the matching exception class.
    """

    @staticmethod
    def missing_translation(key: str, language: str) -> Diagnostic:
        """Translation key absent from every dictionary in the chain.

        Args:
            key: The translation key that was not found
            language: Language tag of the translator

        Returns:
            Diagnostic for MISSING_TRANSLATION
        """
        msg = f"Translation {_quote(key)} not found for language '{language}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=msg,
            hint="Add the key to one of the translator's dictionaries or enable silent mode",
            key=key,
            language=language,
        )

    @staticmethod
    def plural_form_not_found(message: str, count: object, language: str) -> Diagnostic:
        """No clause of a plural message applies to the count.

        Args:
            message: The raw plural message text
            count: The count being pluralized
            language: Language tag used for category selection

        Returns:
            Diagnostic for PLURAL_FORM_NOT_FOUND
        """
        msg = (
            f"Unable to choose a translation for {_quote(message)} "
            f"with count {count} and language '{language}'"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_NOT_FOUND,
            message=msg,
            hint="Provide one standard clause per plural form of the language",
            language=language,
        )

    @staticmethod
    def invalid_interval(interval: str, position: int) -> Diagnostic:
        """Malformed interval expression.

        Args:
            interval: The interval text that failed to parse
            position: Offset inside the text where scanning failed

        Returns:
            Diagnostic for INVALID_INTERVAL
        """
        msg = f"{_quote(interval)} is not a valid interval"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INTERVAL,
            message=msg,
            span=SourceSpan(start=position, end=max(position, len(interval))),
            hint="Use {n1,n2,...} or [a,b] / ]a,b[ with numbers, -Inf, +Inf or Inf",
        )

    @staticmethod
    def invalid_locale(locale_code: str) -> Diagnostic:
        """Locale tag does not look like "en_US" or "en-US"."""
        msg = (
            f"Invalid locale format {_quote(locale_code)}, "
            'expected something like "en_US" or "en-US"'
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a 2-3 letter lowercase language and a 2 letter uppercase territory",
        )

    @staticmethod
    def invalid_language_tag(language: str) -> Diagnostic:
        """Translator language tag is empty or contains stray characters."""
        msg = f"Invalid language tag {_quote(language)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint='Use a language code such as "en", optionally with a territory: "pt_BR" or "pt-BR"',
            language=language,
        )

    @staticmethod
    def unknown_language(language: str) -> Diagnostic:
        """No default locale is known for a bare language code."""
        msg = f"Unable to create locale for language {_quote(language)}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LANGUAGE,
            message=msg,
            hint="Construct the Locale with an explicit territory instead",
            language=language,
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, reason: str) -> Diagnostic:
        """Locale-aware formatting raised inside Babel."""
        msg = f"{kind} formatting failed for '{value}': {reason}"
        return Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message=msg)

    @staticmethod
    def currency_amount_not_integer(amount: object) -> Diagnostic:
        """Currency amounts must be given in integer minor units."""
        msg = "Currency amounts have to be given as integer value"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_AMOUNT_NOT_INTEGER,
            message=msg,
            hint=f"Pass minor units as int, e.g. 12345 for 123.45 (got {type(amount).__name__})",
        )

    @staticmethod
    def plural_form_count_mismatch(found: int, expected: int, language: str) -> Diagnostic:
        """Standard clause count differs from the language's plural forms."""
        msg = (
            f"Message has {found} standard clause(s) but language "
            f"'{language}' uses {expected} plural form(s)"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_COUNT_MISMATCH,
            message=msg,
            language=language,
            severity="warning",
        )

    @staticmethod
    def duplicate_interval(interval: str) -> Diagnostic:
        """The same explicit interval is declared more than once."""
        msg = f"Interval {_quote(interval)} is declared more than once; only the first applies"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_INTERVAL,
            message=msg,
            severity="warning",
        )
