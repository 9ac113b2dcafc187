"""Plural message validation.

Checks a plural message without resolving it. Useful in tests and CI for
translation catalogs: a message that validates cleanly for a language will
never raise InvalidIntervalError, and a message with the expected number of
standard clauses will not raise PluralSelectionError for integer counts.

Checks:
    - Errors: malformed interval expressions
    - Warnings: standard clause count differs from the language's plural
      forms; the same interval declared twice

Python 3.13+.
"""

import logging

from lexichoice.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    InvalidIntervalError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from lexichoice.plural.interval import scan_interval
from lexichoice.plural.message import split_segments
from lexichoice.plural.rules import plural_forms

logger = logging.getLogger(__name__)


def _to_warning(diagnostic: Diagnostic, context: str | None = None) -> ValidationWarning:
    return ValidationWarning(code=diagnostic.code.name, message=diagnostic.message, context=context)


def validate_plural_message(text: str, language: str) -> ValidationResult:
    """Validate a plural message for a language.

    Args:
        text: Raw plural message
        language: Language or locale tag the message is written for

    Returns:
        ValidationResult; is_valid is False only for malformed intervals

    Example:
        >>> result = validate_plural_message("{0} none|one|many|lots", "en")
        >>> result.is_valid, result.warning_count
        (True, 1)
    """
    segments = split_segments(text)
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []
    seen_intervals: set[str] = set()
    standard_count = 0

    for index, segment in enumerate(segments):
        try:
            scanned = scan_interval(segment)
        except InvalidIntervalError as e:
            message = e.diagnostic.message if e.diagnostic is not None else str(e)
            errors.append(
                ValidationError(
                    code="INVALID_INTERVAL",
                    message=message,
                    content=segment,
                    column=e.position + 1,
                    segment=index,
                )
            )
            continue

        if scanned is None:
            standard_count += 1
            continue

        # "[1, 5]" and "[1,5]" declare the same interval
        interval_key = "".join(scanned.value.source.split())
        if interval_key in seen_intervals:
            warnings.append(
                _to_warning(ErrorTemplate.duplicate_interval(scanned.value.source), interval_key)
            )
        seen_intervals.add(interval_key)

    expected = plural_forms(language)
    if len(segments) > 1 and standard_count and standard_count != expected:
        warnings.append(
            _to_warning(ErrorTemplate.plural_form_count_mismatch(standard_count, expected, language))
        )

    logger.debug(
        "Validated plural message for %s: %d errors, %d warnings",
        language,
        len(errors),
        len(warnings),
    )
    return ValidationResult.collect(errors, warnings)
