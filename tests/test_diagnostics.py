"""Tests for lexichoice.diagnostics: codes, templates, formatter and exceptions."""

from __future__ import annotations

import json

import pytest

from lexichoice.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FormattingError,
    InvalidIntervalError,
    LocaleError,
    MissingTranslationError,
    OutputFormat,
    SourceSpan,
    TranslatorError,
)


class TestSourceSpan:
    """Span invariants."""

    def test_column_is_one_based(self) -> None:
        assert SourceSpan(0, 3).column == 1

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            SourceSpan(-1, 0)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="precedes start"):
            SourceSpan(5, 2)


class TestErrorTemplate:
    """Template output is stable."""

    def test_missing_translation(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("cart.title", "pl")
        assert diagnostic.code == DiagnosticCode.MISSING_TRANSLATION
        assert diagnostic.message == "Translation 'cart.title' not found for language 'pl'"
        assert diagnostic.key == "cart.title"
        assert diagnostic.language == "pl"

    def test_invalid_interval_span(self) -> None:
        diagnostic = ErrorTemplate.invalid_interval("{1,2 x", 5)
        assert diagnostic.message == "'{1,2 x' is not a valid interval"
        assert diagnostic.span == SourceSpan(5, 6)

    def test_long_text_is_truncated(self) -> None:
        diagnostic = ErrorTemplate.plural_form_not_found("x" * 200, 3, "en")
        assert "x" * 80 + "..." in diagnostic.message
        assert "x" * 81 not in diagnostic.message

    def test_warning_templates(self) -> None:
        assert ErrorTemplate.duplicate_interval("{1}").severity == "warning"
        assert ErrorTemplate.plural_form_count_mismatch(3, 2, "en").severity == "warning"

    def test_currency_hint_names_the_type(self) -> None:
        diagnostic = ErrorTemplate.currency_amount_not_integer(1.5)
        assert diagnostic.message == "Currency amounts have to be given as integer value"
        assert diagnostic.hint is not None
        assert "float" in diagnostic.hint


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("cart.title", "pl")
        assert diagnostic.format_error() == (
            "error[MISSING_TRANSLATION]: Translation 'cart.title' not found for language 'pl'\n"
            "  = key: cart.title\n"
            "  = language: pl\n"
            "  = help: Add the key to one of the translator's dictionaries or enable silent mode"
        )

    def test_rust_format_with_span(self) -> None:
        text = ErrorTemplate.invalid_interval("{1,2 x", 5).format_error()
        assert text.splitlines()[1] == "  --> column 6"

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.invalid_interval("{1", 2)) == (
            "INVALID_INTERVAL: '{1' is not a valid interval"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.invalid_interval("{1,2 x", 5)))
        assert data["code"] == "INVALID_INTERVAL"
        assert data["code_value"] == 3001
        assert data["severity"] == "error"
        assert (data["start"], data["end"], data["column"]) == (5, 6, 6)
        assert data["hint"].startswith("Use {n1,n2,...}")
        assert "key" not in data

    def test_json_lines(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        output = formatter.format_all(
            [ErrorTemplate.missing_translation("a", "en"), ErrorTemplate.missing_translation("b", "en")]
        )
        assert [json.loads(line)["key"] for line in output.splitlines()] == ["a", "b"]

    def test_sanitize(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10)
        diagnostic = Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message="m" * 50)
        assert formatter.format(diagnostic) == "FORMATTING_FAILED: " + "m" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.invalid_interval("{1", 2),
            ErrorTemplate.unknown_language("xx"),
        ]
        assert formatter.format_all(diagnostics) == (
            "INVALID_INTERVAL: '{1' is not a valid interval\n\n"
            "UNKNOWN_LANGUAGE: Unable to create locale for language 'xx'"
        )


class TestExceptions:
    """Exception hierarchy and diagnostic plumbing."""

    def test_message_from_diagnostic(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("k", "en")
        error = MissingTranslationError(diagnostic, key="k", language="en")
        assert str(error) == diagnostic.format_error()
        assert error.diagnostic is diagnostic

    def test_plain_message(self) -> None:
        error = LocaleError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_hierarchy(self) -> None:
        assert issubclass(MissingTranslationError, TranslatorError)
        assert issubclass(MissingTranslationError, LookupError)
        assert issubclass(InvalidIntervalError, ValueError)
        assert issubclass(TranslatorError, LocaleError)

    def test_formatting_error_fallback(self) -> None:
        error = FormattingError("failed", fallback_value="42")
        assert error.fallback_value == "42"

    def test_interval_error_defaults(self) -> None:
        error = InvalidIntervalError("bad")
        assert (error.interval, error.position) == ("", 0)
