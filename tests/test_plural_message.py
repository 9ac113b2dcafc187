"""Tests for lexichoice.plural.message: segment classification and selection."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexichoice.diagnostics import (
    DiagnosticCode,
    InvalidIntervalError,
    PluralSelectionError,
)
from lexichoice.plural import (
    PluralMessage,
    parse_plural_message,
    select_plural,
    split_segments,
)

APPLES = (
    "{0} There are no apples|{1} There is one apple|"
    "]1,19] There are %count% apples|[20,Inf] There are many apples"
)

RANGES = "[-Inf,0[ not enough|{0} none|{1} one|]1,19] %count%|[20,Inf] many"


class TestSplitSegments:
    """Segment splitting and trimming."""

    def test_segments_are_trimmed(self) -> None:
        assert split_segments("  a | b |c  ") == ["a", "b", "c"]

    def test_single_segment(self) -> None:
        assert split_segments("apples") == ["apples"]

    def test_empty_segments_are_kept(self) -> None:
        assert split_segments("a||b") == ["a", "", "b"]


class TestParsePluralMessage:
    """Classification into explicit and standard clauses."""

    def test_explicit_and_standard_mix(self) -> None:
        message = parse_plural_message("{0} none|s: %count% apple|%count% apples")
        assert isinstance(message, PluralMessage)
        assert message.segment_count == 3
        assert len(message.explicit) == 1
        assert message.explicit[0].text == "none"
        assert message.standard == ("%count% apple", "%count% apples")

    def test_label_prefix_removed(self) -> None:
        message = parse_plural_message("s: apple|p:apples|x:  apples")
        assert message.standard == ("apple", "apples", "apples")

    def test_colon_later_in_text_is_kept(self) -> None:
        message = parse_plural_message("s: see below|a: b: see below")
        assert message.standard == ("see below", "b: see below")

    def test_word_labels_are_text(self) -> None:
        message = parse_plural_message("Note: %count% file|one: %count% files")
        assert message.standard == ("Note: %count% file", "one: %count% files")

    def test_explicit_text_loses_leading_whitespace(self) -> None:
        message = parse_plural_message("{0}    nothing")
        assert message.explicit[0].text == "nothing"

    def test_malformed_interval_propagates(self) -> None:
        with pytest.raises(InvalidIntervalError):
            parse_plural_message("{0 none|some")


class TestSelectPlural:
    """Clause selection for a count."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, "There are no apples"),
            (1, "There is one apple"),
            (2, "There are %count% apples"),
            (19, "There are %count% apples"),
            (20, "There are many apples"),
            (1000, "There are many apples"),
        ],
    )
    def test_interval_message(self, count: int, expected: str) -> None:
        assert select_plural(APPLES, count, "en") == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (-10, "not enough"),
            (-1, "not enough"),
            (0, "none"),
            (1, "one"),
            (5, "%count%"),
            (99, "many"),
        ],
    )
    def test_open_ended_ranges(self, count: int, expected: str) -> None:
        # "0[" excludes zero, so {0} still gets its turn
        assert select_plural(RANGES, count, "en") == expected

    def test_standard_clauses_follow_language(self) -> None:
        text = "a: %count% яблоко|b: %count% яблока|c: %count% яблок"
        assert select_plural(text, 1, "ru") == "%count% яблоко"
        assert select_plural(text, 3, "ru") == "%count% яблока"
        assert select_plural(text, 5, "ru") == "%count% яблок"
        assert select_plural(text, 21, "ru") == "%count% яблоко"

    def test_explicit_clause_takes_precedence(self) -> None:
        text = "%count% apple|%count% apples|{1} exactly one"
        assert select_plural(text, 1, "en") == "exactly one"
        assert select_plural(text, 2, "en") == "%count% apples"

    def test_first_matching_explicit_clause_wins(self) -> None:
        text = "[0,10] small|[5,Inf] large"
        assert select_plural(text, 7, "en") == "small"

    def test_explicit_clauses_do_not_count_as_standard(self) -> None:
        # Index 1 for English is the second *standard* clause
        text = "{0} none|apple|{5} five|apples"
        assert select_plural(text, 3, "en") == "apples"
        assert select_plural(text, 1, "en") == "apple"

    def test_single_segment_fallback(self) -> None:
        assert select_plural("%count% apples", 7, "en") == "%count% apples"
        assert select_plural("%count% items", 5, "ru") == "%count% items"

    def test_fractional_count(self) -> None:
        assert select_plural(APPLES, 1.5, "en") == "There is one apple"
        assert select_plural(APPLES, 19.9, "en") == "There are %count% apples"
        assert select_plural(APPLES, -0.5, "en") == "There are no apples"
        assert select_plural(APPLES, Decimal("1.99"), "en") == "There is one apple"
        assert select_plural(APPLES, Decimal("0"), "en") == "There are no apples"

    def test_language_with_region(self) -> None:
        text = "%count% maçã|%count% maçãs"
        assert select_plural(text, 0, "pt_BR") == "%count% maçã"
        assert select_plural(text, 0, "pt_PT") == "%count% maçãs"


class TestPluralSelectionFailures:
    """No applicable clause."""

    def test_missing_standard_form_raises(self) -> None:
        text = "{0} none|{1} one"
        with pytest.raises(PluralSelectionError) as exc_info:
            select_plural(text, 5, "en")
        error = exc_info.value
        assert error.text == text
        assert error.count == 5
        assert error.language == "en"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.PLURAL_FORM_NOT_FOUND

    def test_too_few_forms_for_language(self) -> None:
        with pytest.raises(PluralSelectionError):
            select_plural("one|few", 5, "ru")

    def test_single_explicit_segment_without_match(self) -> None:
        with pytest.raises(PluralSelectionError):
            select_plural("{0} none", 3, "en")


class TestSelectionProperties:
    """Selection invariants."""

    @given(count=st.integers(min_value=0, max_value=10**6))
    def test_apples_message_always_resolves(self, count: int) -> None:
        assert select_plural(APPLES, count, "en") in {
            "There are no apples",
            "There is one apple",
            "There are %count% apples",
            "There are many apples",
        }

    @given(count=st.floats(min_value=-1000, max_value=1000, allow_nan=False))
    def test_fraction_selects_like_its_integer_part(self, count: float) -> None:
        assert select_plural(RANGES, count, "en") == select_plural(RANGES, int(count), "en")

    @given(text=st.text(alphabet=st.characters(exclude_characters="|{[]"), max_size=40))
    def test_single_plain_segment_is_returned(self, text: str) -> None:
        # Plain single-segment messages resolve for every count
        assert select_plural(text, 42, "ru") == parse_plural_message(text).standard[0]
