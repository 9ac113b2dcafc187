"""Tests for lexichoice.runtime.dictionary: ArrayDictionary and CompositeDictionary."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexichoice.runtime import ArrayDictionary, CompositeDictionary, DictionaryEntry


class TestArrayDictionary:
    """Single in-memory dictionary."""

    def test_get_and_set(self) -> None:
        d = ArrayDictionary("en_US")
        assert d.get("greeting") is None
        assert d.set("greeting", "Hello") is d
        assert d.get("greeting") == "Hello"

    def test_empty_string_is_a_translation(self) -> None:
        d = ArrayDictionary("en_US", {"blank": ""})
        assert d.get("blank") == ""
        assert "blank" in d

    def test_set_overwrites(self) -> None:
        d = ArrayDictionary("en_US", {"k": "old"})
        d.set("k", "new")
        assert d.get("k") == "new"
        assert len(d) == 1

    def test_comment_is_kept_but_ignored(self) -> None:
        d = ArrayDictionary("en_US").set("k", "v", comment="shown in the toolbar")
        assert d.get("k") == "v"
        assert d.entry("k") == DictionaryEntry("k", "v", "shown in the toolbar")

    def test_update_and_replace_all(self) -> None:
        d = ArrayDictionary("en_US", {"a": "1"})
        d.update({"b": "2"})
        assert d.all_entries() == {"a": "1", "b": "2"}
        d.replace_all({"c": "3"})
        assert d.all_entries() == {"c": "3"}

    def test_remove(self) -> None:
        d = ArrayDictionary("en_US", {"a": "1"})
        assert d.remove("a") is True
        assert d.remove("a") is False
        assert d.get("a") is None

    def test_locale(self) -> None:
        assert ArrayDictionary("fr_FR").locale == "fr_FR"

    def test_all_entries_is_a_snapshot(self) -> None:
        d = ArrayDictionary("en_US", {"a": "1"})
        snapshot = d.all_entries()
        snapshot["b"] = "2"
        assert d.get("b") is None

    def test_repr(self) -> None:
        assert repr(ArrayDictionary("en_US", {"a": "1"})) == "ArrayDictionary(locale='en_US', entries=1)"


class TestCompositeDictionary:
    """Dictionary chains."""

    def test_local_entries_first(self) -> None:
        child = ArrayDictionary("en_US", {"k": "child"})
        chain = CompositeDictionary("en_US", [child], {"k": "local"})
        assert chain.get("k") == "local"

    def test_children_in_registration_order(self) -> None:
        first = ArrayDictionary("en_US", {"k": "first"})
        second = ArrayDictionary("en_US", {"k": "second", "only": "second"})
        chain = CompositeDictionary("en_US", [first, second])
        assert chain.get("k") == "first"
        assert chain.get("only") == "second"
        assert chain.get("absent") is None

    def test_empty_string_in_child_stops_the_search(self) -> None:
        first = ArrayDictionary("en_US", {"k": ""})
        second = ArrayDictionary("en_US", {"k": "fallback"})
        chain = CompositeDictionary("en_US", [first, second])
        assert chain.get("k") == ""

    def test_priority_inserts_at_position(self) -> None:
        base = ArrayDictionary("en_US", {"k": "base"})
        override = ArrayDictionary("en_US", {"k": "override"})
        chain = CompositeDictionary("en_US", [base])
        chain.add_dictionary(override, priority=0)
        assert chain.dictionaries == (override, base)
        assert chain.get("k") == "override"

    def test_priority_out_of_range_appends(self) -> None:
        a = ArrayDictionary("en_US")
        b = ArrayDictionary("en_US")
        chain = CompositeDictionary("en_US", [a])
        chain.add_dictionary(b, priority=99)
        assert chain.dictionaries == (a, b)

    def test_cannot_contain_itself(self) -> None:
        chain = CompositeDictionary("en_US")
        with pytest.raises(ValueError, match="cannot contain itself"):
            chain.add_dictionary(chain)

    @pytest.mark.parametrize("candidate", [{"k": "v"}, "en_US", None, 42])
    def test_rejects_non_dictionaries(self, candidate: object) -> None:
        chain = CompositeDictionary("en_US")
        with pytest.raises(TypeError, match="Expected a Dictionary"):
            chain.add_dictionary(candidate)  # type: ignore[arg-type]
        assert chain.dictionaries == ()

    def test_nested_composites(self) -> None:
        inner = CompositeDictionary("en_US", [ArrayDictionary("en_US", {"deep": "found"})])
        outer = CompositeDictionary("en_US", [inner])
        assert outer.get("deep") == "found"
        assert "deep" in outer

    def test_set_never_touches_children(self) -> None:
        child = ArrayDictionary("en_US", {"k": "child"})
        chain = CompositeDictionary("en_US", [child])
        chain.set("k", "local")
        assert child.get("k") == "child"
        assert chain.get("k") == "local"

    def test_all_entries_agrees_with_get(self) -> None:
        first = ArrayDictionary("en_US", {"a": "first-a", "b": "first-b"})
        second = ArrayDictionary("en_US", {"b": "second-b", "c": "second-c"})
        chain = CompositeDictionary("en_US", [first, second], {"a": "local-a"})
        entries = chain.all_entries()
        assert entries == {"a": "local-a", "b": "first-b", "c": "second-c"}
        assert len(chain) == 3

    def test_children_are_live_references(self) -> None:
        child = ArrayDictionary("en_US")
        chain = CompositeDictionary("en_US", [child])
        child.set("late", "added later")
        assert chain.get("late") == "added later"

    def test_contains_rejects_non_strings(self) -> None:
        assert 1 not in CompositeDictionary("en_US")


_keys = st.text(min_size=1, max_size=8)
_tables = st.dictionaries(_keys, st.text(max_size=8), max_size=6)


class TestCompositeProperties:
    """all_entries() and get() always agree."""

    @given(local=_tables, children=st.lists(_tables, max_size=4))
    def test_all_entries_matches_get(self, local: dict[str, str], children: list[dict[str, str]]) -> None:
        chain = CompositeDictionary(
            "en_US", [ArrayDictionary("en_US", table) for table in children], local
        )
        entries = chain.all_entries()
        for key, text in entries.items():
            assert chain.get(key) == text
        every_key = set(local).union(*children)
        assert set(entries) == every_key
