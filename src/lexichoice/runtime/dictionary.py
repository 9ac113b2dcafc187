"""Translation dictionaries and dictionary chains.

A dictionary maps translation keys to raw message text for one locale.
CompositeDictionary chains several of them: its own entries first, then
each child in registration order. The first dictionary holding a key wins.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol, Self

__all__ = [
    "ArrayDictionary",
    "CompositeDictionary",
    "Dictionary",
    "DictionaryEntry",
    "is_dictionary",
]

logger = logging.getLogger(__name__)


class Dictionary(Protocol):
    """Source of raw message text for one locale.

    Structural protocol: any object with these members can sit in a
    Translator's chain.

    Example:
        >>> class EnvDictionary:
        ...     locale = "en_US"
        ...     def get(self, key: str) -> str | None:
        ...         return os.environ.get(f"MSG_{key.upper()}")
        ...     def set(self, key: str, text: str) -> "EnvDictionary":
        ...         raise NotImplementedError
        ...     def all_entries(self) -> dict[str, str]:
        ...         return {}
    """

    @property
    def locale(self) -> str:
        """Declared locale tag, e.g. "en_US"."""
        ...

    def get(self, key: str) -> str | None:
        """Raw text for key, or None when absent. "" is a valid translation."""
        ...

    def set(self, key: str, text: str) -> Self:
        """Store text under key and return the dictionary."""
        ...

    def all_entries(self) -> dict[str, str]:
        """Snapshot of every key and the text get() returns for it."""
        ...


def is_dictionary(candidate: object) -> bool:
    """True if candidate has callable get and all_entries members."""
    return callable(getattr(candidate, "get", None)) and callable(
        getattr(candidate, "all_entries", None)
    )


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """One stored translation.

    The comment is for translators only and never affects resolution.
    """

    key: str
    text: str
    comment: str | None = None


class ArrayDictionary:
    """In-memory dictionary backed by a dict.

    Example:
        >>> d = ArrayDictionary("en_US", {"greeting": "Hello %name%"})
        >>> d.get("greeting")
        'Hello %name%'
        >>> d.get("farewell") is None
        True
        >>> d.set("empty", "").get("empty")
        ''
    """

    __slots__ = ("_entries", "_locale")

    def __init__(self, locale: str, translations: Mapping[str, str] | None = None) -> None:
        self._locale = locale
        self._entries: dict[str, DictionaryEntry] = {}
        if translations:
            self.update(translations)

    @property
    def locale(self) -> str:
        return self._locale

    def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        return entry.text if entry is not None else None

    def entry(self, key: str) -> DictionaryEntry | None:
        """Stored entry for key, including its comment."""
        return self._entries.get(key)

    def set(self, key: str, text: str, *, comment: str | None = None) -> Self:
        """Store text under key, replacing any previous entry."""
        self._entries[key] = DictionaryEntry(key, text, comment)
        return self

    def update(self, translations: Mapping[str, str]) -> Self:
        """Merge translations into the dictionary; existing keys are overwritten."""
        for key, text in translations.items():
            self._entries[key] = DictionaryEntry(key, text)
        return self

    def replace_all(self, translations: Mapping[str, str]) -> Self:
        """Discard every entry, then store translations."""
        self._entries.clear()
        return self.update(translations)

    def remove(self, key: str) -> bool:
        """Delete key. Returns False if it was not present."""
        return self._entries.pop(key, None) is not None

    def all_entries(self) -> dict[str, str]:
        return {key: entry.text for key, entry in self._entries.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self._locale!r}, entries={len(self._entries)})"


class CompositeDictionary(ArrayDictionary):
    """Dictionary chain: local entries first, then children in order.

    Children are held by reference and never mutated; set() and update()
    only touch the composite's own entries.

    Example:
        >>> base = ArrayDictionary("en_US", {"ok": "OK", "cancel": "Cancel"})
        >>> custom = ArrayDictionary("en_US", {"ok": "Sure"})
        >>> chain = CompositeDictionary("en_US", [custom, base])
        >>> chain.get("ok"), chain.get("cancel")
        ('Sure', 'Cancel')
    """

    __slots__ = ("_dictionaries",)

    def __init__(
        self,
        locale: str,
        dictionaries: Iterable[Dictionary] = (),
        translations: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(locale, translations)
        self._dictionaries: list[Dictionary] = []
        for dictionary in dictionaries:
            self.add_dictionary(dictionary)

    @property
    def dictionaries(self) -> tuple[Dictionary, ...]:
        """Children in lookup order."""
        return tuple(self._dictionaries)

    def add_dictionary(self, dictionary: Dictionary, priority: int | None = None) -> Self:
        """Register a child dictionary.

        Args:
            dictionary: Dictionary to consult after the local entries
            priority: Position in the chain (list.insert semantics, so
                negative and out-of-range values are clamped); None appends

        Raises:
            TypeError: If dictionary does not implement the Dictionary protocol
            ValueError: If dictionary is this composite
        """
        if not is_dictionary(dictionary):
            msg = f"Expected a Dictionary, got {type(dictionary).__name__}"
            raise TypeError(msg)
        if dictionary is self:
            msg = "A CompositeDictionary cannot contain itself"
            raise ValueError(msg)

        if priority is None:
            self._dictionaries.append(dictionary)
        else:
            self._dictionaries.insert(priority, dictionary)

        logger.debug(
            "Dictionary %r registered at position %s of %d",
            dictionary,
            "end" if priority is None else priority,
            len(self._dictionaries),
        )
        return self

    def get(self, key: str) -> str | None:
        text = super().get(key)
        if text is not None:
            return text
        for dictionary in self._dictionaries:
            text = dictionary.get(key)
            if text is not None:
                return text
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def all_entries(self) -> dict[str, str]:
        """Merged snapshot agreeing with get(): local entries, then children in order."""
        merged = super().all_entries()
        for dictionary in self._dictionaries:
            for key, text in dictionary.all_entries().items():
                merged.setdefault(key, text)
        return merged

    def __len__(self) -> int:
        return len(self.all_entries())

    def __repr__(self) -> str:
        return (
            f"CompositeDictionary(locale={self._locale!r}, "
            f"entries={len(self._entries)}, dictionaries={len(self._dictionaries)})"
        )
