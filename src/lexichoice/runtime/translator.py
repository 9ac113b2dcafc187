"""Translator - main API for message resolution.

Resolves a key through the dictionary chain, picks the plural clause for a
count and binds placeholders:

    >>> messages = ArrayDictionary("en_US", {
    ...     "apples": "{0} No apples|s: One apple|%count% apples",
    ...     "hello": "Hello %name%",
    ... })
    >>> translator = Translator("en", messages)
    >>> translator.translate("hello", {"name": "Anna"})
    'Hello Anna'
    >>> translator.translate_plural("apples", 3)
    '3 apples'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from lexichoice.constants import COUNT_PLACEHOLDER
from lexichoice.diagnostics import ErrorTemplate, InvalidLocaleError, MissingTranslationError
from lexichoice.locale_utils import get_system_locale
from lexichoice.plural import Number, select_plural
from lexichoice.runtime.dictionary import CompositeDictionary, Dictionary, is_dictionary
from lexichoice.runtime.placeholders import PlaceholderArgs, prepare_placeholders, stringify, substitute
from lexichoice.runtime.rwlock import RWLock
from lexichoice.validation import validate_plural_message

if TYPE_CHECKING:
    from lexichoice.diagnostics import ValidationResult

__all__ = ["MissingTranslation", "Translator"]

logger = logging.getLogger(__name__)

# Debug log lines show at most this much resolved text.
_LOG_TRUNCATE_DEBUG: int = 50


@dataclass(frozen=True, slots=True)
class MissingTranslation:
    """A lookup that found nothing in the dictionary chain.

    Passed to the Translator's on_missing callback.

    Example:
        >>> missing: list[str] = []
        >>> def record(info: MissingTranslation) -> None:
        ...     missing.append(f"{info.language}:{info.key}")
        >>> translator = Translator("de", silent=True, on_missing=record)
    """

    key: str
    language: str


class Translator:
    """Resolves translation keys for one language.

    Failure policy:
        silent=False (default): a missing key raises MissingTranslationError.
        silent=True: a missing key resolves to the key itself.
        InvalidIntervalError and PluralSelectionError always propagate.

    Thread Safety:
        With thread_safe=True, lookups hold a shared read lock and the
        language/dictionary setters and add_dictionary() hold the write lock.
        Writing into a dictionary instance directly is never guarded; finish
        filling dictionaries before sharing the translator.
    """

    __slots__ = ("_chain", "_language", "_lock", "_on_missing", "_silent")

    @staticmethod
    def _validate_language(language: str) -> None:
        """Reject empty tags and tags with characters other than [A-Za-z0-9_-].

        Raises:
            InvalidLocaleError: If the tag is malformed
        """
        stripped = language.replace("_", "").replace("-", "")
        if not stripped or not stripped.isascii() or not stripped.isalnum():
            raise InvalidLocaleError(ErrorTemplate.invalid_language_tag(language), locale_code=language)

    def __init__(
        self,
        language: str,
        dictionaries: Dictionary | Iterable[Dictionary] | None = None,
        *,
        silent: bool = False,
        thread_safe: bool = False,
        on_missing: Callable[[MissingTranslation], None] | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            language: Language tag driving plural selection ("en", "pt_BR")
            dictionaries: A dictionary or an iterable of dictionaries, in
                lookup order. A CompositeDictionary passed alone becomes the
                chain itself.
            silent: Resolve missing keys to the key instead of raising
            thread_safe: Guard the chain with a readers-writer lock
            on_missing: Called with MissingTranslation for every key absent
                from the chain, in both modes

        Raises:
            InvalidLocaleError: If language is malformed
        """
        Translator._validate_language(language)

        self._language = language
        self._silent = silent
        self._on_missing = on_missing
        self._lock: RWLock | None = RWLock() if thread_safe else None
        self._chain = self._build_chain(dictionaries)

        logger.info(
            "Translator initialized for language: %s (dictionaries=%d, silent=%s, thread_safe=%s)",
            language,
            len(self._chain.dictionaries),
            silent,
            thread_safe,
        )

    def _build_chain(self, dictionaries: Dictionary | Iterable[Dictionary] | None) -> CompositeDictionary:
        match dictionaries:
            case CompositeDictionary():
                return dictionaries
            case None:
                return CompositeDictionary(self._language)
            case _ if is_dictionary(dictionaries):
                return CompositeDictionary(self._language, [dictionaries])  # type: ignore[list-item]
            case _:
                return CompositeDictionary(self._language, dictionaries)  # type: ignore[arg-type]

    @classmethod
    def for_system_locale(
        cls,
        dictionaries: Dictionary | Iterable[Dictionary] | None = None,
        *,
        silent: bool = False,
        thread_safe: bool = False,
        on_missing: Callable[[MissingTranslation], None] | None = None,
    ) -> Self:
        """Create a translator for the process locale.

        The language is detected from locale.getlocale(), LC_ALL,
        LC_MESSAGES or LANG.

        Raises:
            RuntimeError: If the system locale cannot be determined
        """
        system_locale = get_system_locale(raise_on_failure=True)
        return cls(
            system_locale,
            dictionaries,
            silent=silent,
            thread_safe=thread_safe,
            on_missing=on_missing,
        )

    def __repr__(self) -> str:
        return (
            f"Translator(language={self._language!r}, "
            f"dictionaries={len(self._chain.dictionaries)}, silent={self._silent})"
        )

    @contextmanager
    def _reading(self) -> Iterator[None]:
        with self._lock.read() if self._lock is not None else nullcontext():
            yield

    @contextmanager
    def _writing(self) -> Iterator[None]:
        with self._lock.write() if self._lock is not None else nullcontext():
            yield

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def language(self) -> str:
        """Language tag used for plural selection.

        Example:
            >>> translator = Translator("en")
            >>> translator.language = "pl"
            >>> translator.language
            'pl'
        """
        return self._language

    @language.setter
    def language(self, language: str) -> None:
        Translator._validate_language(language)
        with self._writing():
            previous, self._language = self._language, language
        logger.info("Translator language changed: %s -> %s", previous, language)

    @property
    def silent(self) -> bool:
        return self._silent

    @property
    def is_thread_safe(self) -> bool:
        return self._lock is not None

    @property
    def dictionary(self) -> CompositeDictionary:
        """The composite dictionary holding the lookup chain.

        Assigning a CompositeDictionary adopts it as the chain; assigning
        any other dictionary replaces the chain with one holding only it.
        """
        return self._chain

    @dictionary.setter
    def dictionary(self, dictionary: Dictionary) -> None:
        with self._writing():
            self._chain = self._build_chain(dictionary)
        logger.debug("Translator dictionary chain replaced: %r", self._chain)

    @property
    def dictionaries(self) -> tuple[Dictionary, ...]:
        """Dictionaries in lookup order (after the chain's own entries)."""
        return self._chain.dictionaries

    def add_dictionary(self, dictionary: Dictionary, priority: int | None = None) -> Self:
        """Splice a dictionary into the chain.

        Args:
            dictionary: Dictionary to add
            priority: Position in the chain (0 is consulted first); None appends

        Returns:
            The translator, for chaining
        """
        with self._writing():
            self._chain.add_dictionary(dictionary, priority)
        return self

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def has(self, key: str) -> bool:
        """True if some dictionary in the chain holds key."""
        with self._reading():
            return self._chain.get(key) is not None

    def _lookup(self, key: str) -> tuple[str, str]:
        """Raw text and language for key, applying the missing-key policy."""
        with self._reading():
            text = self._chain.get(key)
            language = self._language

        if text is not None:
            return text, language

        logger.warning("Translation '%s' not found for language '%s'", key, language)
        if self._on_missing is not None:
            self._on_missing(MissingTranslation(key, language))

        if self._silent:
            return key, language
        raise MissingTranslationError(
            ErrorTemplate.missing_translation(key, language), key=key, language=language
        )

    def translate(self, key: str, args: PlaceholderArgs = None) -> str:
        """Resolve key and bind placeholders.

        Args:
            key: Translation key
            args: Mapping for named placeholders or a sequence for positional

        Returns:
            Resolved text; in silent mode the key itself (with placeholders
            bound) when it is missing

        Raises:
            MissingTranslationError: key is missing and the translator is not silent
        """
        text, _ = self._lookup(key)
        result = substitute(text, prepare_placeholders(text, args))
        logger.debug("Resolved '%s': %s", key, result[:_LOG_TRUNCATE_DEBUG])
        return result

    def translate_plural(self, key: str, count: Number, args: PlaceholderArgs = None) -> str:
        """Resolve key as a plural message for count.

        %count% is always bound to count, overriding any count argument.
        Positional args skip the %count% token.

        Args:
            key: Translation key
            count: Number selecting the plural clause
            args: Mapping for named placeholders or a sequence for positional

        Raises:
            MissingTranslationError: key is missing and the translator is not silent
            InvalidIntervalError: The message holds a malformed interval
            PluralSelectionError: No clause applies to count
        """
        text, language = self._lookup(key)
        choice = select_plural(text, count, language)

        replacements = prepare_placeholders(choice, args, reserved=frozenset({COUNT_PLACEHOLDER}))
        replacements[COUNT_PLACEHOLDER] = stringify(count)

        result = substitute(choice, replacements)
        logger.debug("Resolved '%s' for count %s: %s", key, count, result[:_LOG_TRUNCATE_DEBUG])
        return result

    def validate(self, key: str) -> ValidationResult:
        """Validate the stored plural message for key against the current language.

        Raises:
            MissingTranslationError: key is missing and the translator is not silent
        """
        text, language = self._lookup(key)
        return validate_plural_message(text, language)
