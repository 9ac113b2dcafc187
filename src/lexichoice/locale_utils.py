"""Locale tag helpers shared by the translator and the formatting layer.

Tags are normalized to the POSIX underscore form ("pt_BR") at every entry
point so cache keys, plural rule lookups and Babel calls all agree.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from lexichoice.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale",
]

_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 tag to POSIX form.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


def split_locale(locale_code: str) -> tuple[str, str | None]:
    """Split a tag into (language, territory).

    Example:
        >>> split_locale("de-AT")
        ('de', 'AT')
        >>> split_locale("ja")
        ('ja', None)
    """
    language, _, territory = normalize_locale(locale_code).partition("_")
    return language, territory or None


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a cached Babel Locale for a tag.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no CLDR data for the tag
        ValueError: If the tag cannot be parsed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_encoding(value: str) -> str:
    # "de_DE.UTF-8@euro" -> "de_DE"
    return value.split(".")[0].split("@")[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the process locale from the OS and environment.

    Detection order:
    1. locale.getlocale()
    2. LC_ALL, LC_MESSAGES, LANG environment variables

    The "C" and "POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning the
            default locale when nothing usable is found.

    Returns:
        Locale tag in POSIX form, or DEFAULT_LOCALE.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    candidates = [system_locale, *(os.environ.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG"))]
    for candidate in candidates:
        if candidate and _strip_encoding(candidate) not in _PSEUDO_LOCALES:
            return normalize_locale(_strip_encoding(candidate))

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
