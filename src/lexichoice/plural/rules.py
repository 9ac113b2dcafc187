"""Plural category index per language.

Maps a language and a cardinal number to the index of the standard clause
a plural message should use. Rules follow the CLDR v24-era plural table:
15 rule families covering about 100 languages. Languages outside the table
always get index 0.

Rule arithmetic:
    n  -- the number itself, used for equality and range tests
    i  -- integer part of n truncated toward zero (0 for NaN and infinities)
    i % 10, i % 100 -- truncated remainders, negative for negative i

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

__all__ = [
    "PluralFamily",
    "plural_category_index",
    "plural_family",
    "plural_forms",
    "plural_rule_key",
]

PluralRule: TypeAlias = Callable[[float | int, int], int]


def _rem(i: int, modulus: int) -> int:
    """Remainder with the sign of the dividend (C semantics)."""
    return i % modulus if i >= 0 else -(-i % modulus)


def _invariant(n: float | int, i: int) -> int:
    return 0


def _one_other(n: float | int, i: int) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: float | int, i: int) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: float | int, i: int) -> int:
    m10, m100 = _rem(i, 10), _rem(i, 100)
    if m10 == 1 and m100 != 11:
        return 0
    if 2 <= m10 <= 4 and (m100 < 10 or m100 >= 20):
        return 1
    return 2


def _czech(n: float | int, i: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _irish(n: float | int, i: int) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _lithuanian(n: float | int, i: int) -> int:
    m10, m100 = _rem(i, 10), _rem(i, 100)
    if m10 == 1 and m100 != 11:
        return 0
    if m10 >= 2 and (m100 < 10 or m100 >= 20):
        return 1
    return 2


def _slovenian(n: float | int, i: int) -> int:
    m100 = _rem(i, 100)
    if m100 == 1:
        return 0
    if m100 == 2:
        return 1
    return 2 if m100 in (3, 4) else 3


def _macedonian(n: float | int, i: int) -> int:
    return 0 if _rem(i, 10) == 1 else 1


def _maltese(n: float | int, i: int) -> int:
    m100 = _rem(i, 100)
    if n == 1:
        return 0
    if n == 0 or 1 < m100 < 11:
        return 1
    return 2 if 10 < m100 < 20 else 3


def _latvian(n: float | int, i: int) -> int:
    if n == 0:
        return 0
    return 1 if _rem(i, 10) == 1 and _rem(i, 100) != 11 else 2


def _polish(n: float | int, i: int) -> int:
    m10, m100 = _rem(i, 10), _rem(i, 100)
    if n == 1:
        return 0
    return 1 if 2 <= m10 <= 4 and (m100 < 12 or m100 > 14) else 2


def _welsh(n: float | int, i: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n in (8, 11) else 3


def _romanian(n: float | int, i: int) -> int:
    if n == 1:
        return 0
    return 1 if n == 0 or 0 < _rem(i, 100) < 20 else 2


def _arabic(n: float | int, i: int) -> int:  # noqa: PLR0911
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n <= 10:
        return 3
    if 11 <= n <= 99:
        return 4
    return 5


@dataclass(frozen=True, slots=True)
class PluralFamily:
    """Languages sharing one plural rule.

    Attributes:
        name: Short family name used in logs and diagnostics
        forms: Number of standard clauses the family distinguishes
        languages: Rule keys (see plural_rule_key) belonging to the family
        rule: Function of (n, i) returning the category index
    """

    name: str
    forms: int
    languages: frozenset[str]
    rule: PluralRule


_INVARIANT = PluralFamily(
    "invariant", 1,
    frozenset("bo dz id ja jv ka km kn ko ms th tr vi zh".split()),
    _invariant,
)

_FAMILIES: tuple[PluralFamily, ...] = (
    _INVARIANT,
    PluralFamily(
        "one-other", 2,
        frozenset(
            "af az bn bg ca da de el en eo es et eu fa fi fo fur fy gl gu ha he hu "
            "is it ku lb ml mn mr nah nb ne nl nn no om or pa pap ps pt so sq sv sw "
            "ta te tk ur zu".split()
        ),
        _one_other,
    ),
    PluralFamily(
        "zero-one-other", 2,
        # "xbr" is the rule key for Brazilian Portuguese (pt_BR)
        frozenset("am bh fil fr gun hi ln mg nso xbr ti wa".split()),
        _zero_one_other,
    ),
    PluralFamily("east-slavic", 3, frozenset("be bs hr ru sr uk".split()), _east_slavic),
    PluralFamily("czech", 3, frozenset({"cs", "sk"}), _czech),
    PluralFamily("irish", 3, frozenset({"ga"}), _irish),
    PluralFamily("lithuanian", 3, frozenset({"lt"}), _lithuanian),
    PluralFamily("slovenian", 4, frozenset({"sl"}), _slovenian),
    PluralFamily("macedonian", 2, frozenset({"mk"}), _macedonian),
    PluralFamily("maltese", 4, frozenset({"mt"}), _maltese),
    PluralFamily("latvian", 3, frozenset({"lv"}), _latvian),
    PluralFamily("polish", 3, frozenset({"pl"}), _polish),
    PluralFamily("welsh", 4, frozenset({"cy"}), _welsh),
    PluralFamily("romanian", 3, frozenset({"ro"}), _romanian),
    PluralFamily("arabic", 6, frozenset({"ar"}), _arabic),
)

_FAMILY_BY_KEY: dict[str, PluralFamily] = {
    language: family for family in _FAMILIES for language in family.languages
}


def plural_rule_key(language: str) -> str:
    """Reduce a language tag to the key used by the rule table.

    Hyphens are treated as underscores. Tags longer than three characters
    lose their last "_" suffix only, so "sr_Latn_RS" keys on "sr_Latn".
    Matching is case-sensitive. Brazilian Portuguese keeps its own key
    because it follows the French-style zero-one rule.

    Example:
        >>> plural_rule_key("en-US")
        'en'
        >>> plural_rule_key("pt_BR")
        'xbr'
        >>> plural_rule_key("sr_Latn_RS")
        'sr_Latn'
    """
    tag = language.replace("-", "_")
    if tag == "pt_BR":
        return "xbr"
    if len(tag) > 3 and "_" in tag:
        return tag.rpartition("_")[0]
    return tag


def plural_family(language: str) -> PluralFamily:
    """Rule family for a language; unknown languages map to the invariant family."""
    return _FAMILY_BY_KEY.get(plural_rule_key(language), _INVARIANT)


def plural_forms(language: str) -> int:
    """Number of standard clauses a message needs for the language.

    Example:
        >>> plural_forms("ru")
        3
        >>> plural_forms("ja")
        1
    """
    return plural_family(language).forms


def _integer_part(number: float | int) -> int:
    if isinstance(number, float) and not math.isfinite(number):
        return 0
    return int(number)


def plural_category_index(language: str, number: int | float | Decimal) -> int:
    """Index of the standard clause to use for number in language.

    Pure and stateless.

    Args:
        language: Language or locale tag ("ru", "pt_BR", "en-GB")
        number: Cardinal number; floats and Decimals are not truncated
            for equality tests

    Returns:
        Category index in range(plural_forms(language))

    Example:
        >>> plural_category_index("en", 1)
        0
        >>> plural_category_index("ru", 22)
        1
        >>> plural_category_index("ar", 100)
        5
    """
    n = float(number) if isinstance(number, Decimal) else number
    return plural_family(language).rule(n, _integer_part(n))
