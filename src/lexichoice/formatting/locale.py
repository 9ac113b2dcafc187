"""Locale value object.

Bundles a validated locale tag with the settings locale-aware formatting
needs: timezone, currency and the currency sub-unit. Nothing here touches
process-wide state; the timezone is plain configuration.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from babel import UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from lexichoice.constants import DEFAULT_CURRENCY_SUB_UNIT, DEFAULT_TIMEZONE
from lexichoice.diagnostics import ErrorTemplate, InvalidLocaleError
from lexichoice.locale_utils import get_babel_locale, split_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["Locale"]

logger = logging.getLogger(__name__)

_LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}[-_][A-Z]{2}$")


@dataclass(frozen=True, slots=True)
class Locale:
    """Validated locale with formatting settings.

    Attributes:
        code: Locale tag in POSIX form ("en_US"); "en-US" is accepted
        timezone: IANA timezone name used for date and time output
        currency_sub_unit: Minor units per major unit (100 for cents)
        currency: ISO 4217 code; defaults to the territory's current currency

    Example:
        >>> locale = Locale("pl-PL", timezone="Europe/Warsaw")
        >>> locale.code, locale.language, locale.territory
        ('pl_PL', 'pl', 'PL')
        >>> locale.currency
        'PLN'
    """

    # Default locale per bare language code.
    DEFAULT_LOCALES: ClassVar[dict[str, str]] = {
        "az": "az_AZ",
        "bg": "bg_BG",
        "de": "de_DE",
        "en": "en_US",
        "es": "es_ES",
        "fi": "fi_FI",
        "fo": "fo_FO",
        "fr": "fr_FR",
        "hr": "hr_HR",
        "ht": "ht_HT",
        "hu": "hu_HU",
        "id": "id_ID",
        "is": "is_IS",
        "it": "it_IT",
        "lt": "lt_LT",
        "lv": "lv_LV",
        "mg": "mg_MG",
        "mk": "mk_MK",
        "mn": "mn_MN",
        "mt": "mt_MT",
        "nl": "nl_NL",
        "pl": "pl_PL",
        "pt": "pt_PT",
        "ro": "ro_RO",
        "ru": "ru_RU",
        "rw": "rw_RW",
        "sk": "sk_SK",
        "so": "so_SO",
        "th": "th_TH",
        "tr": "tr_TR",
        "uz": "uz_UZ",
    }

    code: str
    timezone: str = DEFAULT_TIMEZONE
    currency_sub_unit: int = DEFAULT_CURRENCY_SUB_UNIT
    currency: str | None = None

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            InvalidLocaleError: Malformed code, unknown timezone or a
                non-positive sub-unit
        """
        if not isinstance(self.code, str) or not _LOCALE_PATTERN.match(self.code):
            code = str(self.code)
            raise InvalidLocaleError(ErrorTemplate.invalid_locale(code), locale_code=code)
        object.__setattr__(self, "code", self.code.replace("-", "_"))

        sub_unit = self.currency_sub_unit
        if isinstance(sub_unit, bool) or not isinstance(sub_unit, int) or sub_unit <= 0:
            msg = f"Currency sub-unit must be a positive integer, got {self.currency_sub_unit!r}"
            raise InvalidLocaleError(msg, locale_code=self.code)

        try:
            babel_dates.get_timezone(self.timezone)
        except LookupError as e:
            msg = f"Unknown timezone '{self.timezone}' for locale {self.code}"
            raise InvalidLocaleError(msg, locale_code=self.code) from e

        if self.currency is None:
            object.__setattr__(self, "currency", _territory_currency(self.territory))

    @classmethod
    def from_language(
        cls,
        language: str,
        *,
        timezone: str = DEFAULT_TIMEZONE,
        currency_sub_unit: int = DEFAULT_CURRENCY_SUB_UNIT,
    ) -> Locale:
        """Build the default locale for a bare language code.

        Example:
            >>> Locale.from_language("de").code
            'de_DE'

        Raises:
            InvalidLocaleError: No default locale is known for language
        """
        code = cls.DEFAULT_LOCALES.get(language)
        if code is None:
            raise InvalidLocaleError(ErrorTemplate.unknown_language(language), locale_code=language)
        return cls(code, timezone=timezone, currency_sub_unit=currency_sub_unit)

    @property
    def language(self) -> str:
        return split_locale(self.code)[0]

    @property
    def territory(self) -> str:
        # Validated format guarantees a territory.
        return self.code.split("_", 1)[1]

    @property
    def tzinfo(self) -> datetime.tzinfo:
        """Timezone object for the configured timezone name."""
        return babel_dates.get_timezone(self.timezone)

    @property
    def babel_locale(self) -> BabelLocale:
        """Babel Locale for the code.

        Raises:
            InvalidLocaleError: Babel has no CLDR data for the code
        """
        try:
            return get_babel_locale(self.code)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidLocaleError(
                ErrorTemplate.invalid_locale(self.code), locale_code=self.code
            ) from e

    def __str__(self) -> str:
        return self.code


def _territory_currency(territory: str) -> str | None:
    currencies = babel_numbers.get_territory_currencies(territory)
    if not currencies:
        logger.debug("No current currency known for territory %s", territory)
        return None
    return currencies[0]
