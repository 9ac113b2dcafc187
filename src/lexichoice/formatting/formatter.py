"""Locale-aware formatting of numbers, money, dates and times.

Thin layer over Babel's CLDR formatters. Dates and times use the locale's
SHORT styles. Currency amounts are integers in minor units and are divided
by the locale's sub-unit before formatting.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from decimal import Decimal, InvalidOperation

from babel import dates as babel_dates
from babel import numbers as babel_numbers

from lexichoice.diagnostics import ErrorTemplate, FormattingError

from .locale import Locale

__all__ = ["LocaleFormatter"]

logger = logging.getLogger(__name__)

_SHORT = "short"


@dataclass(frozen=True, slots=True)
class LocaleFormatter:
    """Formats values for one Locale.

    Immutable and thread-safe; share one instance per locale.

    Examples:
        >>> formatter = LocaleFormatter(Locale("en_US"))
        >>> formatter.format_number(1234.5)
        '1,234.5'
        >>> formatter.format_currency(12345)
        '$123.45'

        >>> formatter = LocaleFormatter(Locale("de_DE"))
        >>> formatter.format_number(1234.5)
        '1.234,5'
    """

    locale: Locale

    def format_number(self, value: int | float | Decimal) -> str:
        """Format a number with the locale's decimal pattern.

        Raises:
            FormattingError: Babel rejected the value
        """
        try:
            return str(babel_numbers.format_decimal(value, locale=self.locale.babel_locale))
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Number", value, str(e)), fallback_value=str(value)
            ) from e

    def format_currency(self, amount: int) -> str:
        """Format an amount given in minor units (e.g. cents).

        Args:
            amount: Integer amount of minor units; 12345 is 123.45 with the
                default sub-unit of 100

        Raises:
            FormattingError: amount is not an int, or the locale has no currency
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise FormattingError(
                ErrorTemplate.currency_amount_not_integer(amount), fallback_value=str(amount)
            )

        currency = self.locale.currency
        value = Decimal(amount) / Decimal(self.locale.currency_sub_unit)
        if currency is None:
            raise FormattingError(
                ErrorTemplate.formatting_failed(
                    "Currency", amount, f"no currency configured for {self.locale.code}"
                ),
                fallback_value=str(value),
            )

        try:
            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    locale=self.locale.babel_locale,
                    currency_digits=True,
                    format_type="standard",
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Currency", f"{currency} {value}", str(e)),
                fallback_value=f"{currency} {value}",
            ) from e

    def _zone(self, timezone: str | None) -> tzinfo:
        if timezone is None:
            return self.locale.tzinfo
        try:
            return babel_dates.get_timezone(timezone)
        except LookupError as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Timezone", timezone, "unknown timezone"),
                fallback_value=timezone,
            ) from e

    @staticmethod
    def _in_zone(value: datetime, zone: tzinfo) -> datetime:
        # Naive datetimes are taken to be wall-clock time in the target zone.
        if value.tzinfo is None:
            # pytz zones (used by Babel when installed) only get the right offset via localize()
            localize = getattr(zone, "localize", None)
            return localize(value) if localize is not None else value.replace(tzinfo=zone)
        return value.astimezone(zone)

    def format_date(self, value: date | datetime, *, timezone: str | None = None) -> str:
        """Format the date part in the locale's short style.

        Aware datetimes are converted to the locale timezone (or timezone)
        first, so the calendar day matches the wall clock there.

        Raises:
            FormattingError: Babel rejected the value or timezone is unknown
        """
        if isinstance(value, datetime):
            value = self._in_zone(value, self._zone(timezone))
        try:
            return str(babel_dates.format_date(value, format=_SHORT, locale=self.locale.babel_locale))
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Date", value, str(e)), fallback_value=value.isoformat()
            ) from e

    def format_time(self, value: datetime | time, *, timezone: str | None = None) -> str:
        """Format the time part in the locale's short style.

        Raises:
            FormattingError: Babel rejected the value or timezone is unknown
        """
        if isinstance(value, datetime):
            value = self._in_zone(value, self._zone(timezone))
        try:
            return str(babel_dates.format_time(value, format=_SHORT, locale=self.locale.babel_locale))
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Time", value, str(e)), fallback_value=value.isoformat()
            ) from e

    def format_datetime(self, value: datetime, *, timezone: str | None = None) -> str:
        """Format date and time in the locale's short style.

        Example:
            >>> from datetime import UTC
            >>> formatter = LocaleFormatter(Locale("de_DE", timezone="Europe/Berlin"))
            >>> formatter.format_datetime(datetime(2025, 1, 15, 13, 5, tzinfo=UTC))
            '15.01.25, 14:05'

        Raises:
            FormattingError: Babel rejected the value or timezone is unknown
        """
        value = self._in_zone(value, self._zone(timezone))
        try:
            return str(babel_dates.format_datetime(value, format=_SHORT, locale=self.locale.babel_locale))
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("DateTime", value, str(e)),
                fallback_value=value.isoformat(),
            ) from e
