"""Currency display formatting.

Amounts are kept as plain numbers everywhere else; rounding happens only here,
to two decimal places with ROUND_HALF_UP.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, Optional, Union

from invoiceflow.domain.models.value_objects import Currency


@dataclass(frozen=True)
class CurrencyLocale:
    """Display conventions of one currency in its locale."""

    locale: str
    symbol: str
    group_separator: str = ","
    decimal_separator: str = "."
    symbol_after: bool = False


CURRENCY_LOCALES: Dict[Currency, CurrencyLocale] = {
    Currency.USD: CurrencyLocale(locale="en-US", symbol="$"),
    Currency.EUR: CurrencyLocale(
        locale="de-DE",
        symbol="\u00a0€",
        group_separator=".",
        decimal_separator=",",
        symbol_after=True,
    ),
    Currency.GBP: CurrencyLocale(locale="en-GB", symbol="£"),
    Currency.CAD: CurrencyLocale(locale="en-CA", symbol="$"),
    Currency.PKR: CurrencyLocale(locale="en-PK", symbol="Rs\u00a0"),
}

DEFAULT_CURRENCY = Currency.USD

TWO_PLACES = Decimal("0.01")


def _to_decimal(amount: Union[int, float, Decimal, None]) -> Decimal:
    """Normalize incoming values so rounding behaves consistently."""
    if amount is None:
        return Decimal(0)
    try:
        # str() keeps the shortest repr of floats, e.g. 0.1 -> "0.1"
        return Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal(0)


def resolve_currency(currency: Optional[str]) -> Currency:
    """Map a currency code to a supported currency, falling back to USD."""
    if not currency:
        return DEFAULT_CURRENCY
    try:
        return Currency(currency.strip().upper())
    except ValueError:
        return DEFAULT_CURRENCY


def format_currency(amount: Union[int, float, Decimal, None], currency: Optional[str] = "USD") -> str:
    """
    Format an amount for display in the locale of its currency.
    Unknown currency codes are formatted as US dollars.
    """
    config = CURRENCY_LOCALES[resolve_currency(currency)]

    value = _to_decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""

    digits = f"{abs(value):,.2f}"
    if config.group_separator != "," or config.decimal_separator != ".":
        integer_part, fraction = digits.split(".")
        integer_part = integer_part.replace(",", config.group_separator)
        digits = f"{integer_part}{config.decimal_separator}{fraction}"

    if config.symbol_after:
        return f"{sign}{digits}{config.symbol}"
    return f"{sign}{config.symbol}{digits}"
