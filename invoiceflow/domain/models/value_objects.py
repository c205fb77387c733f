"""
Value Objects for the domain layer.
Immutable objects that represent values and are compared by their contents.
"""

from dataclasses import dataclass
from enum import Enum


class Currency(str, Enum):
    """Currencies with a dedicated display locale."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    PKR = "PKR"


@dataclass(frozen=True)
class Address:
    """Value object representing a postal address. Every part may be blank."""

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""

    def format_single_line(self) -> str:
        """Format address as single line, skipping blank parts."""
        parts = [self.street, self.city, self.state, self.zip_code, self.country]
        return ", ".join(part for part in parts if part)

    def format_multi_line(self) -> str:
        """Format address as multiple lines."""
        lines = [self.street]

        city_line = " ".join(part for part in (self.city, self.state, self.zip_code) if part)
        lines.append(city_line)
        lines.append(self.country)

        return "\n".join(line for line in lines if line)

    def __str__(self) -> str:
        return self.format_single_line()


@dataclass(frozen=True)
class BankDetails:
    """Bank account printed on invoices."""

    account_name: str = ""
    account_number: str = ""
    bank_name: str = ""
    iban: str = ""
