"""Billing calculations for invoices.
Each rule (item subtotal, tax, discount, clamped total) is a pure function so
it can be tested and composed on its own; BillingService composes them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol, Union


class DiscountType(str, Enum):
    """How an invoice discount value is interpreted."""
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class HasSubtotal(Protocol):
    subtotal: float


def calculate_item_subtotal(quantity: float, unit_price: float) -> float:
    """Subtotal of a single line: quantity * unit price."""
    return quantity * unit_price


def calculate_subtotal(items: Iterable[HasSubtotal]) -> float:
    """Sum of each item's own subtotal. An empty sequence gives 0."""
    return sum((item.subtotal for item in items), 0)


def calculate_tax_amount(subtotal: float, tax_rate: float) -> float:
    """Tax on the subtotal; tax_rate is a percentage (e.g. 8.5)."""
    return subtotal * tax_rate / 100


def calculate_discount_amount(
    subtotal: float,
    discount_type: Union[DiscountType, str],
    discount_value: float
) -> float:
    """
    Percentage discounts apply to the subtotal. Any other type is a fixed
    amount taken as-is.
    """
    if discount_type == DiscountType.PERCENTAGE:
        return subtotal * discount_value / 100
    return discount_value


def calculate_total(subtotal: float, tax_amount: float, discount_amount: float) -> float:
    """Grand total, never negative."""
    return max(0, subtotal + tax_amount - discount_amount)


@dataclass(frozen=True)
class InvoiceTotals:
    """Derived amounts of an invoice."""

    subtotal: float
    tax_amount: float
    discount_amount: float
    total: float


class BillingService:
    """
    Domain service for invoice billing calculations.
    Totals are recomputed from scratch on every call; nothing is cached.
    """

    def calculate_invoice_totals(
        self,
        items: Iterable[HasSubtotal],
        tax_rate: float = 0,
        discount_type: Union[DiscountType, str] = DiscountType.PERCENTAGE,
        discount_value: float = 0
    ) -> InvoiceTotals:
        """
        Calculate subtotal, tax, discount and total for a set of items.
        Tax and discount are both computed on the undiscounted subtotal.
        """
        subtotal = calculate_subtotal(items)
        tax_amount = calculate_tax_amount(subtotal, tax_rate or 0)
        discount_amount = calculate_discount_amount(subtotal, discount_type, discount_value or 0)

        return InvoiceTotals(
            subtotal=subtotal,
            tax_amount=tax_amount,
            discount_amount=discount_amount,
            total=calculate_total(subtotal, tax_amount, discount_amount)
        )
