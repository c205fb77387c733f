"""
Invoice domain model.
An invoice owns its items and a snapshot of the billed client.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, date, timedelta
from typing import Optional, List
from enum import Enum

from invoiceflow.domain.models.base import (
    BaseEntity,
    ValidationError,
    generate_id,
    utc_now
)
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.services.billing_service import (
    BillingService,
    DiscountType,
    calculate_item_subtotal
)


class InvoiceStatus(str, Enum):
    """Invoice status."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


@dataclass(eq=False)
class InvoiceItem(BaseEntity):
    """Individual line item in an invoice."""

    description: str = ""
    quantity: float = 1
    unit_price: float = 0.0
    subtotal: float = 0.0

    @classmethod
    def create(cls, description: str = "", quantity: float = 1, unit_price: float = 0.0) -> "InvoiceItem":
        """Create a new item with a fresh ID and a computed subtotal."""
        item = cls(description=description, quantity=quantity, unit_price=unit_price)
        item.recalculate()
        return item

    def recalculate(self) -> None:
        """Recompute subtotal from quantity and unit price."""
        self.subtotal = calculate_item_subtotal(self.quantity, self.unit_price)

    def validate(self) -> None:
        """Validate line item."""
        if self.quantity is None or self.quantity < 0:
            raise ValidationError("Quantity cannot be negative", "quantity")

        if self.unit_price is None or self.unit_price < 0:
            raise ValidationError("Unit price cannot be negative", "unit_price")


@dataclass(eq=False)
class Invoice(BaseEntity):
    """
    Invoice aggregate root.
    Totals are always derived from the items, tax rate and discount.
    """

    invoice_number: str = ""
    issue_date: date = field(default_factory=date.today)
    due_date: Optional[date] = None
    po_number: Optional[str] = None
    currency: str = "USD"

    # Snapshot of the client at the time of invoicing
    client: Optional[Client] = None
    items: List[InvoiceItem] = field(default_factory=list)

    # Calculated amounts
    subtotal: float = 0.0
    tax_rate: float = 0.0
    tax_amount: float = 0.0
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float = 0.0
    discount_amount: float = 0.0
    total: float = 0.0

    # Content
    notes: str = ""
    terms: str = ""
    status: InvoiceStatus = InvoiceStatus.DRAFT

    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if self.due_date is None:
            self.due_date = self.issue_date + timedelta(days=30)

    def validate(self) -> None:
        """Validate invoice state."""
        if self.client is None:
            raise ValidationError("Client is required", "client")

        if not self.items:
            raise ValidationError("At least one item is required", "items")

        for item in self.items:
            item.validate()

        if self.due_date < self.issue_date:
            raise ValidationError("Due date cannot be before invoice date", "due_date")

        if self.tax_rate < 0:
            raise ValidationError("Tax rate cannot be negative", "tax_rate")

        if self.discount_value < 0:
            raise ValidationError("Discount cannot be negative", "discount_value")

        if self.discount_type == DiscountType.PERCENTAGE and self.discount_value > 100:
            raise ValidationError("Discount percentage must be between 0 and 100", "discount_value")

    def recalculate_totals(self) -> None:
        """Recalculate item subtotals and all invoice totals."""
        for item in self.items:
            item.recalculate()

        totals = BillingService().calculate_invoice_totals(
            self.items, self.tax_rate, self.discount_type, self.discount_value
        )
        self.subtotal = totals.subtotal
        self.tax_amount = totals.tax_amount
        self.discount_amount = totals.discount_amount
        self.total = totals.total

    def change_status(self, status: InvoiceStatus) -> None:
        """Move the invoice to another status. Any transition is allowed."""
        self.status = InvoiceStatus(status)

    def matches(self, search_term: str = "", status: Optional[str] = None) -> bool:
        """
        Match on invoice number, client name or client email, and optionally status.
        A status of None or "all" matches every invoice.
        """
        if status and status != "all" and self.status != InvoiceStatus(status):
            return False

        if not search_term:
            return True

        term = search_term.lower()
        if term in self.invoice_number.lower():
            return True
        if self.client is None:
            return False
        return term in self.client.name.lower() or term in self.client.email.lower()

    def duplicate(self, suffix: str = "-COPY", payment_terms_days: int = 30, today: Optional[date] = None) -> "Invoice":
        """Copy this invoice as a new draft with fresh dates."""
        today = today or date.today()
        now = utc_now()
        return replace(
            self,
            id=generate_id(),
            invoice_number=f"{self.invoice_number}{suffix}",
            issue_date=today,
            due_date=today + timedelta(days=payment_terms_days),
            client=self.client.snapshot() if self.client else None,
            items=[replace(item) for item in self.items],
            status=InvoiceStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
