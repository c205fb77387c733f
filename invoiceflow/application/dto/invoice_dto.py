"""
Invoice DTOs for the application layer.
The invoice draft keeps its totals current: every editing method recomputes
them through the billing service.
"""

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from pydantic import Field, validator

from invoiceflow.application.dto.base_dto import BaseDTO, DraftDTO
from invoiceflow.application.dto.client_dto import ClientDraft
from invoiceflow.domain.models.base import EntityNotFoundError, ValidationError, generate_id, utc_now
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from invoiceflow.domain.models.product import Product
from invoiceflow.domain.services.billing_service import (
    BillingService,
    DiscountType,
    calculate_item_subtotal
)


EDITABLE_ITEM_FIELDS = ("description", "quantity", "unit_price")


class InvoiceItemDraft(BaseDTO):
    """Line item of an invoice draft."""

    id: str = Field(default_factory=generate_id)
    description: str = ""
    quantity: float = 1
    unit_price: float = 0.0
    subtotal: float = 0.0

    def recalculate(self) -> None:
        self.subtotal = calculate_item_subtotal(self.quantity, self.unit_price)

    def to_domain(self) -> InvoiceItem:
        item = InvoiceItem(
            id=self.id,
            description=self.description,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )
        item.recalculate()
        return item

    @classmethod
    def from_domain(cls, item: InvoiceItem) -> "InvoiceItemDraft":
        return cls(
            id=item.id,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            subtotal=item.subtotal,
        )


class InvoiceDraft(DraftDTO):
    """
    Invoice being created or edited.

    Client and items may be missing while editing; they are required only
    when the draft is saved.
    """

    id: str = Field(default_factory=generate_id)
    invoice_number: str = ""
    issue_date: date = Field(default_factory=date.today)
    due_date: date = Field(default_factory=lambda: date.today() + timedelta(days=30))
    po_number: Optional[str] = None
    currency: str = "USD"

    client: Optional[ClientDraft] = None
    items: List[InvoiceItemDraft] = Field(default_factory=list)

    subtotal: float = 0.0
    tax_rate: float = 0.0
    tax_amount: float = 0.0
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float = 0.0
    discount_amount: float = 0.0
    total: float = 0.0

    notes: str = ""
    terms: str = ""
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_at: Optional[datetime] = None

    @validator('po_number', pre=True)
    def blank_po_number(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Editing

    def add_item(self, description: str = "", quantity: float = 1, unit_price: float = 0.0) -> InvoiceItemDraft:
        """Append a new line item and return it."""
        item = InvoiceItemDraft(description=description, quantity=quantity, unit_price=unit_price)
        item.recalculate()
        self.items.append(item)
        self.recalculate_totals()
        return item

    def add_product(self, product: Product, quantity: float = 1) -> InvoiceItemDraft:
        """Append an item stamped from a product. The product is not linked."""
        return self.add_item(description=product.description, quantity=quantity, unit_price=product.price)

    def update_item(self, item_id: str, **changes: Any) -> InvoiceItemDraft:
        """Change description, quantity or unit_price of one item."""
        unknown = [name for name in changes if name not in EDITABLE_ITEM_FIELDS]
        if unknown:
            raise ValidationError(f"Cannot update item field(s): {', '.join(unknown)}", unknown[0])

        item = self._find_item(item_id)
        for name, value in changes.items():
            setattr(item, name, value)
        item.recalculate()
        self.recalculate_totals()
        return item

    def remove_item(self, item_id: str) -> None:
        item = self._find_item(item_id)
        self.items = [i for i in self.items if i is not item]
        self.recalculate_totals()

    def set_client(self, client: Optional[Client]) -> None:
        """Embed a snapshot of the client; later edits to the client do not show here."""
        self.client = ClientDraft.from_domain(client) if client else None

    def set_tax_rate(self, tax_rate: float) -> None:
        self.tax_rate = tax_rate
        self.recalculate_totals()

    def set_discount(self, discount_type: DiscountType, discount_value: float) -> None:
        self.discount_type = discount_type
        self.discount_value = discount_value
        self.recalculate_totals()

    def recalculate_totals(self) -> None:
        totals = BillingService().calculate_invoice_totals(
            self.items, self.tax_rate, self.discount_type, self.discount_value
        )
        self.subtotal = totals.subtotal
        self.tax_amount = totals.tax_amount
        self.discount_amount = totals.discount_amount
        self.total = totals.total

    # Conversion

    def to_domain(self) -> Invoice:
        """Build the invoice aggregate with freshly derived totals."""
        invoice = Invoice(
            id=self.id,
            invoice_number=self.invoice_number,
            issue_date=self.issue_date,
            due_date=self.due_date,
            po_number=self.po_number,
            currency=self.currency,
            client=self.client.to_domain() if self.client else None,
            items=[item.to_domain() for item in self.items],
            tax_rate=self.tax_rate,
            discount_type=DiscountType(self.discount_type),
            discount_value=self.discount_value,
            notes=self.notes,
            terms=self.terms,
            status=InvoiceStatus(self.status),
            created_at=self.created_at or utc_now(),
        )
        invoice.recalculate_totals()
        return invoice

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceDraft":
        """Draft for editing an existing invoice."""
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            po_number=invoice.po_number,
            currency=invoice.currency,
            client=ClientDraft.from_domain(invoice.client) if invoice.client else None,
            items=[InvoiceItemDraft.from_domain(item) for item in invoice.items],
            subtotal=invoice.subtotal,
            tax_rate=invoice.tax_rate,
            tax_amount=invoice.tax_amount,
            discount_type=invoice.discount_type,
            discount_value=invoice.discount_value,
            discount_amount=invoice.discount_amount,
            total=invoice.total,
            notes=invoice.notes,
            terms=invoice.terms,
            status=invoice.status,
            created_at=invoice.created_at,
        )

    def _find_item(self, item_id: str) -> InvoiceItemDraft:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError("InvoiceItem", item_id)


# Requests

class SaveInvoiceRequestDTO(BaseDTO):
    """Save a draft with the chosen status (draft or sent from the editor)."""

    draft: InvoiceDraft
    status: InvoiceStatus = InvoiceStatus.DRAFT


class UpdateInvoiceStatusRequestDTO(BaseDTO):
    id: str = Field(min_length=1, description="Invoice ID")
    status: InvoiceStatus


class ListInvoicesRequestDTO(BaseDTO):
    """Search term over number, client name and client email, plus a status filter."""

    search: str = Field(default="", description="Search query")
    status: str = Field(default="all", description="'all' or an invoice status")

    @validator('search', pre=True)
    def none_to_empty(cls, v):
        return "" if v is None else v

    @validator('status', pre=True)
    def validate_status(cls, v):
        if v is None or v == "":
            return "all"
        v = getattr(v, "value", v)
        if v != "all" and v not in [s.value for s in InvoiceStatus]:
            raise ValueError(f"Unknown invoice status: {v}")
        return v


# Responses

class InvoiceSummary(BaseDTO):
    """Counts and totals of the stored invoices."""

    count: int = 0
    total_amount: float = 0.0
    count_by_status: Dict[str, int] = Field(default_factory=dict)
    totals_by_status: Dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_invoices(cls, invoices: List[Invoice]) -> "InvoiceSummary":
        count_by_status = {status.value: 0 for status in InvoiceStatus}
        totals_by_status = {status.value: 0.0 for status in InvoiceStatus}

        for invoice in invoices:
            count_by_status[invoice.status.value] += 1
            totals_by_status[invoice.status.value] += invoice.total

        return cls(
            count=len(invoices),
            total_amount=sum((invoice.total for invoice in invoices), 0.0),
            count_by_status=count_by_status,
            totals_by_status=totals_by_status,
        )
