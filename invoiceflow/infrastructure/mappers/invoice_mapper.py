"""
Invoice mapper for converting between domain entities and stored JSON records.
"""

from datetime import date
from typing import Any, Dict

from invoiceflow.domain.models.base import utc_now
from invoiceflow.domain.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from invoiceflow.domain.services.billing_service import DiscountType
from invoiceflow.infrastructure.mappers.base_mapper import (
    format_datetime,
    parse_date,
    parse_datetime,
    to_number,
    to_text
)
from invoiceflow.infrastructure.mappers.client_mapper import ClientMapper


class InvoiceMapper:
    """Maps between the Invoice aggregate and its stored record."""

    def __init__(self):
        self.client_mapper = ClientMapper()

    def item_to_record(self, item: InvoiceItem) -> Dict[str, Any]:
        return {
            "id": item.id,
            "description": item.description,
            "quantity": item.quantity,
            "unitPrice": item.unit_price,
            "subtotal": item.subtotal,
        }

    def item_to_domain(self, record: Dict[str, Any]) -> InvoiceItem:
        if not record.get("id"):
            raise ValueError("Invoice item record has no id")

        item = InvoiceItem(
            id=str(record["id"]),
            description=to_text(record.get("description")),
            quantity=to_number(record.get("quantity")),
            unit_price=to_number(record.get("unitPrice")),
        )
        # The stored subtotal is only a cache
        item.recalculate()
        return item

    def to_record(self, invoice: Invoice) -> Dict[str, Any]:
        """Convert Invoice aggregate to a JSON-ready dict."""
        return {
            "id": invoice.id,
            "invoiceNumber": invoice.invoice_number,
            "date": invoice.issue_date.isoformat(),
            "dueDate": invoice.due_date.isoformat(),
            "poNumber": invoice.po_number,
            "currency": invoice.currency,
            "client": self.client_mapper.to_record(invoice.client) if invoice.client else None,
            "items": [self.item_to_record(item) for item in invoice.items],
            "subtotal": invoice.subtotal,
            "taxRate": invoice.tax_rate,
            "taxAmount": invoice.tax_amount,
            "discountType": invoice.discount_type.value,
            "discountValue": invoice.discount_value,
            "discountAmount": invoice.discount_amount,
            "total": invoice.total,
            "notes": invoice.notes,
            "terms": invoice.terms,
            "status": invoice.status.value,
            "createdAt": format_datetime(invoice.created_at),
            "updatedAt": format_datetime(invoice.updated_at),
        }

    def to_domain(self, record: Dict[str, Any]) -> Invoice:
        """Convert a stored record to an Invoice, re-deriving every total."""
        if not record.get("id"):
            raise ValueError("Invoice record has no id")

        now = utc_now()
        issue_date = parse_date(record.get("date"), date.today())
        client_record = record.get("client")

        invoice = Invoice(
            id=str(record["id"]),
            invoice_number=to_text(record.get("invoiceNumber")),
            issue_date=issue_date,
            due_date=parse_date(record.get("dueDate")),
            po_number=record.get("poNumber"),
            currency=to_text(record.get("currency"), "USD"),
            client=self.client_mapper.to_domain(client_record) if client_record else None,
            items=[self.item_to_domain(item) for item in record.get("items") or []],
            tax_rate=to_number(record.get("taxRate")),
            discount_type=DiscountType(record.get("discountType") or DiscountType.PERCENTAGE.value),
            discount_value=to_number(record.get("discountValue")),
            notes=to_text(record.get("notes")),
            terms=to_text(record.get("terms")),
            status=InvoiceStatus(record.get("status") or InvoiceStatus.DRAFT.value),
            created_at=parse_datetime(record.get("createdAt"), now),
            updated_at=parse_datetime(record.get("updatedAt"), now),
        )
        invoice.recalculate_totals()
        return invoice
