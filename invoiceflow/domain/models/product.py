"""
Product domain model.
Products are templates used to stamp out new invoice items.
"""

from dataclasses import dataclass

from invoiceflow.domain.models.base import BaseEntity, ValidationError
from invoiceflow.domain.models.invoice import InvoiceItem


@dataclass(eq=False)
class Product(BaseEntity):
    """Product or service offered by the company."""

    name: str = ""
    description: str = ""
    price: float = 0.0
    category: str = ""

    def validate(self) -> None:
        """Validate product state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required", "name")

        if not self.description or not self.description.strip():
            raise ValidationError("Product description is required", "description")

        if self.price is None or self.price <= 0:
            raise ValidationError("Product price must be greater than 0", "price")

    def matches(self, search_term: str) -> bool:
        """Case-insensitive match on name, description and category."""
        if not search_term:
            return True
        term = search_term.lower()
        return (
            term in self.name.lower()
            or term in self.description.lower()
            or term in self.category.lower()
        )

    def to_invoice_item(self, quantity: float = 1) -> InvoiceItem:
        """Stamp a new invoice item from this product. No link is kept."""
        return InvoiceItem.create(
            description=self.description,
            quantity=quantity,
            unit_price=self.price,
        )
