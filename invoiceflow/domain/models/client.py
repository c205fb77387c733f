"""
Client domain model.
Represents a client/customer that invoices are addressed to.
"""

from dataclasses import dataclass, field, replace
from typing import Optional
import re

from invoiceflow.domain.models.base import BaseEntity, ValidationError
from invoiceflow.domain.models.value_objects import Address


EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


@dataclass(eq=False)
class Client(BaseEntity):
    """
    Client entity.
    Identity is the ID; name, email and phone are only used for search.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    address: Address = field(default_factory=Address)
    tax_id: Optional[str] = None

    def validate(self) -> None:
        """Validate client state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Client name is required", "name")

        if not self.email or not self.email.strip():
            raise ValidationError("Client email is required", "email")

        if not EMAIL_PATTERN.match(self.email.strip()):
            raise ValidationError(f"Invalid email format: {self.email}", "email")

        if len(self.name) > 255:
            raise ValidationError("Client name too long (max 255 characters)", "name")

        if self.tax_id and len(self.tax_id) > 50:
            raise ValidationError("Tax ID too long (max 50 characters)", "tax_id")

    def matches(self, search_term: str) -> bool:
        """Case-insensitive match on name, email and phone."""
        if not search_term:
            return True
        term = search_term.lower()
        return (
            term in self.name.lower()
            or term in self.email.lower()
            or term in self.phone.lower()
        )

    def snapshot(self) -> "Client":
        """Copy of this client for embedding in an invoice."""
        return replace(self)
