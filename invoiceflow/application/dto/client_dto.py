"""
Client DTOs for the application layer.
"""

from typing import Optional

from pydantic import Field, validator

from invoiceflow.application.dto.base_dto import BaseDTO, DraftDTO
from invoiceflow.domain.models.base import generate_id
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.models.value_objects import Address


class AddressDTO(BaseDTO):
    """Postal address as entered by the user."""

    street: str = Field(default="", max_length=255)
    city: str = Field(default="", max_length=100)
    state: str = Field(default="", max_length=100)
    zip_code: str = Field(default="", max_length=20)
    country: str = Field(default="", max_length=100)

    @validator('street', 'city', 'state', 'zip_code', 'country', pre=True)
    def none_to_empty(cls, v):
        return "" if v is None else v

    def to_domain(self) -> Address:
        return Address(
            street=self.street,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            country=self.country,
        )

    @classmethod
    def from_domain(cls, address: Address) -> "AddressDTO":
        return cls(
            street=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
        )


class ClientDraft(DraftDTO):
    """Client being created or edited. A missing id means a new client."""

    id: Optional[str] = Field(default=None, description="Existing client ID")
    name: str = Field(default="", description="Client name")
    email: str = Field(default="", description="Client email")
    phone: str = Field(default="", description="Phone number")
    address: AddressDTO = Field(default_factory=AddressDTO)
    tax_id: Optional[str] = Field(default=None, description="Tax ID")

    @validator('name', 'email', 'phone', pre=True)
    def strip_strings(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @validator('tax_id', pre=True)
    def blank_tax_id(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_domain(self) -> Client:
        """Build the client entity. Validation is left to the caller."""
        return Client(
            id=self.id or generate_id(),
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address.to_domain(),
            tax_id=self.tax_id,
        )

    @classmethod
    def from_domain(cls, client: Client) -> "ClientDraft":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=AddressDTO.from_domain(client.address),
            tax_id=client.tax_id,
        )
