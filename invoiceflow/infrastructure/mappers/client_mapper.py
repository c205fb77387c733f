"""
Client mapper for converting between domain entities and stored JSON records.
"""

from typing import Any, Dict

from invoiceflow.domain.models.client import Client
from invoiceflow.infrastructure.mappers.base_mapper import (
    address_from_record,
    address_to_record,
    to_text
)


class ClientMapper:
    """Maps between the Client domain entity and its stored record."""

    def to_record(self, client: Client) -> Dict[str, Any]:
        """Convert Client domain entity to a JSON-ready dict."""
        record = {
            "id": client.id,
            "name": client.name,
            "email": client.email,
            "phone": client.phone,
            "address": address_to_record(client.address),
        }
        if client.tax_id is not None:
            record["taxId"] = client.tax_id
        return record

    def to_domain(self, record: Dict[str, Any]) -> Client:
        """Convert a stored record to a Client. Missing fields become blank."""
        if not record.get("id"):
            raise ValueError("Client record has no id")

        return Client(
            id=str(record["id"]),
            name=to_text(record.get("name")),
            email=to_text(record.get("email")),
            phone=to_text(record.get("phone")),
            address=address_from_record(record.get("address")),
            tax_id=record.get("taxId"),
        )
