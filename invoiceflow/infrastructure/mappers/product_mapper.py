"""
Product mapper for converting between domain entities and stored JSON records.
"""

from typing import Any, Dict

from invoiceflow.domain.models.product import Product
from invoiceflow.infrastructure.mappers.base_mapper import to_number, to_text


class ProductMapper:
    """Maps between the Product domain entity and its stored record."""

    def to_record(self, product: Product) -> Dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "category": product.category,
        }

    def to_domain(self, record: Dict[str, Any]) -> Product:
        if not record.get("id"):
            raise ValueError("Product record has no id")

        return Product(
            id=str(record["id"]),
            name=to_text(record.get("name")),
            description=to_text(record.get("description")),
            price=to_number(record.get("price")),
            category=to_text(record.get("category")),
        )
