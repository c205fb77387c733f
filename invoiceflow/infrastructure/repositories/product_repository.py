"""
Product repository implementation on JSON storage.
"""

from typing import List, Optional

from invoiceflow.domain.models.product import Product
from invoiceflow.infrastructure.mappers.product_mapper import ProductMapper
from invoiceflow.infrastructure.repositories.json_record_repository import JsonRecordRepository
from invoiceflow.infrastructure.storage.json_storage import JsonStorage, StorageKeys


class JsonProductRepository(JsonRecordRepository[Product]):
    """Stores products under the products key."""

    entity_name = "Product"

    def __init__(self, storage: JsonStorage):
        super().__init__(storage, StorageKeys.PRODUCTS, ProductMapper())

    def search(self, query: str = "", category: Optional[str] = None) -> List[Product]:
        """Products matching the query, optionally limited to one category."""
        return [
            product for product in self.get_all()
            if product.matches(query) and (not category or product.category == category)
        ]

    def get_categories(self) -> List[str]:
        """Distinct non-empty categories in first-seen order."""
        categories = []
        for product in self.get_all():
            if product.category and product.category not in categories:
                categories.append(product.category)
        return categories
