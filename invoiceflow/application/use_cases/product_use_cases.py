"""
Product use cases for the application layer.
"""

from typing import List, Optional
import logging

from invoiceflow.application.dto.product_dto import ListProductsRequestDTO, ProductDraft
from invoiceflow.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from invoiceflow.domain.models.product import Product
from invoiceflow.infrastructure.repositories.product_repository import JsonProductRepository

logger = logging.getLogger(__name__)


class SaveProductUseCase(CommandUseCase[ProductDraft, Product]):
    """Create a product, or replace the one with the draft's ID."""

    def __init__(self, product_repository: JsonProductRepository):
        super().__init__()
        self.product_repository = product_repository

    def _execute_command_logic(self, request: ProductDraft) -> Product:
        product = request.to_domain()
        product.validate()

        saved_product = self.product_repository.save(product)
        logger.info(f"Saved product {saved_product.id} ({saved_product.name})")
        return saved_product


class DeleteProductUseCase(CommandUseCase[str, bool]):
    """Delete a product. Items already stamped from it are unaffected."""

    def __init__(self, product_repository: JsonProductRepository):
        super().__init__()
        self.product_repository = product_repository

    def _execute_command_logic(self, product_id: str) -> bool:
        return self.product_repository.delete_by_id(product_id)


class ListProductsUseCase(QueryUseCase[Optional[ListProductsRequestDTO], List[Product]]):
    """List products by search term and category."""

    def __init__(self, product_repository: JsonProductRepository):
        super().__init__()
        self.product_repository = product_repository

    def _execute_business_logic(self, request: Optional[ListProductsRequestDTO]) -> List[Product]:
        request = request or ListProductsRequestDTO()
        return self.product_repository.search(request.search, request.category)

    def list_categories(self) -> List[str]:
        """Categories in use, for the category filter."""
        return self.product_repository.get_categories()
