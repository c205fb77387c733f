"""
Product DTOs for the application layer.
"""

from typing import Optional

from pydantic import Field, validator

from invoiceflow.application.dto.base_dto import BaseDTO, DraftDTO
from invoiceflow.domain.models.base import generate_id
from invoiceflow.domain.models.product import Product


class ProductDraft(DraftDTO):
    """Product being created or edited. A missing id means a new product."""

    id: Optional[str] = Field(default=None, description="Existing product ID")
    name: str = Field(default="", description="Product name")
    description: str = Field(default="", description="Text copied into invoice items")
    price: float = Field(default=0.0, description="Unit price")
    category: str = Field(default="", description="Free-form category")

    @validator('name', 'description', 'category', pre=True)
    def strip_strings(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    def to_domain(self) -> Product:
        return Product(
            id=self.id or generate_id(),
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
        )

    @classmethod
    def from_domain(cls, product: Product) -> "ProductDraft":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
        )


class ListProductsRequestDTO(BaseDTO):
    """Search term over name, description and category, plus a category filter."""

    search: str = Field(default="", description="Search query")
    category: Optional[str] = Field(default=None, description="Exact category, or None for all")

    @validator('search', pre=True)
    def none_to_empty(cls, v):
        return "" if v is None else v

    @validator('category', pre=True)
    def blank_category(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
