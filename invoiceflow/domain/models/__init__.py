"""
Domain models for the invoicing core.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    StorageBackendError,
    StoreWriteFailed,
    DeserializationError,
    ImportParseError,
    generate_id,
    utc_now
)

# Value Objects
from .value_objects import (
    Currency,
    Address,
    BankDetails
)

# Domain entities
from .client import Client
from .invoice import Invoice, InvoiceItem, InvoiceStatus
from .product import Product
from .settings import CompanyProfile, InvoiceSettings

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "StorageBackendError",
    "StoreWriteFailed",
    "DeserializationError",
    "ImportParseError",
    "generate_id",
    "utc_now",

    # Value objects
    "Currency",
    "Address",
    "BankDetails",

    # Entities
    "Client",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Product",
    "CompanyProfile",
    "InvoiceSettings",
]
