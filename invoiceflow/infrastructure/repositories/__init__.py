"""
Infrastructure repositories module.
Contains JSON-storage implementations of domain repositories.
"""

from .json_record_repository import JsonRecordRepository
from .client_repository import JsonClientRepository
from .product_repository import JsonProductRepository
from .invoice_repository import JsonInvoiceRepository
from .settings_repository import JsonSettingsRepository, JsonSequenceRepository

__all__ = [
    "JsonRecordRepository",
    "JsonClientRepository",
    "JsonProductRepository",
    "JsonInvoiceRepository",
    "JsonSettingsRepository",
    "JsonSequenceRepository",
]
