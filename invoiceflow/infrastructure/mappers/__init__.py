"""
Mappers between domain entities and stored JSON records.
"""

from .client_mapper import ClientMapper
from .product_mapper import ProductMapper
from .invoice_mapper import InvoiceMapper
from .settings_mapper import SettingsMapper

__all__ = [
    "ClientMapper",
    "ProductMapper",
    "InvoiceMapper",
    "SettingsMapper",
]
