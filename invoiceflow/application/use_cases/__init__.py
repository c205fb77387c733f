"""
Application layer use cases.
Business logic for the invoicing core.
"""

from .base_use_case import *
from .client_use_cases import *
from .product_use_cases import *
from .invoice_use_cases import *
from .settings_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "UseCaseResult",

    # Client Use Cases
    "SaveClientUseCase",
    "DeleteClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",

    # Product Use Cases
    "SaveProductUseCase",
    "DeleteProductUseCase",
    "ListProductsUseCase",

    # Invoice Use Cases
    "StartInvoiceUseCase",
    "SaveInvoiceUseCase",
    "DeleteInvoiceUseCase",
    "DuplicateInvoiceUseCase",
    "UpdateInvoiceStatusUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "GetInvoiceSummaryUseCase",

    # Settings and Data Use Cases
    "GetSettingsUseCase",
    "SaveSettingsUseCase",
    "ExportDataUseCase",
    "ImportDataUseCase",
    "ClearAllDataUseCase",
]
