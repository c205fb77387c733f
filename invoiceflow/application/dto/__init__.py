"""
Application DTOs.
Editable drafts for clients, products and invoices, and the request/response
objects of the use cases.
"""

from .base_dto import BaseDTO, DraftDTO
from .client_dto import AddressDTO, ClientDraft
from .product_dto import ProductDraft, ListProductsRequestDTO
from .invoice_dto import (
    InvoiceDraft,
    InvoiceItemDraft,
    InvoiceSummary,
    ListInvoicesRequestDTO,
    SaveInvoiceRequestDTO,
    UpdateInvoiceStatusRequestDTO
)

__all__ = [
    "BaseDTO",
    "DraftDTO",
    "AddressDTO",
    "ClientDraft",
    "ProductDraft",
    "ListProductsRequestDTO",
    "InvoiceDraft",
    "InvoiceItemDraft",
    "InvoiceSummary",
    "ListInvoicesRequestDTO",
    "SaveInvoiceRequestDTO",
    "UpdateInvoiceStatusRequestDTO",
]
