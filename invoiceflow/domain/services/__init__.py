"""
Domain services for the invoicing core.
This module exports all domain services for billing, numbering and display logic.
"""

from .billing_service import (
    BillingService,
    DiscountType,
    InvoiceTotals,
    calculate_item_subtotal,
    calculate_subtotal,
    calculate_tax_amount,
    calculate_discount_amount,
    calculate_total
)
from .currency_formatter import format_currency
from .numbering_service import NumberingService, format_invoice_number, parse_invoice_number

__all__ = [
    "BillingService",
    "DiscountType",
    "InvoiceTotals",
    "calculate_item_subtotal",
    "calculate_subtotal",
    "calculate_tax_amount",
    "calculate_discount_amount",
    "calculate_total",
    "format_currency",
    "NumberingService",
    "format_invoice_number",
    "parse_invoice_number",
]
