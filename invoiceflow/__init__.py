"""
InvoiceFlow: local invoicing core.
Invoices, clients, products and company settings over a pluggable key-value store.
"""

__version__ = "1.0.0"
