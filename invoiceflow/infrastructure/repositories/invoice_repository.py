"""
Invoice repository implementation on JSON storage.
"""

from datetime import datetime
from typing import Callable, List, Optional

from invoiceflow.domain.models.base import utc_now
from invoiceflow.domain.models.invoice import Invoice
from invoiceflow.infrastructure.mappers.invoice_mapper import InvoiceMapper
from invoiceflow.infrastructure.repositories.json_record_repository import JsonRecordRepository
from invoiceflow.infrastructure.storage.json_storage import JsonStorage, StorageKeys


class JsonInvoiceRepository(JsonRecordRepository[Invoice]):
    """
    Stores invoices under the invoices key.
    Totals are recomputed from the items and updated_at is overwritten with
    the clock's time on every save.
    """

    entity_name = "Invoice"

    def __init__(self, storage: JsonStorage, clock: Callable[[], datetime] = utc_now):
        super().__init__(storage, StorageKeys.INVOICES, InvoiceMapper())
        self.clock = clock

    def search(self, query: str = "", status: Optional[str] = None) -> List[Invoice]:
        """Invoices matching the query and status ("all" or None for any status)."""
        return [invoice for invoice in self.get_all() if invoice.matches(query, status)]

    def get_invoice_numbers(self) -> List[str]:
        return [invoice.invoice_number for invoice in self.get_all()]

    def _before_save(self, record: Invoice) -> None:
        record.recalculate_totals()
        record.updated_at = self.clock()
