"""
Invoice use cases for the application layer.
Implements business logic for invoice operations.
"""

from datetime import date, timedelta
from typing import Callable, List, Optional
import logging

from invoiceflow.application.dto.invoice_dto import (
    InvoiceDraft,
    InvoiceSummary,
    ListInvoicesRequestDTO,
    SaveInvoiceRequestDTO,
    UpdateInvoiceStatusRequestDTO
)
from invoiceflow.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from invoiceflow.domain.models.base import EntityNotFoundError
from invoiceflow.domain.models.invoice import Invoice, InvoiceStatus
from invoiceflow.domain.services.numbering_service import NumberingService
from invoiceflow.infrastructure.repositories.invoice_repository import JsonInvoiceRepository
from invoiceflow.infrastructure.repositories.settings_repository import JsonSettingsRepository

logger = logging.getLogger(__name__)


class StartInvoiceUseCase(CommandUseCase[None, InvoiceDraft]):
    """
    Open a new invoice draft pre-filled from the settings.

    Consumes an invoice number immediately; abandoning the draft leaves a gap
    in the sequence.
    """

    def __init__(
        self,
        settings_repository: JsonSettingsRepository,
        numbering_service: NumberingService,
        payment_terms_days: int = 30,
        today: Callable[[], date] = date.today
    ):
        super().__init__()
        self.settings_repository = settings_repository
        self.numbering_service = numbering_service
        self.payment_terms_days = payment_terms_days
        self.today = today

    def _execute_command_logic(self, request: None) -> InvoiceDraft:
        settings = self.settings_repository.get_settings()
        invoice_number = self.numbering_service.generate_invoice_number(
            settings.invoice_prefix, settings.invoice_start_number
        )
        issue_date = self.today()

        draft = InvoiceDraft(
            invoice_number=invoice_number,
            issue_date=issue_date,
            due_date=issue_date + timedelta(days=self.payment_terms_days),
            currency=settings.default_currency,
            tax_rate=settings.default_tax_rate,
            notes=settings.default_notes,
            terms=settings.default_terms,
        )
        logger.info(f"Started invoice {invoice_number}")
        return draft


class SaveInvoiceUseCase(CommandUseCase[SaveInvoiceRequestDTO, Invoice]):
    """Validate a draft and store it with the requested status."""

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_command_logic(self, request: SaveInvoiceRequestDTO) -> Invoice:
        invoice = request.draft.to_domain()
        invoice.change_status(request.status)
        invoice.validate()

        existing = self.invoice_repository.find_by_id(invoice.id)
        if existing:
            invoice.created_at = existing.created_at

        saved_invoice = self.invoice_repository.save(invoice)
        logger.info(f"Saved invoice {saved_invoice.invoice_number} as {saved_invoice.status.value}")
        return saved_invoice


class DeleteInvoiceUseCase(CommandUseCase[str, bool]):

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_command_logic(self, invoice_id: str) -> bool:
        return self.invoice_repository.delete_by_id(invoice_id)


class DuplicateInvoiceUseCase(CommandUseCase[str, Invoice]):
    """
    Store a copy of an invoice as a new draft.
    The copy gets a new ID, the original number plus a suffix and fresh dates.
    """

    def __init__(
        self,
        invoice_repository: JsonInvoiceRepository,
        suffix: str = "-COPY",
        payment_terms_days: int = 30,
        today: Callable[[], date] = date.today
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.suffix = suffix
        self.payment_terms_days = payment_terms_days
        self.today = today

    def _execute_command_logic(self, invoice_id: str) -> Invoice:
        invoice = self.invoice_repository.find_by_id(invoice_id)
        if not invoice:
            raise EntityNotFoundError("Invoice", invoice_id)

        copy = invoice.duplicate(
            suffix=self.suffix,
            payment_terms_days=self.payment_terms_days,
            today=self.today(),
        )
        saved_copy = self.invoice_repository.save(copy)
        logger.info(f"Duplicated invoice {invoice.invoice_number} as {saved_copy.invoice_number}")
        return saved_copy


class UpdateInvoiceStatusUseCase(CommandUseCase[UpdateInvoiceStatusRequestDTO, Invoice]):
    """Move an invoice to another status. Any status may follow any other."""

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_command_logic(self, request: UpdateInvoiceStatusRequestDTO) -> Invoice:
        invoice = self.invoice_repository.find_by_id(request.id)
        if not invoice:
            raise EntityNotFoundError("Invoice", request.id)

        invoice.change_status(InvoiceStatus(request.status))
        return self.invoice_repository.save(invoice)


class GetInvoiceUseCase(QueryUseCase[str, Invoice]):

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_business_logic(self, invoice_id: str) -> Invoice:
        invoice = self.invoice_repository.find_by_id(invoice_id)
        if not invoice:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice


class ListInvoicesUseCase(QueryUseCase[Optional[ListInvoicesRequestDTO], List[Invoice]]):
    """List invoices by search term and status."""

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_business_logic(self, request: Optional[ListInvoicesRequestDTO]) -> List[Invoice]:
        request = request or ListInvoicesRequestDTO()
        return self.invoice_repository.search(request.search, request.status)


class GetInvoiceSummaryUseCase(QueryUseCase[None, InvoiceSummary]):
    """Invoice counts and totals per status."""

    def __init__(self, invoice_repository: JsonInvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    def _execute_business_logic(self, request: None) -> InvoiceSummary:
        return InvoiceSummary.from_invoices(self.invoice_repository.get_all())
