"""
Unit tests for invoice use cases.
"""

from datetime import date

from invoiceflow.application.dto.invoice_dto import (
    InvoiceDraft,
    ListInvoicesRequestDTO,
    SaveInvoiceRequestDTO,
    UpdateInvoiceStatusRequestDTO
)
from invoiceflow.application.use_cases.invoice_use_cases import (
    DeleteInvoiceUseCase,
    DuplicateInvoiceUseCase,
    GetInvoiceSummaryUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    SaveInvoiceUseCase,
    StartInvoiceUseCase,
    UpdateInvoiceStatusUseCase
)
from invoiceflow.config import Settings
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.models.invoice import InvoiceStatus
from invoiceflow.domain.models.settings import InvoiceSettings
from invoiceflow.infrastructure.dependencies import build_container
from invoiceflow.infrastructure.storage.memory_store import InMemoryKeyValueStore


TODAY = date(2024, 2, 1)


def make_container():
    return build_container(Settings(_env_file=None, storage_backend="memory"), store=InMemoryKeyValueStore())


class TestInvoiceUseCases:
    """Test cases for invoice use cases."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = make_container()
        self.start = StartInvoiceUseCase(
            self.container.settings, self.container.numbering, today=lambda: TODAY
        )
        self.save = SaveInvoiceUseCase(self.container.invoices)
        self.client = self.container.clients.save(Client(name="Acme", email="a@acme.com"))

    def make_draft(self) -> InvoiceDraft:
        draft = self.start.execute().data
        draft.set_client(self.client)
        draft.add_item("Design", 2, 100.0)
        return draft

    def test_start_prefills_from_settings(self):
        """Test a new draft uses the settings defaults and the next number."""
        draft = self.start.execute().data

        assert draft.invoice_number == "INV-0001"
        assert draft.issue_date == TODAY
        assert draft.due_date == date(2024, 3, 2)
        assert draft.currency == "PKR"
        assert draft.tax_rate == 8.5
        assert draft.notes == "Thank you for your business!"
        assert draft.status == "draft"
        assert draft.items == []

    def test_start_consumes_numbers(self):
        """Test each started draft takes the next number, saved or not."""
        self.start.execute()
        assert self.start.execute().data.invoice_number == "INV-0002"

    def test_start_honours_custom_prefix_and_start(self):
        """Test prefix and start number from the settings are used."""
        self.container.settings.save_settings(InvoiceSettings(invoice_prefix="B-", invoice_start_number=500))

        assert self.start.execute().data.invoice_number == "B-0500"
        assert self.start.execute().data.invoice_number == "B-0501"

    def test_save_invoice(self):
        """Test saving a complete draft stores the invoice with its totals."""
        draft = self.make_draft()
        result = self.save.execute(SaveInvoiceRequestDTO(draft=draft, status=InvoiceStatus.SENT))

        assert result.success is True
        invoice = self.container.invoices.find_by_id(draft.id)
        assert invoice.status == InvoiceStatus.SENT
        assert invoice.subtotal == 200.0
        assert invoice.tax_amount == 17.0
        assert invoice.total == 217.0
        assert invoice.client.name == "Acme"

    def test_save_requires_client(self):
        """Test a draft without client is rejected."""
        draft = self.start.execute().data
        draft.add_item("Design", 1, 10.0)

        result = self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        assert result.success is False
        assert result.error == "Client is required"
        assert self.container.invoices.get_all() == []

    def test_save_requires_items(self):
        """Test a draft without items is rejected."""
        draft = self.start.execute().data
        draft.set_client(self.client)

        result = self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        assert result.success is False
        assert result.error == "At least one item is required"

    def test_saving_again_updates_in_place(self):
        """Test re-saving an edited draft keeps one invoice."""
        draft = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        draft.add_item("Hosting", 1, 50.0)
        self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        invoices = self.container.invoices.get_all()
        assert len(invoices) == 1
        assert len(invoices[0].items) == 2

    def test_client_snapshot_not_linked(self):
        """Test later client edits do not change a saved invoice."""
        draft = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        self.client.name = "Renamed"
        self.container.clients.save(self.client)

        assert self.container.invoices.find_by_id(draft.id).client.name == "Acme"

    def test_duplicate(self):
        """Test duplicating stores a new draft copy."""
        draft = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=draft, status=InvoiceStatus.PAID))
        duplicate = DuplicateInvoiceUseCase(self.container.invoices, today=lambda: TODAY)

        result = duplicate.execute(draft.id)

        assert result.success is True
        assert result.data.invoice_number == "INV-0001-COPY"
        assert result.data.status == InvoiceStatus.DRAFT
        assert result.data.id != draft.id
        assert len(self.container.invoices.get_all()) == 2

    def test_duplicate_missing(self):
        """Test duplicating an unknown invoice is an error result."""
        result = DuplicateInvoiceUseCase(self.container.invoices).execute("missing")

        assert result.success is False
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_update_status(self):
        """Test changing the status of a stored invoice."""
        draft = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        result = UpdateInvoiceStatusUseCase(self.container.invoices).execute(
            UpdateInvoiceStatusRequestDTO(id=draft.id, status="paid")
        )

        assert result.success is True
        assert self.container.invoices.find_by_id(draft.id).status == InvoiceStatus.PAID

    def test_update_status_missing(self):
        """Test changing the status of an unknown invoice."""
        result = UpdateInvoiceStatusUseCase(self.container.invoices).execute(
            UpdateInvoiceStatusRequestDTO(id="missing", status="paid")
        )
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_delete_and_get(self):
        """Test deleting an invoice."""
        draft = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=draft))

        assert DeleteInvoiceUseCase(self.container.invoices).execute(draft.id).data is True
        assert GetInvoiceUseCase(self.container.invoices).execute(draft.id).success is False

    def test_list_with_filters(self):
        """Test listing invoices by search term and status."""
        first = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=first, status=InvoiceStatus.SENT))
        second = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=second))
        list_invoices = ListInvoicesUseCase(self.container.invoices)

        assert len(list_invoices.execute().data) == 2
        sent = list_invoices.execute(ListInvoicesRequestDTO(status="sent")).data
        assert [i.invoice_number for i in sent] == ["INV-0001"]
        found = list_invoices.execute(ListInvoicesRequestDTO(search="0002")).data
        assert [i.invoice_number for i in found] == ["INV-0002"]
        assert len(list_invoices.execute(ListInvoicesRequestDTO(search="acme", status="all")).data) == 2

    def test_list_rejects_unknown_status(self):
        """Test an unknown status filter is a validation error."""
        result = ListInvoicesUseCase(self.container.invoices).execute(
            ListInvoicesRequestDTO.model_construct(search="", status="archived")
        )
        assert result.error_code == "VALIDATION_ERROR"

    def test_summary(self):
        """Test counts and totals per status."""
        first = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=first, status=InvoiceStatus.PAID))
        second = self.make_draft()
        self.save.execute(SaveInvoiceRequestDTO(draft=second))

        summary = GetInvoiceSummaryUseCase(self.container.invoices).execute().data

        assert summary.count == 2
        assert summary.total_amount == 434.0
        assert summary.count_by_status["paid"] == 1
        assert summary.count_by_status["overdue"] == 0
        assert summary.totals_by_status["draft"] == 217.0
