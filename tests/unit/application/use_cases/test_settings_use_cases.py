"""
Unit tests for settings and data management use cases.
"""

import json

from invoiceflow.application.use_cases.settings_use_cases import (
    ClearAllDataUseCase,
    ExportDataUseCase,
    GetSettingsUseCase,
    ImportDataUseCase,
    SaveSettingsUseCase
)
from invoiceflow.config import Settings
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.models.settings import CompanyProfile, InvoiceSettings
from invoiceflow.infrastructure.dependencies import build_container
from invoiceflow.infrastructure.storage.memory_store import InMemoryKeyValueStore


def make_container():
    return build_container(Settings(_env_file=None, storage_backend="memory"), store=InMemoryKeyValueStore())


class TestSettingsUseCases:
    """Test cases for settings use cases."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = make_container()

    def test_get_defaults(self):
        """Test defaults are returned before anything is saved."""
        result = GetSettingsUseCase(self.container.settings).execute()

        assert result.success is True
        assert result.data == InvoiceSettings()

    def test_save_settings(self):
        """Test saved settings replace the stored ones."""
        settings = InvoiceSettings(company=CompanyProfile(name="Studio"), default_currency="GBP")

        result = SaveSettingsUseCase(self.container.settings).execute(settings)

        assert result.success is True
        stored = GetSettingsUseCase(self.container.settings).execute().data
        assert stored.company.name == "Studio"
        assert stored.default_currency == "GBP"

    def test_invalid_settings_not_saved(self):
        """Test invalid settings are rejected before reaching the store."""
        result = SaveSettingsUseCase(self.container.settings).execute(InvoiceSettings(default_tax_rate=-1))

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"
        assert self.container.storage.store.keys() == []


class TestDataUseCases:
    """Test cases for export, import and clear."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = make_container()
        self.container.clients.save(Client(name="Acme", email="a@acme.com"))

    def test_export_import(self):
        """Test an export imports into another store."""
        document = ExportDataUseCase(self.container.backup).execute().data
        target = make_container()

        result = ImportDataUseCase(target.backup).execute(document)

        assert result.success is True
        assert [c.name for c in target.clients.get_all()] == ["Acme"]

    def test_import_invalid_document(self):
        """Test an invalid backup is an error result."""
        result = ImportDataUseCase(self.container.backup).execute("not json")

        assert result.success is False
        assert result.error_code == "IMPORT_PARSE_FAILURE"
        assert len(self.container.clients.get_all()) == 1

    def test_import_write_failure(self):
        """Test a storage failure during import is reported."""
        target = build_container(
            Settings(_env_file=None, storage_backend="memory"),
            store=InMemoryKeyValueStore(quota_bytes=50)
        )
        document = json.dumps({"clients": [{"id": "c1", "name": "x" * 200}]})

        result = ImportDataUseCase(target.backup).execute(document)

        assert result.success is False
        assert result.error_code == "STORE_WRITE_FAILED"

    def test_clear_all(self):
        """Test clearing all data."""
        result = ClearAllDataUseCase(self.container.backup).execute()

        assert result.success is True
        assert self.container.clients.get_all() == []
