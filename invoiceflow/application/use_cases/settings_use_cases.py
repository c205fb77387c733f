"""
Settings and data management use cases.
"""

import logging

from invoiceflow.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from invoiceflow.domain.models.base import ImportParseError
from invoiceflow.domain.models.settings import InvoiceSettings
from invoiceflow.infrastructure.backup.backup_service import BackupService
from invoiceflow.infrastructure.repositories.settings_repository import JsonSettingsRepository

logger = logging.getLogger(__name__)


class GetSettingsUseCase(QueryUseCase[None, InvoiceSettings]):
    """Current settings, or the defaults if none were saved."""

    def __init__(self, settings_repository: JsonSettingsRepository):
        super().__init__()
        self.settings_repository = settings_repository

    def _execute_business_logic(self, request: None) -> InvoiceSettings:
        return self.settings_repository.get_settings()


class SaveSettingsUseCase(CommandUseCase[InvoiceSettings, InvoiceSettings]):
    """Replace the stored settings. The request is validated before saving."""

    def __init__(self, settings_repository: JsonSettingsRepository):
        super().__init__()
        self.settings_repository = settings_repository

    def _execute_command_logic(self, settings: InvoiceSettings) -> InvoiceSettings:
        return self.settings_repository.save_settings(settings)


class ExportDataUseCase(QueryUseCase[None, str]):

    def __init__(self, backup_service: BackupService):
        super().__init__()
        self.backup_service = backup_service

    def _execute_business_logic(self, request: None) -> str:
        return self.backup_service.export_all()


class ImportDataUseCase(CommandUseCase[str, bool]):
    """Restore a backup document. A rejected document leaves the store unchanged."""

    def __init__(self, backup_service: BackupService):
        super().__init__()
        self.backup_service = backup_service

    def _execute_command_logic(self, document: str) -> bool:
        if not self.backup_service.import_all(document):
            raise ImportParseError("Invalid backup file")
        return True


class ClearAllDataUseCase(CommandUseCase[None, None]):
    """Remove invoices, clients, products, settings and the invoice counter."""

    def __init__(self, backup_service: BackupService):
        super().__init__()
        self.backup_service = backup_service

    def _execute_command_logic(self, request: None) -> None:
        self.backup_service.clear_all()
        logger.warning("All application data was cleared")
