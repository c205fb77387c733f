"""
Settings and sequence repositories on JSON storage.
"""

import logging
from typing import ContextManager

from invoiceflow.domain.models.settings import InvoiceSettings
from invoiceflow.domain.repositories.sequence_repository import SequenceRepository
from invoiceflow.infrastructure.mappers.base_mapper import MAPPING_ERRORS
from invoiceflow.infrastructure.mappers.settings_mapper import SettingsMapper
from invoiceflow.infrastructure.storage.json_storage import JsonStorage, StorageKeys

logger = logging.getLogger(__name__)


class JsonSettingsRepository:
    """The settings singleton. Defaults are returned until settings are saved."""

    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.mapper = SettingsMapper()

    def get_settings(self) -> InvoiceSettings:
        record = self.storage.get_item(StorageKeys.SETTINGS, None, expected_type=dict)
        if record is None:
            return InvoiceSettings()
        try:
            return self.mapper.to_domain(record)
        except MAPPING_ERRORS as e:
            logger.warning(f"Stored settings are malformed, using defaults: {e}")
            return InvoiceSettings()

    def save_settings(self, settings: InvoiceSettings) -> InvoiceSettings:
        """Overwrite the stored settings as a whole."""
        self.storage.set_item(StorageKeys.SETTINGS, self.mapper.to_record(settings))
        logger.info("Settings saved")
        return settings


class JsonSequenceRepository(SequenceRepository):
    """The last issued invoice number, stored as a JSON integer."""

    def __init__(self, storage: JsonStorage):
        self.storage = storage

    def get_last_number(self) -> int:
        value = self.storage.get_item(StorageKeys.LAST_INVOICE_NUMBER, 0, expected_type=int)
        if isinstance(value, bool) or value < 0:
            logger.warning(f"Ignoring invalid stored invoice counter {value!r}")
            return 0
        return value

    def set_last_number(self, number: int) -> None:
        self.storage.set_item(StorageKeys.LAST_INVOICE_NUMBER, number)

    def locked(self) -> ContextManager:
        return self.storage.locked()
