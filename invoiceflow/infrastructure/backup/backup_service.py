"""
Backup service for exporting and restoring the whole store as one JSON document.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from invoiceflow.domain.models.base import ImportParseError
from invoiceflow.domain.models.settings import InvoiceSettings
from invoiceflow.infrastructure.mappers.settings_mapper import SettingsMapper
from invoiceflow.infrastructure.storage.json_storage import JsonStorage, StorageKeys

logger = logging.getLogger(__name__)


COLLECTION_KEYS = (StorageKeys.INVOICES, StorageKeys.CLIENTS, StorageKeys.PRODUCTS)


def backup_filename(today: Optional[date] = None) -> str:
    """Default file name for an export, e.g. invoiceflow-backup-2024-01-31.json."""
    today = today or date.today()
    return f"invoiceflow-backup-{today.isoformat()}.json"


class BackupService:
    """
    Service for full-store export and import.

    Import overwrites each known key present in the document and leaves the
    other keys untouched. The document is checked as a whole before anything
    is written, so a rejected import changes nothing.
    """

    def __init__(self, storage: JsonStorage):
        self.storage = storage

    def export_all(self) -> str:
        """Serialize every stored collection, the settings and the counter."""
        default_settings = SettingsMapper().to_record(InvoiceSettings())

        data = {
            StorageKeys.INVOICES: self.storage.get_item(StorageKeys.INVOICES, [], expected_type=list),
            StorageKeys.CLIENTS: self.storage.get_item(StorageKeys.CLIENTS, [], expected_type=list),
            StorageKeys.PRODUCTS: self.storage.get_item(StorageKeys.PRODUCTS, [], expected_type=list),
            StorageKeys.SETTINGS: self.storage.get_item(StorageKeys.SETTINGS, default_settings, expected_type=dict),
            StorageKeys.LAST_INVOICE_NUMBER: self.storage.get_item(
                StorageKeys.LAST_INVOICE_NUMBER, 0, expected_type=int
            ),
        }

        logger.info(
            f"Exported {len(data[StorageKeys.INVOICES])} invoices, "
            f"{len(data[StorageKeys.CLIENTS])} clients, "
            f"{len(data[StorageKeys.PRODUCTS])} products"
        )
        return json.dumps(data, indent=2, ensure_ascii=False)

    def import_all(self, document: str) -> bool:
        """
        Restore from an exported document.

        Returns False, with nothing written, when the document is not valid
        JSON, is not an object, or holds a known key with the wrong shape.
        Storage write failures are raised as StoreWriteFailed.
        """
        try:
            data = self.parse_document(document)
        except ImportParseError as e:
            logger.error(f"Error importing data: {e.message}")
            return False

        imported = [key for key in StorageKeys.ALL if key in data]
        with self.storage.locked():
            for key in imported:
                self.storage.set_item(key, data[key])

        logger.info(f"Imported backup keys: {', '.join(imported) or 'none'}")
        return True

    def clear_all(self) -> None:
        """Remove every key owned by the store."""
        self.storage.clear(StorageKeys.ALL)
        logger.info("All stored data cleared")

    @staticmethod
    def parse_document(document: str) -> Dict[str, Any]:
        """Decode a backup and check the shape of every known key it holds."""
        try:
            data = json.loads(document)
        except (json.JSONDecodeError, TypeError) as e:
            raise ImportParseError(f"Backup is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ImportParseError("Backup must be a JSON object")

        for key in COLLECTION_KEYS:
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, list) or not all(isinstance(r, dict) for r in value):
                raise ImportParseError(f"'{key}' must be a list of objects")

        if StorageKeys.SETTINGS in data and not isinstance(data[StorageKeys.SETTINGS], dict):
            raise ImportParseError(f"'{StorageKeys.SETTINGS}' must be an object")

        if StorageKeys.LAST_INVOICE_NUMBER in data:
            counter = data[StorageKeys.LAST_INVOICE_NUMBER]
            if isinstance(counter, bool) or not isinstance(counter, int) or counter < 0:
                raise ImportParseError(
                    f"'{StorageKeys.LAST_INVOICE_NUMBER}' must be a non-negative integer"
                )

        return data
