"""
JSON storage on top of a key-value store.
Reads degrade to a default value when stored data is corrupt; writes that the
backend rejects are reported as StoreWriteFailed.
"""

import copy
import json
import logging
import threading
from typing import Any, List, Optional, Tuple, Type, Union

from invoiceflow.domain.models.base import (
    DeserializationError,
    StorageBackendError,
    StoreWriteFailed
)
from invoiceflow.domain.repositories.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class StorageKeys:
    """Logical keys of every stored entry."""
    INVOICES = "invoices"
    CLIENTS = "clients"
    PRODUCTS = "products"
    SETTINGS = "settings"
    LAST_INVOICE_NUMBER = "lastInvoiceNumber"

    ALL = (INVOICES, CLIENTS, PRODUCTS, SETTINGS, LAST_INVOICE_NUMBER)


class JsonStorage:
    """
    Serializes values as JSON under prefixed keys.
    The re-entrant lock serializes read-modify-write sequences of callers.
    """

    def __init__(self, store: KeyValueStore, key_prefix: str = "invoiceflow_"):
        self.store = store
        self.key_prefix = key_prefix
        self._lock = threading.RLock()

    def full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def locked(self) -> threading.RLock:
        """Lock to hold across a read-modify-write step."""
        return self._lock

    def get_item(
        self,
        key: str,
        default: Any,
        expected_type: Optional[Union[Type, Tuple[Type, ...]]] = None
    ) -> Any:
        """
        Return the decoded value stored under key.
        Absent, unreadable or wrongly typed data gives a copy of default.
        """
        full_key = self.full_key(key)
        try:
            raw = self.store.get_item(full_key)
        except StorageBackendError as e:
            logger.warning(f"Error reading {full_key} from storage: {e.message}")
            return copy.deepcopy(default)

        if not raw:
            return copy.deepcopy(default)

        try:
            value = self._decode(full_key, raw, expected_type)
        except DeserializationError as e:
            logger.warning(f"{e.message}; using default value")
            return copy.deepcopy(default)

        return value

    def set_item(self, key: str, value: Any) -> None:
        """Encode and store a value, raising StoreWriteFailed if the backend refuses it."""
        full_key = self.full_key(key)
        payload = json.dumps(value, ensure_ascii=False)

        try:
            self.store.set_item(full_key, payload)
        except StorageBackendError as e:
            logger.error(f"Error saving {full_key} to storage: {e.message}")
            raise StoreWriteFailed(full_key, e.message) from e

    def remove_item(self, key: str) -> None:
        full_key = self.full_key(key)
        try:
            self.store.remove_item(full_key)
        except StorageBackendError as e:
            logger.error(f"Error removing {full_key} from storage: {e.message}")
            raise StoreWriteFailed(full_key, e.message) from e

    def clear(self, keys: List[str] = StorageKeys.ALL) -> None:
        """Remove every given key."""
        with self._lock:
            for key in keys:
                self.remove_item(key)
        logger.info(f"Cleared {len(keys)} storage keys")

    @staticmethod
    def _decode(full_key: str, raw: str, expected_type) -> Any:
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise DeserializationError(full_key, str(e)) from e

        if expected_type is not None and not isinstance(value, expected_type):
            raise DeserializationError(
                full_key, f"expected {expected_type}, found {type(value).__name__}"
            )
        return value
