"""
In-memory key-value store.
Used by tests and by the memory backend; an optional byte quota emulates the
storage limits of a browser.
"""

from typing import Dict, List, Optional

from invoiceflow.domain.models.base import StorageBackendError
from invoiceflow.domain.repositories.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed key-value store."""

    def __init__(self, quota_bytes: Optional[int] = None, initial: Optional[Dict[str, str]] = None):
        self.quota_bytes = quota_bytes
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = self._size_without(key) + self._entry_size(key, value)
            if used > self.quota_bytes:
                raise StorageBackendError(
                    f"Storage quota exceeded: {used} of {self.quota_bytes} bytes"
                )
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    @staticmethod
    def _entry_size(key: str, value: str) -> int:
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def _size_without(self, key: str) -> int:
        return sum(
            self._entry_size(k, v) for k, v in self._data.items() if k != key
        )
