"""
Generic record repository over JSON storage.
Each collection is one JSON array stored under a single key.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, TypeVar

from invoiceflow.domain.models.base import BaseEntity
from invoiceflow.domain.repositories.record_repository import RecordRepository
from invoiceflow.infrastructure.mappers.base_mapper import MAPPING_ERRORS
from invoiceflow.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)


class JsonRecordRepository(RecordRepository[T], Generic[T]):
    """
    Upsert/delete by ID over a stored JSON array.
    Records that cannot be mapped are skipped with a warning on read and
    left untouched on write.
    """

    entity_name = "Record"

    def __init__(self, storage: JsonStorage, key: str, mapper: Any):
        self.storage = storage
        self.key = key
        self.mapper = mapper

    def get_all(self) -> List[T]:
        """Return fresh entities for every readable stored record."""
        entities = []
        for record in self._load_records():
            entity = self._to_domain(record)
            if entity is not None:
                entities.append(entity)
        return entities

    def find_by_id(self, record_id: str) -> Optional[T]:
        for record in self._load_records():
            if isinstance(record, dict) and record.get("id") == record_id:
                return self._to_domain(record)
        return None

    def save(self, record: T) -> T:
        """Replace the record with the same ID in place, or append it."""
        with self.storage.locked():
            self._before_save(record)
            new_record = self.mapper.to_record(record)
            records = self._load_records()

            index = self._index_of(records, record.id)
            if index is not None:
                records[index] = new_record
                action = "Updated"
            else:
                records.append(new_record)
                action = "Created"

            self.storage.set_item(self.key, records)

        logger.debug(f"{action} {self.entity_name} {record.id}")
        return record

    def delete_by_id(self, record_id: str) -> bool:
        """Remove the record if present. A missing ID leaves storage untouched."""
        with self.storage.locked():
            records = self._load_records()
            remaining = [
                r for r in records
                if not (isinstance(r, dict) and r.get("id") == record_id)
            ]
            if len(remaining) == len(records):
                logger.debug(f"{self.entity_name} {record_id} not found, nothing to delete")
                return False

            self.storage.set_item(self.key, remaining)

        logger.info(f"Deleted {self.entity_name} {record_id}")
        return True

    def count(self) -> int:
        return len(self.get_all())

    def _before_save(self, record: T) -> None:
        """Hook for subclasses to stamp fields before writing."""
        pass

    def _load_records(self) -> List[Any]:
        return self.storage.get_item(self.key, [], expected_type=list)

    def _to_domain(self, record: Any) -> Optional[T]:
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed {self.entity_name} entry in {self.key}: not an object")
            return None
        try:
            return self.mapper.to_domain(record)
        except MAPPING_ERRORS as e:
            logger.warning(f"Skipping malformed {self.entity_name} {record.get('id')!r} in {self.key}: {e}")
            return None

    @staticmethod
    def _index_of(records: List[Dict[str, Any]], record_id: str) -> Optional[int]:
        for index, record in enumerate(records):
            if isinstance(record, dict) and record.get("id") == record_id:
                return index
        return None
