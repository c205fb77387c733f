"""
Record repository interface.
Defines the contract shared by the invoice, client and product collections.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """
    Repository interface for a flat collection of records keyed by ID.
    Every returned record is an independent snapshot of the stored data.
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """
        Return all records in insertion order.
        Returns an empty list if nothing is stored or the stored data is unreadable.
        """
        pass

    @abstractmethod
    def find_by_id(self, record_id: str) -> Optional[T]:
        """
        Find a record by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def save(self, record: T) -> T:
        """
        Insert or replace a record by ID.
        An existing record keeps its position; a new one is appended.
        """
        pass

    @abstractmethod
    def delete_by_id(self, record_id: str) -> bool:
        """
        Delete a record by ID.
        Returns True if a record was removed; a missing ID is not an error.
        """
        pass
