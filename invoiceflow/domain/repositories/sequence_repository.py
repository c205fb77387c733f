"""
Sequence repository interface.
Defines the contract for the persisted invoice number counter.
"""

from abc import ABC, abstractmethod
from typing import ContextManager


class SequenceRepository(ABC):
    """
    Repository interface for the invoice number counter.
    """

    @abstractmethod
    def get_last_number(self) -> int:
        """
        Return the last issued number, 0 if none was ever issued.
        """
        pass

    @abstractmethod
    def set_last_number(self, number: int) -> None:
        """
        Persist the last issued number.
        """
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """
        Context manager that serializes read-modify-write on the counter.
        """
        pass
