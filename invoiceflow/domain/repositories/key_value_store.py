"""
Key-value store interface.
The storage capability every repository is built on.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class KeyValueStore(ABC):
    """
    A string-to-string store, modelled on browser local storage.
    Implementations raise StorageBackendError when the medium rejects an operation.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Return the stored string, or None if the key is absent.
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a string under a key, replacing any previous value.
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing an absent key does nothing.
        """
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """
        Return all stored keys.
        """
        pass
