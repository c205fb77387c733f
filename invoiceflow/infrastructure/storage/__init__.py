"""
Storage module.
Key-value backends and the JSON layer on top of them.
"""

from .json_storage import JsonStorage, StorageKeys
from .memory_store import InMemoryKeyValueStore
from .sql_store import SQLAlchemyKeyValueStore, create_store_engine

__all__ = [
    "JsonStorage",
    "StorageKeys",
    "InMemoryKeyValueStore",
    "SQLAlchemyKeyValueStore",
    "create_store_engine",
]
