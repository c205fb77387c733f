"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .key_value_store import KeyValueStore
from .record_repository import RecordRepository
from .sequence_repository import SequenceRepository

__all__ = [
    "KeyValueStore",
    "RecordRepository",
    "SequenceRepository",
]
