"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any
from dataclasses import dataclass, field
import uuid


def generate_id() -> str:
    """Generate a new opaque entity identifier."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class BaseEntity:
    """
    Base class for all domain entities.
    Entities are identified by an opaque string ID that never changes.
    """

    id: str = field(default_factory=generate_id)

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__.__name__, self.id))

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class StorageBackendError(DomainException):
    """Raised by key-value backends when the medium rejects an operation."""

    def __init__(self, message: str):
        super().__init__(message, "STORAGE_BACKEND_ERROR")


class StoreWriteFailed(DomainException):
    """Exception raised when a collection could not be persisted."""

    def __init__(self, key: str, reason: Optional[str] = None):
        message = f"Failed to write '{key}' to storage"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "STORE_WRITE_FAILED")
        self.key = key


class DeserializationError(DomainException):
    """Exception raised when stored data cannot be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not decode '{key}': {reason}", "DESERIALIZATION_FAILURE")
        self.key = key


class ImportParseError(DomainException):
    """Exception raised when a backup document is malformed."""

    def __init__(self, message: str):
        super().__init__(message, "IMPORT_PARSE_FAILURE")
