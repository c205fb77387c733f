"""
Service wiring.
Builds the key-value backend from configuration and assembles the
repositories and services that share it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from invoiceflow.config import Settings, get_settings
from invoiceflow.domain.repositories.key_value_store import KeyValueStore
from invoiceflow.domain.services.numbering_service import NumberingService
from invoiceflow.infrastructure.backup.backup_service import BackupService
from invoiceflow.infrastructure.repositories import (
    JsonClientRepository,
    JsonInvoiceRepository,
    JsonProductRepository,
    JsonSequenceRepository,
    JsonSettingsRepository
)
from invoiceflow.infrastructure.storage.json_storage import JsonStorage
from invoiceflow.infrastructure.storage.memory_store import InMemoryKeyValueStore
from invoiceflow.infrastructure.storage.sql_store import SQLAlchemyKeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Everything the use cases and the CLI need, sharing one storage."""
    config: Settings
    storage: JsonStorage
    invoices: JsonInvoiceRepository
    clients: JsonClientRepository
    products: JsonProductRepository
    settings: JsonSettingsRepository
    sequence: JsonSequenceRepository
    numbering: NumberingService
    backup: BackupService


def create_key_value_store(config: Settings) -> KeyValueStore:
    """Create the backend selected by storage_backend."""
    if config.storage_backend == "memory":
        logger.debug("Using in-memory key-value store")
        return InMemoryKeyValueStore(quota_bytes=config.storage_quota_bytes)

    logger.debug(f"Using SQL key-value store at {config.database_url}")
    return SQLAlchemyKeyValueStore.from_url(config.database_url, echo=config.debug)


def build_container(
    config: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None
) -> ServiceContainer:
    """
    Assemble the services.

    Args:
        config: Settings to use, defaults to get_settings()
        store: Backend to use instead of the configured one
    """
    config = config or get_settings()
    store = store if store is not None else create_key_value_store(config)

    storage = JsonStorage(store, key_prefix=config.storage_key_prefix)
    sequence = JsonSequenceRepository(storage)

    return ServiceContainer(
        config=config,
        storage=storage,
        invoices=JsonInvoiceRepository(storage),
        clients=JsonClientRepository(storage),
        products=JsonProductRepository(storage),
        settings=JsonSettingsRepository(storage),
        sequence=sequence,
        numbering=NumberingService(sequence),
        backup=BackupService(storage),
    )
