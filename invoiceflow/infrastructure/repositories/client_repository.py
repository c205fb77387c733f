"""
Client repository implementation on JSON storage.
"""

from typing import List

from invoiceflow.domain.models.client import Client
from invoiceflow.infrastructure.mappers.client_mapper import ClientMapper
from invoiceflow.infrastructure.repositories.json_record_repository import JsonRecordRepository
from invoiceflow.infrastructure.storage.json_storage import JsonStorage, StorageKeys


class JsonClientRepository(JsonRecordRepository[Client]):
    """Stores clients under the clients key."""

    entity_name = "Client"

    def __init__(self, storage: JsonStorage):
        super().__init__(storage, StorageKeys.CLIENTS, ClientMapper())

    def search(self, query: str = "") -> List[Client]:
        """Clients whose name, email or phone contain the query."""
        return [client for client in self.get_all() if client.matches(query)]
