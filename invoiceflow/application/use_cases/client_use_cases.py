"""
Client use cases for the application layer.
Implements business logic for client operations.
"""

from typing import List, Optional
import logging

from invoiceflow.application.dto.client_dto import ClientDraft
from invoiceflow.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from invoiceflow.domain.models.base import EntityNotFoundError
from invoiceflow.domain.models.client import Client
from invoiceflow.infrastructure.repositories.client_repository import JsonClientRepository

logger = logging.getLogger(__name__)


class SaveClientUseCase(CommandUseCase[ClientDraft, Client]):
    """Create a client, or replace the one with the draft's ID."""

    def __init__(self, client_repository: JsonClientRepository):
        super().__init__()
        self.client_repository = client_repository

    def _execute_command_logic(self, request: ClientDraft) -> Client:
        client = request.to_domain()
        client.validate()

        saved_client = self.client_repository.save(client)
        logger.info(f"Saved client {saved_client.id} ({saved_client.name})")
        return saved_client


class DeleteClientUseCase(CommandUseCase[str, bool]):
    """
    Delete a client by ID.
    Invoices keep their own copy of the client, so they are not affected.
    """

    def __init__(self, client_repository: JsonClientRepository):
        super().__init__()
        self.client_repository = client_repository

    def _execute_command_logic(self, client_id: str) -> bool:
        return self.client_repository.delete_by_id(client_id)


class GetClientUseCase(QueryUseCase[str, Client]):

    def __init__(self, client_repository: JsonClientRepository):
        super().__init__()
        self.client_repository = client_repository

    def _execute_business_logic(self, client_id: str) -> Client:
        client = self.client_repository.find_by_id(client_id)
        if not client:
            raise EntityNotFoundError("Client", client_id)
        return client


class ListClientsUseCase(QueryUseCase[Optional[str], List[Client]]):
    """List clients, optionally filtered by a search term."""

    def __init__(self, client_repository: JsonClientRepository):
        super().__init__()
        self.client_repository = client_repository

    def _execute_business_logic(self, search: Optional[str]) -> List[Client]:
        return self.client_repository.search(search or "")
