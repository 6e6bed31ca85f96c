"""
Registration and credential checks against the client store.
"""

import hmac
from typing import List, Optional

from shared.logging import get_logger

from .models import Client
from .repository import ClientRepository


DEMO_CLIENTS = (
    ("Ivan Petrov", "+79000000001", "user1", "pass1"),
    ("Maria Ivanova", "+79000000002", "user2", "pass2"),
)


class ClientService:
    """Business logic for clients: register, verify credentials, list."""

    def __init__(self, repository: ClientRepository):
        self.repository = repository
        self.logger = get_logger("auth.clients")

    def register(self, full_name: str, phone: str, username: str, password: str) -> Client:
        client = self.repository.add(full_name, phone, username, password)
        self.logger.info("Client registered", client_id=client.id, username=username)
        return client

    def login(self, username: str, password: str) -> Optional[Client]:
        """Return the client if the credentials match, else None."""
        client = self.repository.find_by_username(username)
        if client is None:
            return None
        if not hmac.compare_digest(client.password.encode(), password.encode()):
            return None
        return client

    def list_all_clients(self) -> List[Client]:
        return self.repository.list_all()

    def seed_demo_clients(self):
        for full_name, phone, username, password in DEMO_CLIENTS:
            if self.repository.find_by_username(username) is None:
                self.repository.add(full_name, phone, username, password)
