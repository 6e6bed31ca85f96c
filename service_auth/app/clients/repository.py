"""
In-memory client store.
"""

import itertools
import threading
from typing import Dict, List, Optional

from ..errors import UsernameTakenError
from .models import Client


class ClientRepository:
    """Thread-safe in-memory store of registered clients, keyed by username."""

    def __init__(self):
        self._lock = threading.Lock()
        self._clients: Dict[str, Client] = {}
        self._ids = itertools.count(1)

    def add(self, full_name: str, phone: str, username: str, password: str) -> Client:
        with self._lock:
            if username in self._clients:
                raise UsernameTakenError(username)
            client = Client(
                id=next(self._ids),
                full_name=full_name,
                phone=phone,
                username=username,
                password=password,
            )
            self._clients[username] = client
        return client

    def find_by_username(self, username: str) -> Optional[Client]:
        with self._lock:
            return self._clients.get(username)

    def list_all(self) -> List[Client]:
        """Snapshot of all clients in registration order."""
        with self._lock:
            return list(self._clients.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)
