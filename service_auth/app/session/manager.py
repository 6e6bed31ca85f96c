"""
Single-slot session state.
"""

import threading
from typing import Optional

from shared.logging import get_logger

from ..clients.models import Client


class SessionManager:
    """Tracks which client, if any, is logged in.

    There is exactly one slot per process. ``login`` overwrites whatever is
    there (last writer wins) and ``logout`` is idempotent.
    """

    def __init__(self):
        self.logger = get_logger("auth.session")
        self._lock = threading.Lock()
        self._client: Optional[Client] = None

    def login(self, client: Client) -> Optional[Client]:
        """Make ``client`` the logged-in client; returns the one it replaced."""
        with self._lock:
            previous, self._client = self._client, client

        if previous is not None and previous.username != client.username:
            self.logger.info(
                "Session overwritten",
                previous=previous.username,
                current=client.username,
            )
        return previous

    def logout(self) -> Optional[Client]:
        """Clear the session; returns the client that was logged in."""
        with self._lock:
            previous, self._client = self._client, None
        return previous

    def current(self) -> Optional[Client]:
        with self._lock:
            return self._client

    def is_logged_in(self) -> bool:
        with self._lock:
            return self._client is not None
