"""
Auth gateway: sequences one auth request.

Every operation runs the same steps: count the call, start the timer,
wait the configured artificial delay, delegate to the client store or the
session, mutate the session on success, stop the timer. Failures surface as
the typed errors in ``app.errors``; the HTTP layer renders them.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List

from shared.errors import AccessLayerException
from shared.logging import get_logger, set_user_context

from .clients.models import Client
from .clients.service import ClientService
from .errors import CollaboratorUnavailableError, InvalidCredentialsError, InvalidTimeoutError, NoActiveSessionError
from .metrics.auth_metrics import AuthMetrics
from .operations import OperationKind
from .session.manager import SessionManager
from .timeouts.registry import TimeoutRegistry


Sleep = Callable[[float], Awaitable[Any]]


class AuthGateway:
    """Orchestrates auth operations over the shared registries."""

    def __init__(
        self,
        clients: ClientService,
        sessions: SessionManager,
        timeouts: TimeoutRegistry,
        metrics: AuthMetrics,
        sleep: Sleep = asyncio.sleep,
    ):
        self.clients = clients
        self.sessions = sessions
        self.timeouts = timeouts
        self.metrics = metrics
        self._sleep = sleep
        self.logger = get_logger("auth.gateway")

    async def _inject_delay(self, op: OperationKind):
        # Read once: a later setTimeout does not affect this request.
        delay_ms = self.timeouts.get(op)
        if delay_ms > 0:
            self.logger.debug("Injecting delay", operation=op.value, delay_ms=delay_ms)
            await self._sleep(delay_ms / 1000.0)

    def _call_store(self, op: OperationKind, func: Callable, *args):
        try:
            return func(*args)
        except AccessLayerException:
            raise
        except Exception as e:
            self.logger.error("Client store failure", operation=op.value, error=str(e), exc_info=True)
            raise CollaboratorUnavailableError(op.value, e) from e

    async def set_timeout(self, type: str, timeout: int) -> Dict[str, Any]:
        with self.metrics.track(OperationKind.SET_TIMEOUT):
            if timeout < 0:
                raise InvalidTimeoutError(timeout)
            op = OperationKind.parse_delayed(type)
            timeouts = self.timeouts.set(op, timeout)
            return {
                "message": f"Установлен таймаут для запроса {op.value} на {timeout} сек",
                "timeouts": timeouts,
            }

    async def register(self, full_name: str, phone: str, username: str, password: str) -> Client:
        op = OperationKind.REGISTER
        with self.metrics.track(op):
            await self._inject_delay(op)
            return self._call_store(op, self.clients.register, full_name, phone, username, password)

    async def login(self, username: str, password: str) -> Client:
        op = OperationKind.LOGIN
        with self.metrics.track(op):
            await self._inject_delay(op)
            client = self._call_store(op, self.clients.login, username, password)
            if client is None:
                self.logger.info("Login failed", username=username)
                raise InvalidCredentialsError(username)

            self.sessions.login(client)
            set_user_context(username=client.username)
            self.logger.info("Login succeeded", username=client.username)
            return client

    async def logout(self) -> None:
        op = OperationKind.LOGOUT
        with self.metrics.track(op):
            await self._inject_delay(op)
            previous = self.sessions.logout()
            if previous is not None:
                self.logger.info("Logout", username=previous.username)

    async def logged_user(self) -> Client:
        op = OperationKind.LOGGED_USER
        with self.metrics.track(op):
            await self._inject_delay(op)
            client = self.sessions.current()
            if client is None:
                raise NoActiveSessionError()
            return client

    async def is_logged(self) -> bool:
        op = OperationKind.IS_LOGGED
        with self.metrics.track(op):
            await self._inject_delay(op)
            return self.sessions.is_logged_in()

    async def list_clients(self) -> List[Client]:
        op = OperationKind.LIST_CLIENTS
        with self.metrics.track(op):
            return list(self._call_store(op, self.clients.list_all_clients))
