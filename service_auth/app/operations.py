"""
Operation kinds handled by the Auth service.
"""

from enum import Enum
from typing import Tuple

from .errors import InvalidOperationError


class OperationKind(str, Enum):
    """Request kinds that carry their own metrics (and, for some, a delay)."""

    SET_TIMEOUT = "setTimeout"
    REGISTER = "register"
    LOGIN = "login"
    LOGOUT = "logout"
    LOGGED_USER = "loggedUser"
    IS_LOGGED = "isLogged"
    LIST_CLIENTS = "clients"

    @property
    def metric_stem(self) -> str:
        return _METRIC_STEMS[self]

    @classmethod
    def delayed(cls) -> Tuple["OperationKind", ...]:
        """Kinds with a configurable delay, in reporting order."""
        return _DELAYED

    @classmethod
    def parse_delayed(cls, name: str) -> "OperationKind":
        """Resolve a wire name to a delay-bearing kind or raise InvalidOperationError."""
        for op in _DELAYED:
            if op.value == name:
                return op
        raise InvalidOperationError(name)


_DELAYED = (
    OperationKind.LOGIN,
    OperationKind.LOGOUT,
    OperationKind.LOGGED_USER,
    OperationKind.IS_LOGGED,
    OperationKind.REGISTER,
)

_METRIC_STEMS = {
    OperationKind.SET_TIMEOUT: "timeout_set",
    OperationKind.REGISTER: "register",
    OperationKind.LOGIN: "login",
    OperationKind.LOGOUT: "logout",
    OperationKind.LOGGED_USER: "logged_user",
    OperationKind.IS_LOGGED: "is_logged",
    OperationKind.LIST_CLIENTS: "clients_all",
}
