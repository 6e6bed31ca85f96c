"""
Errors raised by the Auth service core.

Messages are part of the public contract: clients match on the exact text.
"""

from typing import Optional

from shared.errors import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    ValidationError,
)


class InvalidOperationError(ValidationError):
    """Unknown operation name passed to setTimeout."""

    def __init__(self, name: Optional[str] = None):
        super().__init__(
            "Неверный тип запроса.",
            details={"type": name},
            code="INVALID_OPERATION",
        )


class InvalidTimeoutError(ValidationError):
    """Negative timeout passed to setTimeout."""

    def __init__(self, seconds: Optional[int] = None):
        super().__init__(
            "Таймаут должен быть положительным числом",
            details={"timeout": seconds},
            code="INVALID_TIMEOUT",
        )


class InvalidCredentialsError(AuthenticationError):
    """Login failed."""

    def __init__(self, username: Optional[str] = None):
        super().__init__(
            "❌ Ошибка: Неверный логин или пароль",
            details={"username": username},
            code="INVALID_CREDENTIALS",
        )


class NoActiveSessionError(AuthenticationError):
    """Nobody is logged in."""

    def __init__(self):
        super().__init__(
            "❌ Ошибка: Отсутствует авторизованный пользователь",
            code="NO_ACTIVE_SESSION",
        )


class UsernameTakenError(ConflictError):
    """Registration with a username that is already in use."""

    def __init__(self, username: str):
        super().__init__(
            f"Пользователь {username} уже существует",
            details={"username": username},
            code="USERNAME_TAKEN",
        )


class CollaboratorUnavailableError(ExternalServiceError):
    """The client store failed unexpectedly. Not retried."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(
            "client-store",
            f"{operation} failed",
            details={"cause": type(cause).__name__},
            code="COLLABORATOR_UNAVAILABLE",
        )
        self.cause = cause
