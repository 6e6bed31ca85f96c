"""
Auth service for the Bank App.
"""

from typing import List

from fastapi import Query
from fastapi.responses import PlainTextResponse

from shared.base_service import BaseService
from shared.errors import ErrorResponse

from .clients import Client, ClientRepository, ClientService
from .gateway import AuthGateway
from .metrics import AuthMetrics
from .session import SessionManager
from .timeouts import TimeoutRegistry


_TIMEOUT_EXAMPLE = {
    "message": "Установлен таймаут для запроса login на 5 сек",
    "timeouts": {"login": 5, "logout": 0, "loggedUser": 0, "isLogged": 0, "register": 0},
}


def _text_example(description: str, *examples: str) -> dict:
    return {
        "description": description,
        "content": {"text/plain": {"examples": {str(i): {"value": v} for i, v in enumerate(examples)}}},
    }


class AuthService(BaseService):
    """Auth service implementation."""

    def __init__(self, **config_overrides):
        super().__init__("auth", 8010, **config_overrides)

        self.client_service = ClientService(ClientRepository())
        if self.config.seed_demo_clients:
            self.client_service.seed_demo_clients()

        self.sessions = SessionManager()
        self.timeouts = TimeoutRegistry(self.config.initial_timeouts)
        self.auth_metrics = AuthMetrics(self.metrics, self.timeouts, self.config.metrics_namespace)
        self.gateway = AuthGateway(
            self.client_service,
            self.sessions,
            self.timeouts,
            self.auth_metrics,
        )

        self._setup_auth_routes()

    def _setup_auth_routes(self):
        """Set up auth-specific routes."""
        gateway = self.gateway

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "auth",
                "message": "Bank App - Auth Service",
                "version": "1.0.0"
            }

        @self.app.post(
            "/auth/setTimeout",
            summary="Установка задержки ответа сервера для различных запросов",
            description="Устанавливает время ожидания в секундах для имитации задержки ответа сервера "
                        "и указывает текущее время ожидания для всех запросов",
            responses={
                200: {
                    "description": "Задержка успешно установлена",
                    "content": {"application/json": {"example": _TIMEOUT_EXAMPLE}},
                },
                400: {"model": ErrorResponse, "description": "Ошибка валидации входных параметров"},
            },
        )
        async def set_timeout(
            type: str = Query(..., description="Типы запросов: login, logout, loggedUser, isLogged, register",
                              examples=["login"]),
            timeout: int = Query(..., description="Время ожидания в секундах", examples=[5]),
        ):
            return await gateway.set_timeout(type, timeout)

        @self.app.post(
            "/auth/register",
            response_model=Client,
            summary="Регистрация нового пользователя",
            description="Регистрирует нового клиента в системе",
            responses={409: {"model": ErrorResponse, "description": "Логин уже занят"}},
        )
        async def register(
            full_name: str = Query(..., alias="fullName", description="Полное имя клиента",
                                   examples=["Lada Mills"]),
            phone: str = Query(..., description="Номер телефона клиента", examples=["+79001234567"]),
            username: str = Query(..., description="Логин", examples=["user11"]),
            password: str = Query(..., description="Пароль", examples=["pass11"]),
        ):
            return await gateway.register(full_name, phone, username, password)

        @self.app.post(
            "/auth/login",
            response_class=PlainTextResponse,
            summary="Авторизация в системе",
            description="Авторизует указанного пользователя в системе",
            responses={
                200: _text_example("Авторизация выполнена", "✅ Успешный вход: user1"),
                401: _text_example("Неверные учетные данные", "❌ Ошибка: Неверный логин или пароль"),
            },
        )
        async def login(
            username: str = Query(..., description="Логин пользователя", examples=["user1"]),
            password: str = Query(..., description="Пароль пользователя", examples=["pass1"]),
        ):
            client = await gateway.login(username, password)
            return PlainTextResponse(f"✅ Успешный вход: {client.username}")

        @self.app.get(
            "/auth/loggedUser",
            response_class=PlainTextResponse,
            summary="Получение авторизованного пользователя",
            description="Возвращает логин пользователя, авторизованного в системе. "
                        "Если пользователь не авторизован, возвращается ошибка.",
            responses={
                200: _text_example("Пользователь успешно найден", "user1"),
                401: _text_example("Пользователь не авторизован",
                                   "❌ Ошибка: Отсутствует авторизованный пользователь"),
            },
        )
        async def logged_user():
            client = await gateway.logged_user()
            return PlainTextResponse(client.username)

        @self.app.get(
            "/auth/isLogged",
            response_model=bool,
            summary="Проверка статуса авторизации пользователя",
            description="Выполняет проверку авторизации пользователя в системе",
        )
        async def is_logged():
            return await gateway.is_logged()

        @self.app.post(
            "/auth/logout",
            response_class=PlainTextResponse,
            summary="Выход из системы",
            description="Выполняет выход пользователя из системы",
            responses={200: _text_example("Успешный выход", "✅ Успешный выход")},
        )
        async def logout():
            await gateway.logout()
            return PlainTextResponse("✅ Успешный выход")

        @self.app.get(
            "/auth/clients",
            response_model=List[Client],
            summary="Получение списка всех пользователей",
            description="Получает список всех пользователей, зарегистрированных в системе",
        )
        async def list_clients():
            return await gateway.list_clients()

    async def _check_dependencies(self):
        """Check auth dependencies."""
        return {"client_store": "ok", "registered_clients": str(len(self.client_service.repository))}


def create_app(**config_overrides):
    """Create FastAPI application."""
    service = AuthService(**config_overrides)
    return service.app


if __name__ == "__main__":
    service = AuthService()
    service.run()
