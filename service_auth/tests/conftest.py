"""
Fixtures for Auth service tests.
"""

import pytest
from fastapi.testclient import TestClient

from service_auth.app.clients import Client, ClientRepository, ClientService
from service_auth.app.gateway import AuthGateway
from service_auth.app.main import AuthService
from service_auth.app.metrics import AuthMetrics
from service_auth.app.session import SessionManager
from service_auth.app.timeouts import TimeoutRegistry
from shared.metrics import get_metrics_collector
from shared.test_helpers import RecordingSleep


@pytest.fixture
def timeouts():
    return TimeoutRegistry()


@pytest.fixture
def sessions():
    return SessionManager()


@pytest.fixture
def collector():
    return get_metrics_collector("auth")


@pytest.fixture
def metrics(collector, timeouts):
    return AuthMetrics(collector, timeouts)


@pytest.fixture
def client_service():
    service = ClientService(ClientRepository())
    service.seed_demo_clients()
    return service


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def gateway(client_service, sessions, timeouts, metrics, fake_sleep):
    return AuthGateway(client_service, sessions, timeouts, metrics, sleep=fake_sleep)


@pytest.fixture
def alice():
    return Client(id=1, full_name="Alice Doe", phone="+79000000010", username="alice", password="a-pass")


@pytest.fixture
def bob():
    return Client(id=2, full_name="Bob Roe", phone="+79000000020", username="bob", password="b-pass")


@pytest.fixture
def service():
    """Auth service with demo clients seeded."""
    return AuthService()


@pytest.fixture
def client(service):
    """Create test client."""
    return TestClient(service.app)
