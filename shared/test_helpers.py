"""
Test helper functions and factory methods for the Bank Auth service.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List


@dataclass
class TestClientData:
    """Registration data for a test client."""
    __test__ = False

    full_name: str
    phone: str
    username: str
    password: str

    def as_query(self) -> Dict[str, Any]:
        """Query parameters for ``POST /auth/register``."""
        return {
            "fullName": self.full_name,
            "phone": self.phone,
            "username": self.username,
            "password": self.password,
        }

    def as_kwargs(self) -> Dict[str, Any]:
        return asdict(self)


class TestDataFactory:
    """Factory for creating test data."""

    __test__ = False

    @staticmethod
    def create_test_clients() -> List[TestClientData]:
        """Create test clients."""
        return [
            TestClientData(
                full_name="Lada Mills",
                phone="+79001234567",
                username="user11",
                password="pass11"
            ),
            TestClientData(
                full_name="Oleg Smirnov",
                phone="+79007654321",
                username="user12",
                password="pass12"
            ),
        ]

    @staticmethod
    def create_test_client(suffix: str = "1") -> TestClientData:
        """Create one client with unique credentials."""
        return TestClientData(
            full_name=f"Test Client {suffix}",
            phone=f"+7900000{suffix:0>4}",
            username=f"test_user_{suffix}",
            password=f"secret_{suffix}"
        )


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float):
        self.calls.append(seconds)
