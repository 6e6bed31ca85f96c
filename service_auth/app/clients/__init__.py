"""
Client store collaborator.

The Auth core only depends on three calls: ``register``, ``login`` and
``list_all_clients``. The in-memory implementation here keeps the service
runnable without a database; swap it for any object with the same methods.
"""

from .models import Client
from .repository import ClientRepository
from .service import ClientService

__all__ = ["Client", "ClientRepository", "ClientService"]
