"""
Artificial latency injection.

Holds the per-operation delay the gateway waits before serving a request,
so clients can be tested against a slow backend.
"""

from .registry import TimeoutRegistry

__all__ = ["TimeoutRegistry"]
