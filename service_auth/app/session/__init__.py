"""
Session state for the single logged-in client.
"""

from .manager import SessionManager

__all__ = ["SessionManager"]
