"""In-memory repository implementations for testing."""

from .linked_account import InMemoryLinkedAccountRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryLinkedAccountRepository",
    "InMemoryUserRepository",
]
