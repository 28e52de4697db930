"""PostgreSQL repository implementations."""

from canon.persistence.repository.linked_account import (
    PostgresLinkedAccountRepository,
)
from canon.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresLinkedAccountRepository",
]
