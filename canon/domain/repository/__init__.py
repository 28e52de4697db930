"""Repository interfaces for the identity domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from canon.domain.repository.linked_account import LinkedAccountRepository
from canon.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "LinkedAccountRepository",
]
