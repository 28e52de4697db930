"""Domain value objects for canonical identities."""

from canon.domain.value.identifiers import LinkedAccountId, UserId
from canon.domain.value.types import (
    AccountFilter,
    AuthMethod,
    AuthProvider,
    DisplayName,
)

__all__ = [
    # Identifiers
    "UserId",
    "LinkedAccountId",
    # Types
    "AccountFilter",
    "AuthMethod",
    "AuthProvider",
    "DisplayName",
]
