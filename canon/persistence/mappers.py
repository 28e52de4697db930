"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Iterable

from canon.domain.model import LinkedAccount, User
from canon.domain.value import AuthProvider, DisplayName, LinkedAccountId, UserId


def row_to_linked_account(row: Dict[str, Any]) -> LinkedAccount:
    """Convert database row to LinkedAccount domain model.

    Args:
        row: Database row as dict

    Returns:
        LinkedAccount domain model
    """
    return LinkedAccount(
        id=LinkedAccountId(row["id"]),
        user_id=UserId(row["user_id"]),
        provider=AuthProvider(row["provider"]),
        provider_account_id=row["provider_account_id"],
        created_at=row["created_at"],
    )


def row_to_user(
    row: Dict[str, Any], account_rows: Iterable[Dict[str, Any]] = ()
) -> User:
    """Convert database rows to User domain model.

    Args:
        row: User row as dict
        account_rows: The user's account rows, already in creation order

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        display_name=DisplayName(row["name"]),
        linked_accounts=tuple(row_to_linked_account(r) for r in account_rows),
    )
