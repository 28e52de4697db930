"""In-memory user repository for testing."""

from typing import Optional

from canon.domain.model.user import User
from canon.domain.repository.user import UserRepository
from canon.domain.value import UserId
from canon.persistence.repository.inmemory.linked_account import (
    InMemoryLinkedAccountRepository,
)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Linked accounts are read from the shared account repository so both
    lookups see the same data, as they would against one database.
    """

    def __init__(self, accounts: InMemoryLinkedAccountRepository) -> None:
        self._users: dict[UserId, User] = {}
        self._accounts = accounts

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID with linked accounts in creation order."""
        user = self._users.get(user_id)
        if not user:
            return None
        linked = self._accounts.find_all_by_user_id(user_id)
        return user.model_copy(update={"linked_accounts": tuple(linked)})

    async def save(self, user: User) -> User:
        """Save a user and any linked accounts it carries."""
        self._users[user.id] = user.model_copy(update={"linked_accounts": ()})
        for account in user.linked_accounts:
            await self._accounts.save(account)
        return user
