"""In-memory linked account repository for testing."""

from canon.domain.model.linked_account import LinkedAccount
from canon.domain.repository.linked_account import LinkedAccountRepository
from canon.domain.value import AccountFilter, UserId


class InMemoryLinkedAccountRepository(LinkedAccountRepository):
    """In-memory implementation of LinkedAccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: list[LinkedAccount] = []
        self.lookups: list[AccountFilter] = []  # Filters seen by find_matching

    async def save(self, account: LinkedAccount) -> LinkedAccount:
        """Save linked account."""
        # Check for existing account with same ID (update case)
        for i, existing in enumerate(self._accounts):
            if existing.id == account.id:
                self._accounts[i] = account
                return account

        self._accounts.append(account)
        return account

    async def delete(self, account: LinkedAccount) -> None:
        """Unlink an account."""
        self._accounts = [a for a in self._accounts if a.id != account.id]

    async def find_matching(self, account_filter: AccountFilter) -> list[LinkedAccount]:
        """Find accounts matching the filter, newest first.

        Returned newest first so callers cannot rely on insertion order.
        """
        self.lookups.append(account_filter)
        return [
            account
            for account in reversed(self._accounts)
            if account.provider in account_filter.providers
            and account.provider_account_id in account_filter.provider_account_ids
        ]

    def find_all_by_user_id(self, user_id: UserId) -> list[LinkedAccount]:
        """Find all accounts for a user, sorted by creation."""
        matches = [a for a in self._accounts if a.user_id == user_id]
        matches.sort(key=lambda a: (a.created_at, a.id))
        return matches
