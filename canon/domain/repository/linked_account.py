"""Linked account repository interface."""

from abc import ABC, abstractmethod

from canon.domain.model.linked_account import LinkedAccount
from canon.domain.value import AccountFilter


class LinkedAccountRepository(ABC):
    """Read-only lookup of linked provider accounts."""

    @abstractmethod
    async def find_matching(self, account_filter: AccountFilter) -> list[LinkedAccount]:
        """Find accounts matching a provider / provider account ID filter.

        Args:
            account_filter: Providers and provider account IDs to match

        Returns:
            Matching accounts in unspecified order (may be empty)
        """
        pass
