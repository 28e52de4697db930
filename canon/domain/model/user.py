"""User aggregate root.

A local account that may have external provider accounts linked to it.
"""

from pydantic import Field

from canon.domain.model.common import DomainModel
from canon.domain.model.linked_account import LinkedAccount
from canon.domain.value import DisplayName, UserId


class User(DomainModel):
    """User aggregate root.

    ``linked_accounts`` is ordered by creation. The first element is the
    account used at signup and is authoritative for the canonical
    identity; repositories must return accounts in that order.
    """

    id: UserId
    display_name: DisplayName
    linked_accounts: tuple[LinkedAccount, ...] = Field(default_factory=tuple)

    @property
    def primary_account(self) -> LinkedAccount | None:
        """First linked account, or None for local-only users."""
        if not self.linked_accounts:
            return None
        return self.linked_accounts[0]
