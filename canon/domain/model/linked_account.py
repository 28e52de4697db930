"""Linked account entity.

Links an external authentication provider account to a local user.
"""

from datetime import datetime

from pydantic import Field

from canon.domain.model.common import DomainModel
from canon.domain.value import AuthProvider, LinkedAccountId, UserId


class LinkedAccount(DomainModel):
    """External provider account linked to a local user.

    ``provider_account_id`` is unique within a provider but not across
    providers, so lookups always pair it with ``provider``.
    """

    id: LinkedAccountId
    user_id: UserId  # Owning user's internal ID
    provider: AuthProvider
    provider_account_id: str  # ID issued by the provider
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> tuple[AuthProvider, str]:
        """Provider and provider account ID, unique per linked account."""
        return (self.provider, self.provider_account_id)
