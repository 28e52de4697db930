"""Identity value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Optional

from pydantic import field_validator

from canon.domain.value.common import RootValueObject, ValueObject


class AuthProvider(str, Enum):
    """Supported external authentication providers."""

    GOOGLE = "google"
    DISCORD = "discord"


class AuthMethod(str, Enum):
    """How a canonical identity authenticates.

    ``local`` for accounts without linked providers, otherwise one member
    per AuthProvider with the same value.
    """

    LOCAL = "local"
    GOOGLE = "google"
    DISCORD = "discord"

    @property
    def provider(self) -> Optional[AuthProvider]:
        """External provider behind this method, None for local."""
        if self is AuthMethod.LOCAL:
            return None
        return AuthProvider(self.value)

    @classmethod
    def from_provider(cls, provider: AuthProvider) -> "AuthMethod":
        """Auth method matching an external provider."""
        return cls(provider.value)


class DisplayName(RootValueObject[str]):
    """Human-readable user name shown to downstream consumers."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name length."""
        if len(v) > 255:
            raise ValueError("Display name must be at most 255 characters")
        return v


class AccountFilter(ValueObject):
    """Filter for the batched linked-account lookup.

    Matches accounts whose provider is in ``providers`` and whose
    provider account ID is in ``provider_account_ids``. The two sets are
    applied independently; callers re-pair results themselves.
    """

    providers: frozenset[AuthProvider]
    provider_account_ids: frozenset[str]

    @property
    def is_empty(self) -> bool:
        """True when the filter cannot match anything."""
        return not self.providers or not self.provider_account_ids
