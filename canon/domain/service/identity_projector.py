"""Identity projection domain service.

Projects a local user onto the canonical identity downstream consumers
see. The account used at signup is authoritative, so the first linked
account wins and later links never change a user's canonical identity.
"""

import logfire

from canon.domain.error import NotFoundError
from canon.domain.model import CanonicalIdentity, User
from canon.domain.repository import UserRepository
from canon.domain.value import AuthMethod, UserId


def project(user: User) -> CanonicalIdentity:
    """Project a user onto its canonical identity.

    Args:
        user: User with linked accounts in creation order

    Returns:
        The local identity when no accounts are linked, otherwise the
        identity of the first linked account
    """
    account = user.primary_account
    if account is None:
        return CanonicalIdentity(
            id=user.id,
            display_name=user.display_name,
            auth_method=AuthMethod.LOCAL,
        )

    return CanonicalIdentity(
        id=account.provider_account_id,
        display_name=user.display_name,
        auth_method=AuthMethod.from_provider(account.provider),
    )


class IdentityService:
    """Domain service for canonical identity lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_canonical_identity(self, user_id: UserId) -> CanonicalIdentity:
        """Get the canonical identity for a user.

        Args:
            user_id: Internal user ID

        Returns:
            Canonical identity descriptor

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "identity_service.get_canonical_identity", user_id=str(user_id)
        ):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            identity = project(user)
            logfire.info(
                "Canonical identity projected",
                user_id=str(user_id),
                auth_method=identity.auth_method.value,
                linked_accounts=len(user.linked_accounts),
            )
            return identity
