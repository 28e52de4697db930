"""Get canonical identity use case."""

from pydantic import BaseModel

from canon.domain.service import IdentityService
from canon.domain.value import AuthMethod, UserId


class GetCanonicalIdentityRequest(BaseModel):
    """Get canonical identity request."""

    user_id: str


class GetCanonicalIdentityResponse(BaseModel):
    """Canonical identity as presented to downstream consumers."""

    id: str
    display_name: str
    auth_method: AuthMethod


class GetCanonicalIdentityUseCase:
    """Use case for getting the canonical identity of a local user."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get canonical identity use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(
        self, request: GetCanonicalIdentityRequest
    ) -> GetCanonicalIdentityResponse:
        """Execute get canonical identity flow.

        Args:
            request: Request with internal user ID

        Returns:
            Canonical identity of the user

        Raises:
            NotFoundError: If user not found
        """
        identity = await self.identity_service.get_canonical_identity(
            UserId(request.user_id)
        )

        return GetCanonicalIdentityResponse(
            id=identity.id,
            display_name=identity.display_name.root,
            auth_method=identity.auth_method,
        )
