"""Resolve a single identity use case."""

from pydantic import BaseModel

from canon.domain.service import ReverseResolver
from canon.domain.value import AuthProvider


class ResolveIdentityRequest(BaseModel):
    """Resolve identity request."""

    provider: AuthProvider
    external_id: str


class ResolveIdentityResponse(BaseModel):
    """Resolve identity response."""

    user_id: str


class ResolveIdentityUseCase:
    """Use case for resolving one provider account to its local user."""

    def __init__(self, reverse_resolver: ReverseResolver) -> None:
        """Initialize resolve identity use case.

        Args:
            reverse_resolver: Reverse resolution domain service
        """
        self.reverse_resolver = reverse_resolver

    async def execute(self, request: ResolveIdentityRequest) -> ResolveIdentityResponse:
        """Execute single resolution.

        Raises:
            NotFoundError: If no account is linked for this provider ID
        """
        user_id = await self.reverse_resolver.resolve_one(
            request.external_id, request.provider
        )
        return ResolveIdentityResponse(user_id=user_id)
