"""Resolve identities use case."""

from typing import Literal

from pydantic import BaseModel

from canon.domain.model import IdentityEntry, Resolved, UnresolvedReason
from canon.domain.service import ReverseResolver
from canon.domain.value import AuthMethod


class IdentityEntryInfo(BaseModel):
    """Canonical identity to resolve."""

    external_id: str | None = None
    auth_method: AuthMethod | None = None


class ResolveIdentitiesRequest(BaseModel):
    """Resolve identities request."""

    entries: list[IdentityEntryInfo]


class ResolutionInfo(BaseModel):
    """Outcome for one batch position."""

    index: int
    status: Literal["resolved", "unresolved"]
    user_id: str | None = None  # Set when resolved
    placeholder: str | None = None  # Set when unresolved


class DiagnosticInfo(BaseModel):
    """Why a batch position could not be resolved."""

    index: int
    reason: UnresolvedReason
    auth_method: AuthMethod | None
    external_id: str | None


class ResolveIdentitiesResponse(BaseModel):
    """Resolve identities response.

    ``results`` is positionally aligned with the request entries. Positions
    listed in ``diagnostics`` hold the external ID as a placeholder, not an
    internal user ID, and should be re-validated.
    """

    results: list[str | None]
    resolutions: list[ResolutionInfo]
    diagnostics: list[DiagnosticInfo]


class ResolveIdentitiesUseCase:
    """Use case for batch-resolving canonical identities to internal user IDs."""

    def __init__(self, reverse_resolver: ReverseResolver) -> None:
        """Initialize resolve identities use case.

        Args:
            reverse_resolver: Reverse resolution domain service
        """
        self.reverse_resolver = reverse_resolver

    async def execute(
        self, request: ResolveIdentitiesRequest
    ) -> ResolveIdentitiesResponse:
        """Execute batch resolution.

        Args:
            request: Request with identity entries in caller order

        Returns:
            Aligned results with per-position status and diagnostics
        """
        batch = await self.reverse_resolver.resolve_batch(
            [
                IdentityEntry(external_id=e.external_id, auth_method=e.auth_method)
                for e in request.entries
            ]
        )

        return ResolveIdentitiesResponse(
            results=batch.results,
            resolutions=[
                ResolutionInfo(index=index, status="resolved", user_id=r.user_id)
                if isinstance(r, Resolved)
                else ResolutionInfo(
                    index=index, status="unresolved", placeholder=r.placeholder
                )
                for index, r in enumerate(batch.resolutions)
            ],
            diagnostics=[
                DiagnosticInfo(
                    index=d.index,
                    reason=d.reason,
                    auth_method=d.auth_method,
                    external_id=d.external_id,
                )
                for d in batch.diagnostics
            ],
        )
