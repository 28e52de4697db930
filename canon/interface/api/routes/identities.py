"""Reverse identity resolution routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from canon.application.usecase.identity import (
    ResolveIdentitiesUseCase,
    ResolveIdentityUseCase,
)
from canon.application.usecase.identity.resolve_identities import (
    ResolveIdentitiesRequest,
    ResolveIdentitiesResponse,
)
from canon.application.usecase.identity.resolve_identity import (
    ResolveIdentityRequest,
    ResolveIdentityResponse,
)
from canon.domain.error import NotFoundError
from canon.domain.value import AuthProvider

router = APIRouter(prefix="/identities", tags=["identities"], route_class=DishkaRoute)


@router.post("/resolve", response_model=ResolveIdentitiesResponse)
async def resolve_identities(
    request: ResolveIdentitiesRequest,
    resolve_identities_use_case: FromDishka[ResolveIdentitiesUseCase],
) -> ResolveIdentitiesResponse:
    """Resolve canonical identities to internal user IDs.

    Always returns one result per entry. Entries that could not be mapped
    keep their external ID as a placeholder and are listed in
    ``diagnostics``.

    Example:
        POST /identities/resolve
        {"entries": [
            {"external_id": "u1", "auth_method": "local"},
            {"external_id": "acc42", "auth_method": "discord"}
        ]}

        Response:
        {"results": ["u1", "u99"], "resolutions": [...], "diagnostics": []}
    """
    return await resolve_identities_use_case.execute(request)


@router.get("/{provider}/{external_id}", response_model=ResolveIdentityResponse)
async def resolve_identity(
    provider: AuthProvider,
    external_id: str,
    resolve_identity_use_case: FromDishka[ResolveIdentityUseCase],
) -> ResolveIdentityResponse:
    """Resolve one provider account to its owning user's internal ID."""
    try:
        return await resolve_identity_use_case.execute(
            ResolveIdentityRequest(provider=provider, external_id=external_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No account linked for {provider.value} account '{external_id}'",
        )
