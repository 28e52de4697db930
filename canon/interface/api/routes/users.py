"""User identity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from canon.application.usecase.identity import GetCanonicalIdentityUseCase
from canon.application.usecase.identity.get_canonical_identity import (
    GetCanonicalIdentityRequest,
    GetCanonicalIdentityResponse,
)
from canon.domain.error import NotFoundError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/identity", response_model=GetCanonicalIdentityResponse)
async def get_canonical_identity(
    user_id: str,
    get_canonical_identity_use_case: FromDishka[GetCanonicalIdentityUseCase],
) -> GetCanonicalIdentityResponse:
    """Get the canonical identity of a local user.

    Example:
        GET /users/clx0k2abc0000/identity

        Response:
        {
            "id": "81234567890",
            "display_name": "Alice",
            "auth_method": "discord"
        }
    """
    try:
        return await get_canonical_identity_use_case.execute(
            GetCanonicalIdentityRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
