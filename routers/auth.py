# routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from core.config import settings
from core.security import create_access_token
from routers.deps import get_profile_store
from schemas.auth import TokenRequest, TokenResponse
from services.stores import ProfileStore

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/token",
    response_model=TokenResponse,
    summary="JWT для существующего профиля (только DEBUG, основной вход во внешнем сервисе)"
)
async def issue_token(
    payload: TokenRequest,
    profiles: ProfileStore = Depends(get_profile_store),
) -> TokenResponse:
    if not settings.DEBUG:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    profile = await profiles.get_or_404(payload.user_id)
    return TokenResponse(
        access_token=create_access_token(profile.id),
        token_type="bearer",
        has_profile=profile.is_complete,
    )
