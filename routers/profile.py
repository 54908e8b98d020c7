# routers/profile.py
from fastapi import APIRouter, Depends

from core.security import get_current_user_id
from routers.deps import get_profile_store
from schemas.profile import (
    ProfileBasicInfo,
    ProfileComplete,
    ProfileInterests,
    ProfileLocation,
    ProfilePreferences,
    ProfileRead,
    PublicProfileRead,
)
from services.stores import ProfileStore
from utils.profile_helpers import to_profile_read, to_public_profile_read

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRead, summary="Получить свой профиль")
async def read_my_profile(
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    return to_profile_read(await profiles.get_or_404(current_user_id))


@router.put("/me/basic-info", response_model=ProfileRead, summary="Шаг 1: имя, дата рождения, пол, о себе")
async def update_basic_info(
    payload: ProfileBasicInfo,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    profile = await profiles.update(current_user_id, payload.model_dump())
    return to_profile_read(profile)


@router.put("/me/interests", response_model=ProfileRead, summary="Шаг 2: интересы")
async def update_interests(
    payload: ProfileInterests,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    profile = await profiles.update(current_user_id, {"interests": payload.interests})
    return to_profile_read(profile)


@router.put("/me/location", response_model=ProfileRead, summary="Шаг 3: локация")
async def update_location(
    payload: ProfileLocation,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    profile = await profiles.update(current_user_id, payload.model_dump())
    return to_profile_read(profile)


@router.put("/me/preferences", response_model=ProfileRead, summary="Шаг 4: кого и где искать")
async def update_preferences(
    payload: ProfilePreferences,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    profile = await profiles.update(current_user_id, payload.model_dump())
    return to_profile_read(profile)


@router.put("/me/complete", response_model=ProfileRead, summary="Шаг 5: аватар и завершение настройки")
async def complete_profile(
    payload: ProfileComplete,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> ProfileRead:
    profile = await profiles.update(
        current_user_id, {"avatar_url": payload.avatar_url, "is_complete": True}
    )
    return to_profile_read(profile)


@router.get("/{user_id}", response_model=PublicProfileRead, summary="Публичный профиль другого пользователя")
async def read_user_profile(
    user_id: int,
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> PublicProfileRead:
    return to_public_profile_read(await profiles.get_or_404(user_id))
