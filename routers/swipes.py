from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from core.constants import SwipeAction
from core.security import get_current_user_id
from routers.deps import get_profile_store, get_swipe_recorder, get_swipe_store
from schemas.swipe import SwipeCreate, SwipeRead, SwipeResult
from services.stores import ProfileStore, SwipeStore
from services.swipes import SwipeRecorder

router = APIRouter(prefix="/swipes", tags=["swipes"])


@router.post(
    "",
    response_model=SwipeResult,
    status_code=status.HTTP_200_OK,
    summary="Свайпнуть профиль и узнать, образовался ли матч",
)
async def create_swipe(
    payload: SwipeCreate,
    profiles: ProfileStore = Depends(get_profile_store),
    recorder: SwipeRecorder = Depends(get_swipe_recorder),
    current_user_id: int = Depends(get_current_user_id),
) -> SwipeResult:
    # Профиль цели должен существовать
    await profiles.get_or_404(payload.target_id)
    return await recorder.create_swipe(current_user_id, payload.target_id, payload.action)


@router.get(
    "",
    response_model=List[SwipeRead],
    summary="История свайпов текущего пользователя",
)
async def list_swipes(
    action: Optional[SwipeAction] = Query(None),
    swipes: SwipeStore = Depends(get_swipe_store),
    current_user_id: int = Depends(get_current_user_id),
) -> List[SwipeRead]:
    rows = await swipes.list_for_user(current_user_id, action)
    return [SwipeRead.model_validate(row) for row in rows]
