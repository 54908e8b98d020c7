# routers/match.py
from typing import List

from fastapi import APIRouter, Depends

from core.security import get_current_user_id
from routers.deps import get_match_store, get_profile_store
from schemas.match import MatchLookup, MatchRead
from services.stores import MatchStore, ProfileStore
from utils.profile_helpers import to_match_reads

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "",
    response_model=List[MatchRead],
    summary="Список матчей текущего пользователя, новые первыми"
)
async def get_my_matches(
    matches: MatchStore = Depends(get_match_store),
    profiles: ProfileStore = Depends(get_profile_store),
    current_user_id: int = Depends(get_current_user_id),
) -> List[MatchRead]:
    rows = await matches.list_for_user(current_user_id)
    return await to_match_reads(rows, current_user_id, profiles)


@router.get(
    "/with/{user_id}",
    response_model=MatchLookup,
    summary="ID матча с указанным пользователем (null, если матча нет)"
)
async def find_match(
    user_id: int,
    matches: MatchStore = Depends(get_match_store),
    current_user_id: int = Depends(get_current_user_id),
) -> MatchLookup:
    if user_id == current_user_id:
        return MatchLookup(match_id=None)
    return MatchLookup(match_id=await matches.find_id(current_user_id, user_id))
