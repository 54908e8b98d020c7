from typing import List

from fastapi import APIRouter, Depends, Query

from core.config import settings
from core.security import get_current_user_id
from routers.deps import get_candidate_pool
from schemas.candidate import MatchCandidate
from services.candidates import CandidatePool

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get(
    "/candidates",
    response_model=List[MatchCandidate],
    summary="Получить ленту кандидатов"
)
async def get_candidates(
    limit: int = Query(settings.CANDIDATE_BATCH_SIZE, ge=1, le=settings.MAX_CANDIDATE_LIMIT),
    pool: CandidatePool = Depends(get_candidate_pool),
    current_user_id: int = Depends(get_current_user_id),
) -> List[MatchCandidate]:
    return await pool.get_match_candidates(current_user_id, limit)
