# routers/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from services.candidates import CandidatePool
from services.stores import MatchStore, ProfileStore, SwipeStore
from services.swipes import SwipeRecorder


def get_profile_store(db: AsyncSession = Depends(get_db)) -> ProfileStore:
    return ProfileStore(db)


def get_swipe_store(db: AsyncSession = Depends(get_db)) -> SwipeStore:
    return SwipeStore(db)


def get_match_store(db: AsyncSession = Depends(get_db)) -> MatchStore:
    return MatchStore(db)


def get_candidate_pool(
    profiles: ProfileStore = Depends(get_profile_store),
    swipes: SwipeStore = Depends(get_swipe_store),
) -> CandidatePool:
    return CandidatePool(profiles, swipes)


def get_swipe_recorder(
    swipes: SwipeStore = Depends(get_swipe_store),
    matches: MatchStore = Depends(get_match_store),
) -> SwipeRecorder:
    return SwipeRecorder(swipes, matches)
