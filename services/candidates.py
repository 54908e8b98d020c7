"""
Подбор кандидатов для ленты свайпов.

Фильтр и ранжирование работают в памяти над одной сырой выборкой из БД:
сначала берём в CANDIDATE_OVERSAMPLE раз больше строк, чем нужно, затем
отсекаем по возрасту, расстоянию и интересам и сортируем по числу общих
интересов. Предпочтения проверяются только в одну сторону: от зрителя к
кандидату.
"""
import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from core.config import settings
from core.exceptions import MatchingError, NotAuthenticated, NotFound, PersistenceError
from models.profile import Profile
from schemas.candidate import MatchCandidate
from services.geo import haversine_km
from services.stores import ProfileStore, SwipeStore

logger = logging.getLogger(__name__)


@dataclass
class MatchFilters:
    seeking_gender: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    max_distance: Optional[float] = None
    interests: List[str] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    viewer_gender: Optional[str] = None
    # Считается, но в фильтрации пока не участвует
    viewer_age: Optional[int] = None


def calculate_age(birthdate: Optional[date], today: Optional[date] = None) -> int:
    """Возраст как разница календарных лет, не меньше нуля."""
    if birthdate is None:
        return 0
    today = today or date.today()
    return max(today.year - birthdate.year, 0)


def build_match_filters(viewer: Profile, today: Optional[date] = None) -> MatchFilters:
    return MatchFilters(
        seeking_gender=viewer.seeking_gender,
        age_min=viewer.age_min,
        age_max=viewer.age_max,
        max_distance=viewer.distance_km,
        interests=list(viewer.interests or []),
        latitude=viewer.latitude,
        longitude=viewer.longitude,
        viewer_gender=viewer.gender,
        viewer_age=calculate_age(viewer.birthdate, today),
    )


def shared_interest_count(viewer_interests, candidate_interests) -> int:
    """Число различных общих тегов; повторы в списке не считаются."""
    return len(set(viewer_interests or []) & set(candidate_interests or []))


def _has_coordinates(latitude: Optional[float], longitude: Optional[float]) -> bool:
    return latitude is not None and longitude is not None


def filter_candidate(
    candidate: Profile,
    filters: MatchFilters,
    today: Optional[date] = None,
) -> Optional[MatchCandidate]:
    """
    Возвращает MatchCandidate или None, если кандидат не проходит фильтры
    зрителя. Проверки идут по порядку: возраст, расстояние, интересы.
    """
    age = calculate_age(candidate.birthdate, today)
    if filters.age_min is not None and age < filters.age_min:
        return None
    if filters.age_max is not None and age > filters.age_max:
        return None

    # Без координат у одной из сторон расстояние неизвестно и не отсекает
    distance_km = None
    if _has_coordinates(filters.latitude, filters.longitude) and _has_coordinates(
        candidate.latitude, candidate.longitude
    ):
        distance_km = haversine_km(
            filters.latitude, filters.longitude, candidate.latitude, candidate.longitude
        )
        if filters.max_distance is not None and distance_km > filters.max_distance:
            return None

    candidate_interests = list(candidate.interests or [])
    shared = shared_interest_count(filters.interests, candidate_interests)
    if filters.interests and candidate_interests and not shared:
        return None

    return MatchCandidate(
        user_id=candidate.id,
        name=candidate.display_name or "User",
        age=age,
        avatar_url=candidate.avatar_url,
        bio=candidate.bio or None,
        interests=candidate_interests,
        address=candidate.address or None,
        distance_km=distance_km,
        gender=candidate.gender,
        shared_interests=shared,
    )


def count_common_interests(candidate: MatchCandidate, filters: MatchFilters) -> int:
    return shared_interest_count(filters.interests, candidate.interests)


def rank_candidates(
    candidates: Sequence[MatchCandidate],
    filters: MatchFilters,
    rng: Optional[random.Random] = None,
) -> List[MatchCandidate]:
    """
    Больше общих интересов выше. Внутри группы с одинаковым числом общих
    интересов порядок случайный, повторный вызов может дать другой порядок.
    """
    ranked = list(candidates)
    (rng or random).shuffle(ranked)
    # sort стабилен, поэтому перемешанный порядок внутри групп сохраняется
    ranked.sort(key=lambda c: count_common_interests(c, filters), reverse=True)
    return ranked


class CandidatePool:
    def __init__(
        self,
        profiles: ProfileStore,
        swipes: SwipeStore,
        oversample: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.profiles = profiles
        self.swipes = swipes
        self.oversample = oversample or settings.CANDIDATE_OVERSAMPLE
        self.rng = rng

    async def get_match_candidates(
        self,
        viewer_id: Optional[int],
        limit: int = settings.CANDIDATE_BATCH_SIZE,
    ) -> List[MatchCandidate]:
        if viewer_id is None:
            raise NotAuthenticated()

        try:
            viewer = await self.profiles.get(viewer_id)
            if viewer is None:
                raise NotFound(f"Profile {viewer_id} not found")

            filters = build_match_filters(viewer)

            # Исключаем только лайкнутых: пропущенные (pass) могут вернуться в ленту
            liked_ids = await self.swipes.target_ids(viewer_id, "like")

            raw_candidates = await self.profiles.query_candidates(
                viewer_id=viewer_id,
                seeking_gender=filters.seeking_gender,
                exclude_ids=liked_ids,
                limit=limit * self.oversample,
            )
        except (NotAuthenticated, NotFound):
            raise
        except MatchingError as exc:
            raise PersistenceError(
                f"Failed to get match candidates: {exc.message}", cause=exc.cause or exc
            )

        if not raw_candidates:
            return []

        accepted: List[MatchCandidate] = []
        for profile in raw_candidates:
            candidate = filter_candidate(profile, filters)
            if candidate is None:
                continue
            accepted.append(candidate)
            if len(accepted) >= limit:
                break

        logger.debug(
            "Viewer %s: %d raw candidates, %d accepted (limit %d)",
            viewer_id, len(raw_candidates), len(accepted), limit,
        )
        return rank_candidates(accepted, filters, self.rng)[:limit]
