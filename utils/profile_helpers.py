"""Утилиты для преобразования моделей профилей и матчей в схемы Pydantic."""
from typing import List

from models.match import Match
from models.profile import Profile
from schemas.match import MatchRead
from schemas.profile import ProfileRead, PublicProfileRead
from services.stores import ProfileStore


def to_profile_read(profile: Profile) -> ProfileRead:
    """Полный профиль, который видит только его владелец."""
    return ProfileRead.model_validate(profile)


def to_public_profile_read(profile: Profile) -> PublicProfileRead:
    return PublicProfileRead.model_validate(profile)


async def to_match_reads(
    matches: List[Match], user_id: int, profiles: ProfileStore
) -> List[MatchRead]:
    """Матчи пользователя с профилем второго участника; матчи без профиля пропускаются."""
    output: List[MatchRead] = []
    for match in matches:
        other = await profiles.get(match.other_user_id(user_id))
        if other is None:
            continue
        output.append(
            MatchRead(
                match_id=match.id,
                created_at=match.created_at,
                last_message_at=match.last_message_at,
                user=to_public_profile_read(other),
            )
        )
    return output
