# utils/seed_db.py
import asyncio
import logging
import random
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.constants import INTEREST_MAP, SEEKING_GENDERS
from models.profile import Profile
from services.stores import MatchStore, SwipeStore
from services.swipes import SwipeRecorder

log = logging.getLogger(__name__)

# Константы для семплов
NUM_PROFILES = 40
NUM_SWIPES = 200
LIKE_RATIO = 0.7

# Центр, вокруг которого раскидываем координаты (Хошимин)
CENTER_LAT, CENTER_LON = 10.776, 106.700
SPREAD_DEG = 0.3

FIRST_NAMES = [
    "Alex", "Sam", "Jordan", "Taylor", "Morgan", "Casey", "Jamie", "Reese", "Drew", "Quinn",
    "Riley", "Avery", "Cameron", "Logan", "Hayden", "Peyton", "Skyler", "Dakota", "Emerson", "Kai"
]
BIO_TEMPLATES = [
    "Love hiking and outdoor adventures.",
    "Coffee fanatic and book lover.",
    "Tech enthusiast and amateur chef.",
    "Travel addict exploring the world.",
    "Music is life. Always at concerts.",
]


def build_profile(rng: random.Random) -> Profile:
    gender = rng.choice(["male", "female"])
    age_min = rng.randint(18, 30)
    return Profile(
        display_name=rng.choice(FIRST_NAMES),
        birthdate=date.today() - timedelta(days=rng.randint(18 * 365, 45 * 365)),
        gender=gender,
        bio=rng.choice(BIO_TEMPLATES),
        latitude=round(CENTER_LAT + rng.uniform(-SPREAD_DEG, SPREAD_DEG), 6),
        longitude=round(CENTER_LON + rng.uniform(-SPREAD_DEG, SPREAD_DEG), 6),
        interests=rng.sample(sorted(INTEREST_MAP), rng.randint(0, 5)),
        seeking_gender=rng.choice(SEEKING_GENDERS),
        age_min=age_min,
        age_max=rng.randint(age_min, 50),
        distance_km=rng.choice([5, 10, 25, 50, 100]),
        avatar_url=f"https://example.com/avatars/{rng.randint(1, 20)}.jpg",
        is_complete=rng.random() < 0.9,
    )


async def seed(
    session_factory: Optional[async_sessionmaker] = None,
    num_profiles: int = NUM_PROFILES,
    num_swipes: int = NUM_SWIPES,
    rng: Optional[random.Random] = None,
) -> int:
    """Наполняет БД профилями и свайпами; матчи образуются через SwipeRecorder. Возвращает число матчей."""
    if session_factory is None:
        from core.database import AsyncSessionLocal
        session_factory = AsyncSessionLocal
    rng = rng or random.Random()

    async with session_factory() as session:
        # 1. Профили
        profiles = [build_profile(rng) for _ in range(num_profiles)]
        session.add_all(profiles)
        await session.commit()
        all_ids = [p.id for p in profiles]

        # 2. Свайпы: взаимные лайки сами превращаются в матчи
        recorder = SwipeRecorder(SwipeStore(session), MatchStore(session))
        match_ids = set()
        for _ in range(num_swipes):
            actor, target = rng.sample(all_ids, 2)
            action = "like" if rng.random() < LIKE_RATIO else "pass"
            result = await recorder.create_swipe(actor, target, action)
            if result.is_match:
                match_ids.add(result.match_id)

    log.info("DB seeded: %d profiles, %d swipes, %d matches", num_profiles, num_swipes, len(match_ids))
    return len(match_ids)


async def main():
    from utils.reset_db import create_tables
    await create_tables()
    await seed()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
