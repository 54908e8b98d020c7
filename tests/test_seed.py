import random

from sqlalchemy import func, select

from models.match import Match
from models.profile import Profile
from services.stores import SwipeStore
from utils.seed_db import seed


async def test_seed_builds_consistent_matches(session_factory, db):
    matches_created = await seed(session_factory, num_profiles=15, num_swipes=80, rng=random.Random(3))

    profiles = (await db.execute(select(func.count()).select_from(Profile))).scalar_one()
    matches = (await db.execute(select(Match))).scalars().all()
    swipes = SwipeStore(db)

    assert profiles == 15
    assert len(matches) == matches_created
    pairs = [(m.user1_id, m.user2_id) for m in matches]
    assert len(pairs) == len(set(pairs))
    for user1_id, user2_id in pairs:
        assert user1_id < user2_id
        assert await swipes.exists(user1_id, user2_id, "like")
        assert await swipes.exists(user2_id, user1_id, "like")
