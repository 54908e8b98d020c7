import random
from datetime import datetime, timedelta, timezone

import pytest

from core.exceptions import NotAuthenticated, NotFound, PersistenceError
from services.candidates import CandidatePool
from services.stores import ProfileStore, SwipeStore


@pytest.fixture
def pool(db):
    return CandidatePool(ProfileStore(db), SwipeStore(db), rng=random.Random(7))


async def _viewer(make_profile, **overrides):
    values = {
        "display_name": "Viewer",
        "gender": "male",
        "seeking_gender": "female",
        "age_min": 25,
        "age_max": 35,
        "interests": ["music", "travel"],
    }
    values.update(overrides)
    return await make_profile(**values)


async def test_empty_pool_returns_empty_list(pool, make_profile):
    viewer = await _viewer(make_profile)
    assert await pool.get_match_candidates(viewer.id, 10) == []


async def test_missing_session_raises_not_authenticated(pool):
    with pytest.raises(NotAuthenticated):
        await pool.get_match_candidates(None, 10)


async def test_missing_viewer_profile_raises_not_found(pool):
    with pytest.raises(NotFound):
        await pool.get_match_candidates(424242, 10)


async def test_returns_filtered_and_ranked_candidates(pool, make_profile):
    viewer = await _viewer(make_profile)
    both = await make_profile(display_name="Both", age=30, interests=["music", "travel"])
    one = await make_profile(display_name="One", age=28, interests=["travel", "art"])
    none_listed = await make_profile(display_name="NoInterests", age=31, interests=[])
    await make_profile(display_name="TooOld", age=40, interests=["music"])
    await make_profile(display_name="Disjoint", age=30, interests=["yoga"])

    result = await pool.get_match_candidates(viewer.id, 10)

    assert [c.user_id for c in result] == [both.id, one.id, none_listed.id]
    assert [c.shared_interests for c in result] == [2, 1, 0]


async def test_query_excludes_self_other_genders_and_incomplete(pool, make_profile):
    viewer = await _viewer(make_profile, interests=[])
    await make_profile(gender="male", age=30)
    await make_profile(gender="other", age=30)
    await make_profile(gender="female", age=30, is_complete=False)
    expected = await make_profile(gender="female", age=30)

    result = await pool.get_match_candidates(viewer.id, 10)

    assert [c.user_id for c in result] == [expected.id]


async def test_seeking_both_does_not_constrain_gender(pool, make_profile):
    viewer = await _viewer(make_profile, seeking_gender="both", interests=[])
    await make_profile(gender="male", age=30)
    await make_profile(gender="female", age=30)
    await make_profile(gender="other", age=30)

    result = await pool.get_match_candidates(viewer.id, 10)

    assert len(result) == 3
    assert viewer.id not in {c.user_id for c in result}


async def test_liked_profiles_are_excluded_but_passed_ones_return(pool, make_profile, db):
    viewer = await _viewer(make_profile, interests=[])
    liked = await make_profile(age=30)
    passed = await make_profile(age=30)
    swipes = SwipeStore(db)
    await swipes.insert(viewer.id, liked.id, "like")
    await swipes.insert(viewer.id, passed.id, "pass")

    result = await pool.get_match_candidates(viewer.id, 10)

    assert [c.user_id for c in result] == [passed.id]


async def test_distance_filter_uses_viewer_radius(pool, make_profile):
    viewer = await _viewer(make_profile, interests=[], latitude=10.0, longitude=106.0, distance_km=5)
    near = await make_profile(age=30, latitude=10.01, longitude=106.01)
    await make_profile(age=30, latitude=10.5, longitude=106.5)
    unknown = await make_profile(age=30)

    result = await pool.get_match_candidates(viewer.id, 10)

    assert {c.user_id for c in result} == {near.id, unknown.id}
    by_id = {c.user_id: c for c in result}
    assert by_id[near.id].distance_km <= 5
    assert by_id[unknown.id].distance_km is None


async def test_limit_bounds_result_and_raw_query_is_oversampled(db, make_profile):
    class SpyProfileStore(ProfileStore):
        async def query_candidates(self, **kwargs):
            self.seen_limit = kwargs["limit"]
            return await super().query_candidates(**kwargs)

    profiles = SpyProfileStore(db)
    pool = CandidatePool(profiles, SwipeStore(db), oversample=3)
    viewer = await _viewer(make_profile, interests=[])
    for _ in range(5):
        await make_profile(age=30)

    result = await pool.get_match_candidates(viewer.id, 2)

    assert len(result) == 2
    assert profiles.seen_limit == 6


async def test_filtering_stops_once_limit_is_reached(db, make_profile):
    now = datetime.now(timezone.utc)
    viewer = await _viewer(make_profile, interests=["music"])
    # Сырые строки идут от новых к старым
    first = await make_profile(age=30, interests=[], created_at=now)
    await make_profile(age=30, interests=["music"], created_at=now - timedelta(hours=1))

    pool = CandidatePool(ProfileStore(db), SwipeStore(db))
    result = await pool.get_match_candidates(viewer.id, 1)

    # Кандидат с общим интересом не попал: до него отбор не дошёл
    assert [c.user_id for c in result] == [first.id]


async def test_storage_failure_is_wrapped(db, make_profile):
    class BrokenSwipeStore(SwipeStore):
        async def target_ids(self, actor_id, action):
            raise PersistenceError("connection reset")

    viewer = await _viewer(make_profile)
    pool = CandidatePool(ProfileStore(db), BrokenSwipeStore(db))

    with pytest.raises(PersistenceError) as exc:
        await pool.get_match_candidates(viewer.id, 10)

    assert exc.value.message == "Failed to get match candidates: connection reset"
