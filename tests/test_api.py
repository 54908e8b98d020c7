import httpx
import pytest

from core.config import settings
from core.database import get_db
from core.security import create_access_token
from main import app


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def _auth(user_id: int) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_endpoints_require_token(client):
    for path in ("/feed/candidates", "/matches", "/swipes", "/profiles/me"):
        response = await client.get(path)
        assert response.status_code == 401, path


async def test_swipe_flow_creates_match(client, make_profile):
    alice = await make_profile(display_name="Alice", gender="female", seeking_gender="male")
    bob = await make_profile(display_name="Bob", gender="male", seeking_gender="female")

    feed = await client.get("/feed/candidates", headers=_auth(alice.id))
    assert feed.status_code == 200
    assert [c["user_id"] for c in feed.json()] == [bob.id]

    first = await client.post(
        "/swipes", json={"target_id": bob.id, "action": "like"}, headers=_auth(alice.id)
    )
    assert first.status_code == 200
    assert first.json() == {"success": True, "is_match": False, "match_id": None, "error": None}

    # Лайкнутый профиль больше не показывается
    feed = await client.get("/feed/candidates", headers=_auth(alice.id))
    assert feed.json() == []

    second = await client.post(
        "/swipes", json={"target_id": alice.id, "action": "like"}, headers=_auth(bob.id)
    )
    body = second.json()
    assert body["success"] and body["is_match"]
    match_id = body["match_id"]

    lookup = await client.get(f"/matches/with/{bob.id}", headers=_auth(alice.id))
    assert lookup.json() == {"match_id": match_id}

    matches = await client.get("/matches", headers=_auth(bob.id))
    assert matches.status_code == 200
    [match] = matches.json()
    assert match["match_id"] == match_id
    assert match["user"]["id"] == alice.id
    assert match["last_message_at"] is None


async def test_swipe_on_unknown_profile_is_404(client, make_profile):
    alice = await make_profile()
    response = await client.post(
        "/swipes", json={"target_id": 999999901, "action": "like"}, headers=_auth(alice.id)
    )
    assert response.status_code == 404


async def test_self_swipe_is_400(client, make_profile):
    alice = await make_profile()
    response = await client.post(
        "/swipes", json={"target_id": alice.id, "action": "pass"}, headers=_auth(alice.id)
    )
    assert response.status_code == 400


async def test_invalid_action_is_422(client, make_profile):
    alice = await make_profile()
    bob = await make_profile()
    response = await client.post(
        "/swipes", json={"target_id": bob.id, "action": "superlike"}, headers=_auth(alice.id)
    )
    assert response.status_code == 422


async def test_swipe_history(client, make_profile):
    alice = await make_profile()
    bob = await make_profile()
    carol = await make_profile()
    headers = _auth(alice.id)
    await client.post("/swipes", json={"target_id": bob.id, "action": "like"}, headers=headers)
    await client.post("/swipes", json={"target_id": carol.id, "action": "pass"}, headers=headers)

    everything = await client.get("/swipes", headers=headers)
    passes = await client.get("/swipes", params={"action": "pass"}, headers=headers)

    assert len(everything.json()) == 2
    assert [s["target_id"] for s in passes.json()] == [carol.id]


async def test_feed_for_missing_profile_is_404(client):
    response = await client.get("/feed/candidates", headers=_auth(999999901))
    assert response.status_code == 404


async def test_feed_limit_is_validated(client, make_profile):
    alice = await make_profile()
    too_big = settings.MAX_CANDIDATE_LIMIT + 1
    response = await client.get(f"/feed/candidates?limit={too_big}", headers=_auth(alice.id))
    assert response.status_code == 422


async def test_profile_setup_steps(client, make_profile):
    user = await make_profile(display_name=None, is_complete=False, interests=[])
    headers = _auth(user.id)

    response = await client.put(
        "/profiles/me/basic-info",
        json={"display_name": "Linh", "birthdate": "1996-04-02", "gender": "female", "bio": "hi"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["display_name"] == "Linh"

    response = await client.put(
        "/profiles/me/interests", json={"interests": ["music", "travel", "music"]}, headers=headers
    )
    assert response.json()["interests"] == ["music", "travel"]

    response = await client.put(
        "/profiles/me/interests", json={"interests": ["skydiving"]}, headers=headers
    )
    assert response.status_code == 422

    response = await client.put(
        "/profiles/me/location",
        json={"address": "District 1", "latitude": 10.776, "longitude": 106.7},
        headers=headers,
    )
    assert response.json()["latitude"] == 10.776

    response = await client.put(
        "/profiles/me/preferences",
        json={"seeking_gender": "both", "age_min": 40, "age_max": 30, "distance_km": 10},
        headers=headers,
    )
    assert response.status_code == 422

    response = await client.put(
        "/profiles/me/preferences",
        json={"seeking_gender": "both", "age_min": 25, "age_max": 35, "distance_km": 10},
        headers=headers,
    )
    assert response.json()["distance_km"] == 10
    assert response.json()["is_complete"] is False

    response = await client.put(
        "/profiles/me/complete", json={"avatar_url": "https://cdn.example.com/a.jpg"}, headers=headers
    )
    assert response.json()["is_complete"] is True

    me = await client.get("/profiles/me", headers=headers)
    assert me.json()["seeking_gender"] == "both"

    public = await client.get(f"/profiles/{user.id}", headers=_auth(user.id))
    assert public.status_code == 200
    assert "latitude" not in public.json()


async def test_debug_token_endpoint(client, make_profile):
    alice = await make_profile()
    original = settings.DEBUG
    try:
        settings.DEBUG = False
        hidden = await client.post("/auth/token", json={"user_id": alice.id})
        assert hidden.status_code == 404

        settings.DEBUG = True
        issued = await client.post("/auth/token", json={"user_id": alice.id})
        assert issued.status_code == 200
        token = issued.json()["access_token"]
        me = await client.get("/profiles/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["id"] == alice.id
    finally:
        settings.DEBUG = original
