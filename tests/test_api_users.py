import uuid
from unittest.mock import AsyncMock

import pytest

import skillroster.api.routes.users as users_routes


@pytest.fixture
async def alice(make_user):
    user = await make_user("alice", "pw1")
    return user.id


@pytest.fixture
async def bob(make_user):
    user = await make_user("bob", "pw2")
    return user.id


@pytest.fixture
async def baking(db, skill_service):
    skill = await skill_service.create_skill(db, "baking")
    return skill.id


@pytest.mark.asyncio
async def test_public_listings(client, alice, bob, baking):
    users = await client.get("/api/users")
    skills = await client.get("/api/skills")

    assert users.status_code == 200
    assert users.json() == [
        {"id": str(alice), "username": "alice"},
        {"id": str(bob), "username": "bob"},
    ]
    assert skills.status_code == 200
    assert skills.json() == [{"id": str(baking), "name": "baking"}]


@pytest.mark.asyncio
async def test_user_skills_require_token(client, alice):
    response = await client.get(f"/api/users/{alice}/userSkills")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_reading_someone_elses_skills_is_forbidden(client, monkeypatch, alice, bob, login):
    spy = AsyncMock(return_value=[])
    monkeypatch.setattr(users_routes.user_skill_service, "list_for_user", spy)
    token = await login("alice", "pw1")

    response = await client.get(f"/api/users/{bob}/userSkills", headers={"authorization": token})

    assert response.status_code == 403
    assert response.json()["error"] == "Access denied"
    spy.assert_not_called()


@pytest.mark.asyncio
async def test_unparseable_user_id_is_forbidden(client, alice, login):
    token = await login("alice", "pw1")

    response = await client.get("/api/users/not-a-uuid/userSkills", headers={"authorization": token})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_writing_someone_elses_skills_is_forbidden(client, alice, bob, baking, login):
    token = await login("alice", "pw1")
    headers = {"authorization": token}

    created = await client.post(
        f"/api/users/{bob}/userSkills", json={"skill_id": str(baking)}, headers=headers
    )
    deleted = await client.delete(f"/api/users/{bob}/userSkills/{uuid.uuid4()}", headers=headers)

    assert created.status_code == 403
    assert deleted.status_code == 403


@pytest.mark.asyncio
async def test_duplicate_association_conflicts(client, alice, baking, login):
    headers = {"authorization": await login("alice", "pw1")}
    url = f"/api/users/{alice}/userSkills"

    first = await client.post(url, json={"skill_id": str(baking)}, headers=headers)
    second = await client.post(url, json={"skill_id": str(baking)}, headers=headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["code"] == "CONSTRAINT_VIOLATION"


@pytest.mark.asyncio
async def test_unknown_skill_is_rejected(client, alice, login):
    headers = {"authorization": await login("alice", "pw1")}

    response = await client.post(
        f"/api/users/{alice}/userSkills",
        json={"skill_id": str(uuid.uuid4())},
        headers=headers,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "REFERENTIAL_VIOLATION"


@pytest.mark.asyncio
async def test_deleting_unknown_association_succeeds(client, alice, login):
    headers = {"authorization": await login("alice", "pw1")}

    missing = await client.delete(f"/api/users/{alice}/userSkills/{uuid.uuid4()}", headers=headers)
    malformed = await client.delete(f"/api/users/{alice}/userSkills/nope", headers=headers)

    assert missing.status_code == 204
    assert malformed.status_code == 204


@pytest.mark.asyncio
async def test_alice_bakes_end_to_end(client, make_user, skill_service, db):
    alice = await make_user("alice", "pw1")
    alice_id = str(alice.id)
    baking = await skill_service.create_skill(db, "baking")

    login = await client.post("/api/auth/login", json={"username": "alice", "password": "pw1"})
    assert login.status_code == 200
    headers = {"authorization": login.json()["token"]}
    url = f"/api/users/{alice_id}/userSkills"

    created = await client.post(url, json={"skill_id": str(baking.id)}, headers=headers)
    assert created.status_code == 201
    association = created.json()
    assert association["user_id"] == alice_id
    assert association["skill_id"] == str(baking.id)

    listed = await client.get(url, headers=headers)
    assert listed.status_code == 200
    assert listed.json() == [association]

    deleted = await client.delete(f"{url}/{association['id']}", headers=headers)
    assert deleted.status_code == 204
    assert deleted.content == b""

    after = await client.get(url, headers=headers)
    assert after.status_code == 200
    assert after.json() == []
