import pytest

from skillroster.main import app, lifespan
from skillroster.repositories.skill_repository import SkillRepository
from skillroster.repositories.user_repository import UserRepository


@pytest.fixture
def startup_flags(monkeypatch):
    """Set the startup switches read by the lifespan."""

    def _set(*, reset: bool = False, seed: bool = False):
        monkeypatch.setattr("skillroster.main.settings.db_reset_on_startup", reset)
        monkeypatch.setattr("skillroster.main.settings.seed_on_startup", seed)

    return _set


async def _usernames(db):
    return [u.username for u in await UserRepository().list_users(db)]


@pytest.mark.asyncio
async def test_startup_keeps_existing_rows_by_default(db, make_user, startup_flags):
    await make_user("alice", "pw1")
    startup_flags()

    async with lifespan(app):
        pass

    assert await _usernames(db) == ["alice"]
    assert await SkillRepository().list_skills(db) == []


@pytest.mark.asyncio
async def test_startup_reset_drops_existing_rows(db, make_user, startup_flags):
    await make_user("alice", "pw1")
    startup_flags(reset=True)

    async with lifespan(app):
        pass

    assert await _usernames(db) == []


@pytest.mark.asyncio
async def test_startup_seed_loads_fixture(db, startup_flags):
    startup_flags(seed=True)

    async with lifespan(app):
        pass

    assert await _usernames(db) == ["boots", "chase", "lincoln", "logan"]


@pytest.mark.asyncio
async def test_startup_reset_then_seed_replaces_rows(db, make_user, startup_flags):
    await make_user("alice", "pw1")
    startup_flags(reset=True, seed=True)

    async with lifespan(app):
        pass

    assert await _usernames(db) == ["boots", "chase", "lincoln", "logan"]
