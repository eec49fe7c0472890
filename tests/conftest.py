import os
import shutil
import tempfile

# Settings are read at import time, so the environment must be in place
# before anything from skillroster is imported.
_DB_DIR = tempfile.mkdtemp(prefix="skillroster-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

import pytest
from httpx import ASGITransport, AsyncClient

from skillroster.core.database import async_session_maker, reset_schema
from skillroster.main import app
from skillroster.services.auth_service import AuthService
from skillroster.services.skill_service import SkillService


@pytest.fixture(scope="session", autouse=True)
def _remove_test_database():
    """Delete the temporary SQLite directory once the run is over."""
    yield
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
async def fresh_schema():
    """Every test starts from empty tables."""
    await reset_schema()
    yield


@pytest.fixture
async def db():
    """A session outside any request, for arranging and inspecting data."""
    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def client():
    """In-process HTTP client for the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_service():
    return AuthService()


@pytest.fixture
def skill_service():
    return SkillService()


@pytest.fixture
def make_user(db, auth_service):
    """Factory creating a user through the auth service."""

    async def _make_user(username: str = "alice", password: str = "pw1"):
        return await auth_service.register(db, username=username, password=password)

    return _make_user


@pytest.fixture
def login(client):
    """Factory returning a token obtained from POST /api/auth/login."""

    async def _login(username: str = "alice", password: str = "pw1") -> str:
        response = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _login
