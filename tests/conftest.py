"""
Shared fixtures: a throwaway SQLite store, fast bcrypt, and an in-process client.
"""

from typing import Callable, Dict

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import Database
from main import create_app

TEST_JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def signup(client) -> Callable[..., Dict[str, str]]:
    """Register + log in a user; return the Authorization headers for them."""

    def _signup(username: str, password: str = "pw123", email: str | None = None) -> Dict[str, str]:
        resp = client.post(
            "/auth/register",
            json={
                "username": username,
                "password": password,
                "email": email or f"{username}@x.com",
                "full_name": username.title(),
            },
        )
        assert resp.status_code == 201, resp.text
        resp = client.post("/auth/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _signup
