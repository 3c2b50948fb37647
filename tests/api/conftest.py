"""API test fixtures — FastAPI test client over the in-memory test database.

Invariants:
    - The app under test is built by create_app() and given a session manager
      bound to the test engine (lifespan does not run under ASGITransport)

Design Decisions:
    - DatabaseSessionManager built via __new__: reuses its rollback/error mapping
      without opening a second engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from exercise_tracker.config import Settings
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        views_dir=str(tmp_path / "views"),
        static_dir=str(tmp_path / "public"),
        log_format="text",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app, test_engine, test_session_factory):
    """FastAPI test client whose store is the in-memory test database."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = None


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON body."""
    async def _create(username: str) -> dict:
        res = await client.post("/api/users", json={"username": username})
        assert res.status_code == 200, res.text
        return res.json()
    return _create


@pytest.fixture
def add_exercise(client):
    """Log an exercise through the API and return its JSON body."""
    async def _add(user_id: str, **fields) -> dict:
        res = await client.post(
            f"/api/users/{user_id}/exercises", json=fields,
        )
        assert res.status_code == 200, res.text
        return res.json()
    return _add
