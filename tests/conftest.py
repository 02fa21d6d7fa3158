"""Shared fixtures: a freshly migrated SQLite file per test, wired into the app."""

import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# The module-level engine is built at import time; keep it off the real database
_SESSION_DIR = Path(tempfile.mkdtemp(prefix="swimlanes-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_SESSION_DIR / 'app.db'}")

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from swimlanes.db.migrate import run_migrations
from swimlanes.db.session import create_engine, get_db
from swimlanes.main import app


async def _migrate(url):
    engine = create_engine(url, poolclass=NullPool)
    try:
        await run_migrations(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def database_path(tmp_path):
    return tmp_path / "kanban.db"


@pytest.fixture
def database_url(database_path):
    url = f"sqlite+aiosqlite:///{database_path}"
    asyncio.run(_migrate(url))
    return url


@pytest.fixture
def session_factory(database_url):
    engine = create_engine(database_url, poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def board(client):
    res = client.post("/api/boards", json={"name": "Roadmap"})
    assert res.status_code == 201
    return res.json()


@pytest.fixture
def make_column(client, board):
    def _make(name, board_id=None):
        res = client.post(
            "/api/columns", json={"boardId": board_id or board["id"], "name": name}
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_card(client):
    def _make(column_id, title, **extra):
        res = client.post("/api/cards", json={"columnId": column_id, "title": title, **extra})
        assert res.status_code == 201, res.text
        return res.json()
    return _make
