"""
Shared fixtures: an in-memory bookmark store wired in place of Postgres.
"""

import pytest
from fastapi.testclient import TestClient

from bookmarks import schemas
from bookmarks.dependencies import get_repository
from core.db import StorageError
from main import app

API_TOKEN = "test-api-token"


class FakeBookmarkRepository:
    """Dict-backed stand-in for BookmarkRepository."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._next_id = 1

    def seed(self, **fields) -> dict:
        row = {"id": self._next_id, "description": None, **fields}
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    async def create(self, bookmark: schemas.BookmarkCreate) -> dict:
        return self.seed(**bookmark.model_dump())

    async def list_all(self) -> list[dict]:
        return [dict(self.rows[key]) for key in sorted(self.rows)]

    async def get_by_id(self, bookmark_id: int) -> dict | None:
        row = self.rows.get(bookmark_id)
        return dict(row) if row is not None else None

    async def delete_by_id(self, bookmark_id: int) -> bool:
        return self.rows.pop(bookmark_id, None) is not None


class FailingBookmarkRepository:
    """Every call fails the way a dropped connection would."""

    async def create(self, bookmark):
        raise StorageError("connection refused")

    async def list_all(self):
        raise StorageError("connection refused")

    async def get_by_id(self, bookmark_id):
        raise StorageError("connection refused")

    async def delete_by_id(self, bookmark_id):
        raise StorageError("connection refused")


def make_bookmark(**overrides) -> dict:
    bookmark = {
        "title": "Python docs",
        "url": "https://docs.python.org/3/",
        "description": "The official documentation",
        "rating": 5,
    }
    bookmark.update(overrides)
    return bookmark


@pytest.fixture
def repo() -> FakeBookmarkRepository:
    return FakeBookmarkRepository()


@pytest.fixture
def client(repo, monkeypatch):
    monkeypatch.setenv("API_TOKEN", API_TOKEN)
    monkeypatch.delenv("BOOKMARKS_SANITIZE_URL", raising=False)
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_client(monkeypatch):
    monkeypatch.setenv("API_TOKEN", API_TOKEN)
    app.dependency_overrides[get_repository] = FailingBookmarkRepository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {API_TOKEN}"}
