"""
Bookmark persistence (raw SQL).

A missing row is a normal `None`/`False` result; driver failures surface as
`core.db.StorageError`.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.db import StorageError

from . import schemas

# `bookmarks.id` is a Postgres INTEGER.
MIN_ID = 1
MAX_ID = 2**31 - 1


def _is_storable_id(bookmark_id: int) -> bool:
    return MIN_ID <= bookmark_id <= MAX_ID


class BookmarkRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def create(self, bookmark: schemas.BookmarkCreate) -> dict:
        row = await db.fetch_one(
            self._pool,
            """
            INSERT INTO bookmarks (title, url, description, rating)
            VALUES ($1, $2, $3, $4)
            RETURNING id, title, url, description, rating
            """,
            bookmark.title,
            bookmark.url,
            bookmark.description,
            bookmark.rating,
        )
        if row is None:
            raise StorageError("Failed to insert bookmark.")
        return row

    async def list_all(self) -> list[dict]:
        return await db.fetch_all(
            self._pool,
            """
            SELECT id, title, url, description, rating
            FROM bookmarks
            ORDER BY id ASC
            """,
        )

    async def get_by_id(self, bookmark_id: int) -> dict | None:
        # Ids outside the column range cannot exist; don't send them to the driver.
        if not _is_storable_id(bookmark_id):
            return None
        return await db.fetch_one(
            self._pool,
            """
            SELECT id, title, url, description, rating
            FROM bookmarks
            WHERE id = $1
            """,
            bookmark_id,
        )

    async def delete_by_id(self, bookmark_id: int) -> bool:
        if not _is_storable_id(bookmark_id):
            return False
        row = await db.fetch_one(
            self._pool,
            """
            DELETE FROM bookmarks
            WHERE id = $1
            RETURNING id
            """,
            bookmark_id,
        )
        return row is not None
