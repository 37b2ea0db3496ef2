"""
Bookmark business logic.

Each operation validates before touching storage and sanitizes every record
it returns.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from . import validation
from .errors import ValidationError
from .repository import BookmarkRepository

logger = logging.getLogger(__name__)


async def create_bookmark(repo: BookmarkRepository, payload: Mapping[str, Any] | None) -> dict:
    try:
        bookmark = validation.validate_new_bookmark(payload)
    except ValidationError as exc:
        logger.info("Rejected bookmark: %s", exc.message)
        raise

    row = await repo.create(bookmark)
    logger.info("Created bookmark id=%s", row["id"])
    return validation.sanitize_bookmark(row)


async def list_bookmarks(repo: BookmarkRepository) -> list[dict]:
    rows = await repo.list_all()
    return validation.sanitize_bookmarks(rows)


async def get_bookmark(repo: BookmarkRepository, bookmark_id: int) -> dict | None:
    row = await repo.get_by_id(bookmark_id)
    if row is None:
        logger.info("Bookmark id=%s not found", bookmark_id)
        return None
    return validation.sanitize_bookmark(row)


async def delete_bookmark(repo: BookmarkRepository, bookmark_id: int) -> bool:
    """
    Return True if the bookmark existed and was deleted.

    Existence is checked first so that "never existed" is not reported as a
    successful delete.
    """
    existing = await repo.get_by_id(bookmark_id)
    if existing is None:
        logger.info("Bookmark id=%s not found for delete", bookmark_id)
        return False

    deleted = await repo.delete_by_id(bookmark_id)
    if not deleted:
        # Removed by a concurrent request between the two calls.
        logger.info("Bookmark id=%s was already deleted", bookmark_id)
        return False

    logger.info("Deleted bookmark id=%s", bookmark_id)
    return True
