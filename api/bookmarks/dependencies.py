"""
Request-scoped wiring for bookmark routes.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends

from core import db

from .repository import BookmarkRepository


def get_repository(pool: asyncpg.Pool = Depends(db.get_pool)) -> BookmarkRepository:
    return BookmarkRepository(pool)
