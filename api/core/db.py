"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is created in the application lifespan (see
`api/main.py`), stored on `app.state.pool`, and handed to request handlers
through the `get_pool` dependency. Nothing here keeps a module-level handle.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import settings


# Storage failures are explicit and separable from "row not found".
class StorageError(RuntimeError):
    pass


_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout_s(),
    )


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise StorageError("DB pool is not initialized.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StorageError(f"Query failed: {type(exc).__name__}") from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StorageError(f"Query failed: {type(exc).__name__}") from exc
    return [_record_to_dict(r) for r in rows]

