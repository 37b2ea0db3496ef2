"""
Process configuration read from environment variables.

Everything is read lazily (at call time) so tests can monkeypatch the
environment without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def database_url() -> str:
    # Raw DSN; `core.db.database_url` adapts it for asyncpg.
    return _env_str("DATABASE_URL")


def api_token() -> str:
    # Empty means no token is accepted.
    return _env_str("API_TOKEN")


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> int:
    return _env_int("DB_COMMAND_TIMEOUT_S", 30)


def sanitize_url() -> bool:
    return _env_bool("BOOKMARKS_SANITIZE_URL", False)
