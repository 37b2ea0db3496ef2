"""
Tests for shared helpers: settings, database URL handling, bearer auth.
"""

import pytest
from fastapi import HTTPException

from auth import dependencies as auth_dependencies
from auth import security
from core import db, settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("API_TOKEN", "LOG_LEVEL", "CORS_ORIGINS", "DB_POOL_MAX_SIZE", "BOOKMARKS_SANITIZE_URL"):
            monkeypatch.delenv(name, raising=False)

        assert settings.api_token() == ""
        assert settings.log_level() == "INFO"
        assert settings.cors_origins() == list(settings.DEFAULT_CORS_ORIGINS)
        assert settings.db_pool_max_size() == 5
        assert settings.sanitize_url() is False

    def test_malformed_values_fall_back(self, monkeypatch) -> None:
        monkeypatch.setenv("DB_POOL_MAX_SIZE", "many")
        monkeypatch.setenv("BOOKMARKS_SANITIZE_URL", "maybe")

        assert settings.db_pool_max_size() == 5
        assert settings.sanitize_url() is False

    def test_cors_origins_list(self, monkeypatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

        assert settings.cors_origins() == ["https://a.example", "https://b.example"]


class TestDatabaseUrl:
    def test_settings_reads_raw_url(self, monkeypatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "  postgresql://db/bookmarks?sslmode=require  ")

        assert settings.database_url() == "postgresql://db/bookmarks?sslmode=require"
        assert db.database_url() == "postgresql://db/bookmarks"

    def test_strips_sslmode(self, monkeypatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/bookmarks?sslmode=disable&application_name=api")

        assert db.database_url() == "postgresql://u:p@db:5432/bookmarks?application_name=api"

    def test_missing_url(self, monkeypatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(RuntimeError):
            db.database_url()


class TestBearerAuth:
    @pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer   "])
    def test_rejects_malformed_header(self, header) -> None:
        with pytest.raises(HTTPException) as exc_info:
            auth_dependencies._extract_bearer_token(header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Unauthorized request"

    def test_extracts_token(self) -> None:
        assert auth_dependencies._extract_bearer_token("bearer abc123") == "abc123"

    def test_unconfigured_token_rejects_everything(self, monkeypatch) -> None:
        monkeypatch.delenv("API_TOKEN", raising=False)

        with pytest.raises(security.AuthSecurityError):
            security.verify_api_token("anything")

    def test_matching_token(self, monkeypatch) -> None:
        monkeypatch.setenv("API_TOKEN", "s3cret")

        security.verify_api_token("s3cret")

        with pytest.raises(security.AuthSecurityError):
            security.verify_api_token("s3cret-not")
