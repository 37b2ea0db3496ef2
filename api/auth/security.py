"""
Auth security helpers.
"""

from __future__ import annotations

import secrets

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def verify_api_token(token: str) -> None:
    """
    Raise AuthSecurityError unless `token` matches the configured API_TOKEN.
    """
    expected = settings.api_token()
    if not expected:
        raise AuthSecurityError("API_TOKEN is not configured.")

    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Bearer token is empty.")

    if not secrets.compare_digest(raw.encode("utf-8"), expected.encode("utf-8")):
        raise AuthSecurityError("Bearer token does not match.")
