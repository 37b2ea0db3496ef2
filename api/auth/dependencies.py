"""
Auth dependencies for protected FastAPI routes.

Every failure is reported to the client as the same 401 "Unauthorized
request"; the specific reason only goes to the log.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from . import security

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized request"


def _unauthorized(reason: str) -> HTTPException:
    logger.warning("Rejected request: %s", reason)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized("missing Authorization header")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise _unauthorized("invalid Authorization header format")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise _unauthorized("Authorization scheme is not Bearer")
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def require_api_token(token: str = Depends(get_bearer_token)) -> None:
    try:
        security.verify_api_token(token)
    except security.AuthSecurityError as exc:
        raise _unauthorized(str(exc)) from exc
