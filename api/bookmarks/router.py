"""
Bookmark API endpoints.

404 bodies differ per endpoint: GET answers with plain text, DELETE with the
structured {"error": {"message": ...}} body.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse

from auth import dependencies as auth_dependencies

from . import schemas, service
from .dependencies import get_repository
from .errors import ValidationError
from .repository import BookmarkRepository

NOT_FOUND_MESSAGE = "Bookmark Not Found"

router = APIRouter()


def bookmark_location(bookmark_id: int) -> str:
    return f"/bookmarks/{bookmark_id}"


async def json_object_body(request: Request) -> dict[str, Any]:
    """
    Read the request body as a JSON object.

    Empty bodies, non-JSON bodies (e.g. form data) and JSON values that are
    not objects all read as `{}`, so they fail the required-field check with
    a 400 instead of a 422.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.Bookmark)
@router.post("/bookmarks", status_code=status.HTTP_201_CREATED, response_model=schemas.Bookmark)
async def create_bookmark(
    response: Response,
    payload: dict[str, Any] = Depends(json_object_body),
    repo: BookmarkRepository = Depends(get_repository),
) -> Response | dict:
    try:
        created = await service.create_bookmark(repo, payload)
    except ValidationError as exc:
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    response.headers["Location"] = bookmark_location(created["id"])
    return created


@router.get("/bookmarks", response_model=list[schemas.Bookmark])
async def list_bookmarks(
    repo: BookmarkRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_bookmarks(repo)


@router.get("/bookmarks/{bookmark_id}", response_model=schemas.Bookmark)
async def get_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_repository),
) -> Response | dict:
    bookmark = await service.get_bookmark(repo, bookmark_id)
    if bookmark is None:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
    return bookmark


@router.delete(
    "/bookmarks/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(auth_dependencies.require_api_token)],
)
async def delete_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_repository),
) -> Response:
    deleted = await service.delete_bookmark(repo, bookmark_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
