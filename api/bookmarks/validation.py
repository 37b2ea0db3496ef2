"""
Bookmark input validation and output sanitization.

Write path: `validate_new_bookmark` checks required fields in a fixed order
(title, url, rating), failing on the first one that is missing or falsy,
then checks that rating is an integer in [1, 5].

Read path: `sanitize_bookmark` escapes markup in the free-text fields before
a record leaves the service. `url` is left untouched unless
BOOKMARKS_SANITIZE_URL is enabled.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from bleach.sanitizer import ALLOWED_ATTRIBUTES, ALLOWED_PROTOCOLS, ALLOWED_TAGS, Cleaner

from core import settings

from . import schemas
from .errors import ValidationError

REQUIRED_FIELDS = ("title", "url", "rating")

RATING_MIN = 1
RATING_MAX = 5
RATING_ERROR_MESSAGE = f"Rating must be a number between {RATING_MIN} and {RATING_MAX}"

# Disallowed tags are escaped, not stripped, so the text stays visible.
# Ampersands are hidden behind a private-use character while cleaning so
# bleach does not rewrite them as "&amp;".
_AMPERSAND_PLACEHOLDER = "\ue000"
# Cleaner is not thread-safe; it is only used from the event loop thread.
_CLEANER = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def missing_field_message(field: str) -> str:
    return f"'{field}' is required"


def _parse_rating(value: Any) -> int:
    # bool is an int subclass but never a rating.
    if isinstance(value, bool):
        raise ValidationError(RATING_ERROR_MESSAGE)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not RATING_MIN <= value <= RATING_MAX:
        raise ValidationError(RATING_ERROR_MESSAGE)
    return value


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    # Non-string JSON values are stored as their JSON text, e.g. true -> "true".
    return value if isinstance(value, str) else json.dumps(value)


def validate_new_bookmark(payload: Mapping[str, Any] | None) -> schemas.BookmarkCreate:
    """
    Return a normalized bookmark or raise ValidationError.
    """
    data = payload or {}
    for field in REQUIRED_FIELDS:
        if not data.get(field):
            raise ValidationError(missing_field_message(field), field=field)

    rating = _parse_rating(data["rating"])
    return schemas.BookmarkCreate(
        title=_optional_text(data["title"]),
        url=_optional_text(data["url"]),
        rating=rating,
        description=_optional_text(data.get("description")),
    )


def sanitize_text(value: str | None) -> str | None:
    if value is None:
        return None
    text = str(value)
    # No "<" means no tag, so nothing can execute.
    if "<" not in text:
        return text
    if _AMPERSAND_PLACEHOLDER in text:
        return _CLEANER.clean(text)
    cleaned = _CLEANER.clean(text.replace("&", _AMPERSAND_PLACEHOLDER))
    return cleaned.replace(_AMPERSAND_PLACEHOLDER, "&")


def sanitize_bookmark(row: Mapping[str, Any], *, sanitize_url: bool | None = None) -> dict[str, Any]:
    if sanitize_url is None:
        sanitize_url = settings.sanitize_url()

    return {
        "id": row["id"],
        "title": sanitize_text(row["title"]),
        "url": sanitize_text(row["url"]) if sanitize_url else row["url"],
        "description": sanitize_text(row.get("description")),
        "rating": row["rating"],
    }


def sanitize_bookmarks(rows: Iterable[Mapping[str, Any]], *, sanitize_url: bool | None = None) -> list[dict[str, Any]]:
    if sanitize_url is None:
        sanitize_url = settings.sanitize_url()
    return [sanitize_bookmark(row, sanitize_url=sanitize_url) for row in rows]
