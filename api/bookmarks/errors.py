"""
Bookmark input errors.

Raised before any storage call; the router renders them as plain-text 400s.
"""

from __future__ import annotations


class ValidationError(ValueError):
    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        # Set only for missing-field failures.
        self.field = field

    def __str__(self) -> str:
        return self.message
