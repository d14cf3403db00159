"""Error taxonomy raised by the resource pipelines."""

from __future__ import annotations

from typing import Any


class RolodexError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(RolodexError):
    """Raised when a request payload or query is malformed."""

    status_code = 400
    title = "Bad Request"


class QueryParameterError(ValidationError):
    """Raised when a list query carries an unusable parameter."""


class NotFoundError(RolodexError):
    """Raised when a resource type or record does not exist."""

    status_code = 404
    title = "Not Found"


class StoreError(RolodexError):
    """Raised when the record store fails to read or persist."""


__all__ = [
    "NotFoundError",
    "QueryParameterError",
    "RolodexError",
    "StoreError",
    "ValidationError",
]
