"""Models used for API request and response payloads."""

from rolodex_backend.api.models.resources import (
    ErrorObject,
    ErrorResponse,
    ListMetaResponse,
    PageMetaResponse,
    ResourceListResponse,
    ResourceResponse,
    UpdateData,
    UpdateEnvelope,
)

__all__ = [
    "ErrorObject",
    "ErrorResponse",
    "ListMetaResponse",
    "PageMetaResponse",
    "ResourceListResponse",
    "ResourceResponse",
    "UpdateData",
    "UpdateEnvelope",
]
