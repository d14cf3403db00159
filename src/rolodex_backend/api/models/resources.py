"""Pydantic models for the resource endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UpdateData(BaseModel):
    """The ``data`` object of a partial update request."""

    model_config = ConfigDict(extra="ignore")

    id_: StrictStr = Field(alias="id", min_length=1)
    attributes: dict[str, Any]
    meta: dict[str, Any] | None = None


class UpdateEnvelope(BaseModel):
    """Body of ``PATCH /{resource}/{id}``."""

    model_config = ConfigDict(extra="ignore")

    data: UpdateData


class PageMetaResponse(BaseModel):
    """Pagination block of a list response."""

    limit: int
    offset: int
    total: int


class ListMetaResponse(BaseModel):
    """Top-level ``meta`` object of a list response."""

    page: PageMetaResponse


class ResourceListResponse(BaseModel):
    """Response returned by ``GET /{resource}``."""

    data: list[dict[str, Any]]
    meta: ListMetaResponse


class ResourceResponse(BaseModel):
    """Response wrapping a single serialized record."""

    data: dict[str, Any]


class ErrorObject(BaseModel):
    """A single JSON:API error object."""

    status: str
    title: str
    detail: str
    meta: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Error document returned for rejected requests."""

    errors: list[ErrorObject]
