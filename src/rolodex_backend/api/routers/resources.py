"""Collection list, detail and partial update endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from rolodex_backend.api.dependencies import get_resource_service
from rolodex_backend.api.models import (
    ErrorResponse,
    ListMetaResponse,
    PageMetaResponse,
    ResourceListResponse,
    ResourceResponse,
)
from rolodex_backend.api.services import ResourceService

router = APIRouter(tags=["resources"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get(
    "/{resource}",
    response_model=ResourceListResponse,
    responses=_ERROR_RESPONSES,
)
def list_resources(
    resource: str,
    request: Request,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceListResponse:
    """List a collection with ``filter[...]``, ``sort``, ``q`` and ``page[...]``."""

    result = service.list_records(resource, request.query_params.multi_items())
    page = PageMetaResponse(
        limit=result.page.limit, offset=result.page.offset, total=result.page.total
    )
    return ResourceListResponse(data=result.data, meta=ListMetaResponse(page=page))


@router.get(
    "/{resource}/{record_id}",
    response_model=ResourceResponse,
    responses=_ERROR_RESPONSES,
)
def get_resource(
    resource: str,
    record_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceResponse:
    """Return a single record with its relationships populated."""

    return ResourceResponse(data=service.get_record(resource, record_id))


@router.patch(
    "/{resource}/{record_id}",
    response_model=ResourceResponse,
    responses=_ERROR_RESPONSES,
)
def update_resource(
    resource: str,
    record_id: str,
    body: Any = Body(default=None),
    service: ResourceService = Depends(get_resource_service),
) -> ResourceResponse:
    """Apply a partial update and return the re-serialized record."""

    return ResourceResponse(data=service.update_record(resource, record_id, body))
