"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from fastapi import Depends

from rolodex_backend.api.services import ResourceService
from rolodex_backend.database import DatabaseService, get_database
from rolodex_backend.resources import (
    RecordLockRegistry,
    ResourceRegistry,
    get_default_registry,
)
from rolodex_backend.settings import BackendSettings, get_settings

_record_locks = RecordLockRegistry()


def get_resource_registry() -> ResourceRegistry:
    """Return the registry of exposed resource types."""

    return get_default_registry()


def get_record_locks() -> RecordLockRegistry:
    """Return the process-wide per-record lock registry."""

    return _record_locks


def get_resource_service(
    database: DatabaseService = Depends(get_database),
    registry: ResourceRegistry = Depends(get_resource_registry),
    settings: BackendSettings = Depends(get_settings),
    locks: RecordLockRegistry = Depends(get_record_locks),
) -> ResourceService:
    """Assemble the request's :class:`ResourceService`."""

    return ResourceService(
        database=database, registry=registry, settings=settings, locks=locks
    )


__all__ = ["get_record_locks", "get_resource_registry", "get_resource_service"]
