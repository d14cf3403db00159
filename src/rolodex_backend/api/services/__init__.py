"""Service layer for API-specific business logic."""

from rolodex_backend.api.services.resources import ListResult, ResourceService

__all__ = ["ListResult", "ResourceService"]
