"""Route definitions for public HTTP endpoints."""

from rolodex_backend.api.routers.resources import router as resources_router

__all__ = ["resources_router"]
