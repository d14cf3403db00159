"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rolodex_backend.api.errors import register_error_handlers
from rolodex_backend.api.routers import resources_router
from rolodex_backend.log_config import configure_logging
from rolodex_backend.settings import get_settings


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    configure_logging(get_settings().log_level)
    app = FastAPI(title="Rolodex API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(resources_router)
    return app
