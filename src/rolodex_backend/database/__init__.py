"""Database connectivity helpers and the record store."""

from rolodex_backend.database.base import BaseSchema
from rolodex_backend.database.dependencies import get_database
from rolodex_backend.database.repositories import ResourceRepository
from rolodex_backend.database.schemas import ResourceSchema
from rolodex_backend.database.service import DatabaseService
from rolodex_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "ResourceRepository",
    "ResourceSchema",
    "get_database",
    "get_settings",
]
