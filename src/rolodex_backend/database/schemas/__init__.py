"""SQLAlchemy schemas."""

from rolodex_backend.database.schemas.resource import ResourceSchema

__all__ = ["ResourceSchema"]
