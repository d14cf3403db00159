"""Repositories wrapping SQLAlchemy sessions."""

from rolodex_backend.database.repositories.resource import ResourceRepository

__all__ = ["ResourceRepository"]
