"""Repository helpers for working with resource records."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from rolodex_backend.database.schemas import ResourceSchema


class ResourceRepository:
    """Encapsulates persistence operations for :class:`ResourceSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self, collection: str) -> list[ResourceSchema]:
        """Return every record of a collection in insertion order."""
        stmt = (
            select(ResourceSchema)
            .where(ResourceSchema.collection == collection)
            .order_by(ResourceSchema.pk)
        )
        return list(self._session.scalars(stmt))

    def get_by_id(self, collection: str, record_id: str) -> ResourceSchema | None:
        """Return a record by its id within a collection."""
        stmt = select(ResourceSchema).where(
            ResourceSchema.collection == collection,
            ResourceSchema.record_id == record_id,
        )
        return self._session.scalar(stmt)

    def get_many(
        self, collection: str, record_ids: Iterable[str]
    ) -> dict[str, ResourceSchema]:
        """Return the records found for *record_ids*, keyed by id."""
        ids = list(record_ids)
        if not ids:
            return {}
        stmt = select(ResourceSchema).where(
            ResourceSchema.collection == collection,
            ResourceSchema.record_id.in_(ids),
        )
        return {row.record_id: row for row in self._session.scalars(stmt)}

    def import_records(
        self, collection: str, documents: Iterable[Mapping[str, Any]]
    ) -> list[ResourceSchema]:
        """Insert fixture documents; each must carry its id under ``_id`` or ``id``."""
        rows = []
        for document in documents:
            attributes = dict(document)
            record_id = attributes.pop("_id", None) or attributes.pop("id")
            rows.append(
                ResourceSchema(
                    collection=collection, record_id=str(record_id), document=attributes
                )
            )
        self._session.add_all(rows)
        self._session.flush()
        return rows

    def remove_all(self, collection: str) -> int:
        """Delete every record of a collection and return how many were removed."""
        result = self._session.execute(
            delete(ResourceSchema).where(ResourceSchema.collection == collection)
        )
        return result.rowcount

    def save_document(
        self, record: ResourceSchema, document: Mapping[str, Any]
    ) -> ResourceSchema:
        """Replace the stored document of *record*."""
        record.document = dict(document)
        self._session.flush()
        self._session.refresh(record)
        return record
