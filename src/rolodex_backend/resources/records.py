"""Domain representation of stored resource records."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rolodex_backend.database.schemas import ResourceSchema


@dataclass(slots=True)
class ResourceRecord:
    """A persisted entity: immutable id plus its nested attribute tree."""

    record_id: str
    document: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_schema(cls, schema: ResourceSchema) -> ResourceRecord:
        """Detach a record from its ORM row."""
        return cls(record_id=schema.record_id, document=copy.deepcopy(schema.document))


__all__ = ["ResourceRecord"]
