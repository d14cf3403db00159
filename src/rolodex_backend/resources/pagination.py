"""Page slicing and relationship population for list and detail responses."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rolodex_backend.resources.records import ResourceRecord
from rolodex_backend.resources.serializer import ResourceSerializer
from rolodex_backend.shared.paths import MISSING, get_path, set_path

if TYPE_CHECKING:
    from rolodex_backend.resources.configuration import (
        ResourceConfiguration,
        ResourceRegistry,
    )
    from rolodex_backend.resources.query import PageWindow

RecordLookup = Callable[[str, Iterable[str]], Mapping[str, ResourceRecord]]
"""Fetch records of a collection by id: ``lookup(collection, ids)``."""


@dataclass(frozen=True, slots=True)
class PageMeta:
    """Pagination metadata returned with every list response."""

    limit: int
    offset: int
    total: int


@dataclass(frozen=True, slots=True)
class Page:
    """One window of a matched record set."""

    items: list[ResourceRecord]
    meta: PageMeta


def paginate(records: Sequence[ResourceRecord], window: PageWindow) -> Page:
    """Slice ``[offset, offset + limit)``; an offset past the end yields nothing."""
    items = list(records[window.offset : window.offset + window.limit])
    meta = PageMeta(limit=window.limit, offset=window.offset, total=len(records))
    return Page(items=items, meta=meta)


def populate(
    records: Sequence[ResourceRecord],
    configuration: ResourceConfiguration,
    registry: ResourceRegistry,
    lookup: RecordLookup,
) -> list[ResourceRecord]:
    """Replace relationship references with the related records' representation.

    References that cannot be resolved become ``None``. The input records are
    left untouched.
    """
    populated = [
        ResourceRecord(record_id=record.record_id, document=copy.deepcopy(record.document))
        for record in records
    ]
    for path, related_name in configuration.relationships.items():
        related = registry.get(related_name)
        serializer = ResourceSerializer(related)
        references = {
            value
            for record in populated
            if isinstance(value := get_path(record.document, path), str)
        }
        found = lookup(related.collection, sorted(references)) if references else {}
        for record in populated:
            reference = get_path(record.document, path)
            if reference is MISSING:
                continue
            target = found.get(reference) if isinstance(reference, str) else None
            set_path(
                record.document,
                path,
                serializer.serialize(target.record_id, target.document) if target else None,
            )
    return populated


__all__ = ["Page", "PageMeta", "RecordLookup", "paginate", "populate"]
