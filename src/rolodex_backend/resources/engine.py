"""Filtering, free-text search and sorting over a resource collection."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rolodex_backend.shared.paths import MISSING, get_path

if TYPE_CHECKING:
    from rolodex_backend.resources.configuration import ResourceConfiguration
    from rolodex_backend.resources.query import QueryDescriptor, SortKey
    from rolodex_backend.resources.records import ResourceRecord


def _scalar_matches(value: Any, accepted: str) -> bool:
    if isinstance(value, bool):
        return accepted.lower() == str(value).lower()
    if isinstance(value, int | float):
        try:
            return float(accepted) == value
        except ValueError:
            return False
    if isinstance(value, str):
        return value == accepted
    return False


def value_matches(value: Any, accepted: Sequence[str]) -> bool:
    """Return True if the stored *value* equals one of the *accepted* values."""
    if value is MISSING or value is None:
        return False
    if isinstance(value, list):
        return any(value_matches(item, accepted) for item in value)
    return any(_scalar_matches(value, candidate) for candidate in accepted)


def matches_filters(
    record: ResourceRecord,
    filters: dict[str, tuple[str, ...]],
    configuration: ResourceConfiguration,
) -> bool:
    """All filter fields must match (AND); values within a field are ORed."""
    return all(
        value_matches(get_path(record.document, configuration.resolve_path(name)), accepted)
        for name, accepted in filters.items()
    )


def _searchable_text(value: Any) -> list[str]:
    if value is MISSING or value is None or isinstance(value, dict):
        return []
    if isinstance(value, list):
        return [text for item in value for text in _searchable_text(item)]
    return [str(value).lower()]


def matches_search(
    record: ResourceRecord,
    terms: Sequence[str],
    configuration: ResourceConfiguration,
) -> bool:
    """Every term must be a case-insensitive substring of some searchable field."""
    if not terms:
        return True
    haystack = [
        text
        for path in configuration.searchable_fields
        for text in _searchable_text(get_path(record.document, path))
    ]
    return all(any(term.lower() in text for text in haystack) for term in terms)


def sort_value(value: Any) -> tuple[int, int, Any]:
    """Sort key for a stored value; missing values are the greatest."""
    if value is MISSING or value is None:
        return (1, 0, 0)
    if isinstance(value, bool):
        return (0, 0, int(value))
    if isinstance(value, int | float):
        return (0, 0, value)
    if isinstance(value, str):
        return (0, 1, value)
    return (0, 2, json.dumps(value, sort_keys=True, default=str))


def sort_records(
    records: Sequence[ResourceRecord],
    keys: Sequence[SortKey],
    configuration: ResourceConfiguration,
) -> list[ResourceRecord]:
    """Stable multi-key sort; the first key is the most significant."""
    ordered = list(records)
    for key in reversed(keys):
        path = configuration.resolve_path(key.field)
        ordered.sort(
            key=lambda record, path=path: sort_value(get_path(record.document, path)),
            reverse=key.descending,
        )
    return ordered


def apply_query(
    records: Sequence[ResourceRecord],
    descriptor: QueryDescriptor,
    configuration: ResourceConfiguration,
) -> list[ResourceRecord]:
    """Filter, search and sort *records*; pagination is applied afterwards."""
    filters = dict(descriptor.filters)
    matched = [
        record
        for record in records
        if matches_filters(record, filters, configuration)
        and matches_search(record, descriptor.search_terms, configuration)
    ]
    return sort_records(matched, descriptor.sort, configuration)


__all__ = [
    "apply_query",
    "matches_filters",
    "matches_search",
    "sort_records",
    "sort_value",
    "value_matches",
]
