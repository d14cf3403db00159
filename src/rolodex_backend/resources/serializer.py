"""Translation between stored documents and the external API shape."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from rolodex_backend.shared.paths import MISSING, pop_path

if TYPE_CHECKING:
    from rolodex_backend.resources.configuration import ResourceConfiguration

IMMUTABLE_ATTRIBUTES = frozenset({"id"})


class ResourceSerializer:
    """Maps a resource type's internal documents to and from the API shape."""

    def __init__(self, configuration: ResourceConfiguration) -> None:
        self._configuration = configuration
        self._inbound = configuration.inbound_names()

    @property
    def configuration(self) -> ResourceConfiguration:
        """Configuration driving this serializer."""
        return self._configuration

    def serialize(self, record_id: str, document: Mapping[str, Any]) -> dict[str, Any]:
        """Return the external representation of a stored document."""
        remaining = copy.deepcopy(dict(document))
        payload: dict[str, Any] = {"id": record_id}
        for external, internal in self._configuration.field_map.items():
            value = pop_path(remaining, internal)
            if value is not MISSING:
                payload[external] = value
        for name, value in remaining.items():
            payload.setdefault(name, value)
        return payload

    def deserialize(self, attributes: Mapping[str, Any]) -> list[tuple[str, Any]]:
        """Flatten external *attributes* into ``(internal path, value)`` assignments.

        Nested objects that are not mapped as a whole recurse, so a partial
        nested update only touches the leaves it names.
        """
        assignments: list[tuple[str, Any]] = []
        self._collect(attributes, prefix="", assignments=assignments)
        return assignments

    def _collect(
        self,
        attributes: Mapping[str, Any],
        *,
        prefix: str,
        assignments: list[tuple[str, Any]],
    ) -> None:
        for name, value in attributes.items():
            external = f"{prefix}{name}"
            if not prefix and external in IMMUTABLE_ATTRIBUTES:
                continue
            internal = self._inbound.get(external, external)
            if internal in self._configuration.relationships:
                assignments.append((internal, _reference(value)))
            elif isinstance(value, Mapping) and value and external not in self._inbound:
                self._collect(value, prefix=f"{external}.", assignments=assignments)
            else:
                assignments.append((internal, copy.deepcopy(value)))


def _reference(value: Any) -> Any:
    """Collapse a populated relationship object back to its id."""
    if isinstance(value, Mapping):
        return value.get("id")
    return value


__all__ = ["ResourceSerializer"]
