"""Per-resource-type configuration: field names, search, sanitization, links."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import cache

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from rolodex_backend.resources.errors import NotFoundError


class SanitizationPolicy(BaseModel):
    """Which update fields are HTML-escaped for a resource type."""

    model_config = ConfigDict(frozen=True)

    active: bool = False
    fields: tuple[str, ...] = ()


class ResourceConfiguration(BaseModel):
    """Immutable description of one resource type exposed by the API.

    ``field_map`` translates in both directions: stored values at the internal
    path are answered under the external name. ``query_aliases`` only apply to
    inbound names (filters, sort keys, update attributes), so the stored
    nested shape is kept in responses.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    collection: str
    field_map: Mapping[str, str] = Field(default_factory=dict)
    query_aliases: Mapping[str, str] = Field(default_factory=dict)
    searchable_fields: tuple[str, ...] = ()
    sanitization: SanitizationPolicy = Field(default_factory=SanitizationPolicy)
    relationships: Mapping[str, str] = Field(default_factory=dict)

    def resolve_path(self, name: str) -> str:
        """Translate an external field name into the internal dotted path."""
        if name in self.query_aliases:
            return self.query_aliases[name]
        return self.field_map.get(name, name)

    def inbound_names(self) -> dict[str, str]:
        """Return every external name accepted on input with its internal path."""
        return {**self.field_map, **self.query_aliases}


class ResourceRegistry:
    """Lookup table of the configured resource types."""

    def __init__(self, configurations: Mapping[str, ResourceConfiguration]) -> None:
        self._configurations = dict(configurations)

    @classmethod
    def from_configurations(
        cls, *configurations: ResourceConfiguration
    ) -> ResourceRegistry:
        """Build a registry keyed by each configuration's name."""
        return cls({configuration.name: configuration for configuration in configurations})

    def get(self, name: str) -> ResourceConfiguration:
        """Return the configuration for *name* or raise :class:`NotFoundError`."""
        try:
            return self._configurations[name]
        except KeyError:
            msg = f"Unknown resource type '{name}'"
            raise NotFoundError(msg, {"resource": name}) from None

    def __contains__(self, name: object) -> bool:
        return name in self._configurations

    def __iter__(self) -> Iterator[ResourceConfiguration]:
        return iter(self._configurations.values())


PERSON_NAME_FIELDS = {"first-name": "name.first", "last-name": "name.last"}

USERS = ResourceConfiguration(
    name="users",
    collection="users",
    query_aliases=PERSON_NAME_FIELDS,
    searchable_fields=("name.first", "address.city"),
    sanitization=SanitizationPolicy(active=True, fields=("first-name",)),
    relationships={"company": "companies"},
)

ADMINS = ResourceConfiguration(
    name="admins",
    collection="admins",
    field_map=PERSON_NAME_FIELDS,
    searchable_fields=("name.first", "name.last", "username"),
    sanitization=SanitizationPolicy(
        active=True,
        fields=("first-name", "last-name", "address.city", "address.state"),
    ),
)

MANAGERS = ResourceConfiguration(
    name="managers",
    collection="admins",
    field_map=PERSON_NAME_FIELDS,
    searchable_fields=("name.first", "name.last", "username"),
    sanitization=SanitizationPolicy(
        active=False,
        fields=("first-name", "last-name", "address.city", "address.state"),
    ),
)

COMPANIES = ResourceConfiguration(
    name="companies",
    collection="companies",
    field_map={"legal-name": "legal_name"},
    searchable_fields=("name", "legal_name"),
    sanitization=SanitizationPolicy(active=True, fields=("name", "legal-name")),
)


@cache
def get_default_registry() -> ResourceRegistry:
    """Return the cached registry of the built-in resource types."""
    return ResourceRegistry.from_configurations(USERS, ADMINS, MANAGERS, COMPANIES)


__all__ = [
    "ADMINS",
    "COMPANIES",
    "MANAGERS",
    "USERS",
    "ResourceConfiguration",
    "ResourceRegistry",
    "SanitizationPolicy",
    "get_default_registry",
]
