"""HTML escaping of declared update fields."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rolodex_backend.resources.configuration import ResourceConfiguration


def escape_markup(value: str) -> str:
    """Neutralize tag openings; ``&`` is kept so escaping stays idempotent."""
    return value.replace("<", "&lt;")


def sanitize(
    attributes: Mapping[str, Any], configuration: ResourceConfiguration
) -> dict[str, Any]:
    """Return a copy of *attributes* with the declared fields escaped.

    Declared fields are matched on the internal path every attribute resolves
    to, so ``first-name``, ``{"name": {"first": ...}}`` and ``"name.first"``
    all reach the same field. Attribute names are walked the same way the
    serializer translates them.
    """
    sanitized = copy.deepcopy(dict(attributes))
    policy = configuration.sanitization
    if not policy.active:
        return sanitized

    declared = frozenset(configuration.resolve_path(field) for field in policy.fields)
    _escape_attributes(
        sanitized,
        prefix="",
        declared=declared,
        inbound=configuration.inbound_names(),
        relationships=configuration.relationships,
    )
    return sanitized


def _escape_attributes(
    attributes: dict[str, Any],
    *,
    prefix: str,
    declared: frozenset[str],
    inbound: Mapping[str, str],
    relationships: Mapping[str, str],
) -> None:
    for name, value in attributes.items():
        external = f"{prefix}{name}"
        internal = inbound.get(external, external)
        if (
            isinstance(value, dict)
            and external not in inbound
            and internal not in relationships
        ):
            _escape_attributes(
                value,
                prefix=f"{external}.",
                declared=declared,
                inbound=inbound,
                relationships=relationships,
            )
        else:
            attributes[name] = _escape_at(value, internal, declared)


def _escape_at(value: Any, path: str, declared: frozenset[str]) -> Any:
    # A declared path covers everything stored beneath it.
    if any(path == field or path.startswith(f"{field}.") for field in declared):
        return _escape_strings(value)
    if isinstance(value, dict):
        return {
            key: _escape_at(item, f"{path}.{key}", declared)
            for key, item in value.items()
        }
    return value


def _escape_strings(value: Any) -> Any:
    if isinstance(value, str):
        return escape_markup(value)
    if isinstance(value, dict):
        return {key: _escape_strings(item) for key, item in value.items()}
    return value


__all__ = ["escape_markup", "sanitize"]
