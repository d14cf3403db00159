"""Helpers for addressing nested documents with dotted paths."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Final


class _Missing:
    """Sentinel type for absent values."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted path into its segments, ignoring empty ones."""
    return tuple(segment for segment in path.split(".") if segment)


def get_path(document: Mapping[str, Any], path: str) -> Any:
    """Return the value stored at *path* or :data:`MISSING`."""
    current: Any = document
    for segment in split_path(path):
        if not isinstance(current, Mapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def set_path(document: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign *value* at *path*, creating intermediate objects as needed."""
    segments = split_path(path)
    if not segments:
        return
    current = document
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value


def pop_path(document: MutableMapping[str, Any], path: str) -> Any:
    """Remove and return the value at *path*, pruning emptied parents."""
    segments = split_path(path)
    if not segments:
        return MISSING
    parents: list[MutableMapping[str, Any]] = []
    current: Any = document
    for segment in segments[:-1]:
        if not isinstance(current, MutableMapping) or not isinstance(
            current.get(segment), MutableMapping
        ):
            return MISSING
        parents.append(current)
        current = current[segment]
    if not isinstance(current, MutableMapping) or segments[-1] not in current:
        return MISSING
    value = current.pop(segments[-1])
    for parent, segment in zip(reversed(parents), reversed(segments[:-1])):
        if parent[segment]:
            break
        del parent[segment]
    return value


__all__ = ["MISSING", "get_path", "pop_path", "set_path", "split_path"]
