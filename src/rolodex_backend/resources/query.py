"""Parsing of list query strings into a structured query descriptor."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from rolodex_backend.resources.errors import QueryParameterError
from rolodex_backend.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

FILTER_PATTERN = re.compile(r"^filter\[(?P<field>[^\]]+)\]$")
PAGE_PATTERN = re.compile(r"^page\[(?P<key>limit|offset)\]$")
SEARCH_SEPARATORS = re.compile(r"[\s+]+")


@dataclass(frozen=True, slots=True)
class SortKey:
    """One sort criterion; ``field`` is the name as given by the client."""

    field: str
    descending: bool = False


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Pagination window applied after filtering and sorting."""

    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


@dataclass(frozen=True, slots=True)
class QueryDescriptor:
    """Request-scoped description of a list query."""

    filters: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    sort: tuple[SortKey, ...] = ()
    search_terms: tuple[str, ...] = ()
    page: PageWindow = field(default_factory=PageWindow)


def _iter_pairs(
    params: Mapping[str, str] | Iterable[tuple[str, str]],
) -> Iterable[tuple[str, str]]:
    if isinstance(params, Mapping):
        return params.items()
    return params


def _parse_sort(value: str) -> list[SortKey]:
    keys: list[SortKey] = []
    for token in value.split(","):
        token = token.strip()
        descending = token.startswith("-")
        name = token.lstrip("-+")
        if name:
            keys.append(SortKey(field=name, descending=descending))
    return keys


def _parse_non_negative(key: str, value: str) -> int:
    try:
        number = int(value.strip())
    except ValueError:
        msg = f"page[{key}] must be a non-negative integer"
        raise QueryParameterError(msg, {"parameter": f"page[{key}]", "value": value}) from None
    if number < 0:
        msg = f"page[{key}] must be a non-negative integer"
        raise QueryParameterError(msg, {"parameter": f"page[{key}]", "value": value})
    return number


def parse_query(
    params: Mapping[str, str] | Iterable[tuple[str, str]],
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> QueryDescriptor:
    """Build a :class:`QueryDescriptor` from raw query-string pairs.

    Repeated ``filter[...]`` keys for one field union their values, repeated
    ``sort`` and ``q`` keys append. Unknown parameters are ignored.
    """
    filters: dict[str, list[str]] = {}
    sort: list[SortKey] = []
    terms: list[str] = []
    page = {"limit": default_limit, "offset": 0}

    for key, value in _iter_pairs(params):
        if match := FILTER_PATTERN.match(key):
            accepted = filters.setdefault(match.group("field"), [])
            for candidate in value.split(","):
                candidate = candidate.strip()
                if candidate and candidate not in accepted:
                    accepted.append(candidate)
        elif key == "sort":
            sort.extend(_parse_sort(value))
        elif key == "q":
            terms.extend(term for term in SEARCH_SEPARATORS.split(value) if term)
        elif match := PAGE_PATTERN.match(key):
            page[match.group("key")] = _parse_non_negative(match.group("key"), value)

    return QueryDescriptor(
        filters={name: tuple(values) for name, values in filters.items() if values},
        sort=tuple(sort),
        search_terms=tuple(terms),
        page=PageWindow(limit=min(page["limit"], max_limit), offset=page["offset"]),
    )


__all__ = ["PageWindow", "QueryDescriptor", "SortKey", "parse_query"]
