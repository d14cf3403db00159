"""Tests for page slicing and relationship population."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from rolodex_backend.resources import (
    PageMeta,
    PageWindow,
    ResourceRecord,
    get_default_registry,
    paginate,
    populate,
)
from rolodex_backend.resources.configuration import USERS

COMPANIES = {
    "c1": ResourceRecord(
        record_id="c1", document={"name": "Google", "legal_name": "Alphabet Inc."}
    ),
}


def lookup(collection: str, ids: Iterable[str]) -> dict[str, ResourceRecord]:
    assert collection == "companies"
    return {key: COMPANIES[key] for key in ids if key in COMPANIES}


@pytest.fixture
def records() -> list[ResourceRecord]:
    return [ResourceRecord(record_id=str(index)) for index in range(5)]


@pytest.mark.parametrize(
    ("limit", "offset", "expected"),
    [
        (2, 0, ["0", "1"]),
        (2, 4, ["4"]),
        (10, 5, []),
        (0, 0, []),
    ],
)
def test_paginate_slices_window(
    records: list[ResourceRecord], limit: int, offset: int, expected: list[str]
) -> None:
    page = paginate(records, PageWindow(limit=limit, offset=offset))

    assert [record.record_id for record in page.items] == expected
    assert page.meta == PageMeta(limit=limit, offset=offset, total=5)


def test_populate_embeds_serialized_related_record() -> None:
    user = ResourceRecord(record_id="u1", document={"company": "c1"})

    (populated,) = populate([user], USERS, get_default_registry(), lookup)

    assert populated.document["company"] == {
        "id": "c1",
        "name": "Google",
        "legal-name": "Alphabet Inc.",
    }
    assert user.document == {"company": "c1"}


def test_populate_leaves_unresolved_references_empty() -> None:
    dangling = ResourceRecord(record_id="u1", document={"company": "missing"})
    absent = ResourceRecord(record_id="u2", document={"username": "neil"})

    populated = populate([dangling, absent], USERS, get_default_registry(), lookup)

    assert populated[0].document["company"] is None
    assert "company" not in populated[1].document


def test_populate_skips_lookup_without_references() -> None:
    def failing_lookup(collection: str, ids: Iterable[str]) -> dict:
        raise AssertionError("lookup should not be called")

    record = ResourceRecord(record_id="u1", document={})

    assert populate([record], USERS, get_default_registry(), failing_lookup)[0] == record
