"""Tests for dotted path helpers."""

from rolodex_backend.shared import MISSING, get_path, pop_path, set_path


def test_get_path_resolves_nested_values() -> None:
    document = {"address": {"city": "London"}, "tags": ["a"]}

    assert get_path(document, "address.city") == "London"
    assert get_path(document, "address.zip") is MISSING
    assert get_path(document, "tags.first") is MISSING


def test_set_path_creates_and_replaces_parents() -> None:
    document: dict = {"address": "unknown"}

    set_path(document, "address.city", "Paris")
    set_path(document, "name.first", "Ada")

    assert document == {"address": {"city": "Paris"}, "name": {"first": "Ada"}}


def test_pop_path_prunes_emptied_parents() -> None:
    document = {"name": {"first": "Ada", "last": "Lovelace"}, "a": {"b": {"c": 1}}}

    assert pop_path(document, "name.first") == "Ada"
    assert pop_path(document, "name.last") == "Lovelace"
    assert pop_path(document, "a.b.c") == 1
    assert pop_path(document, "a.b.c") is MISSING
    assert document == {}
