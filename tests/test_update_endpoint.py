"""Integration tests for ``PATCH /{resource}/{id}``."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

WATERMELON = "<script>Watermelon</script>"
ALERT = '<script>alert("xss")</script>'
ESCAPED_WATERMELON = "&lt;script>Watermelon&lt;/script>"
ESCAPED_ALERT = '&lt;script>alert("xss")&lt;/script>'


def _envelope(record_id: str, attributes: dict[str, Any]) -> dict[str, Any]:
    return {"data": {"id": record_id, "attributes": attributes}}


def test_update_existing_resource(client: TestClient, users: list[dict]) -> None:
    record_id = users[3]["_id"]

    response = client.patch(
        f"/users/{record_id}", json=_envelope(record_id, {"last-name": "Lovegood"})
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == {"first": "Ada", "last": "Lovegood"}
    assert data["username"] == "adalovelace"
    assert data["address"] == {"city": "London", "state": "Greater London"}


def test_update_is_persisted(client: TestClient, users: list[dict]) -> None:
    record_id = users[3]["_id"]
    client.patch(
        f"/users/{record_id}", json=_envelope(record_id, {"last-name": "Lovegood"})
    )

    body = client.get("/users?filter[last-name]=Lovegood").json()

    assert [user["id"] for user in body["data"]] == [record_id]


def test_update_repopulates_relationships(client: TestClient, users: list[dict]) -> None:
    record_id = users[0]["_id"]

    response = client.patch(
        f"/users/{record_id}",
        json=_envelope(record_id, {"company": {"id": "562d8ac45e5d77d80c478103"}}),
    )

    assert response.status_code == 200
    assert response.json()["data"]["company"]["name"] == "Google"


def test_update_nested_leaf_keeps_siblings(client: TestClient, users: list[dict]) -> None:
    record_id = users[1]["_id"]

    response = client.patch(
        f"/users/{record_id}", json=_envelope(record_id, {"address": {"city": "Palo Alto"}})
    )

    assert response.json()["data"]["address"] == {"city": "Palo Alto", "state": "CA"}


def test_update_missing_record_is_not_found(client: TestClient) -> None:
    record_id = "5630743e2446a0672a4ee793"

    response = client.patch(
        f"/users/{record_id}",
        json=_envelope(record_id, {"last-name": "this should fail"}),
    )

    assert response.status_code == 404


def test_update_without_attributes_is_rejected(
    client: TestClient, users: list[dict]
) -> None:
    record_id = users[0]["_id"]
    body = {"data": {"id": record_id, "meta": {"stuff": "this should fail"}}}

    response = client.patch(f"/users/{record_id}", json=body)

    assert response.status_code == 400
    assert response.json()["errors"][0]["status"] == "400"


def test_update_without_id_is_rejected(client: TestClient, users: list[dict]) -> None:
    record_id = users[0]["_id"]
    body = {"data": {"meta": {"stuff": "this should fail"}}}

    assert client.patch(f"/users/{record_id}", json=body).status_code == 400


def test_update_with_mismatched_id_is_rejected(
    client: TestClient, users: list[dict]
) -> None:
    response = client.patch(
        f"/users/{users[0]['_id']}",
        json=_envelope(users[1]["_id"], {"last-name": "Nope"}),
    )

    assert response.status_code == 400


def test_update_with_unparseable_body_is_rejected(
    client: TestClient, users: list[dict]
) -> None:
    response = client.patch(
        f"/users/{users[0]['_id']}",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_validation_precedes_lookup(client: TestClient) -> None:
    response = client.patch("/users/5630743e2446a0672a4ee793", json={"data": {}})

    assert response.status_code == 400


def test_sanitize_all_fields(client: TestClient, admins: list[dict]) -> None:
    record_id = admins[0]["_id"]

    response = client.patch(
        f"/admins/{record_id}",
        json=_envelope(record_id, {"first-name": WATERMELON, "last-name": ALERT}),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["first-name"] == ESCAPED_WATERMELON
    assert data["last-name"] == ESCAPED_ALERT


def test_sanitize_nested_fields(client: TestClient, admins: list[dict]) -> None:
    record_id = admins[0]["_id"]
    attributes = {
        "first-name": WATERMELON,
        "last-name": ALERT,
        "address": {"state": ALERT, "city": "Atlantic"},
    }

    response = client.patch(f"/admins/{record_id}", json=_envelope(record_id, attributes))

    data = response.json()["data"]
    assert data["first-name"] == ESCAPED_WATERMELON
    assert data["last-name"] == ESCAPED_ALERT
    assert data["address"] == {"state": ESCAPED_ALERT, "city": "Atlantic"}


def test_sanitize_selected_fields(client: TestClient, users: list[dict]) -> None:
    record_id = users[0]["_id"]

    response = client.patch(
        f"/users/{record_id}",
        json=_envelope(record_id, {"first-name": WATERMELON, "last-name": ALERT}),
    )

    data = response.json()["data"]
    assert data["name"]["first"] == ESCAPED_WATERMELON
    assert data["name"]["last"] == ALERT


def test_no_sanitization_when_inactive(client: TestClient, admins: list[dict]) -> None:
    record_id = admins[0]["_id"]

    response = client.patch(
        f"/managers/{record_id}",
        json=_envelope(record_id, {"first-name": WATERMELON, "last-name": ALERT}),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["first-name"] == WATERMELON
    assert data["last-name"] == ALERT


def test_escaped_input_is_not_escaped_twice(client: TestClient, admins: list[dict]) -> None:
    record_id = admins[0]["_id"]

    response = client.patch(
        f"/admins/{record_id}",
        json=_envelope(record_id, {"first-name": ESCAPED_WATERMELON}),
    )

    assert response.json()["data"]["first-name"] == ESCAPED_WATERMELON


def test_sanitize_declared_field_sent_in_nested_shape(
    client: TestClient, users: list[dict]
) -> None:
    record_id = users[0]["_id"]

    response = client.patch(
        f"/users/{record_id}",
        json=_envelope(record_id, {"name": {"first": ALERT}}),
    )

    assert response.status_code == 200
    assert response.json()["data"]["name"] == {"first": ESCAPED_ALERT, "last": "Musk"}


def test_sanitize_declared_field_sent_as_dotted_name(
    client: TestClient, admins: list[dict]
) -> None:
    record_id = admins[0]["_id"]

    response = client.patch(
        f"/admins/{record_id}",
        json=_envelope(record_id, {"address.state": ALERT}),
    )

    assert response.status_code == 200
    assert response.json()["data"]["address"]["state"] == ESCAPED_ALERT
    stored = client.get(f"/admins/{record_id}").json()["data"]
    assert stored["address"]["state"] == ESCAPED_ALERT


def test_sanitize_declared_field_sent_under_internal_name(client: TestClient) -> None:
    record_id = "562d8ac45e5d77d80c478101"

    response = client.patch(
        f"/companies/{record_id}",
        json=_envelope(record_id, {"legal_name": ALERT}),
    )

    assert response.status_code == 200
    assert response.json()["data"]["legal-name"] == ESCAPED_ALERT
