"""Tests for /api/clients CRUD, partial updates and list paging."""

from datetime import datetime

import pytest

from tests.utils.factories import client_payload

pytestmark = pytest.mark.integration


async def _create(client, headers, **overrides):
    response = await client.post("/api/clients", json=client_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_and_partially_update_client(client, agent_headers):
    """Updating only the status leaves every other field as it was."""
    created = await _create(client, agent_headers)

    assert created["id"]
    assert created["status"] == "active"
    assert created["created_at"] and created["updated_at"]

    response = await client.put(
        f"/api/clients/{created['id']}",
        json={"status": "inactive"},
        headers=agent_headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "inactive"
    for field in ("first_name", "last_name", "email", "phone", "address", "created_at"):
        assert updated[field] == created[field]
    assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(created["updated_at"])


async def test_update_ignores_empty_strings(client, agent_headers):
    created = await _create(client, agent_headers)

    response = await client.put(
        f"/api/clients/{created['id']}",
        json={"first_name": "", "email": "", "phone": "0799999"},
        headers=agent_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["first_name"] == "Alice"
    assert body["email"] == "alice@x.co.uk"
    assert body["phone"] == "0799999"


async def test_explicit_null_clears_additional_details(client, agent_headers):
    created = await _create(client, agent_headers, additional_details={"budget": 500000})
    assert created["additional_details"] == {"budget": 500000}

    untouched = await client.put(
        f"/api/clients/{created['id']}",
        json={"status": "lead"},
        headers=agent_headers,
    )
    assert untouched.json()["additional_details"] == {"budget": 500000}

    cleared = await client.put(
        f"/api/clients/{created['id']}",
        json={"additional_details": None},
        headers=agent_headers,
    )
    assert cleared.status_code == 200
    assert cleared.json()["additional_details"] is None


async def test_missing_required_field_is_bad_request(client, agent_headers):
    payload = client_payload()
    del payload["last_name"]

    response = await client.post("/api/clients", json=payload, headers=agent_headers)

    assert response.status_code == 400
    assert response.json()["message"].startswith("last_name:")


async def test_invalid_email_is_bad_request(client, agent_headers):
    response = await client.post(
        "/api/clients",
        json=client_payload(email="not-an-email"),
        headers=agent_headers,
    )

    assert response.status_code == 400
    assert "email" in response.json()["message"]


async def test_get_and_delete_client(client, agent_headers):
    created = await _create(client, agent_headers)

    fetched = await client.get(f"/api/clients/{created['id']}", headers=agent_headers)
    assert fetched.status_code == 200
    assert fetched.json() == created

    deleted = await client.delete(f"/api/clients/{created['id']}", headers=agent_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {
        "message": f"Client {created['id']} deleted successfully",
        "id": created["id"],
    }

    missing = await client.get(f"/api/clients/{created['id']}", headers=agent_headers)
    assert missing.status_code == 404
    assert missing.json() == {"message": "Client not found"}


async def test_update_unknown_client_is_not_found(client, agent_headers):
    response = await client.put(
        "/api/clients/does-not-exist",
        json={"status": "inactive"},
        headers=agent_headers,
    )

    assert response.status_code == 404


async def test_pages_are_disjoint_and_ordered(client, agent_headers):
    """Consecutive limit/offset pages never overlap and follow sort order."""
    for name in ("Dora", "Bea", "Cleo", "Ana"):
        await _create(client, agent_headers, first_name=name, email=f"{name.lower()}@x.co.uk")

    params = {"sort_by": "first_name", "sort_order": "asc", "limit": 2}
    first = await client.get("/api/clients", params={**params, "offset": 0}, headers=agent_headers)
    second = await client.get("/api/clients", params={**params, "offset": 2}, headers=agent_headers)

    assert first.status_code == second.status_code == 200
    names = [c["first_name"] for c in first.json()] + [c["first_name"] for c in second.json()]
    assert names == ["Ana", "Bea", "Cleo", "Dora"]


async def test_default_order_is_newest_first(client, agent_headers):
    older = await _create(client, agent_headers, first_name="Older")
    newer = await _create(client, agent_headers, first_name="Newer")

    response = await client.get("/api/clients", headers=agent_headers)

    assert [c["id"] for c in response.json()] == [newer["id"], older["id"]]


async def test_query_searches_names_and_email(client, agent_headers):
    await _create(client, agent_headers, first_name="Zed", email="zed@x.co.uk")
    await _create(client, agent_headers, first_name="Yara", last_name="Zimmer", email="yara@x.co.uk")
    await _create(client, agent_headers, first_name="Xavi", email="xavi@x.co.uk")

    response = await client.get("/api/clients", params={"query": "z"}, headers=agent_headers)

    assert sorted(c["first_name"] for c in response.json()) == ["Yara", "Zed"]


@pytest.mark.parametrize(
    "params",
    [
        {"limit": 0},
        {"offset": -1},
        {"sort_by": "password_hash"},
        {"sort_order": "sideways"},
    ],
)
async def test_invalid_list_parameters_are_bad_request(client, agent_headers, params):
    response = await client.get("/api/clients", params=params, headers=agent_headers)

    assert response.status_code == 400
    assert response.json()["message"]


async def test_query_wildcards_match_literally(client, agent_headers):
    """`%` and `_` in the search text are not LIKE wildcards."""
    await _create(client, agent_headers, first_name="Bob", email="bob@x.co.uk")
    await _create(client, agent_headers, first_name="Bo_b", email="bo_b@x.co.uk")

    percent = await client.get("/api/clients", params={"query": "%"}, headers=agent_headers)
    underscore = await client.get("/api/clients", params={"query": "o_b"}, headers=agent_headers)

    assert percent.status_code == 200
    assert percent.json() == []
    assert [c["first_name"] for c in underscore.json()] == ["Bo_b"]


async def test_malformed_json_body_message(client, agent_headers):
    response = await client.post(
        "/api/clients",
        content=b'{"first_name": "Alice",',
        headers={**agent_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "JSON decode error"}
