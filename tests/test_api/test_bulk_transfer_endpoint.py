"""Tests for client bulk import (.xlsx/.csv) and CSV export."""

import csv
import io

import pytest
from openpyxl import Workbook

from tests.utils.factories import client_payload

pytestmark = pytest.mark.integration

HEADER = ["first_name", "last_name", "email", "phone", "address", "status", "additional_details"]


def _xlsx(rows) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


async def test_xlsx_import_persists_rows(client, support_headers):
    content = _xlsx([
        HEADER,
        ["Alice", "W", "alice@x.co.uk", 712345, "1 A St", "active", '{"vip": true}'],
        ["Bob", "B", "bob@x.co.uk", "0700000", "2 B St", "lead", None],
    ])

    response = await client.post(
        "/api/clients/import",
        files={"file": ("clients.xlsx", content, "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")},
        headers=support_headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "Bulk import completed successfully"
    assert [c["first_name"] for c in body["data"]] == ["Alice", "Bob"]
    assert body["data"][0]["phone"] == "712345"
    assert body["data"][0]["additional_details"] == {"vip": True}

    listed = await client.get("/api/clients", params={"sort_by": "first_name", "sort_order": "asc"}, headers=support_headers)
    assert [c["email"] for c in listed.json()] == ["alice@x.co.uk", "bob@x.co.uk"]


async def test_invalid_row_aborts_whole_import(client, admin_headers):
    """A bad row reports its row number and nothing is inserted."""
    content = (
        ",".join(HEADER) + "\n"
        + "Alice,W,alice@x.co.uk,1,1 A St,active,\n"
        + "Bob,B,,2,2 B St,lead,\n"
    ).encode("utf-8")

    response = await client.post(
        "/api/clients/import",
        files={"file": ("clients.csv", content, "text/csv")},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Row 3: email:")

    listed = await client.get("/api/clients", headers=admin_headers)
    assert listed.json() == []


async def test_unsupported_file_type(client, admin_headers):
    response = await client.post(
        "/api/clients/import",
        files={"file": ("clients.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )

    assert response.status_code == 400


async def test_agent_cannot_import_or_export(client, agent_headers):
    imported = await client.post(
        "/api/clients/import",
        files={"file": ("clients.csv", b"first_name\n", "text/csv")},
        headers=agent_headers,
    )
    exported = await client.get("/api/clients/export", headers=agent_headers)

    assert imported.status_code == 403
    assert exported.status_code == 403


async def test_export_with_no_clients_is_not_found(client, support_headers):
    response = await client.get("/api/clients/export", headers=support_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "No clients found for export"}


async def test_export_matches_client_fields(client, admin_headers):
    """Header equals the client JSON keys; quoted values survive."""
    await client.post(
        "/api/clients",
        json=client_payload(address="1 A St, Flat 2", additional_details={"tags": ["vip", "cash"]}),
        headers=admin_headers,
    )

    response = await client.get("/api/clients/export", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == "attachment; filename=clients_export.csv"

    listed = (await client.get("/api/clients", headers=admin_headers)).json()
    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0] == list(listed[0].keys())
    assert len(rows) == 2

    exported = dict(zip(rows[0], rows[1]))
    assert exported["id"] == listed[0]["id"]
    assert exported["address"] == "1 A St, Flat 2"
    assert exported["additional_details"] == '{"tags": ["vip", "cash"]}'


async def test_exported_file_can_be_imported(client, admin_headers):
    await client.post("/api/clients", json=client_payload(address="1 A St, Flat 2"), headers=admin_headers)
    exported = await client.get("/api/clients/export", headers=admin_headers)

    response = await client.post(
        "/api/clients/import",
        files={"file": ("clients_export.csv", exported.content, "text/csv")},
        headers=admin_headers,
    )

    assert response.status_code == 200, response.text
    [imported] = response.json()["data"]
    assert imported["address"] == "1 A St, Flat 2"
    assert imported["additional_details"] is None
