"""HTTP tests for /api/documents: upload, listing, download, update, status and delete."""

from urllib.parse import quote

from app.api.v1.endpoints.documents import _content_disposition
from app.infrastructure.exceptions import StorageDeleteError

MOCK_ACTOR = "Ahmed Mohamud"


async def test_upload_returns_created_document(upload_document) -> None:
    doc = await upload_document(
        content=b"x" * 1000,
        title="Q3 Budget",
        description="Quarterly numbers",
        category="Finance",
        department="Legal",
        confidentiality="Internal",
        tags="budget, q3 ,,budget",
    )
    assert doc["id"].startswith("DOC-")
    assert doc["title"] == "Q3 Budget"
    assert doc["tags"] == ["budget", "q3"]
    assert doc["size"] == 1000
    assert doc["mime_type"] == "application/pdf"
    assert doc["original_name"] == "report.pdf"
    assert doc["stored_name"].endswith("-report.pdf")
    assert doc["file_path"] == f"/uploads/{doc['stored_name']}"
    assert doc["status"] == "pending"
    assert doc["version"] == 1
    assert doc["uploaded_by"] == MOCK_ACTOR
    assert doc["history"] == [
        {
            "version": 1,
            "timestamp": doc["uploaded_at"],
            "actor": MOCK_ACTOR,
            "change_summary": "Initial upload",
        }
    ]


async def test_upload_without_metadata_defaults_to_empty(upload_document) -> None:
    doc = await upload_document()
    assert doc["title"] == ""
    assert doc["category"] == ""
    assert doc["tags"] == []


async def test_upload_without_file_is_400(client) -> None:
    response = await client.post("/api/documents", data={"title": "No file"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["message"] == "No file uploaded."
    listed = await client.get("/api/documents")
    assert listed.json() == []


async def test_upload_with_nameless_file_part_is_400(client) -> None:
    response = await client.post(
        "/api/documents", files={"file": ("", b"abc", "text/plain")}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "No file uploaded."


async def test_uploaded_file_is_served_under_file_path(client, upload_document) -> None:
    doc = await upload_document(content=b"static bytes")
    response = await client.get(doc["file_path"])
    assert response.status_code == 200
    assert response.content == b"static bytes"


async def test_list_returns_upload_order(client, upload_document) -> None:
    first = await upload_document(title="First")
    second = await upload_document(title="Second")
    response = await client.get("/api/documents")
    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [first["id"], second["id"]]


async def test_list_filters_are_combined(client, upload_document) -> None:
    wanted = await upload_document(title="Contract", category="Finance", department="Legal")
    await upload_document(title="Payroll", category="Finance", department="HR")
    await upload_document(title="Policy", category="HR", department="Legal")

    response = await client.get(
        "/api/documents", params={"category": "Finance", "department": "Legal"}
    )
    assert [d["id"] for d in response.json()] == [wanted["id"]]


async def test_list_text_search_is_case_insensitive(client, upload_document) -> None:
    by_title = await upload_document(title="Annual REPORT")
    by_tag = await upload_document(title="Other", tags="reporting")
    await upload_document(title="Unrelated")

    response = await client.get("/api/documents", params={"q": "report"})
    assert [d["id"] for d in response.json()] == [by_title["id"], by_tag["id"]]


async def test_list_filters_by_status(client, upload_document) -> None:
    approved = await upload_document(title="A")
    await upload_document(title="B")
    await client.patch(f"/api/documents/{approved['id']}/status", json={"status": "approved"})

    response = await client.get("/api/documents", params={"status": "approved"})
    assert [d["id"] for d in response.json()] == [approved["id"]]
    pending = await client.get("/api/documents", params={"status": "pending"})
    assert len(pending.json()) == 1


async def test_list_filters_by_date_range(client, upload_document) -> None:
    doc = await upload_document()
    inside = await client.get(
        "/api/documents",
        params={"dateFrom": "2000-01-01T00:00:00Z", "dateTo": "2999-01-01T00:00:00Z"},
    )
    assert [d["id"] for d in inside.json()] == [doc["id"]]
    before = await client.get("/api/documents", params={"dateTo": "2000-01-01T00:00:00Z"})
    assert before.json() == []


async def test_list_with_invalid_date_is_422(client) -> None:
    response = await client.get("/api/documents", params={"dateFrom": "not-a-date"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_get_document(client, upload_document) -> None:
    doc = await upload_document(title="Lookup")
    response = await client.get(f"/api/documents/{doc['id']}")
    assert response.status_code == 200
    assert response.json() == doc


async def test_get_unknown_document_is_404(client) -> None:
    response = await client.get("/api/documents/DOC-0")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_download_streams_original_file(client, upload_document) -> None:
    doc = await upload_document(content=b"%PDF-1.7 body", filename="contract.pdf")
    response = await client.get(f"/api/documents/{doc['id']}/download")
    assert response.status_code == 200
    assert response.content == b"%PDF-1.7 body"
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="contract.pdf"'


async def test_download_unknown_document_is_404(client) -> None:
    response = await client.get("/api/documents/DOC-0/download")
    assert response.status_code == 404


async def test_download_with_missing_blob_is_500(app, client, upload_document) -> None:
    doc = await upload_document()
    (app.state.storage.storage_root / doc["stored_name"]).unlink()
    response = await client.get(f"/api/documents/{doc['id']}/download")
    assert response.status_code == 500
    assert response.json()["error"] == "STORAGE_NOT_FOUND"


def test_content_disposition_encodes_non_ascii_names() -> None:
    assert _content_disposition("résumé.pdf") == f"attachment; filename*=utf-8''{quote('résumé.pdf')}"


async def test_update_creates_new_version(client, upload_document) -> None:
    doc = await upload_document(title="Draft", category="Finance")
    response = await client.put(
        f"/api/documents/{doc['id']}",
        json={"title": "Final", "tags": "signed, final"},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Final"
    assert updated["category"] == "Finance"
    assert updated["tags"] == ["signed", "final"]
    assert updated["version"] == 2
    assert updated["history"][0]["version"] == 2
    assert updated["history"][0]["change_summary"] == "Metadata updated"
    assert updated["history"][0]["actor"] == MOCK_ACTOR
    assert updated["history"][1] == doc["history"][0]


async def test_update_ignores_protected_fields(client, upload_document) -> None:
    doc = await upload_document(content=b"abc")
    response = await client.put(
        f"/api/documents/{doc['id']}",
        json={
            "id": "DOC-hijack",
            "size": 999,
            "stored_name": "../etc/passwd",
            "status": "approved",
            "version": 42,
            "description": "kept",
        },
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == doc["id"]
    assert updated["size"] == 3
    assert updated["stored_name"] == doc["stored_name"]
    assert updated["status"] == "pending"
    assert updated["version"] == 2
    assert updated["description"] == "kept"


async def test_update_with_empty_body_still_bumps_version(client, upload_document) -> None:
    doc = await upload_document(title="Same")
    response = await client.put(f"/api/documents/{doc['id']}", json={})
    assert response.status_code == 200
    assert response.json()["version"] == 2
    assert response.json()["title"] == "Same"


async def test_update_unknown_document_is_404(client) -> None:
    response = await client.put("/api/documents/DOC-0", json={"title": "x"})
    assert response.status_code == 404


async def test_set_status_approves_without_new_version(client, upload_document) -> None:
    doc = await upload_document()
    response = await client.patch(
        f"/api/documents/{doc['id']}/status", json={"status": "approved"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "approved"
    assert body["version"] == 1
    assert len(body["history"]) == 1

    rejected = await client.patch(
        f"/api/documents/{doc['id']}/status", json={"status": "rejected"}
    )
    assert rejected.json()["status"] == "rejected"


async def test_set_status_rejects_unsupported_values(client, upload_document) -> None:
    doc = await upload_document()
    for payload in ({"status": "pending"}, {"status": "APPROVED"}, {"status": 1}, {}):
        response = await client.patch(f"/api/documents/{doc['id']}/status", json=payload)
        assert response.status_code == 400, payload
        assert response.json()["message"] == "Invalid status."


async def test_set_status_without_body_is_400(client, upload_document) -> None:
    doc = await upload_document()
    response = await client.patch(f"/api/documents/{doc['id']}/status")
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_STATUS"


async def test_set_status_validates_before_lookup(client) -> None:
    invalid = await client.patch("/api/documents/DOC-0/status", json={"status": "archived"})
    assert invalid.status_code == 400
    missing = await client.patch("/api/documents/DOC-0/status", json={"status": "approved"})
    assert missing.status_code == 404


async def test_delete_removes_record_and_file(app, client, upload_document) -> None:
    doc = await upload_document()
    response = await client.delete(f"/api/documents/{doc['id']}")
    assert response.status_code == 204
    assert response.content == b""
    assert (await client.get(f"/api/documents/{doc['id']}")).status_code == 404
    assert not (app.state.storage.storage_root / doc["stored_name"]).exists()


async def test_delete_unknown_document_is_404(client) -> None:
    response = await client.delete("/api/documents/DOC-0")
    assert response.status_code == 404


async def test_delete_succeeds_when_blob_removal_fails(app, client, upload_document, monkeypatch) -> None:
    doc = await upload_document()

    async def failing_delete(stored_name: str) -> bool:
        raise StorageDeleteError(stored_name, "read-only filesystem")

    monkeypatch.setattr(app.state.storage, "delete", failing_delete)
    response = await client.delete(f"/api/documents/{doc['id']}")
    assert response.status_code == 204
    assert (await client.get("/api/documents")).json() == []


async def test_deleted_id_is_never_reissued(client, upload_document) -> None:
    first = await upload_document()
    await client.delete(f"/api/documents/{first['id']}")
    second = await upload_document()
    assert second["id"] != first["id"]
