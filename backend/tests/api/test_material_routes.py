"""Material routes — organizer upload/delete, authenticated list/download.

Invariants:
    - Upload is multipart; title required; file optional and at most max_bytes
    - Each successful download adds exactly one to downloadCount
    - Download of a material without a stored file -> 404, count unchanged
"""

from makesta.core.errors import DatabaseError
from makesta.repositories.materials import MaterialRepository


async def _upload(client, headers, title="Modul 1", content=b"isi modul", filename="modul.pdf"):
    files = {"file": (filename, content, "application/pdf")} if content is not None else None
    return await client.post(
        "/api/v1/materials",
        data={"title": title, "description": "Pengantar"},
        files=files,
        headers=headers,
    )


async def test_participant_cannot_upload(client, participant_headers):
    res = await _upload(client, participant_headers)
    assert res.status_code == 403


async def test_upload_requires_token(client):
    res = await _upload(client, {})
    assert res.status_code == 401


async def test_upload_and_list(client, organizer_headers, participant_headers):
    res = await _upload(client, organizer_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["fileName"] == "modul.pdf"
    assert body["fileSize"] == len(b"isi modul")
    assert body["downloadCount"] == 0
    assert body["uploader"]["username"] == "panitia"

    listing = await client.get("/api/v1/materials", headers=participant_headers)
    assert listing.status_code == 200
    assert [m["title"] for m in listing.json()] == ["Modul 1"]


async def test_upload_without_title_rejected(client, organizer_headers):
    res = await _upload(client, organizer_headers, title="   ")
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_upload_over_limit_rejected(client, organizer_headers, file_store):
    file_store.max_bytes = 16
    res = await _upload(client, organizer_headers, content=b"x" * 17)
    assert res.status_code == 400
    assert res.json()["code"] == "FILE_TOO_LARGE"
    assert not any(file_store.upload_dir.iterdir())


async def test_download_counts_each_request(client, organizer_headers, participant_headers):
    material = (await _upload(client, organizer_headers)).json()

    for _ in range(2):
        res = await client.get(
            f"/api/v1/materials/{material['id']}/download", headers=participant_headers,
        )
        assert res.status_code == 200
        assert res.content == b"isi modul"
        assert "modul.pdf" in res.headers["content-disposition"]

    listing = await client.get("/api/v1/materials", headers=participant_headers)
    assert listing.json()[0]["downloadCount"] == 2


async def test_download_without_file_is_404_and_not_counted(
    client, organizer_headers, participant_headers,
):
    material = (await _upload(client, organizer_headers, content=None)).json()
    res = await client.get(
        f"/api/v1/materials/{material['id']}/download", headers=participant_headers,
    )
    assert res.status_code == 404

    listing = await client.get("/api/v1/materials", headers=participant_headers)
    assert listing.json()[0]["downloadCount"] == 0


async def test_download_missing_material(client, participant_headers):
    res = await client.get("/api/v1/materials/999/download", headers=participant_headers)
    assert res.status_code == 404


async def test_delete_removes_row_and_file(client, organizer_headers, file_store):
    material = (await _upload(client, organizer_headers)).json()
    assert len(list(file_store.upload_dir.iterdir())) == 1

    res = await client.delete(f"/api/v1/materials/{material['id']}", headers=organizer_headers)
    assert res.status_code == 200
    assert res.json()["message"] == "Material deleted"
    assert not any(file_store.upload_dir.iterdir())

    again = await client.delete(f"/api/v1/materials/{material['id']}", headers=organizer_headers)
    assert again.status_code == 404


async def test_failed_insert_removes_stored_file(
    client, organizer_headers, file_store, monkeypatch,
):
    async def _fail(self, **kwargs):
        raise DatabaseError("insert rejected", "commit")

    monkeypatch.setattr(MaterialRepository, "create", _fail)

    res = await _upload(client, organizer_headers)
    assert res.status_code == 500
    assert res.json()["code"] == "DATABASE_ERROR"
    assert not any(file_store.upload_dir.iterdir())
