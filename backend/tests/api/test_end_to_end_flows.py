"""End-to-end flows across several resources.

Invariants:
    - A participant registers, sees an organizer's material, downloads it,
      and checks in to an instructor's session
    - An instructor's records appear in the session's record list
"""

from tests.api.helpers import bearer, registration_payload


async def test_participant_journey(client, organizer_headers, instructor_headers):
    reg = await client.post("/api/v1/auth/register", json=registration_payload("sari"))
    assert reg.status_code == 201
    login = await client.post(
        "/api/v1/auth/login", json={"username": "sari", "password": "secret123"},
    )
    headers = bearer(login.json()["token"])

    upload = await client.post(
        "/api/v1/materials",
        data={"title": "Dasar Organisasi"},
        files={"file": ("dasar.pdf", b"%PDF-1.4 dasar", "application/pdf")},
        headers=organizer_headers,
    )
    material_id = upload.json()["id"]

    materials = await client.get("/api/v1/materials", headers=headers)
    assert [m["title"] for m in materials.json()] == ["Dasar Organisasi"]
    download = await client.get(f"/api/v1/materials/{material_id}/download", headers=headers)
    assert download.content == b"%PDF-1.4 dasar"

    session = (await client.post(
        "/api/v1/attendance-sessions", json={"title": "Hari 1"}, headers=instructor_headers,
    )).json()
    active = await client.get("/api/v1/attendance-sessions/active", headers=headers)
    assert [s["id"] for s in active.json()] == [session["id"]]

    checkin = await client.post(
        "/api/v1/attendance-records",
        json={"sessionId": session["id"], "status": "present"},
        headers=headers,
    )
    assert checkin.status_code == 201

    records = await client.get(
        f"/api/v1/attendance-sessions/{session['id']}/records", headers=instructor_headers,
    )
    assert [r["participant"]["username"] for r in records.json()] == ["sari"]

    materials = await client.get("/api/v1/materials", headers=headers)
    assert materials.json()[0]["downloadCount"] == 1


async def test_organizer_grades_and_certifies(client, organizer_headers, participant):
    user_id = participant["user"]["id"]

    grade = await client.post(
        "/api/v1/grades",
        json={"participantId": user_id, "assignmentScore": 85, "examScore": 88, "finalScore": 91},
        headers=organizer_headers,
    )
    assert grade.json()["averageScore"] == 88.0

    cert = await client.post(
        "/api/v1/certificates",
        json={"participantId": user_id, "status": "issued"},
        headers=organizer_headers,
    )
    assert cert.status_code == 201
    assert cert.json()["participant"]["id"] == user_id

    me = await client.get("/api/v1/auth/me", headers=bearer(participant["token"]))
    assert me.json()["role"] == "participant"
