"""Certificate routes — organizer-only, duplicates allowed."""


async def test_issue_twice_creates_two_rows(client, organizer_headers, participant):
    payload = {"participantId": participant["user"]["id"]}
    first = await client.post("/api/v1/certificates", json=payload, headers=organizer_headers)
    second = await client.post("/api/v1/certificates", json=payload, headers=organizer_headers)

    assert first.status_code == second.status_code == 201
    assert first.json()["certificateType"] == "completion"
    assert first.json()["status"] == "draft"

    listing = await client.get("/api/v1/certificates", headers=organizer_headers)
    assert len(listing.json()) == 2


async def test_status_transition_and_delete(client, organizer_headers, participant):
    cert = (await client.post(
        "/api/v1/certificates",
        json={"participantId": participant["user"]["id"], "notes": "Lulus"},
        headers=organizer_headers,
    )).json()

    res = await client.patch(
        f"/api/v1/certificates/{cert['id']}", json={"status": "issued"},
        headers=organizer_headers,
    )
    assert res.status_code == 200
    assert res.json()["status"] == "issued"

    bad = await client.patch(
        f"/api/v1/certificates/{cert['id']}", json={"status": "lost"},
        headers=organizer_headers,
    )
    assert bad.status_code == 400

    deleted = await client.delete(f"/api/v1/certificates/{cert['id']}", headers=organizer_headers)
    assert deleted.status_code == 200
    missing = await client.delete(f"/api/v1/certificates/{cert['id']}", headers=organizer_headers)
    assert missing.status_code == 404


async def test_certificate_for_unknown_user(client, organizer_headers):
    res = await client.post(
        "/api/v1/certificates", json={"participantId": 999}, headers=organizer_headers,
    )
    assert res.status_code == 404


async def test_participant_cannot_issue(client, participant, participant_headers):
    res = await client.post(
        "/api/v1/certificates",
        json={"participantId": participant["user"]["id"]},
        headers=participant_headers,
    )
    assert res.status_code == 403


async def test_certificate_for_staff_account_rejected(client, organizer, organizer_headers):
    res = await client.post(
        "/api/v1/certificates",
        json={"participantId": organizer.id},
        headers=organizer_headers,
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"
