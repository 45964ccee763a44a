"""Grade routes — organizer-only, scores bounded to [0, 100]."""


async def test_create_grade_with_average(client, organizer_headers, participant):
    res = await client.post(
        "/api/v1/grades",
        json={
            "participantId": participant["user"]["id"],
            "assignmentScore": 80, "examScore": 90, "finalScore": 100,
        },
        headers=organizer_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["averageScore"] == 90.0
    assert body["participant"]["username"] == "ani"


async def test_score_out_of_range_rejected(client, organizer_headers, participant):
    res = await client.post(
        "/api/v1/grades",
        json={"participantId": participant["user"]["id"], "examScore": 150},
        headers=organizer_headers,
    )
    assert res.status_code == 400

    listing = await client.get("/api/v1/grades", headers=organizer_headers)
    assert listing.json() == []


async def test_negative_score_rejected(client, organizer_headers, participant):
    res = await client.post(
        "/api/v1/grades",
        json={"participantId": participant["user"]["id"], "finalScore": -1},
        headers=organizer_headers,
    )
    assert res.status_code == 400


async def test_grade_for_unknown_user(client, organizer_headers):
    res = await client.post(
        "/api/v1/grades", json={"participantId": 999, "examScore": 70},
        headers=organizer_headers,
    )
    assert res.status_code == 404


async def test_partial_update(client, organizer_headers, participant):
    grade = (await client.post(
        "/api/v1/grades",
        json={"participantId": participant["user"]["id"], "assignmentScore": 60},
        headers=organizer_headers,
    )).json()

    res = await client.patch(
        f"/api/v1/grades/{grade['id']}", json={"examScore": 90},
        headers=organizer_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["assignmentScore"] == 60
    assert body["examScore"] == 90
    assert body["finalScore"] is None
    assert body["averageScore"] == 50.0


async def test_update_missing_grade(client, organizer_headers):
    res = await client.patch(
        "/api/v1/grades/5", json={"examScore": 90}, headers=organizer_headers,
    )
    assert res.status_code == 404


async def test_participant_cannot_read_grades(client, participant_headers):
    res = await client.get("/api/v1/grades", headers=participant_headers)
    assert res.status_code == 403


async def test_grade_for_staff_account_rejected(client, organizer, organizer_headers):
    res = await client.post(
        "/api/v1/grades",
        json={"participantId": organizer.id, "examScore": 50},
        headers=organizer_headers,
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"

    listing = await client.get("/api/v1/grades", headers=organizer_headers)
    assert listing.json() == []
