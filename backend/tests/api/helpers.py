"""Request builders shared by the API tests."""

TEST_SECRET = "makesta-api-test-secret"


def registration_payload(username: str, **overrides) -> dict:
    """A complete participant sign-up form in camelCase."""
    payload = {
        "username": username,
        "password": "secret123",
        "fullName": f"{username.title()} Putra",
        "email": f"{username}@example.com",
        "phone": "081234567890",
        "birthPlace": "Bandung",
        "address": "Jl. Merdeka 1",
        "elementarySchool": "SDN 1 Bandung",
        "juniorHighSchool": "SMPN 2 Bandung",
        "purpose": "Belajar organisasi",
        "interests": "Membaca",
        "talents": "Menyanyi",
    }
    payload.update(overrides)
    return payload


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
