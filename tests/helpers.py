import uuid

from fastapi.testclient import TestClient

from tests.fakes import FakeNotifier


def unique_email(prefix: str = "student") -> str:
    return f"{prefix}{uuid.uuid4().hex[:8]}@college.edu"


def register_and_verify(client: TestClient, notifier: FakeNotifier, role: str = "student", **overrides) -> dict:
    """Run the full signup flow and return ``{"user", "token", "headers", "password"}``."""
    payload = {
        "name": overrides.get("name", "Test User"),
        "email": overrides.get("email", unique_email(role)),
        "password": overrides.get("password", "Secret123"),
        "role": role,
        "department": overrides.get("department", "CSE"),
    }
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201, response.json()

    code = notifier.last_code_for(payload["email"])
    response = client.post("/api/v1/auth/verify-otp", json={"email": payload["email"], "otp": code})
    assert response.status_code == 200, response.json()

    data = response.json()["data"]
    return {
        "user": data["user"],
        "token": data["token"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
        "password": payload["password"],
    }
