"""Request helpers for API tests."""

from fastapi.testclient import TestClient

from civicfix.config import AuthSettings
from civicfix.util.jwt import create_token

JWT_SECRET = "e2e-test-secret"
WEBHOOK_SECRET = "e2e-webhook-secret"
ADMIN_EMAIL = "admin@city.gov"


def auth_headers(email: str, name: str | None = None) -> dict[str, str]:
    """Authorization header carrying an identity token for ``email``."""
    token = create_token(email, AuthSettings(jwt_secret=JWT_SECRET), name=name)
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, email: str, name: str | None = None) -> dict:
    response = client.post("/users", json={"name": name}, headers=auth_headers(email))
    assert response.status_code in (200, 201), response.text
    return response.json()


def make_staff(client: TestClient, email: str, name: str) -> None:
    register(client, ADMIN_EMAIL, "Admin")
    register(client, email, name)
    response = client.patch(
        f"/users/{email}/role",
        json={"role": "staff"},
        headers=auth_headers(ADMIN_EMAIL),
    )
    assert response.status_code == 200, response.text


def report(client: TestClient, email: str, title: str = "Broken streetlight") -> dict:
    response = client.post(
        "/issues",
        json={
            "title": title,
            "description": "Out since Monday",
            "category": "Streetlight",
            "location": "Main St",
        },
        headers=auth_headers(email),
    )
    assert response.status_code == 201, response.text
    return response.json()
