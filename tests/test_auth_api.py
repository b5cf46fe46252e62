from venuebook.core.security import decode_access_token
from venuebook.db.models import AuditLog

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_admin_login(client):
    response = client.post(
        "/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"] == {"name": "Admin", "role": "admin"}

    claims = decode_access_token(body["token"])
    assert claims["role"] == "admin"
    assert "exp" in claims


def test_login_email_is_case_insensitive(client):
    response = client.post(
        "/auth/login",
        json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200


def test_wrong_password(client, db):
    response = client.post(
        "/auth/login",
        json={"email": ADMIN_EMAIL, "password": "wrong"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"
    assert db.query(AuditLog).filter(AuditLog.action == "auth.login_failed").count() == 1


def test_unknown_user(client):
    response = client.post(
        "/auth/login",
        json={"email": "nobody@venuebook.in", "password": "whatever"},
    )
    assert response.status_code == 401


def test_user_login_returns_user_role(client, guest_user):
    response = client.post(
        "/auth/login",
        json={"email": "guest@venuebook.in", "password": "guest-password"},
    )

    assert response.status_code == 200
    assert response.json()["user"] == {"name": "Regular Guest", "role": "user"}


def test_login_rate_limit(client):
    for _ in range(5):
        client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"})

    response = client.post(
        "/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 429


def test_tampered_token_is_invalid():
    assert decode_access_token("not.a.token") is None
