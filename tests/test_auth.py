# File: tests/test_auth.py

import pytest
from fastapi.testclient import TestClient

from blemap.main import app

client = TestClient(app)


def register(email="alice@example.com", password="secret123", name="Alice"):
    return client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


def test_health_endpoint():
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_root_banner():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["message"]


def test_register_returns_user_without_password():
    resp = register()
    assert resp.status_code == 201
    data = resp.json()
    assert data["email"] == "alice@example.com"
    assert data["name"] == "Alice"
    assert data["id"]
    assert "password" not in data
    assert "hashed_password" not in data


def test_register_name_is_optional():
    resp = client.post(
        "/api/auth/register",
        json={"email": "noname@example.com", "password": "secret123"},
    )
    assert resp.status_code == 201
    assert resp.json()["name"] is None


def test_register_duplicate_email_rejected():
    assert register().status_code == 201
    resp = register(email="ALICE@example.com")
    assert resp.status_code == 400
    assert "already exists" in resp.json()["detail"]


def test_register_invalid_payload_is_400():
    resp = client.post("/api/auth/register", json={"email": "not-an-email", "password": "secret123"})
    assert resp.status_code == 400

    resp = client.post("/api/auth/register", json={"email": "bob@example.com"})
    assert resp.status_code == 400


def test_login_returns_token_and_user():
    register()
    resp = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["token"]
    assert data["user"]["email"] == "alice@example.com"


def test_login_wrong_password():
    register()
    resp = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrong-password"},
    )
    assert resp.status_code == 400
    assert "token" not in resp.json()


def test_login_unknown_user():
    resp = client.post(
        "/api/auth/login",
        json={"email": "ghost@example.com", "password": "secret123"},
    )
    assert resp.status_code == 400


def test_projects_require_token():
    resp = client.get("/api/projects")
    assert resp.status_code == 401


def test_garbage_token_rejected():
    resp = client.get("/api/projects", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_token_for_deleted_user_rejected():
    from blemap.core.security import create_access_token

    token = create_access_token("00000000-0000-0000-0000-000000000000")
    resp = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_register_multibyte_password_over_72_bytes_is_400():
    # 40 characters but 80 UTF-8 bytes, past bcrypt's input limit
    resp = client.post(
        "/api/auth/register",
        json={"email": "multi@example.com", "password": "é" * 40},
    )
    assert resp.status_code == 400


def test_register_multibyte_password_within_72_bytes():
    resp = register(email="multi@example.com", password="é" * 36)
    assert resp.status_code == 201

    resp = client.post(
        "/api/auth/login",
        json={"email": "multi@example.com", "password": "é" * 36},
    )
    assert resp.status_code == 200


def test_register_race_on_unique_email_is_user_exists(monkeypatch):
    from blemap.db.session import SessionLocal
    from blemap.schemas.user import UserCreate
    from blemap.services import auth_service

    payload = UserCreate(email="race@example.com", password="secret123")
    db = SessionLocal()
    try:
        auth_service.register_user(db, payload)

        # Second writer passed the existence check before the first committed
        monkeypatch.setattr(auth_service, "get_user_by_email", lambda db, email: None)
        with pytest.raises(auth_service.UserExistsError):
            auth_service.register_user(db, payload)

        # Session is usable again after the rollback
        assert auth_service.get_user(db, "missing") is None
    finally:
        db.close()
