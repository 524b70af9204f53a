"""
Tests for authentication endpoints.
"""
from app.core.security import get_password_hash
from app.models import User


def test_login(client, admin):
    response = client.post(
        "/api/auth/login",
        json={"username": "admin", "password": "admin-pass"}
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"

    token = response.json()["access_token"]
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "admin"


def test_login_invalid_credentials(client, admin):
    for body in (
        {"username": "admin", "password": "wrongpassword"},
        {"username": "nonexistent", "password": "admin-pass"},
    ):
        response = client.post("/api/auth/login", json=body)
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"username": "admin"})
    assert response.status_code == 400
    assert response.json() == {"message": "All fields are required"}


def test_inactive_user_is_refused(client, db):
    user = User(
        username="former",
        password=get_password_hash("pw1"),
        roles=["Employee"],
        active=False
    )
    db.add(user)
    db.commit()

    response = client.post("/api/auth/login", json={"username": "former", "password": "pw1"})
    assert response.status_code == 403
    assert response.json() == {"message": "User account is inactive"}


def test_deactivated_caller_loses_access(client, admin, auth_headers):
    response = client.patch(
        "/api/users",
        json={"_id": admin.id, "username": "admin", "roles": ["Admin"], "active": False},
        headers=auth_headers
    )
    assert response.status_code == 200

    response = client.get("/api/users", headers=auth_headers)
    assert response.status_code == 403
