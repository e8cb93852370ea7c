"""Tests for registration and the authentication token endpoint."""

from __future__ import annotations

from realmhub.infrastructure.security import user_id_from_token


def test_register_and_login_with_username_or_email(client) -> None:
    """A registered user can obtain a token with either login name."""

    payload = {"username": "alice", "email": "alice@example.com", "password": "StrongPass123"}
    response = client.post("/users/", json=payload)

    assert response.status_code == 201
    created = response.json()
    assert created["username"] == "alice"
    assert "password" not in created

    for login in ("alice", "alice@example.com"):
        token_response = client.post(
            "/auth/token",
            data={"username": login, "password": payload["password"]},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert token_response.status_code == 200
        body = token_response.json()
        assert body["token_type"] == "bearer"
        assert user_id_from_token(body["access_token"]) == created["id"]


def test_wrong_password_is_rejected(client, register) -> None:
    register("bob")

    response = client.post(
        "/auth/token",
        data={"username": "bob", "password": "nope"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Credenciales incorrectas"


def test_duplicate_registration_conflicts(client, register) -> None:
    register("carol")

    response = client.post(
        "/users/",
        json={"username": "carol", "email": "other@example.com", "password": "Secret123"},
    )

    assert response.status_code == 409


def test_me_requires_a_valid_token(client, register) -> None:
    dave = register("dave")

    assert client.get("/users/me").status_code == 401
    invalid = client.get("/users/me", headers={"Authorization": "Bearer broken"})
    assert invalid.status_code == 401
    assert invalid.json()["detail"] == "Credenciales inválidas"

    me = client.get("/users/me", headers=dave.headers)
    assert me.status_code == 200
    assert me.json()["id"] == dave.id
