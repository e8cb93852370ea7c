"""Fixtures for API level tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient


@dataclass
class RegisteredUser:
    id: int
    username: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture()
def client(reset_database):
    """Return a test client bound to a clean application instance."""

    from realmhub.main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def register(client: TestClient):
    """Return a helper registering a user and logging them in."""

    def _register(username: str, password: str = "Secret123") -> RegisteredUser:
        response = client.post(
            "/users/",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        token_response = client.post(
            "/auth/token",
            data={"username": username, "password": password},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert token_response.status_code == 200, token_response.text
        return RegisteredUser(
            id=response.json()["id"],
            username=username,
            token=token_response.json()["access_token"],
        )

    return _register
