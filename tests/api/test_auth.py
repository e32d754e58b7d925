"""Tests for login, logout and the session gate."""

import pytest
from fastapi.testclient import TestClient

from laptopdesk.core.jwt import create_access_token
from tests.conftest import TEST_PASSWORD, TEST_USERNAME


def test_login_sets_httponly_cookie(client: TestClient, user):
    response = client.post(
        "/auth/login",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "user": {"id": "U1", "username": "admin", "name": "Shop Owner"},
    }

    set_cookie = response.headers["set-cookie"].lower()
    assert set_cookie.startswith("token=")
    assert "httponly" in set_cookie
    assert "max-age=604800" in set_cookie


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": TEST_USERNAME, "password": "wrong"},
        {"username": "ghost", "password": TEST_PASSWORD},
    ],
)
def test_bad_credentials_are_unauthorized(client: TestClient, user, credentials):
    response = client.post("/auth/login", json=credentials)

    assert response.status_code == 401
    assert "token" not in response.cookies


def test_me_returns_current_user(auth_client: TestClient):
    response = auth_client.get("/auth/me")

    assert response.status_code == 200
    assert response.json()["username"] == TEST_USERNAME


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/laptops"),
        ("post", "/laptops"),
        ("patch", "/laptops/L1"),
        ("get", "/clients"),
        ("post", "/clients"),
        ("get", "/expenses"),
        ("post", "/expenses"),
        ("get", "/sales"),
        ("post", "/sales"),
        ("get", "/commissions"),
        ("post", "/commissions"),
        ("patch", "/commissions/X1"),
        ("get", "/auth/me"),
    ],
)
def test_endpoints_require_session(client: TestClient, method, path):
    response = client.request(method.upper(), path, json=None if method == "get" else {})

    assert response.status_code == 401


def test_garbage_cookie_is_unauthorized(client: TestClient, user):
    client.cookies.set("token", "not-a-jwt")

    assert client.get("/laptops").status_code == 401


def test_token_for_unknown_user_is_unauthorized(client: TestClient, user):
    client.cookies.set("token", create_access_token({"sub": "deleted-user"}))

    response = client.get("/laptops")

    assert response.status_code == 401
    assert response.json() == {"detail": "User not found"}


def test_logout_clears_session(auth_client: TestClient):
    response = auth_client.post("/auth/logout")

    assert response.status_code == 200
    assert auth_client.get("/auth/me").status_code == 401
