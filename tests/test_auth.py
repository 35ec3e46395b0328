"""
Tests for login, logout and the session guard
"""
import asyncio

import pytest

from src.apps.accounts.dependencies import get_auth_service
from src.apps.accounts.services.auth_service import hash_password, safe_redirect, verify_password


def test_password_hashing_round_trip():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


@pytest.mark.parametrize(
    "target,expected",
    [
        ("/posts/admin", "/posts/admin"),
        (None, "/"),
        ("", "/"),
        ("https://evil.example.com", "/"),
        ("//evil.example.com", "/"),
        ("/\\evil.example.com", "/"),
        ("/\\\\evil.example.com", "/"),
    ],
)
def test_safe_redirect(target, expected):
    assert safe_redirect(target) == expected


def test_login_redirects_to_requested_path(client, users, admin_credentials):
    response = client.post(
        "/login",
        data={**admin_credentials, "redirect_to": "/posts/admin/new"},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/posts/admin/new"
    assert client.get("/posts/admin/new").status_code == 200


def test_login_with_wrong_password(client, users, admin_credentials):
    response = client.post(
        "/login",
        data={"email": admin_credentials["email"], "password": "nope"},
        follow_redirects=False,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"email": "Invalid email or password", "password": None}


def test_login_with_missing_fields(client):
    response = client.post("/login", data={}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "email": "Email is invalid",
        "password": "Password is required",
    }


def test_login_email_is_case_insensitive(client, users, admin_credentials):
    response = client.post(
        "/login",
        data={"email": admin_credentials["email"].upper(), "password": admin_credentials["password"]},
        follow_redirects=False,
    )
    assert response.status_code == 302


def test_login_form_reports_current_user(admin_client, admin_credentials):
    data = admin_client.get("/login", params={"redirect_to": "/posts/admin"}).json()["data"]

    assert data["redirect_to"] == "/posts/admin"
    assert data["user"]["email"] == admin_credentials["email"]
    assert data["user"]["is_admin"] is True


def test_logout_clears_session(admin_client):
    response = admin_client.post("/logout", follow_redirects=False)

    assert response.status_code == 302
    assert admin_client.get("/posts/admin", follow_redirects=False).status_code == 302


def test_session_for_deleted_user_is_anonymous(admin_client, admin_credentials):
    service = get_auth_service()
    user = asyncio.run(service.authenticate(admin_credentials["email"], admin_credentials["password"]))
    asyncio.run(service.delete(user.id))

    response = admin_client.get("/posts/admin", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"].startswith("/login")


def test_register_rejects_overlong_password():
    with pytest.raises(ValueError):
        asyncio.run(get_auth_service().register_user("x@example.com", "a" * 73))
