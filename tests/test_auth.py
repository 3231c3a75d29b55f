# tests/test_auth.py

"""
Tests for session tokens and authentication endpoints.
"""

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from core.config import settings
from core.errors import InvalidSessionToken
from core.security import create_session_token, decode_session_token


# -----------------------------------------------------
# Session tokens
# -----------------------------------------------------
def test_decode_keeps_raw_role():
    user = decode_session_token(create_session_token("u-1", "project_manager", email="pm@example.com"))
    assert user.id == "u-1"
    assert user.role == "project_manager"
    assert user.email == "pm@example.com"


def test_decode_rejects_expired_token():
    token = create_session_token("u-1", "MEMBER", expires_minutes=-1)
    with pytest.raises(InvalidSessionToken):
        decode_session_token(token)


def test_decode_rejects_missing_subject_and_bad_signature():
    no_sub = jwt.encode({"role": "ADMIN"}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(InvalidSessionToken):
        decode_session_token(no_sub)

    forged = jwt.encode({"sub": "x", "role": "ADMIN"}, "other-secret", algorithm="HS256")
    with pytest.raises(InvalidSessionToken):
        decode_session_token(forged)

    with pytest.raises(InvalidSessionToken):
        decode_session_token(None)


# -----------------------------------------------------
# /api/auth endpoints
# -----------------------------------------------------
def test_dev_login_sets_cookie_and_me_reads_it(client: TestClient):
    response = client.post("/api/auth/dev-login", json={"user_id": "u-7", "role": "project_manager"})
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["role"] == "project_manager"
    assert settings.SESSION_COOKIE_NAME in response.cookies

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    body = me.json()
    assert body["id"] == "u-7"
    assert body["raw_role"] == "project_manager"
    assert body["role"] == "PM"
    assert body["rank"] == 70
    assert body["default_route"] == "/dashboard"
    assert "CREATE_PROJECT" in body["permissions"]


def test_me_with_bearer_token(client: TestClient, auth_headers):
    response = client.get("/api/auth/me", headers=auth_headers("Admin"))
    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"


def test_me_with_unknown_role_falls_back_to_member(client: TestClient, auth_headers):
    response = client.get("/api/auth/me", headers=auth_headers("wizard"))
    assert response.status_code == 200
    assert response.json()["role"] == "MEMBER"


def test_me_requires_session(client: TestClient):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_me_rejects_session_without_role(client: TestClient, make_token):
    token = make_token(role=None)
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_logout_clears_cookie(client: TestClient):
    client.post("/api/auth/dev-login", json={"role": "MEMBER"})
    assert client.get("/api/auth/me").status_code == 200

    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_dev_login_disabled(client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_DEV_LOGIN", False)
    response = client.post("/api/auth/dev-login", json={"role": "ADMIN"})
    assert response.status_code == 404


def test_dev_login_refused_outside_development(client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "ENV", "production")
    response = client.post("/api/auth/dev-login", json={"role": "SUPER_ADMIN"})
    assert response.status_code == 404
    assert client.get("/api/auth/me").status_code == 401


# -----------------------------------------------------
# Malformed claims in a correctly signed token
# -----------------------------------------------------
def _signed(claims):
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def test_decode_rejects_non_string_role():
    with pytest.raises(InvalidSessionToken):
        decode_session_token(_signed({"sub": "u-1", "role": ["ADMIN"]}))


def test_non_string_role_is_anonymous_not_server_error(client: TestClient):
    headers = {"Authorization": f"Bearer {_signed({'sub': 'u-1', 'role': ['ADMIN']})}"}

    assert client.get("/health/app", headers=headers).status_code == 200
    assert client.get("/api/auth/me", headers=headers).status_code == 401

    check = client.post("/api/access/check", json={}, headers=headers)
    assert check.json()["outcome"] == "unauthenticated"


def test_non_string_role_on_guarded_page_redirects_to_login(app):
    app.add_api_route("/dashboard", lambda: {"ok": True}, methods=["GET"])
    token = _signed({"sub": "u-1", "role": {"name": "ADMIN"}})

    with TestClient(app) as client:
        response = client.get(
            "/dashboard",
            headers={"Authorization": f"Bearer {token}"},
            follow_redirects=False,
        )
    assert response.status_code == 302
    assert response.headers["location"].startswith("/login?callbackUrl=")


# -----------------------------------------------------
# Token lookup in dependencies
# -----------------------------------------------------
def test_header_wins_over_cookie(client: TestClient, make_token):
    client.cookies.set(settings.SESSION_COOKIE_NAME, make_token("GUEST", user_id="cookie-user"))
    response = client.get(
        "/api/auth/me",
        headers={"Authorization": f"Bearer {make_token('ADMIN', user_id='header-user')}"},
    )
    assert response.json()["id"] == "header-user"


def test_non_bearer_scheme_falls_back_to_cookie(client: TestClient, make_token):
    client.cookies.set(settings.SESSION_COOKIE_NAME, make_token("LEADER", user_id="cookie-user"))
    response = client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 200
    assert response.json()["id"] == "cookie-user"


def test_bearer_scheme_in_openapi(client: TestClient):
    schema = client.get("/openapi.json").json()
    schemes = schema["components"]["securitySchemes"]
    assert any(s["type"] == "http" and s["scheme"] == "bearer" for s in schemes.values())
