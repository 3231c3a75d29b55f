# tests/test_access_api.py

"""
Tests for /api/access endpoints and the auth dependency factories.
"""

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from dependencies.auth import (
    requires_access,
    requires_admin,
    requires_manager,
    requires_minimum_role,
    requires_owner,
    requires_permission,
    requires_permissions,
    requires_role,
)
from models.access import AccessRequirement
from models.enums import Permission, UserRole


# -----------------------------------------------------
# /api/access/check
# -----------------------------------------------------
def test_check_anonymous(client: TestClient):
    response = client.post("/api/access/check", json={"minimum_role": "MEMBER"})
    assert response.status_code == 200
    assert response.json() == {"outcome": "unauthenticated", "allowed": False, "role": None}


def test_check_anonymous_allow_guest(client: TestClient):
    response = client.post("/api/access/check", json={"allow_guest": True})
    assert response.json()["allowed"] is True


def test_check_guest_below_member(client: TestClient, auth_headers):
    response = client.post(
        "/api/access/check",
        json={"minimum_role": "MEMBER"},
        headers=auth_headers("GUEST"),
    )
    body = response.json()
    assert body["outcome"] == "forbidden"
    assert body["role"] == "GUEST"


def test_check_pm_permissions(client: TestClient, auth_headers):
    response = client.post(
        "/api/access/check",
        json={"required_permissions": ["CREATE_PROJECT", "MANAGE_TEAM"]},
        headers=auth_headers("project_manager"),
    )
    assert response.json() == {"outcome": "allowed", "allowed": True, "role": "PM"}


def test_check_rejects_unknown_tokens(client: TestClient):
    response = client.post("/api/access/check", json={"allowed_roles": ["ROOT"]})
    assert response.status_code == 422


# -----------------------------------------------------
# /api/access/navigation, /api/access/roles
# -----------------------------------------------------
def test_navigation_for_member(client: TestClient, auth_headers):
    response = client.get("/api/access/navigation", headers=auth_headers("MEMBER"))
    assert response.status_code == 200
    sections = [s["id"] for s in response.json()["sections"]]
    assert "management" not in sections
    assert "main" in sections


def test_navigation_requires_session(client: TestClient):
    assert client.get("/api/access/navigation").status_code == 401


def test_roles_listing_is_ordered_by_rank(client: TestClient, auth_headers):
    response = client.get("/api/access/roles", headers=auth_headers("MEMBER"))
    roles = response.json()
    assert [r["role"] for r in roles] == ["SUPER_ADMIN", "ADMIN", "OWNER", "PM", "LEADER", "MEMBER", "GUEST"]
    assert roles[-1]["permissions"] == ["VIEW_FILES", "VIEW_PROJECT", "VIEW_TASK"]


# -----------------------------------------------------
# Dependency factories
# -----------------------------------------------------
@pytest.fixture
def deps_client(app):
    @app.get("/api/demo/leader", dependencies=[Depends(requires_role(UserRole.LEADER))])
    def leader_only():
        return {"ok": True}

    @app.get("/api/demo/owner", dependencies=[Depends(requires_minimum_role(UserRole.OWNER))])
    def owner_only():
        return {"ok": True}

    @app.get("/api/demo/admin-area", dependencies=[Depends(requires_admin())])
    def admin_area():
        return {"ok": True}

    @app.get("/api/demo/owner-area", dependencies=[Depends(requires_owner())])
    def owner_area():
        return {"ok": True}

    @app.get("/api/demo/manager-area", dependencies=[Depends(requires_manager())])
    def manager_area():
        return {"ok": True}

    @app.get("/api/demo/invite", dependencies=[Depends(requires_permission(Permission.INVITE_USERS))])
    def invite():
        return {"ok": True}

    @app.get(
        "/api/demo/any",
        dependencies=[Depends(requires_permissions(Permission.MANAGE_BILLING, Permission.VIEW_TASK, require_all=False))],
    )
    def any_of():
        return {"ok": True}

    @app.get(
        "/api/demo/all",
        dependencies=[Depends(requires_permissions(Permission.MANAGE_BILLING, Permission.VIEW_TASK))],
    )
    def all_of():
        return {"ok": True}

    @app.get("/api/demo/public")
    def public(user=Depends(requires_access(AccessRequirement(minimum_role=UserRole.ADMIN, allow_guest=True)))):
        return {"user": user.id if user else None}

    with TestClient(app) as client:
        yield client


@pytest.mark.parametrize("role,status", [
    ("OWNER", 200), ("project_manager", 200), ("LEADER", 200), ("MEMBER", 403), ("GUEST", 403),
])
def test_requires_role_broadens(deps_client, auth_headers, role, status):
    assert deps_client.get("/api/demo/leader", headers=auth_headers(role)).status_code == status


def test_requires_role_without_session(deps_client):
    assert deps_client.get("/api/demo/leader").status_code == 401


def test_requires_minimum_role(deps_client, auth_headers):
    assert deps_client.get("/api/demo/owner", headers=auth_headers("ADMIN")).status_code == 200
    assert deps_client.get("/api/demo/owner", headers=auth_headers("PM")).status_code == 403


def test_requires_permission(deps_client, auth_headers):
    assert deps_client.get("/api/demo/invite", headers=auth_headers("OWNER")).status_code == 200
    response = deps_client.get("/api/demo/invite", headers=auth_headers("LEADER"))
    assert response.status_code == 403
    assert "INVITE_USERS" in response.json()["detail"]


def test_requires_permissions_any_vs_all(deps_client, auth_headers):
    assert deps_client.get("/api/demo/any", headers=auth_headers("GUEST")).status_code == 200
    assert deps_client.get("/api/demo/all", headers=auth_headers("GUEST")).status_code == 403
    assert deps_client.get("/api/demo/all", headers=auth_headers("SUPER_ADMIN")).status_code == 200


def test_requires_access_allow_guest(deps_client, auth_headers):
    assert deps_client.get("/api/demo/public").json() == {"user": None}
    assert deps_client.get("/api/demo/public", headers=auth_headers("MEMBER")).status_code == 403
    admin = deps_client.get("/api/demo/public", headers=auth_headers("ADMIN", user_id="a-1"))
    assert admin.json() == {"user": "a-1"}


@pytest.mark.parametrize("path,role,status", [
    ("/api/demo/admin-area", "OWNER", 200),
    ("/api/demo/admin-area", "SUPER_ADMIN", 200),
    ("/api/demo/admin-area", "PM", 403),
    ("/api/demo/owner-area", "OWNER", 200),
    ("/api/demo/owner-area", "ADMIN", 200),
    ("/api/demo/owner-area", "PM", 403),
    ("/api/demo/manager-area", "LEADER", 200),
    ("/api/demo/manager-area", "project_manager", 200),
    ("/api/demo/manager-area", "MEMBER", 403),
    ("/api/demo/manager-area", "GUEST", 403),
])
def test_canned_role_shortcuts(deps_client, auth_headers, path, role, status):
    assert deps_client.get(path, headers=auth_headers(role)).status_code == status


def test_canned_shortcuts_need_a_session(deps_client):
    assert deps_client.get("/api/demo/manager-area").status_code == 401
