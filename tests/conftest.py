# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from main import create_app
from core.security import create_session_token
from models.user import CurrentUser


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_token():
    """Factory for signed session tokens carrying a raw role string."""

    def _make(role="MEMBER", user_id="test-user-id", **kwargs):
        return create_session_token(user_id=user_id, role=role, **kwargs)

    return _make


@pytest.fixture
def auth_headers(make_token):
    """Factory for Authorization headers."""

    def _headers(role="MEMBER", user_id="test-user-id"):
        return {"Authorization": f"Bearer {make_token(role=role, user_id=user_id)}"}

    return _headers


@pytest.fixture
def mock_admin_user():
    return CurrentUser(id="admin-user-id", email="admin@example.com", role="ADMIN")


@pytest.fixture
def mock_member_user():
    return CurrentUser(id="member-user-id", email="member@example.com", role="member")


@pytest.fixture
def mock_pm_user():
    """Legacy lowercase label, as older sessions carry it."""
    return {"id": "pm-user-id", "role": "project_manager"}


@pytest.fixture
def mock_guest_user():
    return {"id": "guest-user-id", "role": "GUEST"}
