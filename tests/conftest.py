"""
Shared fixtures. The app is exercised without its lifespan, so no database
pool is opened; tests replace repository functions with async fakes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from auth import security
from results import names

TEST_SECRET = "test-secret-for-litigation-analytics"


@pytest.fixture(autouse=True)
def _auth_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.delenv("NEXT_PUBLIC_PASSWORD", raising=False)


@pytest.fixture(autouse=True)
def _fresh_name_state() -> None:
    names.NAME_STATE.clear()


@pytest.fixture
def client() -> TestClient:
    from main import app

    return TestClient(app)


@pytest.fixture
def token() -> str:
    return security.build_access_token(user_id=1, email="analyst@example.org")


@pytest.fixture
def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def returns():
    """Build an async fake that returns `value`."""

    def _make(value):
        async def _fake(*_args, **_kwargs):
            return value

        return _fake

    return _make


@pytest.fixture
def raises():
    """Build an async fake that raises `exc`."""

    def _make(exc: Exception):
        async def _fake(*_args, **_kwargs):
            raise exc

        return _fake

    return _make
