# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient

type HeadersFactory = Callable[[str, str], Awaitable[dict[str, str]]]


@pytest.fixture
def make_auth_headers(client: AsyncClient) -> HeadersFactory:
    """Register a user, log in, and return bearer headers for that user."""

    async def _make(username: str, password: str = "salainen") -> dict[str, str]:
        created = await client.post(
            "/api/users",
            json={"username": username, "name": username.title(), "password": password},
        )
        assert created.status_code == 201
        login = await client.post(
            "/api/login",
            json={"username": username, "password": password},
        )
        assert login.status_code == 200
        return {"Authorization": f"Bearer {login.json()['token']}"}

    return _make


@pytest.fixture
async def auth_headers(make_auth_headers: HeadersFactory) -> dict[str, str]:
    """Bearer headers for the user ``root``."""
    return await make_auth_headers("root")
