# tests/routes/test_users.py
"""Tests for the /api/users endpoints."""

import pytest
from httpx import AsyncClient

from app.configs import settings


async def _create(client: AsyncClient, **payload: str) -> tuple[int, dict]:
    response = await client.post("/api/users", json=payload)
    return response.status_code, response.json()


class TestCreateUser:
    """Tests for POST /api/users."""

    async def test_created(self, client: AsyncClient) -> None:
        status, body = await _create(
            client,
            username="mluukkai",
            name="Matti Luukkainen",
            password="salainen",
        )

        assert status == 201
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["blogs"] == []
        assert "password" not in body
        assert "password_hash" not in body

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "mluukkai"},
            {"password": "salainen"},
            {"username": "", "password": "salainen"},
        ],
    )
    async def test_missing_credentials(self, client: AsyncClient, payload: dict) -> None:
        status, body = await _create(client, **payload)

        assert status == 400
        assert body == {"detail": "both username and password required"}

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ml", "password": "salainen"},
            {"username": "mluukkai", "password": "sa"},
        ],
    )
    async def test_short_credentials(self, client: AsyncClient, payload: dict) -> None:
        status, body = await _create(client, **payload)

        assert status == 400
        assert body == {"detail": "username and password length should be at least 3"}

    async def test_duplicate_username(self, client: AsyncClient) -> None:
        await _create(client, username="root", password="sekret")

        status, body = await _create(client, username="root", password="another")

        assert status == 400
        assert body == {"detail": "expected `username` to be unique"}
        users = (await client.get("/api/users")).json()
        assert len(users) == 1


class TestListUsers:
    """Tests for GET /api/users."""

    async def test_users_carry_their_blogs(self, client: AsyncClient) -> None:
        await _create(client, username="root", name="Superuser", password="sekret")
        await _create(client, username="idle", password="sekret")
        login = await client.post("/api/login", json={"username": "root", "password": "sekret"})
        headers = {"Authorization": f"Bearer {login.json()['token']}"}
        await client.post(
            "/api/blogs",
            json={"title": "Type wars", "author": "Robert C. Martin", "url": "http://x.y"},
            headers=headers,
        )

        response = await client.get("/api/users")

        assert response.status_code == 200
        root, idle = response.json()
        assert root["username"] == "root"
        assert [b["title"] for b in root["blogs"]] == ["Type wars"]
        assert set(root["blogs"][0]) == {"id", "title", "author", "url", "likes"}
        assert idle["blogs"] == []


class TestDeleteAllUsers:
    """Tests for DELETE /api/users."""

    async def test_blogs_survive_without_owner(self, client: AsyncClient) -> None:
        await _create(client, username="root", password="sekret")
        login = await client.post("/api/login", json={"username": "root", "password": "sekret"})
        headers = {"Authorization": f"Bearer {login.json()['token']}"}
        await client.post(
            "/api/blogs",
            json={"title": "Type wars", "author": "Robert C. Martin", "url": "http://x.y"},
            headers=headers,
        )

        response = await client.delete("/api/users")

        assert response.status_code == 204
        assert (await client.get("/api/users")).json() == []
        blogs = (await client.get("/api/blogs")).json()
        assert len(blogs) == 1
        assert blogs[0]["user"] is None

    async def test_hidden_in_production(
        self,
        client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")

        response = await client.delete("/api/users")

        assert response.status_code == 404
