# tests/routes/test_blogs.py
"""Tests for the /api/blogs endpoints."""

from uuid import uuid4

from httpx import AsyncClient

from tests.routes.conftest import HeadersFactory
from tests.sample_data import FOUR_BLOGS, SIX_BLOGS

NEW_BLOG = {
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
}


async def _post_all(
    client: AsyncClient,
    blogs: tuple[dict[str, object], ...],
    headers: dict[str, str],
) -> list[dict[str, object]]:
    created = []
    for blog in blogs:
        response = await client.post("/api/blogs", json=blog, headers=headers)
        assert response.status_code == 201
        created.append(response.json())
    return created


class TestListBlogs:
    """Tests for GET /api/blogs."""

    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")
        assert response.status_code == 200
        assert response.json() == []

    async def test_returned_oldest_first_with_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        await _post_all(client, SIX_BLOGS, auth_headers)

        response = await client.get("/api/blogs")

        assert response.status_code == 200
        body = response.json()
        assert [b["title"] for b in body] == [b["title"] for b in SIX_BLOGS]
        assert all(b["user"]["username"] == "root" for b in body)
        assert "id" in body[0]
        assert "createdAt" in body[0]

    async def test_pagination(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await _post_all(client, SIX_BLOGS, auth_headers)

        response = await client.get("/api/blogs", params={"skip": 2, "limit": 2})

        assert [b["title"] for b in response.json()] == [
            "Canonical string reduction",
            "First class tests",
        ]


class TestGetBlog:
    """Tests for GET /api/blogs/{id}."""

    async def test_existing(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()

        response = await client.get(f"/api/blogs/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_unknown_is_404(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/blogs/{uuid4()}")
        assert response.status_code == 404

    async def test_malformed_id_is_422(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/not-a-uuid")
        assert response.status_code == 422
        assert response.json()["detail"] == "Validation failed"


class TestCreateBlog:
    """Tests for POST /api/blogs."""

    async def test_created_with_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == NEW_BLOG["title"]
        assert body["likes"] == 7
        assert body["user"]["username"] == "root"
        assert body["user"]["name"] == "Root"

        listed = (await client.get("/api/blogs")).json()
        assert len(listed) == 1

    async def test_likes_default_to_zero(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = {k: v for k, v in NEW_BLOG.items() if k != "likes"}

        response = await client.post("/api/blogs", json=blog, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["likes"] == 0

    async def test_missing_title_is_400(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = {k: v for k, v in NEW_BLOG.items() if k != "title"}

        response = await client.post("/api/blogs", json=blog, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"detail": "title and url are required"}
        assert (await client.get("/api/blogs")).json() == []

    async def test_blank_url_is_400(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG | {"url": "   "},
            headers=auth_headers,
        )
        assert response.status_code == 400

    async def test_without_token_is_401(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == 401
        assert response.json() == {"detail": "token invalid"}

    async def test_with_garbage_token_is_401(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": "Bearer not.a.jwt"},
        )
        assert response.status_code == 401
        assert response.json() == {"detail": "token invalid"}

    async def test_negative_likes_is_422(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG | {"likes": -1},
            headers=auth_headers,
        )
        assert response.status_code == 422


class TestUpdateBlog:
    """Tests for PUT /api/blogs/{id}."""

    async def test_replaces_fields_and_keeps_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()

        response = await client.put(
            f"/api/blogs/{created['id']}",
            json=NEW_BLOG | {"likes": 8},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["likes"] == 8
        assert body["user"] == created["user"]
        assert body["updatedAt"] is not None

    async def test_missing_likes_resets_to_zero(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()
        blog = {k: v for k, v in NEW_BLOG.items() if k != "likes"}

        response = await client.put(f"/api/blogs/{created['id']}", json=blog)

        assert response.json()["likes"] == 0

    async def test_missing_url_is_400(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()

        response = await client.put(f"/api/blogs/{created['id']}", json={"title": "only"})

        assert response.status_code == 400

    async def test_unknown_is_404(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json=NEW_BLOG)
        assert response.status_code == 404


class TestDeleteBlog:
    """Tests for DELETE /api/blogs/{id}."""

    async def test_owner_can_delete(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()

        response = await client.delete(f"/api/blogs/{created['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert (await client.get("/api/blogs")).json() == []

    async def test_other_user_is_401(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        make_auth_headers: HeadersFactory,
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()
        other_headers = await make_auth_headers("mallory")

        response = await client.delete(f"/api/blogs/{created['id']}", headers=other_headers)

        assert response.status_code == 401
        assert response.json() == {"detail": "lack of valid authentication credentials"}
        assert len((await client.get("/api/blogs")).json()) == 1

    async def test_without_token_is_401(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = (await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)).json()

        response = await client.delete(f"/api/blogs/{created['id']}")

        assert response.status_code == 401

    async def test_unknown_is_404(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=auth_headers)
        assert response.status_code == 404

    async def test_delete_all(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await _post_all(client, FOUR_BLOGS, auth_headers)

        response = await client.delete("/api/blogs")

        assert response.status_code == 204
        assert (await client.get("/api/blogs")).json() == []


class TestBlogStats:
    """Tests for GET /api/blogs/stats."""

    async def test_no_blogs(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalLikes": 0,
            "favoriteBlog": None,
            "mostBlogs": None,
            "mostLikes": None,
        }

    async def test_six_blogs(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await _post_all(client, SIX_BLOGS, auth_headers)

        response = await client.get("/api/blogs/stats")

        assert response.json() == {
            "totalLikes": 36,
            "favoriteBlog": {
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "likes": 12,
            },
            "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
            "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
        }

    async def test_four_blogs(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await _post_all(client, FOUR_BLOGS, auth_headers)

        body = (await client.get("/api/blogs/stats")).json()

        assert body["mostBlogs"] == {"author": "Aziz", "blogs": 2}
        assert body["mostLikes"] == {"author": "Aziz", "likes": 3356}
        assert body["favoriteBlog"]["title"] == "dog"
