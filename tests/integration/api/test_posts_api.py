"""Integration tests for the posts API."""

import pytest
from httpx import AsyncClient

from tests.conftest import RegisterFn, token_headers

MISSING_POST = "00000000-0000-0000-0000-000000000000"


async def _create_post(api_client: AsyncClient, token: str, text: str = "hi") -> dict:
    response = await api_client.post(
        "/api/post", json={"text": text}, headers=token_headers(token)
    )
    assert response.status_code == 200, response.text
    return response.json()


async def _user_id(api_client: AsyncClient, token: str) -> str:
    response = await api_client.get("/api/auth", headers=token_headers(token))
    return str(response.json()["id"])


class TestCreatePost:
    @pytest.mark.asyncio
    async def test_copies_author_details(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        me = (await api_client.get("/api/auth", headers=token_headers(token))).json()

        post = await _create_post(api_client, token)

        assert post["text"] == "hi"
        assert post["user_id"] == me["id"]
        assert post["name"] == "Ann"
        assert post["avatar"] == me["avatar"]
        assert post["likes"] == []
        assert post["comments"] == []

    @pytest.mark.asyncio
    async def test_text_is_required(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()

        response = await api_client.post(
            "/api/post", json={"text": ""}, headers=token_headers(token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [{"field": "text", "msg": "Text is required"}]

    @pytest.mark.asyncio
    async def test_requires_token(self, api_client: AsyncClient):
        response = await api_client.post("/api/post", json={"text": "hi"})

        assert response.status_code == 401


class TestReadPosts:
    @pytest.mark.asyncio
    async def test_lists_newest_first(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        await _create_post(api_client, token, "first")
        await _create_post(api_client, token, "second")

        response = await api_client.get("/api/post", headers=token_headers(token))

        assert response.status_code == 200
        assert [post["text"] for post in response.json()] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_get_by_id(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        post = await _create_post(api_client, token)

        response = await api_client.get(f"/api/post/{post['id']}", headers=token_headers(token))

        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [MISSING_POST, "not-an-id"])
    async def test_missing_post(
        self, api_client: AsyncClient, register: RegisterFn, post_id: str
    ):
        token = await register()

        response = await api_client.get(f"/api/post/{post_id}", headers=token_headers(token))

        assert response.status_code == 404
        assert response.json()["msg"] == "Post not found"


class TestDeletePost:
    @pytest.mark.asyncio
    async def test_author_deletes(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        post = await _create_post(api_client, token)

        response = await api_client.delete(f"/api/post/{post['id']}", headers=token_headers(token))

        assert response.status_code == 200
        assert response.json() == {"msg": "Post removed"}
        gone = await api_client.get(f"/api/post/{post['id']}", headers=token_headers(token))
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_missing_post(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()

        response = await api_client.delete(
            f"/api/post/{MISSING_POST}", headers=token_headers(token)
        )

        assert response.status_code == 404


class TestLikes:
    @pytest.mark.asyncio
    async def test_like_and_unlike(self, api_client: AsyncClient, register: RegisterFn):
        ann = await register()
        bob = await register(name="Bob", email="b@x.com")
        post = await _create_post(api_client, ann)
        ann_id, bob_id = await _user_id(api_client, ann), await _user_id(api_client, bob)

        await api_client.put(f"/api/post/like/{post['id']}", headers=token_headers(ann))
        liked = await api_client.put(f"/api/post/like/{post['id']}", headers=token_headers(bob))

        assert liked.json() == [{"user_id": bob_id}, {"user_id": ann_id}]

        unliked = await api_client.put(
            f"/api/post/unlike/{post['id']}", headers=token_headers(ann)
        )

        assert unliked.status_code == 200
        assert unliked.json() == [{"user_id": bob_id}]

    @pytest.mark.asyncio
    async def test_unlike_without_like_leaves_likes_unchanged(
        self, api_client: AsyncClient, register: RegisterFn
    ):
        ann = await register()
        bob = await register(name="Bob", email="b@x.com")
        post = await _create_post(api_client, ann)
        bob_id = await _user_id(api_client, bob)
        await api_client.put(f"/api/post/like/{post['id']}", headers=token_headers(bob))

        response = await api_client.put(
            f"/api/post/unlike/{post['id']}", headers=token_headers(ann)
        )

        assert response.status_code == 400
        assert response.json()["msg"] == "Post has not yet been liked"
        after = await api_client.get(f"/api/post/{post['id']}", headers=token_headers(ann))
        assert after.json()["likes"] == [{"user_id": bob_id}]

    @pytest.mark.asyncio
    async def test_like_missing_post(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()

        response = await api_client.put(
            f"/api/post/like/{MISSING_POST}", headers=token_headers(token)
        )

        assert response.status_code == 404


class TestComments:
    @pytest.mark.asyncio
    async def test_comment_lifecycle(self, api_client: AsyncClient, register: RegisterFn):
        ann = await register()
        bob = await register(name="Bob", email="b@x.com")
        post = await _create_post(api_client, ann)

        await api_client.post(
            f"/api/post/comment/{post['id']}", json={"text": "first"}, headers=token_headers(ann)
        )
        response = await api_client.post(
            f"/api/post/comment/{post['id']}", json={"text": "second"}, headers=token_headers(bob)
        )

        assert response.status_code == 200
        comments = response.json()
        assert [c["text"] for c in comments] == ["second", "first"]
        assert [c["name"] for c in comments] == ["Bob", "Ann"]

        bobs_comment = comments[0]["id"]
        forbidden = await api_client.delete(
            f"/api/post/comment/{post['id']}/{bobs_comment}", headers=token_headers(ann)
        )
        assert forbidden.status_code == 401

        removed = await api_client.delete(
            f"/api/post/comment/{post['id']}/{bobs_comment}", headers=token_headers(bob)
        )
        assert removed.status_code == 200
        assert [c["text"] for c in removed.json()] == ["first"]

    @pytest.mark.asyncio
    async def test_comment_text_required(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        post = await _create_post(api_client, token)

        response = await api_client.post(
            f"/api/post/comment/{post['id']}", json={}, headers=token_headers(token)
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Text is required"

    @pytest.mark.asyncio
    async def test_delete_unknown_comment(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()
        post = await _create_post(api_client, token)

        response = await api_client.delete(
            f"/api/post/comment/{post['id']}/{MISSING_POST}", headers=token_headers(token)
        )

        assert response.status_code == 404
        assert response.json()["msg"] == "Comment does not exist"

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, api_client: AsyncClient, register: RegisterFn):
        token = await register()

        response = await api_client.post(
            f"/api/post/comment/{MISSING_POST}", json={"text": "hi"}, headers=token_headers(token)
        )

        assert response.status_code == 404


class TestScenario:
    @pytest.mark.asyncio
    async def test_register_post_like_and_protect_from_others(
        self, api_client: AsyncClient, register: RegisterFn
    ):
        ann = await register(name="Ann", email="a@x.com", password="secret1")
        ann_id = await _user_id(api_client, ann)

        post = await _create_post(api_client, ann, "hi")

        liked = await api_client.put(f"/api/post/like/{post['id']}", headers=token_headers(ann))
        assert liked.status_code == 200
        assert liked.json() == [{"user_id": ann_id}]

        again = await api_client.put(f"/api/post/like/{post['id']}", headers=token_headers(ann))
        assert again.status_code == 400
        assert again.json()["msg"] == "Post already liked"

        bob = await register(name="Bob", email="b@x.com")
        forbidden = await api_client.delete(
            f"/api/post/{post['id']}", headers=token_headers(bob)
        )
        assert forbidden.status_code == 401
        assert forbidden.json()["msg"] == "User not authorized"

        still_there = await api_client.get(f"/api/post/{post['id']}", headers=token_headers(bob))
        assert still_there.status_code == 200
        assert still_there.json()["likes"] == [{"user_id": ann_id}]
