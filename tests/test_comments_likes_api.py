"""Comments and likes API tests."""

import pytest


@pytest.fixture
async def post(client, register_user):
    user, headers = await register_user(name="Ann")
    r = await client.post(
        "/api/v1/posts", json={"title": "Hi", "content": "World"}, headers=headers
    )
    assert r.status_code == 201
    return r.json(), user, headers


# ═══════════════════════════════════════════════════════════
# Comments
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_comment(client, post, register_user):
    created, _, _ = post
    commenter, headers = await register_user(name="Bob")

    r = await client.post(
        "/api/v1/comments",
        json={"postId": created["id"], "content": "Nice post"},
        headers=headers,
    )
    assert r.status_code == 201
    comment = r.json()
    assert comment["postId"] == created["id"]
    assert comment["userId"] == commenter["id"]
    assert comment["content"] == "Nice post"
    assert isinstance(comment["id"], int)


@pytest.mark.asyncio
async def test_list_comments(client, post):
    created, _, headers = post
    for text in ("first", "second"):
        await client.post(
            "/api/v1/comments",
            json={"postId": created["id"], "content": text},
            headers=headers,
        )

    r = await client.get(f"/api/v1/posts/{created['id']}/comments")
    assert r.status_code == 200
    assert [c["content"] for c in r.json()] == ["first", "second"]


@pytest.mark.asyncio
async def test_list_comments_empty(client, post):
    created, _, _ = post
    r = await client.get(f"/api/v1/posts/{created['id']}/comments")
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"content": "no post id"},
        {"postId": 1},
        {"postId": 1, "content": ""},
        {},
    ],
)
async def test_create_comment_missing_fields(client, post, body):
    _, _, headers = post
    r = await client.post("/api/v1/comments", json=body, headers=headers)
    assert r.status_code == 400
    assert r.json() == {"error": "Post ID and content are required"}


@pytest.mark.asyncio
async def test_comment_on_missing_post(client, post):
    _, _, headers = post
    r = await client.post(
        "/api/v1/comments", json={"postId": 9999, "content": "hello?"}, headers=headers
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Post not found"}


@pytest.mark.asyncio
async def test_comment_requires_token(client, post):
    created, _, _ = post
    r = await client.post(
        "/api/v1/comments", json={"postId": created["id"], "content": "anon"}
    )
    assert r.status_code == 401


# ═══════════════════════════════════════════════════════════
# Likes
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_like(client, post):
    created, user, headers = post
    r = await client.post(
        "/api/v1/likes", json={"postId": created["id"]}, headers=headers
    )
    assert r.status_code == 201
    like = r.json()
    assert like["postId"] == created["id"]
    assert like["userId"] == user["id"]


@pytest.mark.asyncio
async def test_like_twice_counts_twice(client, post):
    created, _, headers = post
    for _ in range(2):
        r = await client.post(
            "/api/v1/likes", json={"postId": created["id"]}, headers=headers
        )
        assert r.status_code == 201

    r = await client.get(f"/api/v1/posts/{created['id']}/likes")
    assert r.status_code == 200
    assert len(r.json()) == 2


@pytest.mark.asyncio
async def test_create_like_missing_post_id(client, post):
    _, _, headers = post
    r = await client.post("/api/v1/likes", json={}, headers=headers)
    assert r.status_code == 400
    assert r.json() == {"error": "Post ID is required"}


@pytest.mark.asyncio
async def test_like_missing_post(client, post):
    _, _, headers = post
    r = await client.post("/api/v1/likes", json={"postId": 9999}, headers=headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_like_requires_token(client, post):
    created, _, _ = post
    r = await client.post("/api/v1/likes", json={"postId": created["id"]})
    assert r.status_code == 401


# ═══════════════════════════════════════════════════════════
# Post deletion leaves children in place
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_deleted_post_keeps_comments_and_likes(client, post):
    created, _, headers = post
    post_id = created["id"]
    await client.post(
        "/api/v1/comments", json={"postId": post_id, "content": "kept"}, headers=headers
    )
    await client.post("/api/v1/likes", json={"postId": post_id}, headers=headers)

    r = await client.delete(f"/api/v1/posts/{post_id}", headers=headers)
    assert r.status_code == 200

    comments = (await client.get(f"/api/v1/posts/{post_id}/comments")).json()
    likes = (await client.get(f"/api/v1/posts/{post_id}/likes")).json()
    assert [c["content"] for c in comments] == ["kept"]
    assert len(likes) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("post_id", ["abc", "99999999999999999999"])
async def test_list_children_of_unusable_post_id_is_empty(client, post_id):
    r = await client.get(f"/api/v1/posts/{post_id}/comments")
    assert r.status_code == 200
    assert r.json() == []

    r = await client.get(f"/api/v1/posts/{post_id}/likes")
    assert r.status_code == 200
    assert r.json() == []
