#!/usr/bin/env python3
"""
Postboard Quickstart — the full access-control lifecycle in one script.

Signs up two users, posts as the first, shows the second being refused,
comments and likes, then deletes the post as its owner.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: postboard serve   (http://localhost:5000)

All routes live under /api/v1 (/api/v1/signup, /api/v1/posts, ...), not at
the server root. Clients written against root paths need the new prefix.
"""

import os
import sys
import uuid

import httpx

BASE = os.environ.get("POSTBOARD_API_URL", "http://localhost:5000/api/v1")


def signup_and_login(client: httpx.Client, name: str, run_id: str) -> dict:
    """Register a fresh user and return auth headers for them."""
    email = f"{name.lower()}-{run_id}@example.com"
    password = "secret-password"

    resp = client.post("/signup", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 201, f"Signup failed: {resp.text}"

    resp = client.post("/login", json={"email": email, "password": password})
    assert resp.status_code == 200, f"Login failed: {resp.text}"
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def main():
    run_id = uuid.uuid4().hex[:6]
    client = httpx.Client(base_url=BASE, timeout=10)

    # ── Health check ──────────────────────────────────────────────
    print("Checking backend health...")
    try:
        resp = client.get("/health")
    except httpx.ConnectError:
        print(f"Backend not reachable at {BASE}")
        print("Start it with:  postboard serve")
        sys.exit(1)
    health = resp.json()
    print(f"  Database: {'✓' if health['database'] == 'ok' else '✗'}")

    # ── Users ─────────────────────────────────────────────────────
    print("\n1. Signing up Ann and Bob...")
    ann = signup_and_login(client, "Ann", run_id)
    bob = signup_and_login(client, "Bob", run_id)

    # ── Post ──────────────────────────────────────────────────────
    print("\n2. Ann creates a post...")
    resp = client.post(
        "/posts",
        json={"title": "Hello", "content": "First post", "tags": "intro"},
        headers=ann,
    )
    assert resp.status_code == 201, f"Failed: {resp.text}"
    post = resp.json()
    print(f"   Post #{post['id']} by user {post['userId']}")

    # ── Ownership ─────────────────────────────────────────────────
    print("\n3. Bob tries to edit it...")
    resp = client.put(
        f"/posts/{post['id']}", json={"title": "Bob's now", "content": "?"}, headers=bob
    )
    print(f"   {resp.status_code} {resp.json()['error']}")

    # ── Comments & likes ──────────────────────────────────────────
    print("\n4. Bob comments and likes instead...")
    client.post("/comments", json={"postId": post["id"], "content": "Welcome!"}, headers=bob)
    client.post("/likes", json={"postId": post["id"]}, headers=bob)
    comments = client.get(f"/posts/{post['id']}/comments").json()
    likes = client.get(f"/posts/{post['id']}/likes").json()
    print(f"   {len(comments)} comment(s), {len(likes)} like(s)")

    # ── Listing ───────────────────────────────────────────────────
    resp = client.get("/posts", params={"tag": "intro", "limit": 5})
    print(f"\n5. Posts tagged 'intro' (first page): {len(resp.json())}")

    # ── Delete ────────────────────────────────────────────────────
    print("\n6. Ann deletes her post...")
    resp = client.delete(f"/posts/{post['id']}", headers=ann)
    print(f"   {resp.json()['message']}")
    resp = client.get(f"/posts/{post['id']}")
    print(f"   GET afterwards → {resp.status_code}")

    print("\nDone.")


if __name__ == "__main__":
    main()
