"""Test fixtures — a fresh app and SQLite database per test.

Learn: Each test gets its own Settings pointing at a throwaway SQLite file
under tmp_path, and its own app built by create_app(settings). Tables are
created straight from the ORM metadata, so there is nothing to roll back
and no cross-test pollution.

httpx's ASGITransport drives the app in-process, without a server.
It does not run the lifespan, which is why the fixture creates the tables.
"""

import os
import uuid

os.environ.setdefault("POSTBOARD_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from postboard.config import Settings
from postboard.main import create_app

TEST_JWT_SECRET = "test-secret-0123456789abcdef0123456789abcdef"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'postboard.db'}",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,  # bcrypt's minimum
        auto_create_tables=False,
        json_logs=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture()
async def app(settings):
    app = create_app(settings)
    await app.state.db.create_all()
    try:
        yield app
    finally:
        await app.state.db.dispose()


@pytest_asyncio.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def db_session(app):
    """A session on the test database, for service-level tests."""
    async with app.state.db.session_factory() as session:
        yield session


@pytest.fixture()
def register_user(client):
    """Sign up + log in through the API; returns (user, auth_headers).

    Learn: Most tests need one or two authenticated users. Emails are
    unique per call unless one is passed in.
    """

    async def _register(name="Ann", email=None, password="secret1"):
        email = email or f"user-{uuid.uuid4().hex[:8]}@example.com"
        r = await client.post(
            "/api/v1/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        user = r.json()

        r = await client.post(
            "/api/v1/login", json={"email": email, "password": password}
        )
        assert r.status_code == 200, r.text
        return user, {"Authorization": f"Bearer {r.json()['token']}"}

    return _register
