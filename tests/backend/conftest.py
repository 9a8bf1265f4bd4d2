import os
import uuid

# Settings are read at import time, so the environment must be set first
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789abcdef")
TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from plevenlab.core import db as db_module
from plevenlab.core.credentials import create_credential
from plevenlab.main import app
from plevenlab.models.user import User


db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Provide a fresh database without an HTTP client (service-level tests).
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Startup hooks are not run, so no bootstrap admin is created.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23", name: str | None = None) -> tuple[User, str]:
        credential = create_credential(password)
        user = await User.create(
            name=name or f"user_{uuid.uuid4().hex[:6]}",
            email=f"{uuid.uuid4().hex[:6]}@example.com",
            password_hash=credential.hash,
            password_salt=credential.salt,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(username: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def auth_headers(create_user, auth_header_factory):
    """
    Authorization headers of a freshly created user.
    """
    user, password = await create_user()
    return await auth_header_factory(user.name, password)
