"""
Pytest configuration and fixtures
"""
import asyncio
import os
import tempfile
from pathlib import Path

import pytest

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-password"
USER_EMAIL = "reader@example.com"
USER_PASSWORD = "reader-password"

# Point the app at a throwaway database before anything imports settings
_db_dir = tempfile.mkdtemp(prefix="blog-admin-tests-")
os.environ["ASYNC_DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_db_dir) / 'test.db'}"
os.environ["ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from src.core.database import create_tables, drop_tables  # noqa: E402
from src.main import app  # noqa: E402
from src.apps.accounts.dependencies import get_auth_service  # noqa: E402
from src.apps.blog.routers.post_router import get_post_repository, get_post_service  # noqa: E402


async def _reset_schema():
    await drop_tables()
    await create_tables()


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test."""
    asyncio.run(_reset_schema())
    yield


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def post_repository():
    return get_post_repository()


@pytest.fixture
def post_service():
    return get_post_service()


@pytest.fixture
def get_post(post_repository):
    """Synchronous store lookup for HTTP-level tests."""
    def _get(slug):
        return asyncio.run(post_repository.get(slug))
    return _get


@pytest.fixture
def post(post_service):
    result = asyncio.run(
        post_service.create({"title": "Hello", "slug": "hello", "markdown": "# Hi"})
    )
    return result.data


@pytest.fixture
def users():
    service = get_auth_service()
    asyncio.run(service.register_user(ADMIN_EMAIL, ADMIN_PASSWORD))
    asyncio.run(service.register_user(USER_EMAIL, USER_PASSWORD))


@pytest.fixture
def client(database):
    with TestClient(app) as c:
        yield c


def _login(client, email, password):
    response = client.post(
        "/login",
        data={"email": email, "password": password},
        follow_redirects=False,
    )
    assert response.status_code == 302, response.text
    return client


@pytest.fixture
def admin_client(client, users):
    return _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def user_client(client, users):
    return _login(client, USER_EMAIL, USER_PASSWORD)


@pytest.fixture
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
