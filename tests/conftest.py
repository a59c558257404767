# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from pathlib import Path
from tempfile import mkdtemp

# Settings are read at import time, so this must happen before app is imported
_TEST_DB_DIR = Path(mkdtemp(prefix="bloglist-tests-"))
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.db import drop_db, init_db  # noqa: E402
from app.main import app  # noqa: E402
from app.managers.rate_limiter import limiter  # noqa: E402
from tests.sample_data import FOUR_BLOGS, SIX_BLOGS  # noqa: E402


@pytest.fixture
def six_blogs() -> list[dict[str, object]]:
    """The six-entry reference blog list (36 likes in total)."""
    return [dict(blog) for blog in SIX_BLOGS]


@pytest.fixture
def four_blogs() -> list[dict[str, object]]:
    """Four blogs where ``Aziz`` wrote two of them."""
    return [dict(blog) for blog in FOUR_BLOGS]


@pytest.fixture
async def database() -> AsyncGenerator[None]:
    """Create every table before the test and drop them afterwards."""
    await init_db()
    yield
    await drop_db()


@pytest.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app with rate limiting disabled."""
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True
