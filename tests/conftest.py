"""Pytest configuration shared by all test layers.

Environment variables are set before anything under ``src`` is imported,
because Settings is loaded once at import time:

- in-memory SQLite (aiosqlite), so no database server is needed
- bcrypt cost 4, so hashing does not dominate the run
- a fixed signing key, so tokens can be forged deliberately in tests
- reset tokens exposed in responses, so the reset flow can be driven over HTTP
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-signing-key-0123456789abcdef-0123456789")
os.environ.setdefault("EXPOSE_RESET_TOKEN", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real bcrypt/JWT/SQLite"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


@pytest_asyncio.fixture
async def test_database():
    """Fresh in-memory database with all tables, disposed after the test."""
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Session bound to the per-test database."""
    async with test_database.get_session() as session:
        yield session


@pytest.fixture
def mock_logger():
    """Logger double; assertions inspect ``.info``/``.warning``/``.error`` calls."""
    return Mock()
