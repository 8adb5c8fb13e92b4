"""
Test configuration and fixtures for the College Resource Hub API.

The database, log directory and upload directory are pointed at temporary
locations before the application is imported, so every run starts clean.
Email delivery is replaced by ``FakeNotifier`` through dependency overrides.
"""

import os
import tempfile
from typing import Generator

from dotenv import load_dotenv

import pytest
from fastapi.testclient import TestClient

load_dotenv()

_tmp_root = tempfile.mkdtemp(prefix="resource_hub_tests_")

test_db_url = os.getenv("TEST_DATABASE_URL")
if test_db_url:
    if "postgresql://" in test_db_url and "asyncpg" not in test_db_url:
        test_db_url = test_db_url.replace("postgresql://", "postgresql+asyncpg://")
    os.environ["DATABASE_URL"] = test_db_url
else:
    os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_root, 'test.db')}"

os.environ["LOG_DIR"] = os.path.join(_tmp_root, "logs")
os.environ["UPLOAD_DIR"] = os.path.join(_tmp_root, "uploads")
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

from resource_hub.features.auth.dependencies import get_notifier  # noqa: E402
from tests.fakes import FakeNotifier  # noqa: E402
from tests.helpers import register_and_verify  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from resource_hub.main import app

    return app


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture(scope="function")
def client(test_app, notifier) -> Generator[TestClient, None, None]:
    """
    Test client with email delivery replaced by a recording fake.
    Entering the client runs the lifespan, which creates the tables.
    """
    test_app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.pop(get_notifier, None)


@pytest.fixture
def student(client, notifier) -> dict:
    return register_and_verify(client, notifier, role="student")


@pytest.fixture
def admin(client, notifier) -> dict:
    return register_and_verify(client, notifier, role="admin", name="Admin User")
