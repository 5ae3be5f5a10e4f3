"""
Shared fixtures for API tests.

Each test gets a fresh app bound to its own in-memory SQLite database.
"""
import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from src.mentors.api.main import create_app

ADMIN_TOKEN = "test-admin-secret"


@pytest.fixture(scope="function")
def app_settings():
    """Settings pointing at an in-memory database."""
    return Settings(
        database_url="sqlite://",
        admin_password=ADMIN_TOKEN,
        admin_path="secret-admin",
        log_format="console",
    )


@pytest.fixture(scope="function")
def client(app_settings):
    """Test client with the application lifespan running."""
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    """Headers carrying the admin token."""
    return {"X-Admin-Token": ADMIN_TOKEN}
