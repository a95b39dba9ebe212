"""Shared fixtures for shortlink tests."""

import pytest
from fastapi.testclient import TestClient

from shortlink.core.config import Settings
from shortlink.core.database import Database
from shortlink.main import create_app
from shortlink.services.links import LinkService
from shortlink.utils.codec import LinkCodec

TEST_SECRET = "secret"


@pytest.fixture
def settings():
    """Settings for an in-memory deployment."""
    return Settings(hash_secret=TEST_SECRET, database_url=":memory:")


@pytest.fixture
def test_db():
    """Create a test database instance."""
    db = Database(":memory:")
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def codec():
    """Codec under the test secret."""
    return LinkCodec(TEST_SECRET)


@pytest.fixture
def service(test_db, codec, settings):
    """Link service backed by the test database."""
    return LinkService(test_db, codec, settings)


@pytest.fixture
def app(settings):
    """Application built from test settings."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client running the real startup, with its own in-memory store."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def client_db(client):
    """Database the running test client writes to."""
    return client.app.state.link_service.db
