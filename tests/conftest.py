"""
Shared fixtures: a fresh app and database per test on a temporary SQLite file.
"""
import pytest
from databases import Database
from fastapi.testclient import TestClient
from taskhub.app import create_app
from taskhub.modules.config import Settings
from taskhub.modules.database import init_db

TEST_JWT_KEY = "test-signing-key-for-taskhub-suite-0123456789"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'taskhub.db'}",
        jwt_key=TEST_JWT_KEY,
        log_to_file=False,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def database(settings):
    """Connected database with the schema applied."""
    db = Database(settings.database_url)
    await db.connect()
    await init_db(db)
    yield db
    await db.disconnect()


@pytest.fixture
def register(client):
    """Register a user over HTTP and return the response body."""
    def _register(username="u1", email="u1@example.com", password="Secret1!"):
        response = client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def auth_headers(client, register):
    """Register + login, returning (user, headers) for bearer-protected calls."""
    def _auth_headers(username="u1", email="u1@example.com", password="Secret1!"):
        user = register(username=username, email=email, password=password)
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return user, {"Authorization": f"Bearer {response.json()['token']}"}
    return _auth_headers
