# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from articles_api.core.config import Settings
from articles_api.db.init_db import init_db
from articles_api.main import create_application

TEST_SECRET = "test-secret-key"


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        access_token_expire_minutes=5,
    )


@pytest.fixture()
def app(settings):
    app = create_application(settings)
    init_db(bind=app.state.engine)
    yield app
    app.state.engine.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def register(client):
    def _register(username: str, email: str, password: str = "s3cret-pass"):
        return client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register


@pytest.fixture()
def login(client):
    def _login(email: str, password: str = "s3cret-pass") -> str:
        resp = client.post("/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _login


@pytest.fixture()
def bearer():
    def _bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _bearer
