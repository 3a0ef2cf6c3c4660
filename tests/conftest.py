import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from openlaunch.core.config import Settings
from openlaunch.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'openlaunch.db'}",
        page_size_default=20,
        page_size_max=100,
        page_numbers_visible=7,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_profile(client):
    def _make(username: str, **extra) -> dict:
        payload = {"username": username, "email": f"{username}@example.com", **extra}
        resp = client.post("/api/v1/profiles", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_project(client):
    def _make(owner: str, name: str, **extra) -> dict:
        payload = {"owner": owner, "name": name, "tagline": f"{name} tagline", "status": "launched", **extra}
        resp = client.post("/api/v1/projects", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _make


@pytest.fixture
def sync_engine(settings, client):
    """Blocking engine on the same SQLite file, for arranging rows directly."""
    engine = create_engine(settings.database_url.replace("+aiosqlite", ""))
    yield engine
    engine.dispose()
