import os
import tempfile

os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("UPLOAD_ROOT", tempfile.mkdtemp(prefix="portfolio-uploads-"))

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from config import upload_config
from main import app
from portfolio.client.storage import LocalStorage
from portfolio.client.store import ProjectStore
from portfolio.controllers.v1.portfolio_page.portfolio_page import get_project_store
from portfolio.database.conn import mongo_client
from portfolio.services.notification.mailer import get_notifier
from portfolio.utils.errors import NotificationFailedError


class RecordingNotifier:
    def __init__(self):
        self.sent = []
        self.fail = False

    async def __call__(self, contact):
        if self.fail:
            raise NotificationFailedError("SMTP server unreachable")
        self.sent.append(contact)


@pytest.fixture
def mongo_db():
    mongo_client.bind(AsyncMongoMockClient(), "portfolio_test")
    yield mongo_client.database
    mongo_client._client = None
    mongo_client._db = None


@pytest.fixture
def upload_root(tmp_path, monkeypatch):
    root = tmp_path / "uploads"
    monkeypatch.setitem(upload_config, "UPLOAD_ROOT", str(root))
    return root


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "client")


@pytest.fixture
def project_store(storage):
    return ProjectStore(storage)


@pytest.fixture
def client(mongo_db, upload_root, notifier, project_store):
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_project_store] = lambda: project_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_project(client):
    def _make(**overrides):
        data = {
            "title": "Realtime Chat",
            "description": "WebSocket chat rooms",
            "technologies": "Python, FastAPI",
            "category": "web",
        }
        data.update(overrides)
        resp = client.post("/api/projects", data=data)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
