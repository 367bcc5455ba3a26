"""
Shared fixtures: a fake HTTP transport standing in for the content API,
and a Flask app with the admin console registered.
"""

from urllib.parse import urlsplit

import pytest
from flask import Flask

from portfolio_admin import PortfolioAdmin
from portfolio_admin.client import MemorySessionStore, ResourceClient
from portfolio_admin.core.config import Config

API_BASE = "http://api.test"

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, json_body=_NO_JSON, text=""):
        self.status_code = status_code
        self._json = json_body
        self.text = text

    def json(self):
        if self._json is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._json


class Call:
    def __init__(self, method, url, headers, json, files, timeout):
        self.method = method
        self.url = url
        self.path = urlsplit(url).path
        self.headers = headers or {}
        self.json = json
        self.files = files
        self.timeout = timeout

    def __repr__(self):
        return f"Call({self.method} {self.path})"


class FakeHTTP:
    """Records every request and answers from per-route queues.

    The last queued answer for a route is sticky; an Exception instance in
    the queue is raised instead of returned.
    """

    def __init__(self):
        self.calls = []
        self.routes = {}
        self.on_request = None

    def respond(self, method, path, *answers):
        self.routes[(method, path)] = list(answers)

    def ok(self, method, path, status=200, **body):
        self.respond(method, path, FakeResponse(status, {"success": True, **body}))

    def request(self, method, url, headers=None, json=None, files=None, timeout=None):
        call = Call(method, url, headers, json, files, timeout)
        self.calls.append(call)
        if self.on_request is not None:
            self.on_request(call)

        queue = self.routes.get((method, call.path))
        if not queue:
            raise AssertionError(f"Unexpected request {method} {call.path}")
        answer = queue[0] if len(queue) == 1 else queue.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def calls_to(self, method, path):
        return [c for c in self.calls if c.method == method and c.path == path]


@pytest.fixture(autouse=True)
def isolated_log_db(tmp_path, monkeypatch):
    """Keep the activity log out of the working directory."""
    path = str(tmp_path / "admin_log.db")
    monkeypatch.setattr(Config, "ADMIN_LOG_DB", path)
    return path


@pytest.fixture
def http():
    return FakeHTTP()


@pytest.fixture
def api(http):
    """ResourceClient talking to the fake transport, no token yet."""
    return ResourceClient(base_url=API_BASE, session_store=MemorySessionStore(), http=http)


@pytest.fixture
def app(http, isolated_log_db):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["API_BASE_URL"] = API_BASE
    app.config["ADMIN_LOG_DB"] = isolated_log_db
    app.config["PORTFOLIO_API_HTTP"] = http
    PortfolioAdmin(app)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client whose session already holds an API token."""
    with client.session_transaction() as sess:
        sess[Config.SESSION_TOKEN_KEY] = "tok-123"
        sess["admin_email"] = "admin@example.com"
    return client


def make_project(record_id=7, created="2024-01-05T10:00:00Z", updated=None, **fields):
    record = {
        "id": record_id,
        "title": "Site",
        "description": "Portfolio site",
        "image": "",
        "liveUrl": "",
        "githubUrl": "",
        "technologies": ["Flask", "React"],
        "featured": False,
        "order": 0,
        "createdAt": created,
        "updatedAt": updated or created,
    }
    record.update(fields)
    return record
