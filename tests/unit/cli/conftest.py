"""
Fixtures for CLI tests: a fake marketplace server behind a mocked HTTP session.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest
from click.testing import CliRunner

from tradiestop.app import MarketplaceApp
from tradiestop.cli import cli
from tradiestop.cli.utils.context import CliState
from tradiestop.services.session_store import SessionStore


class FakeServer:
    """Answers ``session.request`` calls from a table of canned routes.

    Unknown routes answer 404. Every request is recorded in ``calls`` as
    ``(method, path, json body)``.
    """

    def __init__(self, base_url: str, response_factory):
        self.base_url = base_url
        self.response_factory = response_factory
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.calls: List[Tuple[str, str, Any]] = []

    def route(self, method: str, path: str, status: int = 200, payload: Any = None) -> None:
        self.routes[(method, path)] = (status, payload)

    def requested(self, method: str, path: str) -> List[Any]:
        """Bodies of the recorded requests to one route."""
        return [body for m, p, body in self.calls if (m, p) == (method, path)]

    def __call__(self, method, url, json=None, headers=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append((method, path, json))
        if (method, path) not in self.routes:
            return self.response_factory(404, {"message": f"No route for {method} {path}"})
        status, payload = self.routes[(method, path)]
        return self.response_factory(status, payload)


@pytest.fixture
def server(test_config, response_factory, app_data_payload):
    """Fake API serving the shared app data and no notifications."""
    fake = FakeServer(test_config.api_base_url, response_factory)
    fake.route("GET", "/data/all", payload=app_data_payload)
    fake.route("GET", "/data/notifications", payload=[])
    return fake


@pytest.fixture
def sessions(client_session, tradie_session, admin_session):
    return {"client": client_session, "tradie": tradie_session, "admin": admin_session}


@pytest.fixture
def make_app(test_config, mock_http_session, server, sessions):
    """Factory building the app, logged in as ``role`` when one is given."""
    mock_http_session.request.side_effect = server
    built = []

    def _make(role: Optional[str] = None) -> MarketplaceApp:
        if role is not None:
            SessionStore(test_config.session_file).save(sessions[role])
        app = MarketplaceApp(config=test_config, session=mock_http_session)
        built.append(app)
        return app

    yield _make

    for app in built:
        app.notifications.stop_polling()


@pytest.fixture
def run(make_app):
    """Invoke the CLI as ``role`` (or logged out) and return the click result."""
    runner = CliRunner()

    def _run(args, role: Optional[str] = None, input: Optional[str] = None):
        app = make_app(role)
        return runner.invoke(cli, args, obj=CliState(app=app), input=input)

    return _run
