"""
Pytest configuration and fixtures for the gateway and directory tests.
"""
import os
import sys
from urllib.parse import urlsplit

import pytest
import requests

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from gateway.app import create_app as create_gateway_app
from gateway.config import TestingConfig
from player_service.app import create_app as create_player_app
from team_service.app import create_app as create_team_app


class FlaskBackedSession:
    """
    Drop-in for requests.Session that answers GETs from Flask test clients,
    keyed by base URL. Unknown hosts raise ConnectionError like a dead upstream.
    """

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        parts = urlsplit(url)
        base = f"{parts.scheme}://{parts.netloc}"

        app = self.routes.get(base)
        if app is None:
            raise requests.exceptions.ConnectionError(f"Connection refused: {base}")

        served = app.test_client().get(parts.path or '/')

        resp = requests.Response()
        resp.status_code = served.status_code
        resp._content = served.data
        resp.headers['Content-Type'] = served.headers.get('Content-Type')
        resp.url = url
        return resp

    def calls_to(self, base_url):
        return [c for c in self.calls if c.startswith(base_url)]


@pytest.fixture
def player_app():
    """Player directory with seed data."""
    return create_player_app()


@pytest.fixture
def team_app():
    """Team directory with seed data."""
    return create_team_app()


@pytest.fixture
def upstream_session(player_app, team_app):
    return FlaskBackedSession({
        TestingConfig.PLAYER_SERVICE_URL: player_app,
        TestingConfig.TEAM_SERVICE_URL: team_app,
    })


@pytest.fixture
def app(upstream_session):
    """Gateway wired to the real directory apps."""
    return create_gateway_app('testing', session=upstream_session)


@pytest.fixture
def client(app):
    """Create gateway test client."""
    return app.test_client()


@pytest.fixture
def player_client(player_app):
    return player_app.test_client()


@pytest.fixture
def team_client(team_app):
    return team_app.test_client()


@pytest.fixture
def build_gateway():
    """Factory for a gateway over an arbitrary set of upstream apps."""
    def _build(routes):
        session = FlaskBackedSession(routes)
        return create_gateway_app('testing', session=session), session
    return _build
