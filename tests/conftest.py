"""Shared fixtures for jempradio tests."""

import pytest
import requests
from loguru import logger

from jempradio.relisten import RelistenResolver

ARTISTS = [
    {"name": "Phish", "slug": "phish"},
    {"name": "Grateful Dead", "slug": "grateful-dead"},
    {"name": "Joe Russo's Almost Dead", "slug": "jrad"},
    {"name": "Umphrey's McGee", "slug": "umphreys"},
]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_error=None):
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.body_error is not None:
            raise self.body_error
        return self.payload


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def artists():
    return [dict(a) for a in ARTISTS]


@pytest.fixture
def resolver(artists):
    return RelistenResolver.from_artists(artists)


@pytest.fixture
def make_session():
    """Factory: make_session(payload) or make_session(error=exc)."""
    def _make(payload=None, *, status_code=200, body_error=None, error=None):
        return FakeSession(FakeResponse(payload, status_code, body_error), error)
    return _make


@pytest.fixture
def warnings_logged():
    """Messages of WARNING-or-worse log records emitted during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]),
                            level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
