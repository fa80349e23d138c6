from __future__ import annotations

import os
import sys
from dataclasses import replace
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.search_leads'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Provider credentials from a developer's shell or .env must never leak into tests
    for key in ("OXYLABS_USERNAME", "OXYLABS_PASSWORD", "APOLLO_API_KEY"):
        monkeypatch.setenv(key, "")
    monkeypatch.setenv("ENRICH_DELAY_SECONDS", "0")
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    from config.settings import get_settings

    def _make(**overrides):
        return replace(get_settings(), **overrides)

    return _make


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Records POSTs and answers from a queue (or a callable keyed on URL)."""

    def __init__(self, responses=None):
        self.handler = responses if callable(responses) else None
        self.responses = [] if self.handler else list(responses or [])
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.handler is not None:
            result = self.handler(url, kwargs)
        else:
            result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


def oxylabs_payload(organic):
    return {"results": [{"content": {"results": {"organic": organic}}}]}


@pytest.fixture
def search_payload():
    return oxylabs_payload
