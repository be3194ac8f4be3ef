"""Shared fixtures for HTTP Inspector tests."""

import json

import httpx
import pytest

from httpinspector.config import InspectorConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, ignoring the environment."""
    set_config(InspectorConfig())
    yield
    set_config(None)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, status_code=200, body=None, text=None, headers=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.text = text
        self.headers = headers or {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, headers=self.headers)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def transport():
    return RecordingTransport(body={"ok": True})
