"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def make_response(status_code=200, body=b"", url="https://randomuser.me/api/"):
    """Build a real requests.Response without touching the network."""
    if not isinstance(body, bytes):
        body = json.dumps(body).encode()
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    resp.url = url
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def sample_users():
    return [
        {"name": {"first": "Ada", "last": "Lovelace"}, "email": "ada@example.com"},
        {"name": {"first": "Alan", "last": "Turing"}, "email": "alan@example.com"},
        {"name": {"first": "Grace", "last": "Hopper"}, "email": "grace@example.com"},
    ]


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; set .response before the call, inspect .calls after."""

    class _FakeGet:
        def __init__(self):
            self.calls = []
            self.response = make_response(body={"results": []})

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if isinstance(self.response, Exception):
                raise self.response
            return self.response

    fake = _FakeGet()
    monkeypatch.setattr(requests, "get", fake)
    return fake
