import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from osrm.core.config import ClientConfig
from osrm.core.models import Coordinate


class FakeResponse:
    def __init__(self, body, status_code=200):
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code


@pytest.fixture
def foo():
    return Coordinate(lat=13.388860, lon=52.517037)


@pytest.fixture
def bar():
    return Coordinate(lat=13.397634, lon=52.529407)


@pytest.fixture
def cfg():
    return ClientConfig(timeout=9, base_url="https://router.example.org")


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace requests.Session.get; every call is recorded in `calls`.
    Set `reply` to a FakeResponse or an exception instance.
    """
    import requests

    state = {"calls": [], "reply": FakeResponse({"code": "Ok"})}

    def _get(self, url, **kwargs):
        state["calls"].append({"url": url, "headers": dict(self.headers), **kwargs})
        if isinstance(state["reply"], BaseException):
            raise state["reply"]
        return state["reply"]

    monkeypatch.setattr(requests.Session, "get", _get)
    return state


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI calls init_logging(force=True); undo it after each test."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
