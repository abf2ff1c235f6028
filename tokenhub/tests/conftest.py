from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple
from urllib.parse import urlsplit

import pytest
import requests
from requests import PreparedRequest, Response

from tokenhub.lib import api_client


def make_response(request: PreparedRequest, status: int, body: Any) -> Response:
    response = Response()
    response.status_code = status
    response.url = request.url or ""
    response.request = request
    response.reason = "OK" if status < 400 else "Error"
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = str(body).encode("utf-8")
        response.headers["Content-Type"] = "text/plain; charset=utf-8"
    return response


class FakeBackend:
    """Intercepts every request sent through ``requests.Session``."""

    def __init__(self) -> None:
        self.requests: List[PreparedRequest] = []
        self.routes: Dict[str, Tuple[int, Any]] = {}

    def reply(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def send(self, request: PreparedRequest, **kwargs: Any) -> Response:
        self.requests.append(request)
        path = urlsplit(request.url).path
        status, body = self.routes.get(path, (404, "404 page not found"))
        return make_response(request, status, body)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TOKENHUB_API_BASE_URL", raising=False)
    monkeypatch.delenv("TOKENHUB_API_TIMEOUT", raising=False)
    api_client.reset_client()
    yield
    api_client.reset_client()


@pytest.fixture
def fake_backend(monkeypatch: pytest.MonkeyPatch) -> FakeBackend:
    backend = FakeBackend()

    def _send(session: requests.Session, request: PreparedRequest, **kwargs: Any) -> Response:
        return backend.send(request, **kwargs)

    monkeypatch.setattr(requests.Session, "send", _send)
    return backend
