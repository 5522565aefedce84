"""Test helpers to stub the ``requests.Session`` used by the gateway.

``FakeSession`` answers ``request(method, url, **kwargs)`` from a table keyed
by ``(method, path)`` and records every call so tests can assert on headers
and bodies without a server.
"""

from __future__ import annotations

from typing import Any

import requests

BASE_URL = "http://budget.test/api"

_NO_BODY = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = _NO_BODY, text: str = ""):
        self.status_code = status_code
        self._body = body
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._body is _NO_BODY:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    """Minimal stand-in for ``requests.Session``.

    Routes map ``(method, path)`` to a ``FakeResponse`` or to an exception
    instance, which is raised instead.
    """

    def __init__(self, routes: dict[tuple[str, str], Any] | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[dict[str, Any]] = []

    def route(self, method: str, path: str, response: Any) -> None:
        self.routes[(method, path)] = response

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        self.calls.append({"method": method, "path": path, **kwargs})
        outcome = self.routes.get((method, path))
        if outcome is None:
            return FakeResponse(404, {"error": "Not found"})
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
