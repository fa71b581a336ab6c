"""Shared fixtures: settings, a stubbed DeepL API and a wired registry."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from deepl_mcp.foundation.config import DeepLSettings
from deepl_mcp.foundation.registry import ToolRegistry
from deepl_mcp.runtime.observability import configure_logging
from deepl_mcp.tools import DeepLClient, create_registry

Handler = Callable[[httpx.Request], httpx.Response]


class StubDeepL:
    """In-memory DeepL API: canned responses per (method, path), records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Handler] = {}

    def respond(self, method: str, path: str, status: int = 200, json_body: object = None) -> None:
        self._routes[(method, path)] = lambda _req: httpx.Response(status, json=json_body)

    def route(self, method: str, path: str, handler: Handler) -> None:
        self._routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "no stub route"})
        return handler(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def quiet_logs() -> None:
    configure_logging(format="none")


@pytest.fixture
def settings() -> DeepLSettings:
    return DeepLSettings(api_key="test-key:fx", _env_file=None)


@pytest.fixture
def upstream() -> StubDeepL:
    return StubDeepL()


@pytest.fixture
def client(settings: DeepLSettings, upstream: StubDeepL) -> DeepLClient:
    return DeepLClient(settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def registry(client: DeepLClient) -> ToolRegistry:
    return create_registry(client)
