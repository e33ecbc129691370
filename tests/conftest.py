# Baserow Upload MCP Server
# File: tests/conftest.py
# Version: v1

"""Shared fixtures: a test configuration and a MockTransport-backed client."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from baserow_upload_mcp.client import BaserowClient
from baserow_upload_mcp.config import BaserowConfig

API_URL = "https://api.baserow.io"
API_TOKEN = "test_token"


@pytest.fixture
def config() -> BaserowConfig:
    return BaserowConfig(api_url=API_URL, api_token=API_TOKEN)


@pytest.fixture
def baserow_env(monkeypatch):
    """Credential context in the environment, as the server process sees it."""
    monkeypatch.setenv("BASEROW_API_URL", API_URL)
    monkeypatch.setenv("BASEROW_API_TOKEN", API_TOKEN)
    monkeypatch.delenv("BASEROW_MAX_SAMPLE_ROWS", raising=False)


class Router:
    """Route (method, path) pairs to canned responses and record requests."""

    def __init__(self) -> None:
        self.routes: Dict[tuple, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, payload: Any = None, text: str | None = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=payload)

        self.routes[(method, path)] = respond

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        return handler(request)

    def json_body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def router() -> Router:
    return Router()


@pytest.fixture
def client(config, router) -> BaserowClient:
    return BaserowClient(config=config, transport=httpx.MockTransport(router))
