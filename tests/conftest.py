"""Shared fixtures: settings without .env, string-backed consoles, fake API."""

from __future__ import annotations

import io
import json
from typing import Any

import httpx
import pytest
from rich.console import Console

from adapters.github_events import GitHubEventsClient
from cli.main import AppContext
from cli.renderer import OutputSink
from core.config import AppSettings
from core.observability import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    setup_logging("WARNING")


def _string_console() -> Console:
    return Console(
        file=io.StringIO(),
        color_system=None,
        highlight=False,
        soft_wrap=True,
        width=200,
    )


class FakeGitHubApi:
    """MockTransport-backed API that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.content: bytes = b"[]"
        self.headers: dict[str, str] = {}
        self.error: Exception | None = None

    def respond(
        self,
        status: int = 200,
        *,
        json_body: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        if text is not None:
            self.content = text.encode("utf-8")
        else:
            self.content = json.dumps(json_body).encode("utf-8")
        self.headers = headers or {}

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, headers=self.headers, content=self.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def sink() -> OutputSink:
    return OutputSink(out=_string_console(), err=_string_console())


@pytest.fixture
def api() -> FakeGitHubApi:
    return FakeGitHubApi()


@pytest.fixture
def client(settings, api) -> GitHubEventsClient:
    return GitHubEventsClient(settings, transport=api.transport)


@pytest.fixture
def cli_context(settings, sink, api) -> AppContext:
    return AppContext(
        settings=settings,
        sink=sink,
        source_factory=lambda s: GitHubEventsClient(s, transport=api.transport),
    )


@pytest.fixture
def sample_events() -> list[dict[str, Any]]:
    return [
        {
            "id": "3",
            "type": "PushEvent",
            "actor": {"login": "octocat"},
            "repo": {"id": 1, "name": "acme/widgets"},
            "payload": {"commits": [{}, {}], "ref": "refs/heads/main"},
            "public": True,
            "created_at": "2024-05-01T10:00:00Z",
        },
        {
            "id": "2",
            "type": "WatchEvent",
            "repo": {"name": "acme/gadgets"},
            "payload": {"action": "started"},
            "created_at": "2024-04-30T09:00:00Z",
        },
        {
            "id": "1",
            "type": "FooEvent",
            "repo": {"name": "x"},
            "payload": {"zeta": 1, "alpha": [1, 2]},
            "created_at": "2024-04-29T08:00:00Z",
        },
    ]
