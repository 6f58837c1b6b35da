"""Renderer: event list and failures -> stdout/stderr.

Output goes through an injected `OutputSink` (two rich Consoles) instead of
process-wide handles, so tests can capture both streams.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console

from adapters.json_exporter import dumps_events
from cli.ui_components import (
    build_error_line,
    build_event_line,
    build_header,
    build_usage_banner,
    format_reset_time,
)
from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import (
    FetchFailure,
    HttpError,
    InvalidResponse,
    NotFound,
    OutputMode,
    RateLimited,
    TransportFailure,
)
from core.services.event_formatter import format_event


@dataclass(frozen=True)
class OutputSink:
    """Where normal output (`out`) and error lines (`err`) are written."""

    out: Console
    err: Console

    @classmethod
    def default(cls) -> "OutputSink":
        return cls(
            out=Console(highlight=False, soft_wrap=True),
            err=Console(stderr=True, highlight=False, soft_wrap=True),
        )


def describe_failure(
    failure: FetchFailure,
    language: Language = Language.ENGLISH,
    *,
    body_max_chars: int = 500,
) -> str:
    """Localized one-line message for a classified fetch failure."""

    if isinstance(failure, NotFound):
        return message(language, "not_found")
    if isinstance(failure, RateLimited):
        when = format_reset_time(failure.reset_epoch, language)
        return message(language, "rate_limited", when=when)
    if isinstance(failure, HttpError):
        body = " ".join(failure.body.split())[:body_max_chars]
        return message(language, "http_error", status=failure.status, body=body).strip()
    if isinstance(failure, InvalidResponse):
        return message(language, "unexpected", cause=f"invalid_json: {failure.message}")
    if isinstance(failure, TransportFailure):
        return message(language, "unexpected", cause=failure.cause)
    raise TypeError(f"unhandled fetch failure: {failure!r}")


class Renderer:
    """Writes the CLI's user-facing output in the configured language."""

    def __init__(self, sink: OutputSink, language: Language = Language.ENGLISH) -> None:
        self._sink = sink
        self._language = language

    def usage(self) -> None:
        for line in build_usage_banner(self._language):
            self._sink.out.print(line)

    def header(self, account: str, rate_limit_remaining: str | None) -> None:
        self._sink.out.print(build_header(account, rate_limit_remaining, self._language))

    def events(self, events: Any, mode: OutputMode) -> None:
        if mode is OutputMode.JSON:
            self._sink.out.out(dumps_events(events), highlight=False)
            return

        if not isinstance(events, list) or not events:
            self._sink.out.print(message(self._language, "no_events"), style="dim", markup=False)
            return

        for event in events:
            created_at = event.get("created_at") if isinstance(event, dict) else None
            line = build_event_line(format_event(event, self._language), created_at)
            self._sink.out.print(line)

    def error(self, text: str) -> None:
        self._sink.err.print(build_error_line(text, self._language))
