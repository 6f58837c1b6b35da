"""GitHub public events adapter.

Issues exactly one `GET /users/{account}/events?per_page=N` and classifies
the outcome into a `FetchResult`. No retries, no pagination, no token.
"""

from __future__ import annotations

import json
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import (
    EventsPage,
    FetchResult,
    HttpError,
    InvalidResponse,
    NotFound,
    RateLimited,
    TransportFailure,
)
from core.interfaces.events_source import ActivitySource
from core.observability import get_logger

logger = get_logger(__name__)

GITHUB_HEADERS = {
    # GitHub requires a UA (set by the builder). Accept the stable JSON media type.
    "Accept": "application/vnd.github+json",
}

RATE_LIMIT_REMAINING = "x-ratelimit-remaining"
RATE_LIMIT_RESET = "x-ratelimit-reset"


def _parse_epoch(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def classify_response(response: httpx.Response) -> FetchResult:
    """Map a completed response to success or a tagged failure."""

    status = response.status_code
    remaining = response.headers.get(RATE_LIMIT_REMAINING)
    reset_epoch = _parse_epoch(response.headers.get(RATE_LIMIT_RESET))

    if 200 <= status < 300:
        text = response.text
        try:
            data = json.loads(text) if text else None
        except ValueError as exc:
            return InvalidResponse(message=str(exc))
        return EventsPage(
            events=data,
            rate_limit_remaining=remaining,
            rate_limit_reset_epoch=reset_epoch,
        )

    if status == 404:
        return NotFound()
    if status == 403 and remaining == "0":
        return RateLimited(reset_epoch=reset_epoch)
    return HttpError(status=status, body=response.text)


class GitHubEventsClient(ActivitySource):
    """Fetches one page of a user's recent public events."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def events_url(self, account: str) -> str:
        base = self._settings.api_base_url.rstrip("/")
        return f"{base}/users/{quote(account, safe='')}/events"

    async def fetch_events(self, account: str, page_limit: int) -> FetchResult:
        url = self.events_url(account)
        params = {"per_page": str(page_limit)}
        logger.debug("github_events.request", url=url, per_page=page_limit)

        try:
            async with build_async_client(
                self._settings,
                extra_headers=GITHUB_HEADERS,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TransportError as exc:
            logger.debug("github_events.transport_error", error=repr(exc))
            return TransportFailure(cause=str(exc) or exc.__class__.__name__)

        result = classify_response(response)
        logger.debug(
            "github_events.response",
            status=response.status_code,
            remaining=response.headers.get(RATE_LIMIT_REMAINING),
            result=result.kind,
        )
        return result
