"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy in one place.
- Makes testing easy: an `httpx.MockTransport` can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - Redirects are not followed; a 3xx surfaces as an HTTP error.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, httpx.Timeout] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        follow_redirects=False,
        headers=headers,
        transport=transport,
        **kwargs,
    )
