"""Tests for the GitHub events adapter and response classification."""

from __future__ import annotations

import httpx

from adapters.github_events import classify_response
from core.domain.models import (
    EventsPage,
    HttpError,
    InvalidResponse,
    NotFound,
    RateLimited,
    TransportFailure,
)


class TestClassifyResponse:
    def test_success_keeps_events_and_headers(self):
        resp = httpx.Response(
            200,
            json=[{"type": "WatchEvent"}],
            headers={"x-ratelimit-remaining": "57", "x-ratelimit-reset": "1700000000"},
        )
        result = classify_response(resp)
        assert isinstance(result, EventsPage)
        assert result.events == [{"type": "WatchEvent"}]
        assert result.rate_limit_remaining == "57"
        assert result.rate_limit_reset_epoch == 1700000000

    def test_empty_body_is_none(self):
        result = classify_response(httpx.Response(204, content=b""))
        assert isinstance(result, EventsPage)
        assert result.events is None

    def test_unparsable_body(self):
        result = classify_response(httpx.Response(200, content=b"<html>oops"))
        assert isinstance(result, InvalidResponse)
        assert result.message

    def test_not_found_ignores_body(self):
        result = classify_response(httpx.Response(404, json={"message": "Not Found"}))
        assert result == NotFound()

    def test_rate_limited_with_reset(self):
        resp = httpx.Response(
            403,
            text="API rate limit exceeded",
            headers={"x-ratelimit-remaining": "0", "x-ratelimit-reset": "1700000000"},
        )
        assert classify_response(resp) == RateLimited(reset_epoch=1700000000)

    def test_rate_limited_unknown_reset(self):
        resp = httpx.Response(403, headers={"x-ratelimit-remaining": "0", "x-ratelimit-reset": "soon"})
        assert classify_response(resp) == RateLimited(reset_epoch=None)

    def test_forbidden_with_remaining_quota_is_http_error(self):
        resp = httpx.Response(403, text="forbidden", headers={"x-ratelimit-remaining": "12"})
        assert classify_response(resp) == HttpError(status=403, body="forbidden")

    def test_server_error(self):
        assert classify_response(httpx.Response(502, text="bad gateway")) == HttpError(
            status=502, body="bad gateway"
        )


class TestGitHubEventsClient:
    async def test_request_shape(self, client, api):
        api.respond(200, json_body=[])
        await client.fetch_events("octocat", 25)

        assert len(api.requests) == 1
        request = api.requests[0]
        assert request.method == "GET"
        assert request.url.host == "api.github.com"
        assert request.url.path == "/users/octocat/events"
        assert request.url.params["per_page"] == "25"
        assert request.headers["user-agent"] == "github-activity-cli"
        assert request.headers["accept"] == "application/vnd.github+json"

    async def test_returns_events_in_server_order(self, client, api, sample_events):
        api.respond(200, json_body=sample_events, headers={"x-ratelimit-remaining": "42"})
        result = await client.fetch_events("octocat", 30)

        assert isinstance(result, EventsPage)
        assert [ev["id"] for ev in result.events] == ["3", "2", "1"]
        assert result.rate_limit_remaining == "42"

    async def test_transport_failure(self, client, api):
        api.fail_with(httpx.ConnectError("name resolution failed"))
        result = await client.fetch_events("octocat", 30)
        assert result == TransportFailure(cause="name resolution failed")

    async def test_redirect_is_not_followed(self, client, api):
        api.respond(301, text="", headers={"location": "https://api.github.com/users/other/events"})
        result = await client.fetch_events("octocat", 30)
        assert result == HttpError(status=301, body="")
        assert len(api.requests) == 1

    def test_account_is_url_encoded(self, client):
        assert client.events_url("a/b c") == "https://api.github.com/users/a%2Fb%20c/events"
