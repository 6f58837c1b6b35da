"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edges (CLI input, API response) with
  self-documenting fields.
- Immutable request/result values: each run is create-use-discard.

Note:
- These models describe *what* the information is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OutputMode(str, Enum):
    """How the event list is written to standard output."""

    TEXT = "text"
    JSON = "json"


class RequestConfig(BaseModel):
    """Validated request built once from the CLI tokens."""

    model_config = ConfigDict(frozen=True)

    account: str = Field(
        ...,
        min_length=1,
        description="GitHub username whose public activity is queried.",
    )
    page_limit: int = Field(
        default=30,
        ge=1,
        le=100,
        description="Maximum number of events requested (per_page).",
    )
    output_mode: OutputMode = Field(
        default=OutputMode.TEXT,
        description="Human-readable lines or raw JSON passthrough.",
    )


class EventsPage(BaseModel):
    """Successful response: events plus the rate-limit headers.

    `events` is the decoded body as-is (a list by convention, `None` for an
    empty body); it is never reordered or validated here.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["ok"] = "ok"
    events: Any = Field(default=None)
    rate_limit_remaining: str | None = Field(
        default=None,
        description="Raw `x-ratelimit-remaining` header value.",
    )
    rate_limit_reset_epoch: int | None = Field(
        default=None,
        description="`x-ratelimit-reset` header (epoch seconds), if parseable.",
    )


class NotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


class RateLimited(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rate_limited"] = "rate_limited"
    reset_epoch: int | None = Field(
        default=None,
        description="When the limit resets (epoch seconds); None when unknown.",
    )


class HttpError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["http_error"] = "http_error"
    status: int = Field(...)
    body: str = Field(default="")


class InvalidResponse(BaseModel):
    """A 2xx response whose body is not valid JSON."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_response"] = "invalid_response"
    message: str = Field(default="")


class TransportFailure(BaseModel):
    """DNS, connection, TLS or timeout failure before a response arrived."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport"] = "transport"
    cause: str = Field(default="")


FetchFailure = Union[NotFound, RateLimited, HttpError, InvalidResponse, TransportFailure]
FetchResult = Union[EventsPage, FetchFailure]
