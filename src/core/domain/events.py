"""Per-kind payload variants of GitHub activity events.

Events arrive as loosely-typed JSON. For text rendering the payload is parsed
into one of the closed set of models below; every field is optional and any
kind not listed falls back to `GenericPayload`. A field that fails
validation is dropped to `None` on its own; the rest of the payload survives.

The raw event dict is never replaced: JSON output passes it through as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic.config import ConfigDict

from core.observability import get_logger

logger = get_logger(__name__)


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def drop_invalid_field(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            logger.debug("payload.field_invalid", model=cls.__name__, errors=exc.error_count())
            return None


class IssueRef(_Record):
    number: int | str | None = None
    title: str | None = None


class PullRequestRef(_Record):
    number: int | str | None = None
    title: str | None = None
    merged: bool | None = None


class ForkeeRef(_Record):
    full_name: str | None = None


class ReleaseRef(_Record):
    tag_name: str | None = None


class MemberRef(_Record):
    login: str | None = None


class PushPayload(_Record):
    commits: list[Any] | None = None
    ref: str | None = None


class IssuesPayload(_Record):
    action: str | None = None
    issue: IssueRef | None = None


class IssueCommentPayload(_Record):
    action: str | None = None
    issue: IssueRef | None = None


class PullRequestPayload(_Record):
    action: str | None = None
    pull_request: PullRequestRef | None = None


class PullRequestReviewPayload(_Record):
    action: str | None = None
    pull_request: PullRequestRef | None = None


class PullRequestReviewCommentPayload(_Record):
    action: str | None = None
    pull_request: PullRequestRef | None = None


class ForkPayload(_Record):
    forkee: ForkeeRef | None = None


class CreatePayload(_Record):
    ref_type: str | None = None
    ref: str | None = None


class DeletePayload(_Record):
    ref_type: str | None = None
    ref: str | None = None


class ReleasePayload(_Record):
    action: str | None = None
    release: ReleaseRef | None = None


class MemberPayload(_Record):
    action: str | None = None
    member: MemberRef | None = None


class GenericPayload(BaseModel):
    """Untyped record for kinds without a dedicated variant."""

    model_config = ConfigDict(extra="allow", frozen=True)


PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "PushEvent": PushPayload,
    "IssuesEvent": IssuesPayload,
    "IssueCommentEvent": IssueCommentPayload,
    "PullRequestEvent": PullRequestPayload,
    "PullRequestReviewEvent": PullRequestReviewPayload,
    "PullRequestReviewCommentEvent": PullRequestReviewCommentPayload,
    "ForkEvent": ForkPayload,
    "CreateEvent": CreatePayload,
    "DeleteEvent": DeletePayload,
    "ReleaseEvent": ReleasePayload,
    "MemberEvent": MemberPayload,
}


def parse_payload(kind: str, raw: Any) -> BaseModel:
    """Parse `raw` into the payload variant for `kind`; never raises."""

    model = PAYLOAD_MODELS.get(kind, GenericPayload)
    if not isinstance(raw, dict):
        return model()
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        logger.debug("payload.invalid", kind=kind, errors=exc.error_count())
        return model()
