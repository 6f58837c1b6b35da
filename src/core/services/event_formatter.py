"""Event formatter: one GitHub event -> one human-readable sentence.

Pure functions, no I/O. The dispatch table maps each event kind to a
renderer over its typed payload (see `core.domain.events`); any kind not
in the table renders as "<kind> in <repo>". Missing nested fields degrade
to "?" or empty-string placeholders and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel

from core.domain.events import (
    CreatePayload,
    DeletePayload,
    ForkPayload,
    IssueCommentPayload,
    IssuesPayload,
    MemberPayload,
    PullRequestPayload,
    PullRequestReviewCommentPayload,
    PullRequestReviewPayload,
    PushPayload,
    ReleasePayload,
    parse_payload,
)
from core.domain.language import Language
from core.domain.messages import message

UNKNOWN_KIND = "UnknownEvent"
MISSING = "?"


def repo_display_name(repo: Any, language: Language = Language.ENGLISH) -> str:
    """Repository `name` if present, else the raw value, else a placeholder."""

    if isinstance(repo, Mapping) and repo.get("name"):
        return str(repo["name"])
    if repo:
        return str(repo)
    return message(language, "unknown_repo")


def branch_from_ref(ref: Any) -> str:
    """Last "/" segment of a ref (`refs/heads/main` -> `main`)."""

    if not ref:
        return ""
    ref = str(ref)
    return ref.split("/")[-1] or ref


def capitalize(word: str | None) -> str:
    """Upper-case the first character only (`reopened` -> `Reopened`)."""

    if not word:
        return ""
    return word[0].upper() + word[1:]


def _num(value: Any) -> str:
    return MISSING if value is None or value == "" else str(value)


def _push(p: PushPayload, repo: str) -> str:
    commits = len(p.commits) if p.commits else 0
    branch = branch_from_ref(p.ref)
    suffix = f" (branch {branch})" if branch else ""
    return f"Pushed {commits} commit(s) to {repo}{suffix}"


def _issues(p: IssuesPayload, repo: str) -> str:
    issue = p.issue
    number = f" #{issue.number}" if issue and issue.number is not None else ""
    title = f": {issue.title}" if issue and issue.title else ""
    return f"{capitalize(p.action)} an issue{number} in {repo}{title}"


def _issue_comment(p: IssueCommentPayload, repo: str) -> str:
    number = _num(p.issue.number if p.issue else None)
    return f"{capitalize(p.action)} a comment on issue #{number} in {repo}"


def _pull_request(p: PullRequestPayload, repo: str) -> str:
    pr = p.pull_request
    number = _num(pr.number if pr else None)
    title = pr.title if pr else None
    if pr and pr.merged:
        return f"Merged pull request #{number} in {repo}: {title or ''}"
    suffix = f": {title}" if title else ""
    return f"{capitalize(p.action)} a pull request #{number} in {repo}{suffix}"


def _review(p: PullRequestReviewPayload, repo: str) -> str:
    number = _num(p.pull_request.number if p.pull_request else None)
    return f"{capitalize(p.action)} a review on PR #{number} in {repo}"


def _review_comment(p: PullRequestReviewCommentPayload, repo: str) -> str:
    number = _num(p.pull_request.number if p.pull_request else None)
    return f"{capitalize(p.action)} a review comment on PR #{number} in {repo}"


def _watch(_: BaseModel, repo: str) -> str:
    return f"Starred {repo}"


def _fork(p: ForkPayload, repo: str) -> str:
    target = p.forkee.full_name if p.forkee and p.forkee.full_name else "(fork)"
    return f"Forked {repo} → {target}"


def _create(p: CreatePayload, repo: str) -> str:
    if p.ref_type == "repository":
        return f"Created repository {repo}"
    if p.ref_type == "tag":
        return f"Created tag {p.ref or MISSING} in {repo}"
    if p.ref_type == "branch":
        return f"Created branch {p.ref or MISSING} in {repo}"
    return f"Created {p.ref_type or 'something'} in {repo}"


def _delete(p: DeletePayload, repo: str) -> str:
    return f"Deleted {p.ref_type or 'ref'} {p.ref or MISSING} in {repo}"


def _release(p: ReleasePayload, repo: str) -> str:
    tag = p.release.tag_name if p.release and p.release.tag_name else MISSING
    return f"{capitalize(p.action)} a release {tag} in {repo}"


def _public(_: BaseModel, repo: str) -> str:
    return f"Open-sourced {repo}"


def _member(p: MemberPayload, repo: str) -> str:
    login = p.member.login if p.member and p.member.login else "a member"
    return f"{capitalize(p.action)} {login} in {repo}"


def _gollum(_: BaseModel, repo: str) -> str:
    return f"Updated the wiki in {repo}"


FORMATTERS: dict[str, Callable[[Any, str], str]] = {
    "PushEvent": _push,
    "IssuesEvent": _issues,
    "IssueCommentEvent": _issue_comment,
    "PullRequestEvent": _pull_request,
    "PullRequestReviewEvent": _review,
    "PullRequestReviewCommentEvent": _review_comment,
    "WatchEvent": _watch,
    "ForkEvent": _fork,
    "CreateEvent": _create,
    "DeleteEvent": _delete,
    "ReleaseEvent": _release,
    "PublicEvent": _public,
    "MemberEvent": _member,
    "GollumEvent": _gollum,
}


def format_event(event: Any, language: Language = Language.ENGLISH) -> str:
    """Render one raw event dict as a one-line description."""

    if not isinstance(event, Mapping):
        event = {}
    kind = event.get("type")
    kind = str(kind) if kind else UNKNOWN_KIND
    repo = repo_display_name(event.get("repo"), language)

    formatter = FORMATTERS.get(kind)
    if formatter is None:
        return f"{kind} in {repo}"
    payload = parse_payload(kind, event.get("payload"))
    return formatter(payload, repo).strip()
