"""Argument validation: CLI tokens -> `RequestConfig`.

typer/click does the tokenizing; this module owns the rules that click
cannot express (single account, `--limit` bounds).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import OutputMode, RequestConfig

MAX_PAGE_LIMIT = 100


class InvalidArgument(Exception):
    """Bad CLI input; reported before any network call."""


class MissingAccount(Exception):
    """No account given: the usage banner is shown instead of an error."""


def parse_limit(raw: str, language: Language = Language.ENGLISH) -> int:
    """Parse `--limit`: finite and > 0, clamped to at most 100.

    Values <= 0 are rejected, not clamped. Fractions round up (0.5 -> 1).
    """

    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidArgument(message(language, "invalid_limit", value=raw)) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(message(language, "invalid_limit", value=raw))
    return min(MAX_PAGE_LIMIT, math.ceil(value))


def build_request_config(
    positionals: Sequence[str],
    *,
    limit: str | None = None,
    json_output: bool = False,
    default_limit: int = 30,
    language: Language = Language.ENGLISH,
) -> RequestConfig:
    """Validate the parsed tokens; a bad `--limit` wins over a missing account."""

    page_limit = parse_limit(limit, language) if limit is not None else default_limit

    if not positionals:
        raise MissingAccount()
    account, *extra = positionals
    if extra:
        raise InvalidArgument(message(language, "extra_argument", value=extra[0]))
    if not account:
        raise MissingAccount()

    return RequestConfig(
        account=account,
        page_limit=page_limit,
        output_mode=OutputMode.JSON if json_output else OutputMode.TEXT,
    )


def reject_extended_syntax(tokens: Sequence[str], language: Language = Language.ENGLISH) -> None:
    """Refuse click-only forms (`--`, `--opt=value`) before click sees them."""

    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token == "--limit":
            skip_next = True
        elif token == "--" or (token.startswith("--") and "=" in token):
            raise InvalidArgument(message(language, "unknown_flag", flag=token))
