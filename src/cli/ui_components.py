"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Everything is built as `Text`, never markup, so titles containing
  "[...]" are printed verbatim.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from rich.text import Text

from core.domain.language import Language
from core.domain.messages import message

DISPLAY_FORMAT = "%x %X"


def format_timestamp(value: Any) -> str:
    """ISO-8601 `created_at` -> local display time; raw value if unparseable."""

    if not isinstance(value, str) or not value:
        return "?"
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone().strftime(DISPLAY_FORMAT)


def format_reset_time(epoch: int | None, language: Language) -> str:
    """Rate-limit reset epoch -> local display time, or the unknown placeholder."""

    if epoch is None:
        return message(language, "unknown_time")
    try:
        return datetime.fromtimestamp(epoch).astimezone().strftime(DISPLAY_FORMAT)
    except (OverflowError, OSError, ValueError):
        return str(epoch)


def build_usage_banner(language: Language) -> list[Text]:
    return [
        Text(""),
        Text(message(language, "usage_title"), style="bold"),
        Text(message(language, "usage")),
        Text(""),
    ]


def build_header(account: str, rate_limit_remaining: str | None, language: Language) -> Text:
    """Header printed once before the text listing."""

    header = Text(message(language, "header", account=account), style="cyan")
    if rate_limit_remaining is not None:
        remaining = message(language, "rate_remaining", remaining=rate_limit_remaining)
        header.append(f" ({remaining})", style="dim")
    return header


def build_event_line(description: str, created_at: Any) -> Text:
    return Text.assemble(
        "• ",
        description,
        " ",
        (f"({format_timestamp(created_at)})", "dim"),
    )


def build_error_line(text: str, language: Language) -> Text:
    single_line = " ".join(text.splitlines())
    return Text.assemble((message(language, "error_prefix"), "red"), single_line)
