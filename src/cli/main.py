"""github-activity CLI (Typer).

Usage: github-activity <username> [--limit N] [--json]

Flow: parse arguments -> one GET -> classify -> render. Every failure path
writes exactly one `Error: ...` line to stderr and exits 1.
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

import click
import typer

from adapters.github_events import GitHubEventsClient
from cli.arguments import (
    InvalidArgument,
    MissingAccount,
    build_request_config,
    reject_extended_syntax,
)
from cli.renderer import OutputSink, Renderer, describe_failure
from core.config import AppSettings
from core.domain.messages import message
from core.domain.models import EventsPage, OutputMode
from core.interfaces.events_source import ActivitySource
from core.observability import get_logger, setup_logging

PROG_NAME = "github-activity"

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Dependencies handed to the command through `ctx.obj`."""

    settings: AppSettings = field(default_factory=AppSettings)
    sink: OutputSink = field(default_factory=OutputSink.default)
    source_factory: Callable[[AppSettings], ActivitySource] = GitHubEventsClient

    @property
    def renderer(self) -> Renderer:
        return Renderer(self.sink, self.settings.default_language)


app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    help="Show a GitHub user's recent public activity.",
)


@app.command(context_settings={"help_option_names": []})
def activity(
    ctx: typer.Context,
    positionals: Optional[List[str]] = typer.Argument(None, metavar="<username>"),
    limit: Optional[str] = typer.Option(None, "--limit", metavar="N"),
    json_output: bool = typer.Option(False, "--json"),
) -> None:
    """Fetch and print the recent public events of <username>."""

    context: AppContext = ctx.obj
    settings = context.settings
    renderer = context.renderer

    try:
        request = build_request_config(
            positionals or [],
            limit=limit,
            json_output=json_output,
            default_limit=settings.default_limit,
            language=settings.default_language,
        )
    except MissingAccount:
        renderer.usage()
        raise typer.Exit(code=1)
    except InvalidArgument as exc:
        renderer.error(str(exc))
        raise typer.Exit(code=1)

    logger.debug(
        "cli.request",
        account=request.account,
        per_page=request.page_limit,
        mode=request.output_mode.value,
        language=settings.default_language.label(),
    )

    try:
        source = context.source_factory(settings)
        result = asyncio.run(source.fetch_events(request.account, request.page_limit))
        if not isinstance(result, EventsPage):
            renderer.error(
                describe_failure(
                    result,
                    settings.default_language,
                    body_max_chars=settings.error_body_max_chars,
                )
            )
            raise typer.Exit(code=1)

        if request.output_mode is OutputMode.TEXT:
            renderer.header(request.account, result.rate_limit_remaining)
        renderer.events(result.events, request.output_mode)
    except typer.Exit:
        raise
    except Exception as exc:
        logger.debug("cli.unexpected", error=repr(exc))
        renderer.error(message(settings.default_language, "unexpected", cause=exc))
        raise typer.Exit(code=1)


def run(argv: Sequence[str] | None = None, *, context: AppContext | None = None) -> int:
    """Run the CLI over `argv` (defaults to `sys.argv[1:]`) and return the exit code."""

    context = context or AppContext()
    setup_logging(context.settings.log_level, context.settings.log_format)
    args = list(sys.argv[1:] if argv is None else argv)
    language = context.settings.default_language

    try:
        reject_extended_syntax(args, language)
        code = app(args=args, prog_name=PROG_NAME, standalone_mode=False, obj=context)
    except InvalidArgument as exc:
        context.renderer.error(str(exc))
        return 1
    except click.NoSuchOption as exc:
        context.renderer.error(message(language, "unknown_flag", flag=exc.option_name))
        return 1
    except click.UsageError as exc:
        context.renderer.error(exc.format_message())
        return 1
    except click.Abort:
        return 1
    return code if isinstance(code, int) else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
