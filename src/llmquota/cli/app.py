"""Main CLI application for llm-quota."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from llmquota.errors.types import ExitCode
from llmquota.telemetry import NullTracer
from llmquota.telemetry import Tracer
from llmquota.telemetry import init_tracer

# Create the main app
app = typer.Typer(
    name="llm-quota",
    help="Report remaining usage quota for AI assistant accounts",
    add_completion=False,
    no_args_is_help=True,
)

__all__ = ["ExitCode", "app", "configure_logging", "get_tracer", "run_app"]


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich.

    Without --verbose only warnings are shown, so normal failures leave
    stderr empty; they are reported in the JSON envelope instead.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def get_tracer(ctx: typer.Context) -> Tracer:
    """Return the tracer installed by the main callback."""
    tracer = ctx.meta.get("tracer")
    return tracer if tracer is not None else NullTracer()


def _version_callback(value: bool) -> None:
    if value:
        from llmquota import __version__

        typer.echo(f"llm-quota {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log pipeline steps to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """llm-quota - Report remaining usage quota for AI assistant accounts."""
    configure_logging(verbose)

    tracer = init_tracer()
    ctx.meta["tracer"] = tracer
    ctx.call_on_close(tracer.shutdown)


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules - they register themselves via @app.command() decorators
# These imports must come after app is defined
from llmquota.cli.commands import usage  # noqa: E402, F401
