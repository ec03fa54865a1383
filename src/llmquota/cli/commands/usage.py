"""Quota lookup commands for llm-quota."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

import typer

from llmquota.cli.app import app
from llmquota.cli.app import get_tracer
from llmquota.core.pipeline import PipelineResult
from llmquota.core.pipeline import run_agent_pipeline
from llmquota.core.pipeline import run_provider_pipeline
from llmquota.display.json import output_json_pretty
from llmquota.errors.types import ExitCode
from llmquota.models import Envelope

logger = logging.getLogger(__name__)


def emit_result(pipeline: Awaitable[PipelineResult]) -> None:
    """Run a pipeline, print its envelope, and exit with its code.

    Anything the pipeline did not anticipate still produces an envelope.
    """
    try:
        result = asyncio.run(pipeline)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        result = PipelineResult(
            envelope=Envelope.failure(f"unexpected error: {e}"),
            exit_code=ExitCode.GENERAL_ERROR,
        )

    output_json_pretty(result.envelope)
    raise typer.Exit(int(result.exit_code))


@app.command("claude")
def claude_command(ctx: typer.Context) -> None:
    """Show Claude usage from the OAuth usage endpoint."""
    emit_result(run_provider_pipeline("claude", tracer=get_tracer(ctx)))


@app.command("codex")
def codex_command(ctx: typer.Context) -> None:
    """Show Codex usage from the ChatGPT backend API."""
    emit_result(run_provider_pipeline("codex", tracer=get_tracer(ctx)))


@app.command("codex-agent")
def codex_agent_command(ctx: typer.Context) -> None:
    """Show Codex usage by asking the local agent for its /status report."""
    emit_result(run_agent_pipeline(tracer=get_tracer(ctx)))
