"""Quota lookup pipelines.

Each pipeline runs its steps strictly in order and converts any QuotaError
into a failure envelope at this boundary, so callers always get something
to print.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import msgspec

from llmquota.config.settings import AgentConfig
from llmquota.config.settings import get_config
from llmquota.core.agent import run_agent
from llmquota.core.credentials import resolve_credential
from llmquota.core.fetch import fetch_usage
from llmquota.core.session import load_or_create_session_id
from llmquota.core.status_parser import parse_status_text
from llmquota.errors.types import ExitCode
from llmquota.errors.types import QuotaError
from llmquota.models import Envelope
from llmquota.providers import create_provider
from llmquota.telemetry import NullTracer
from llmquota.telemetry import Tracer

logger = logging.getLogger(__name__)


class PipelineResult(msgspec.Struct, frozen=True):
    """Envelope to print and the exit code to leave with."""

    envelope: Envelope
    exit_code: ExitCode

    @classmethod
    def from_error(cls, error: QuotaError) -> PipelineResult:
        return cls(
            envelope=Envelope.failure(error.message, response_body=error.response_body),
            exit_code=error.exit_code,
        )


async def run_provider_pipeline(
    provider_id: str,
    tracer: Tracer | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PipelineResult:
    """Resolve credentials, fetch usage, and normalize it for one provider.

    Args:
        provider_id: Registered provider id ("claude", "codex")
        tracer: Optional tracing collaborator
        transport: Optional httpx transport (used by tests)
    """
    tracer = tracer or NullTracer()
    provider = create_provider(provider_id)

    with tracer.span("quota.lookup", provider=provider.id):
        try:
            with tracer.span("quota.resolve_credential"):
                credential = resolve_credential(provider.config)
            with tracer.span("quota.fetch", url=provider.usage_url()):
                usage = await fetch_usage(provider, credential, transport=transport)
        except QuotaError as e:
            logger.info("%s lookup failed (%s): %s", provider.id, e.category, e.message)
            return PipelineResult.from_error(e)

        with tracer.span("quota.normalize"):
            summary = provider.summarize(usage)

    return PipelineResult(
        envelope=Envelope.success(usage=usage, summary=summary),
        exit_code=ExitCode.SUCCESS,
    )


async def run_agent_pipeline(
    tracer: Tracer | None = None,
    config: AgentConfig | None = None,
    session_path: Path | None = None,
) -> PipelineResult:
    """Ask the external agent for its status report and parse it.

    Args:
        tracer: Optional tracing collaborator
        config: Agent settings; defaults to the loaded configuration
        session_path: Session identity file; defaults to the configured path
    """
    tracer = tracer or NullTracer()
    config = config or get_config().agent

    with tracer.span("quota.agent_lookup", agent=config.agent_id):
        try:
            with tracer.span("quota.session_id"):
                session_id = load_or_create_session_id(session_path)
            with tracer.span("quota.run_agent", session_id=session_id):
                reply = await run_agent(config, session_id)
        except QuotaError as e:
            logger.info("agent lookup failed (%s): %s", e.category, e.message)
            return PipelineResult.from_error(e)

        if not config.is_success(reply.status):
            logger.info("agent reported status %r", reply.status)
            return PipelineResult(
                envelope=Envelope.failure(
                    f"agent reported status: {reply.status}", usage=reply.raw
                ),
                exit_code=ExitCode.GENERAL_ERROR,
            )

        with tracer.span("quota.parse_status"):
            summary = parse_status_text(reply.text)

    return PipelineResult(
        envelope=Envelope.success(usage=reply.raw, summary=summary),
        exit_code=ExitCode.SUCCESS,
    )
