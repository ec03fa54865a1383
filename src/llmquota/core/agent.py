"""External agent invocation for the agent-driven Codex variant."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from llmquota.config.settings import AgentConfig
from llmquota.errors.types import AgentError
from llmquota.errors.types import DecodeError
from llmquota.models import AgentReply

logger = logging.getLogger(__name__)


def build_agent_args(config: AgentConfig, session_id: str) -> list[str]:
    """Build the argv used to ask the agent for its status report."""
    return [
        config.command,
        "agent",
        "--agent",
        config.agent_id,
        "--session-id",
        session_id,
        "--message",
        config.message,
        "--json",
    ]


async def run_agent(config: AgentConfig, session_id: str) -> AgentReply:
    """Run the agent to completion and decode its reply.

    Raises:
        AgentError: If the process cannot start, times out, or exits non-zero
        DecodeError: If stdout is not a JSON object
    """
    args = build_agent_args(config, session_id)
    logger.debug("Running %s", " ".join(args))

    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError:
        raise AgentError(f"{config.command} not found in PATH") from None
    except OSError as e:
        raise AgentError(f"failed to run {config.command}: {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(
            process.communicate(), timeout=config.timeout
        )
    except TimeoutError:
        process.kill()
        await process.wait()
        raise AgentError(
            f"{config.command} did not finish within {config.timeout:g}s"
        ) from None

    if process.returncode != 0:
        error_msg = stderr.decode(errors="replace").strip() if stderr else "Unknown error"
        raise AgentError(
            f"{config.command} exited with status {process.returncode}: {error_msg}"
        )

    return parse_agent_output(stdout.decode(errors="replace"))


def parse_agent_output(output: str) -> AgentReply:
    """Decode the agent's JSON reply.

    Expected format:
    {
        "status": "ok",
        "result": { "payloads": [ { "text": "..." } ] }
    }
    """
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON from agent: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("agent output is not a JSON object")

    status = data.get("status")
    return AgentReply(
        status=status if isinstance(status, str) else None,
        text=_payload_text(data),
        raw=data,
    )


def _payload_text(data: dict[str, Any]) -> str:
    """Join the text of every payload in the reply."""
    result = data.get("result")
    payloads = result.get("payloads") if isinstance(result, dict) else None
    if not isinstance(payloads, list):
        return ""

    texts = [
        payload["text"]
        for payload in payloads
        if isinstance(payload, dict) and isinstance(payload.get("text"), str)
    ]
    return "\n".join(texts)
