"""Tests for core/agent.py (external agent invocation)."""

from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest

from llmquota.config.settings import AgentConfig
from llmquota.core.agent import build_agent_args
from llmquota.core.agent import parse_agent_output
from llmquota.core.agent import run_agent
from llmquota.errors.types import AgentError
from llmquota.errors.types import DecodeError


def make_agent(tmp_path: Path, body: str) -> Path:
    """Write an executable shell script standing in for the agent."""
    script = tmp_path / "fake-agent"
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script


class TestBuildAgentArgs:
    """Tests for build_agent_args."""

    def test_default_invocation(self):
        """Agent id, session id and message are passed as flags."""
        args = build_agent_args(AgentConfig(), "sess-1")

        assert args == [
            "openclaw",
            "agent",
            "--agent",
            "main",
            "--session-id",
            "sess-1",
            "--message",
            "/status",
            "--json",
        ]

    def test_custom_command_and_agent(self):
        """Command and agent id come from settings."""
        args = build_agent_args(AgentConfig(command="/opt/claw", agent_id="ops"), "s")

        assert args[0] == "/opt/claw"
        assert args[args.index("--agent") + 1] == "ops"


class TestParseAgentOutput:
    """Tests for parse_agent_output."""

    def test_status_and_joined_text(self):
        """Status and every payload text are extracted."""
        output = json.dumps(
            {
                "status": "ok",
                "result": {"payloads": [{"text": "Model: a"}, {"media": "x"}, {"text": "Session: b"}]},
            }
        )

        reply = parse_agent_output(output)

        assert reply.status == "ok"
        assert reply.text == "Model: a\nSession: b"
        assert reply.raw["status"] == "ok"

    def test_missing_result(self):
        """No payloads yields empty text, not an error."""
        reply = parse_agent_output('{"status": "error"}')

        assert reply.status == "error"
        assert reply.text == ""

    def test_non_string_status(self):
        """A non-string status is treated as absent."""
        assert parse_agent_output('{"status": 1}').status is None

    def test_invalid_json(self):
        """Non-JSON output is a decode error."""
        with pytest.raises(DecodeError):
            parse_agent_output("Model: gpt-5 (not json)")

    def test_non_object_json(self):
        """A JSON array is a decode error."""
        with pytest.raises(DecodeError):
            parse_agent_output("[1, 2]")


class TestRunAgent:
    """Tests for run_agent against a stand-in executable."""

    @pytest.mark.asyncio
    async def test_successful_run(self, tmp_path: Path):
        """Stdout is decoded and the argv reaches the process."""
        args_file = tmp_path / "args.txt"
        reply_json = json.dumps(
            {"status": "ok", "result": {"payloads": [{"text": "Model: gpt-5-codex"}]}}
        )
        script = make_agent(
            tmp_path,
            f"echo \"$@\" > '{args_file}'\ncat <<'EOF'\n{reply_json}\nEOF",
        )

        reply = await run_agent(AgentConfig(command=str(script)), "sess-42")

        assert reply.status == "ok"
        assert reply.text == "Model: gpt-5-codex"
        assert args_file.read_text().split() == [
            "agent",
            "--agent",
            "main",
            "--session-id",
            "sess-42",
            "--message",
            "/status",
            "--json",
        ]

    @pytest.mark.asyncio
    async def test_missing_command(self, tmp_path: Path):
        """A command that does not exist is an AgentError."""
        config = AgentConfig(command=str(tmp_path / "no-such-agent"))

        with pytest.raises(AgentError) as exc_info:
            await run_agent(config, "sess")

        assert "not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_zero_exit(self, tmp_path: Path):
        """A failing process reports its status and stderr."""
        script = make_agent(tmp_path, "echo 'gateway unreachable' >&2\nexit 3")

        with pytest.raises(AgentError) as exc_info:
            await run_agent(AgentConfig(command=str(script)), "sess")

        message = str(exc_info.value)
        assert "status 3" in message
        assert "gateway unreachable" in message

    @pytest.mark.asyncio
    async def test_timeout(self, tmp_path: Path):
        """A process that outlives the timeout is killed."""
        script = make_agent(tmp_path, "exec sleep 10")

        with pytest.raises(AgentError) as exc_info:
            await run_agent(AgentConfig(command=str(script), timeout=0.2), "sess")

        assert "did not finish" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_stdout(self, tmp_path: Path):
        """Plain-text stdout is a decode error."""
        script = make_agent(tmp_path, "echo 'Model: gpt-5'")

        with pytest.raises(DecodeError):
            await run_agent(AgentConfig(command=str(script)), "sess")
