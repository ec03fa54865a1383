"""Pytest configuration and shared fixtures for llm-quota tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import httpx
import pytest

import llmquota.config.settings

# Every variable the package reads, cleared before each test so the
# developer's real environment never leaks in.
ENV_VARS = (
    "ANTHROPIC_OAUTH_API_KEY",
    "ANTHROPIC_BASE_URL",
    "CLAUDE_CREDENTIALS_PATH",
    "CODEX_ACCESS_TOKEN",
    "CODEX_ACCOUNT_ID",
    "CHATGPT_ACCOUNT_ID",
    "CODEX_AUTH_PATH",
    "CODEX_BASE_URL",
    "OPENCLAW_AGENT_ID",
    "LLMQUOTA_AGENT_COMMAND",
    "LLMQUOTA_CONFIG_DIR",
    "LLMQUOTA_STATE_DIR",
    "LLMQUOTA_WORKSPACE_DIR",
    "LLMQUOTA_SESSION_ID_PATH",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_PROTOCOL",
    "OTEL_EXPORTER_OTLP_HEADERS",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point every path at tmp_path and reset the config singleton."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("LLMQUOTA_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("LLMQUOTA_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.setenv("CLAUDE_CREDENTIALS_PATH", str(tmp_path / "claude" / ".credentials.json"))
    monkeypatch.setenv("CODEX_AUTH_PATH", str(tmp_path / "codex" / "auth.json"))

    llmquota.config.settings._config = None
    yield tmp_path
    llmquota.config.settings._config = None


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Path, object], Path]:
    """Write a JSON document, creating parent directories."""

    def _write(path: Path, data: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def claude_credentials_path(tmp_path: Path) -> Path:
    """Path the Claude resolver reads in tests."""
    return tmp_path / "claude" / ".credentials.json"


@pytest.fixture
def codex_auth_path(tmp_path: Path) -> Path:
    """Path the Codex resolver reads in tests."""
    return tmp_path / "codex" / "auth.json"


@pytest.fixture
def claude_credentials(write_json, claude_credentials_path: Path) -> Path:
    """Claude CLI credentials file with a valid access token."""
    return write_json(
        claude_credentials_path,
        {
            "claudeAiOauth": {
                "accessToken": "sk-ant-oat01-file-token",
                "refreshToken": "sk-ant-ort01-refresh",
                "expiresAt": 1767225600000,
            }
        },
    )


@pytest.fixture
def codex_auth(write_json, codex_auth_path: Path) -> Path:
    """Codex CLI auth file with token and account id."""
    return write_json(
        codex_auth_path,
        {
            "OPENAI_API_KEY": None,
            "tokens": {
                "id_token": "eyJ.id",
                "access_token": "eyJ.file-access",
                "refresh_token": "rt-file",
                "account_id": "acct-file-123",
            },
        },
    )


@pytest.fixture
def claude_usage_payload() -> dict:
    """Claude OAuth usage response."""
    return {
        "five_hour": {"utilization": 13.0, "resets_at": "2026-01-17T06:59:59.846865+00:00"},
        "seven_day": {"utilization": 27.0, "resets_at": "2026-01-22T18:59:59.846886+00:00"},
        "seven_day_sonnet": {"utilization": 3.0, "resets_at": "2026-01-22T18:59:59.846886+00:00"},
        "seven_day_opus": None,
        "extra_usage": {"is_enabled": False},
    }


@pytest.fixture
def codex_usage_payload() -> dict:
    """Codex wham/usage response."""
    return {
        "plan_type": "plus",
        "rate_limit": {
            "allowed": True,
            "limit_reached": False,
            "primary_window": {
                "used_percent": 42,
                "limit_window_seconds": 18000,
                "reset_after_seconds": 7200,
                "reset_at": 1768632000,
            },
            "secondary_window": {
                "used_percent": 18,
                "limit_window_seconds": 604800,
                "reset_after_seconds": 400000,
                "reset_at": 1769000000,
            },
        },
        "credits": {"has_credits": False, "unlimited": False, "balance": "0"},
    }


@pytest.fixture
def status_text() -> str:
    """Agent /status report with every field present."""
    return "\n".join(
        [
            "🦞 OpenClaw 2026.1.29",
            "🧠 Model: openai-codex/gpt-5.2-codex · 🔑 oauth (openai-codex:default)",
            "🧮 Tokens: 12k in / 1.3k out",
            "📚 Context: 45k/272k (17%) · 🧹 Compactions: 0",
            "📊 Usage: 5h 87% left ⏱3h 12m · Day 64% left ⏱5d 2h",
            "🧵 Session: agent:main:main • updated just now",
        ]
    )


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build an httpx.MockTransport that records requests.

    Usage:
        transport = mock_transport(200, json={...})
        transport.requests  # list of httpx.Request seen
    """

    def _factory(
        status_code: int = 200,
        *,
        json: object | None = None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, text=text or "")

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return _factory
