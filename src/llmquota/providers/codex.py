"""Codex (OpenAI/ChatGPT) provider for llm-quota."""

from __future__ import annotations

from typing import Any

from llmquota.core.normalize import summarize_codex_usage
from llmquota.providers.base import Provider
from llmquota.providers.base import ProviderConfig


class CodexProvider(Provider):
    """Provider for Codex usage via the ChatGPT backend API."""

    config = ProviderConfig(
        id="codex",
        name="Codex",
        env_token_var="CODEX_ACCESS_TOKEN",
        file_path_default="~/.codex/auth.json",
        file_path_override_var="CODEX_AUTH_PATH",
        base_url_default="https://chatgpt.com",
        base_url_override_var="CODEX_BASE_URL",
        usage_path="/backend-api/wham/usage",
        user_agent="codex-cli",
        token_keys=("tokens", "access_token"),
        account_id_keys=("tokens", "account_id"),
        account_id_env_vars=("CODEX_ACCOUNT_ID", "CHATGPT_ACCOUNT_ID"),
        # Exact capitalization used by the Codex CLI
        account_id_header="ChatGPT-Account-Id",
    )

    def summarize(self, usage: Any) -> dict[str, Any]:
        return summarize_codex_usage(usage)
