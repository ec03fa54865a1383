"""Claude (Anthropic) provider for llm-quota."""

from __future__ import annotations

from typing import Any

from llmquota.core.normalize import summarize_claude_usage
from llmquota.providers.base import Provider
from llmquota.providers.base import ProviderConfig


class ClaudeProvider(Provider):
    """Provider for Claude OAuth usage."""

    config = ProviderConfig(
        id="claude",
        name="Claude",
        env_token_var="ANTHROPIC_OAUTH_API_KEY",
        file_path_default="~/.claude/.credentials.json",
        file_path_override_var="CLAUDE_CREDENTIALS_PATH",
        base_url_default="https://api.anthropic.com",
        base_url_override_var="ANTHROPIC_BASE_URL",
        usage_path="/api/oauth/usage",
        user_agent="claude-code/2.0.32",
        token_keys=("claudeAiOauth", "accessToken"),
        extra_headers={"anthropic-beta": "oauth-2025-04-20"},
    )

    def summarize(self, usage: Any) -> dict[str, Any]:
        return summarize_claude_usage(usage)
