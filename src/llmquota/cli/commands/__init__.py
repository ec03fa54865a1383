"""CLI commands for llm-quota."""

from llmquota.cli.commands.usage import claude_command, codex_agent_command, codex_command

__all__ = [
    "claude_command",
    "codex_command",
    "codex_agent_command",
]
