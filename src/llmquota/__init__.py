"""llm-quota: Report remaining usage quota for AI assistant accounts."""

from __future__ import annotations

__version__ = "0.1.0"

from llmquota.models import AgentReply
from llmquota.models import Credential
from llmquota.models import Envelope
from llmquota.models import UsageWindow
from llmquota.models import WindowSummary
from llmquota.models import percent_left

__all__ = [
    "__version__",
    "AgentReply",
    "Credential",
    "Envelope",
    "UsageWindow",
    "WindowSummary",
    "percent_left",
]


def main() -> None:
    """Entry point for the llm-quota CLI."""
    from llmquota.cli.app import run_app

    run_app()
