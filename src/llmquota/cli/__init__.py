"""Command-line interface for llm-quota."""

from llmquota.cli.app import app, run_app

__all__ = ["app", "run_app"]
