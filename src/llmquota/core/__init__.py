"""Core pipeline components for llm-quota."""

from llmquota.core.normalize import (
    parse_window,
    summarize_claude_usage,
    summarize_codex_usage,
)
from llmquota.core.session import load_or_create_session_id
from llmquota.core.status_parser import FIELD_RULES, FieldRule, parse_status_text

__all__ = [
    # normalize
    "parse_window",
    "summarize_claude_usage",
    "summarize_codex_usage",
    # session
    "load_or_create_session_id",
    # status text
    "FIELD_RULES",
    "FieldRule",
    "parse_status_text",
]
