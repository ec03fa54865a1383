"""Usage payload normalization.

Reshapes raw provider JSON into the canonical summary. Extraction is
best-effort: a window that is missing or has the wrong shape becomes an
empty summary, never an error, because the raw payload is always echoed
alongside.
"""

from __future__ import annotations

from typing import Any

import msgspec

from llmquota.models import UsageWindow
from llmquota.models import WindowSummary

CLAUDE_WINDOWS = ("five_hour", "seven_day", "seven_day_sonnet")


def parse_window(data: Any) -> UsageWindow | None:
    """Decode one window object, returning None for anything unexpected.

    Example:
        { "utilization": 27.0, "resets_at": "2026-01-22T18:59:59.846886+00:00" }
    """
    if data is None:
        return None
    try:
        return msgspec.convert(data, type=UsageWindow)
    except msgspec.ValidationError:
        return None


def summarize_claude_usage(data: Any) -> dict[str, Any]:
    """Build ``{five_hour, seven_day, seven_day_sonnet}`` from a Claude payload."""
    if not isinstance(data, dict):
        data = {}

    summary: dict[str, Any] = {}
    for key in CLAUDE_WINDOWS:
        window = parse_window(data.get(key))
        summary[key] = msgspec.to_builtins(WindowSummary.from_window(window))
    return summary


def summarize_codex_usage(data: Any) -> dict[str, Any]:
    """Copy ``rate_limit.primary_window``/``secondary_window`` verbatim.

    Each key is always present; an absent window is an explicit null.
    """
    rate_limit = data.get("rate_limit") if isinstance(data, dict) else None
    if not isinstance(rate_limit, dict):
        rate_limit = {}

    return {
        "primary": rate_limit.get("primary_window"),
        "secondary": rate_limit.get("secondary_window"),
    }
