"""Field extraction from free-form agent status text.

The agent's /status reply is natural language, for example:

    🧠 Model: openai-codex/gpt-5.2-codex · 🔑 oauth
    🧮 Tokens: 12k in / 1.3k out
    📚 Context: 45k/272k (17%) · 🧹 Compactions: 0
    📊 Usage: 5h 87% left ⏱3h 12m · Day 64% left ⏱5d 2h
    🧵 Session: agent:main:main • updated just now

Each field is described by one rule and matched on its own, so a line that
is missing or reworded only drops that field.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Separators the agent places between items on one line
BULLETS = "·•"

# Timer glyph before a reset duration, with optional emoji presentation selector
TIMER = "\u23f1\ufe0f?"

# Horizontal whitespace; a field never continues onto the next line
SP = r"[ \t]"


def _to_int(value: str) -> int:
    """Parse an integer capture, falling back to 0."""
    try:
        return int(value)
    except ValueError:
        return 0


@dataclass(frozen=True)
class FieldRule:
    """One extractable field: output key, pattern, and match-to-value mapper."""

    name: str
    pattern: re.Pattern[str]
    mapper: Callable[[re.Match[str]], Any]

    def extract(self, text: str) -> Any | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.mapper(match)


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        name="model",
        pattern=re.compile(rf"Model:{SP}*([\w./-]+)"),
        mapper=lambda m: m.group(1),
    ),
    FieldRule(
        name="tokens",
        pattern=re.compile(rf"Tokens:{SP}*(\S+){SP}+in{SP}*/{SP}*(\S+){SP}+out"),
        mapper=lambda m: {"input": m.group(1), "output": m.group(2)},
    ),
    FieldRule(
        name="context",
        pattern=re.compile(
            rf"Context:{SP}*([\w.]+){SP}*/{SP}*([\w.]+){SP}*\({SP}*([\d.]+)%{SP}*\)"
        ),
        mapper=lambda m: {
            "used": m.group(1),
            "total": m.group(2),
            "percent": _to_int(m.group(3)),
        },
    ),
    FieldRule(
        name="ratelimit",
        pattern=re.compile(
            rf"Usage:{SP}*5h{SP}+([\d.]+)%{SP}*(?:left)?{SP}*(?:{TIMER})?{SP}*"
            rf"([^{BULLETS},\n]+?){SP}*(?:[{BULLETS},]{SP}*)?"
            rf"Day{SP}+([\d.]+)%{SP}*(?:left)?{SP}*(?:{TIMER})?{SP}*"
            rf"([^{BULLETS}\n]+?){SP}*(?:[{BULLETS}]|$)",
            re.MULTILINE,
        ),
        mapper=lambda m: {
            "5h_percent_left": _to_int(m.group(1)),
            "5h_reset_in": m.group(2),
            "daily_percent_left": _to_int(m.group(3)),
            "daily_reset_in": m.group(4),
        },
    ),
    FieldRule(
        name="session",
        pattern=re.compile(rf"Session:{SP}*([^\s{BULLETS}]+)"),
        mapper=lambda m: m.group(1),
    ),
)


def parse_status_text(
    text: str,
    rules: tuple[FieldRule, ...] = FIELD_RULES,
) -> dict[str, Any]:
    """Extract every field whose rule matches.

    Returns:
        Mapping containing only the matched fields; empty when nothing matched
    """
    parsed: dict[str, Any] = {}
    for rule in rules:
        value = rule.extract(text)
        if value is not None:
            parsed[rule.name] = value
    return parsed
