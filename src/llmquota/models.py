"""Data models for llm-quota.

Defines the normalized structures every pipeline variant produces, and the
envelope written to stdout.
"""

from __future__ import annotations

from typing import Any

import msgspec


class Credential(msgspec.Struct, frozen=True):
    """Resolved provider credential."""

    token: str
    account_id: str | None = None


class UsageWindow(msgspec.Struct, frozen=True):
    """A rate-limit window as reported upstream."""

    utilization: float | None = None  # 0-100 percentage used
    resets_at: str | None = None  # Upstream timestamp, passed through verbatim

    def percent_left(self) -> float | None:
        """Return percentage remaining, clamped to [0, 100]."""
        if self.utilization is None:
            return None
        return percent_left(self.utilization)


class WindowSummary(msgspec.Struct, frozen=True):
    """Normalized view of one window."""

    resets_at: str | None = None
    percent_left: float | None = None

    @classmethod
    def from_window(cls, window: UsageWindow | None) -> WindowSummary:
        if window is None:
            return cls()
        return cls(resets_at=window.resets_at, percent_left=window.percent_left())


class Envelope(msgspec.Struct, frozen=True, omit_defaults=True):
    """Uniform result written once per invocation.

    ``ok`` is the discriminator; the other fields are omitted from output
    when unset. ``usage`` and ``summary`` default to UNSET rather than None
    so an upstream JSON null is still echoed.
    """

    ok: bool
    usage: Any = msgspec.UNSET
    summary: Any = msgspec.UNSET
    error: str | None = None
    response_body: str | None = None

    @classmethod
    def success(cls, usage: Any, summary: Any) -> Envelope:
        return cls(ok=True, usage=usage, summary=summary)

    @classmethod
    def failure(
        cls,
        error: str,
        response_body: str | None = None,
        usage: Any = msgspec.UNSET,
    ) -> Envelope:
        return cls(ok=False, error=error, response_body=response_body, usage=usage)


class AgentReply(msgspec.Struct, frozen=True):
    """Decoded output of the external agent process."""

    status: str | None
    text: str
    raw: Any = None


def percent_left(utilization: float) -> float:
    """Return ``100 - utilization`` clamped into [0, 100]."""
    return max(0.0, min(100.0, 100.0 - float(utilization)))
