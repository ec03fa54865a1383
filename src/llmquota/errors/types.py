"""Error types and classifications."""

from __future__ import annotations

from enum import IntEnum
from enum import StrEnum


class ExitCode(IntEnum):
    """Process exit codes for llm-quota."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 2


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    CREDENTIAL = "credential"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"
    DECODE = "decode"
    IO = "io"
    AGENT = "agent"
    UNKNOWN = "unknown"


class QuotaError(Exception):
    """Base class for failures that end a quota lookup.

    Every subclass knows which exit code it maps to, so the pipeline can
    turn any of them into an envelope without inspecting the type.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN
    exit_code: ExitCode = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def response_body(self) -> str | None:
        return None


class CredentialError(QuotaError):
    """Missing, empty, or unreadable credentials."""

    category = ErrorCategory.CREDENTIAL
    exit_code = ExitCode.AUTH_ERROR


class TransportError(QuotaError):
    """Connection, DNS, timeout, or client construction failure."""

    category = ErrorCategory.TRANSPORT


class UpstreamError(QuotaError):
    """Non-2xx HTTP response from the usage endpoint."""

    category = ErrorCategory.UPSTREAM

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self._body = body

    @property
    def response_body(self) -> str | None:
        return self._body


class DecodeError(QuotaError):
    """Response body is not valid JSON."""

    category = ErrorCategory.DECODE


class SessionIOError(QuotaError):
    """Session identity file could not be created or read."""

    category = ErrorCategory.IO


class AgentError(QuotaError):
    """External agent process could not be run to completion."""

    category = ErrorCategory.AGENT
