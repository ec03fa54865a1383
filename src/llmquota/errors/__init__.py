"""Error handling for llm-quota."""

from llmquota.errors.network import describe_transport_error
from llmquota.errors.types import (
    AgentError,
    CredentialError,
    DecodeError,
    ErrorCategory,
    ExitCode,
    QuotaError,
    SessionIOError,
    TransportError,
    UpstreamError,
)

__all__ = [
    "ErrorCategory",
    "ExitCode",
    "QuotaError",
    "CredentialError",
    "TransportError",
    "UpstreamError",
    "DecodeError",
    "SessionIOError",
    "AgentError",
    "describe_transport_error",
]
