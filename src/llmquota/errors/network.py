"""Network error classification utilities.

Turns httpx transport exceptions into a TransportError whose message keeps
the underlying error text.
"""

from __future__ import annotations

import httpx

from llmquota.errors.types import TransportError


def describe_transport_error(error: Exception) -> TransportError:
    """Classify a transport-level exception.

    Args:
        error: Exception raised while sending the request

    Returns:
        TransportError with a short prefix and the original error text
    """
    detail = str(error) or type(error).__name__

    if isinstance(error, httpx.TimeoutException):
        return TransportError(f"request timed out: {detail}")

    if isinstance(error, httpx.ConnectError):
        lowered = detail.lower()
        if "name or service" in lowered or "nodename" in lowered or "dns" in lowered:
            return TransportError(f"could not resolve server address: {detail}")
        return TransportError(f"failed to connect: {detail}")

    if isinstance(error, httpx.InvalidURL | httpx.UnsupportedProtocol):
        return TransportError(f"invalid request URL: {detail}")

    if isinstance(error, httpx.TooManyRedirects):
        return TransportError(f"too many redirects: {detail}")

    return TransportError(f"request failed: {detail}")

