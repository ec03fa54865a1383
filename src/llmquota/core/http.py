"""HTTP client construction for llm-quota."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from llmquota.config.settings import get_config
from llmquota.errors.types import TransportError


def get_timeout_config() -> httpx.Timeout:
    """Get timeout configuration from settings.

    The same bound applies to every phase of the single request.
    """
    config = get_config()
    return httpx.Timeout(config.fetch.timeout)


@asynccontextmanager
async def get_http_client(
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Create an HTTP client for one invocation and close it afterwards.

    Usage:
        async with get_http_client() as client:
            response = await client.get(...)

    Raises:
        TransportError: If the client cannot be constructed
    """
    try:
        client = httpx.AsyncClient(
            timeout=get_timeout_config(),
            follow_redirects=True,
            transport=transport,
        )
    except (OSError, ValueError) as e:
        raise TransportError(f"failed to build HTTP client: {e}") from e

    async with client:
        yield client
