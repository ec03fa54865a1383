"""Usage endpoint fetcher.

Performs the single GET for a provider and maps every outcome either to the
raw parsed JSON or to a typed QuotaError.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from llmquota.core.http import get_http_client
from llmquota.errors.network import describe_transport_error
from llmquota.errors.types import DecodeError
from llmquota.errors.types import UpstreamError
from llmquota.models import Credential
from llmquota.providers.base import Provider

logger = logging.getLogger(__name__)


async def fetch_usage(
    provider: Provider,
    credential: Credential,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Fetch the raw usage payload for a provider.

    Args:
        provider: Provider whose endpoint and headers to use
        credential: Resolved credential
        transport: Optional httpx transport (used by tests)

    Returns:
        Parsed JSON body, unmodified

    Raises:
        TransportError: Connection, DNS, timeout, or redirect failure
        UpstreamError: Non-2xx response, carrying the raw body
        DecodeError: 2xx response whose body is not JSON
    """
    url = provider.usage_url()
    logger.debug("GET %s", url)

    async with get_http_client(transport) as client:
        try:
            response = await client.get(url, headers=provider.headers(credential))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise describe_transport_error(e) from e

    logger.debug("%s responded with HTTP %d", provider.id, response.status_code)

    if not response.is_success:
        raise UpstreamError(response.status_code, response.text)

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON in response: {e}") from e
