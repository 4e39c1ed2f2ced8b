"""Shared async HTTP helper for upstream news and translation APIs."""

import logging
from typing import Any, Mapping

import httpx

from vtvnews.exceptions import MalformedResponseError, TransientProviderError

logger = logging.getLogger(__name__)

USER_AGENT = "VtvNewsApp/1.0"

# Query parameters never written to logs
SECRET_PARAMS = {"apikey", "api_key", "token"}


def redact(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Copy of params with credentials masked, for logging."""
    if not params:
        return {}
    return {k: ("***" if k.lower() in SECRET_PARAMS else v) for k, v in params.items()}


async def request_json(
    provider: str,
    method: str,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    json_body: Any = None,
    headers: Mapping[str, str] | None = None,
    timeout: float = 15.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """
    Send one request and decode its JSON body.

    Args:
        provider: Provider name used in errors and logs
        method: HTTP method
        url: Absolute URL
        params: Query string parameters
        json_body: JSON payload for POST requests
        headers: Extra request headers
        timeout: Timeout in seconds for the whole exchange
        transport: Optional transport (tests inject httpx.MockTransport)

    Returns:
        Decoded JSON payload

    Raises:
        TransientProviderError: On network errors, timeouts and non-2xx statuses
        MalformedResponseError: When the body is not valid JSON
    """
    request_headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    logger.debug(f"{provider} request: {method} {url} params={redact(params)}")

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=request_headers,
        follow_redirects=True,
        transport=transport,
    ) as client:
        try:
            response = await client.request(method, url, params=params, json=json_body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error_text = (e.response.text or "")[:500]
            raise TransientProviderError(
                provider, f"API returned {status}: {error_text}", status_code=status
            ) from e
        except httpx.TimeoutException as e:
            raise TransientProviderError(provider, f"timed out after {timeout}s") from e
        except httpx.RequestError as e:
            raise TransientProviderError(provider, f"network error: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(
            provider, f"undecodable response body: {e}", status_code=response.status_code
        ) from e
