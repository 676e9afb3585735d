"""HTTP helpers shared by every Browser7 endpoint call."""

import json
from typing import Any

import aiohttp
import structlog

from ..constants import CONSTANTS
from ..core.exceptions import APIConnectionError, Browser7Error, HTTPStatusError

logger = structlog.get_logger(__name__)


class HTTPResponse:
    """Standardized HTTP response wrapper."""

    def __init__(self, status: int, content: str, headers: dict[str, str] | None = None):
        self.status = status
        self.content = content
        self.headers = headers or {}
        self.is_success = CONSTANTS.HTTP_STATUS_OK <= status < CONSTANTS.HTTP_STATUS_MULTIPLE_CHOICES

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.content)


def build_headers(api_key: str, user_agent: str) -> dict[str, str]:
    """Headers carried by every API request."""
    return {
        "Authorization": f"Bearer {api_key}",
        "User-Agent": user_agent,
    }


async def send_request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    headers: dict[str, str],
    timeout: float | None = None,
    payload: dict[str, Any] | None = None,
) -> HTTPResponse:
    """Send a request and return the response whatever its status.

    Args:
        session: aiohttp session
        method: HTTP method
        url: Absolute endpoint URL
        headers: Request headers
        timeout: Total request timeout in seconds (uses default if None)
        payload: JSON body; sets ``Content-Type: application/json``

    Returns:
        HTTPResponse with status, content and headers

    Raises:
        APIConnectionError: When the endpoint cannot be reached
    """
    timeout = timeout or CONSTANTS.DEFAULT_REQUEST_TIMEOUT

    try:
        async with session.request(
            method,
            url,
            headers=headers,
            json=payload,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as response:
            content = await response.text()
            logger.debug("HTTP request finished", method=method, url=url, status=response.status)
            return HTTPResponse(
                status=response.status, content=content, headers=dict(response.headers)
            )
    except TimeoutError as e:
        logger.error("HTTP request timeout", method=method, url=url, timeout=timeout)
        raise APIConnectionError(url, cause=e) from e
    except aiohttp.ClientError as e:
        logger.error("HTTP client error", method=method, url=url, error=str(e))
        raise APIConnectionError(url, cause=e) from e


async def request_json(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    headers: dict[str, str],
    context: str,
    timeout: float | None = None,
    payload: dict[str, Any] | None = None,
) -> Any:
    """Send a request, raise for non-2xx, and decode the JSON body.

    Args:
        context: Failure description used in error messages,
            e.g. ``"Failed to start render"``

    Raises:
        APIConnectionError: When the endpoint cannot be reached
        HTTPStatusError: For non-2xx responses, with status and body text
        Browser7Error: When a successful response is not valid JSON
    """
    response = await send_request(
        session, method, url, headers=headers, timeout=timeout, payload=payload
    )

    if not response.is_success:
        logger.warning(context, url=url, status=response.status)
        raise HTTPStatusError(context, response.status, response.content, url=url)

    try:
        return response.json()
    except json.JSONDecodeError as e:
        raise Browser7Error("Invalid JSON in API response", url=url, cause=e) from e
