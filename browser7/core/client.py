"""Async client for the Browser7 rendering API."""

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import aiohttp
import structlog
from pydantic import BaseModel, ValidationError

from ..constants import CONSTANTS
from ..rendering import wait_actions
from ..rendering.decoder import decode_render_fields
from ..rendering.events import ProgressCallback, ProgressEvent
from ..rendering.lifecycle import RenderLifecycle
from ..rendering.models import AccountBalance, RenderJob, RenderResult
from ..rendering.options import RenderOptions, build_render_payload
from ..utils.http import build_headers, request_json
from .config import ClientConfig
from .exceptions import Browser7Error, ConfigurationError

logger = structlog.get_logger(__name__)


def _parse_response(model: type[BaseModel], data: Any, url: str) -> Any:
    """Validate a decoded 2xx response body against a response model."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("Unexpected API response", url=url, model=model.__name__, error=str(e))
        raise Browser7Error("Unexpected API response", url=url, cause=e) from e


class Browser7Client:
    """Browser7 API client.

    Example:
        ```python
        async with Browser7Client(ClientConfig(api_key="b7_...")) as client:
            result = await client.render(
                "https://example.com",
                {"countryCode": "US", "waitFor": [Browser7Client.wait_for_delay(500)]},
            )
            print(result.html)
        ```

    The client keeps no per-render state; concurrent ``render`` calls on the
    same instance are safe. An ``aiohttp.ClientSession`` is created on first
    use unless one is passed in, and only a session the client created is
    closed by ``close()``.
    """

    wait_for_delay = staticmethod(wait_actions.wait_for_delay)
    wait_for_selector = staticmethod(wait_actions.wait_for_selector)
    wait_for_text = staticmethod(wait_actions.wait_for_text)
    wait_for_click = staticmethod(wait_actions.wait_for_click)

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        if config is not None and (api_key is not None or base_url is not None):
            raise ConfigurationError("Pass either config or api_key/base_url, not both")
        if config is None:
            overrides: dict[str, Any] = {"api_key": api_key or ""}
            if base_url:
                overrides["base_url"] = base_url
            config = ClientConfig(**overrides)

        self.config = config
        self._session = session
        self._owns_session = session is None
        self._lifecycle = RenderLifecycle(self, config.polling)

        logger.debug("Browser7 client initialized", base_url=config.base_url)

    async def __aenter__(self) -> "Browser7Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def session(self) -> aiohttp.ClientSession:
        """HTTP session, created lazily."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("Browser7 client session closed")

    def _headers(self) -> dict[str, str]:
        return build_headers(self.config.api_key, self.config.user_agent)

    async def create_render(
        self, url: str, options: RenderOptions | dict[str, Any] | None = None
    ) -> RenderJob:
        """Create a render job.

        Args:
            url: The URL to render
            options: Render options; only the keys set are sent

        Returns:
            RenderJob holding the ``render_id``
        """
        payload = build_render_payload(url, options)
        endpoint = self.config.url_for(CONSTANTS.RENDERS_PATH)
        data = await request_json(
            self.session,
            "POST",
            endpoint,
            headers=self._headers(),
            context="Failed to start render",
            timeout=self.config.request_timeout,
            payload=payload,
        )
        return _parse_response(RenderJob, data, endpoint)

    async def get_render(self, render_id: str) -> RenderResult:
        """Fetch the current status of a render job, decoding compressed fields."""
        endpoint = self.config.url_for(f"{CONSTANTS.RENDERS_PATH}/{render_id}")
        data = await request_json(
            self.session,
            "GET",
            endpoint,
            headers=self._headers(),
            context="Failed to get render status",
            timeout=self.config.request_timeout,
        )
        return _parse_response(RenderResult, decode_render_fields(data), endpoint)

    async def get_account_balance(self) -> AccountBalance:
        """Fetch the account balance."""
        endpoint = self.config.url_for(CONSTANTS.ACCOUNT_BALANCE_PATH)
        data = await request_json(
            self.session,
            "GET",
            endpoint,
            headers=self._headers(),
            context="Failed to get account balance",
            timeout=self.config.request_timeout,
        )
        return _parse_response(AccountBalance, data, endpoint)

    async def render(
        self,
        url: str,
        options: RenderOptions | dict[str, Any] | None = None,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> RenderResult:
        """Render a URL and wait for the result.

        Args:
            url: The URL to render
            options: Render options
            on_progress: Called with each ``ProgressEvent``; coroutine
                functions are awaited
            cancel_event: Setting it aborts the wait with
                ``RenderCancelledError``

        Returns:
            The completed RenderResult

        Raises:
            APIConnectionError: The API could not be reached
            HTTPStatusError: The API answered with a non-2xx status
            RenderFailedError: The service reported the render as failed
            RenderTimeoutError: The render did not finish within the attempt cap
            Browser7Error: A response body did not have the expected shape
        """
        return await self._lifecycle.run(url, options, on_progress, cancel_event)

    def iter_render(
        self,
        url: str,
        options: RenderOptions | dict[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> AsyncIterator[ProgressEvent]:
        """Render a URL, yielding progress events instead of calling back.

        The ``completed`` event carries the result in ``event.result``.
        """
        return self._lifecycle.events(url, options, cancel_event)
