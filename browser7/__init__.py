"""Async Python client for the Browser7 rendering API.

Example Usage:
    ```python
    from browser7 import Browser7Client, ClientConfig

    async with Browser7Client(ClientConfig(api_key="b7_...")) as client:
        result = await client.render("https://example.com", {"countryCode": "GB"})
    ```
"""

from .constants import CLIENT_VERSION as __version__
from .core.client import Browser7Client
from .core.config import ClientConfig, PollingPolicy
from .core.exceptions import (
    APIConnectionError,
    Browser7Error,
    ConfigurationError,
    HTTPStatusError,
    RenderCancelledError,
    RenderError,
    RenderFailedError,
    RenderTimeoutError,
)
from .rendering import (
    AccountBalance,
    CaptchaMode,
    ProgressEvent,
    ProgressEventType,
    RenderJob,
    RenderOptions,
    RenderResult,
    ScreenshotFormat,
    wait_for_click,
    wait_for_delay,
    wait_for_selector,
    wait_for_text,
)
from .utils.logging import setup_logging

__all__ = [
    "__version__",
    # Client
    "Browser7Client",
    "ClientConfig",
    "PollingPolicy",
    # Errors
    "APIConnectionError",
    "Browser7Error",
    "ConfigurationError",
    "HTTPStatusError",
    "RenderCancelledError",
    "RenderError",
    "RenderFailedError",
    "RenderTimeoutError",
    # Rendering
    "AccountBalance",
    "CaptchaMode",
    "ProgressEvent",
    "ProgressEventType",
    "RenderJob",
    "RenderOptions",
    "RenderResult",
    "ScreenshotFormat",
    "wait_for_click",
    "wait_for_delay",
    "wait_for_selector",
    "wait_for_text",
    # Logging
    "setup_logging",
]
