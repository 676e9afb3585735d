"""Shared fixtures and test configuration for pytest."""

import asyncio
import base64
import gzip
import json
from typing import Any

import pytest
import structlog

from browser7.core.config import ClientConfig, PollingPolicy
from browser7.rendering.models import RenderJob, RenderResult

# Configure structlog before modules cache loggers with default configuration
structlog.reset_defaults()
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    context_class=dict,
    cache_logger_on_first_use=False,  # Don't cache during tests to allow reconfiguration
)

TEST_API_KEY = "b7_test_key"
TEST_BASE_URL = "https://api.test.browser7.com/v1"
TEST_RENDER_ID = "render-123"


def gzip_base64(value: Any) -> str:
    """Encode text (or JSON-able data) the way the service compresses fields."""
    if not isinstance(value, str):
        value = json.dumps(value)
    return base64.b64encode(gzip.compress(value.encode("utf-8"))).decode("ascii")


class FakeTransport:
    """In-memory transport returning scripted status responses.

    The last scripted response repeats once the script runs out.
    """

    def __init__(self, responses: list[dict[str, Any]], render_id: str = TEST_RENDER_ID):
        self.responses = responses
        self.render_id = render_id
        self.created: list[tuple[str, Any]] = []
        self.polls = 0

    async def create_render(self, url, options=None) -> RenderJob:
        self.created.append((url, options))
        return RenderJob(render_id=self.render_id)

    async def get_render(self, render_id: str) -> RenderResult:
        assert render_id == self.render_id
        response = self.responses[min(self.polls, len(self.responses) - 1)]
        self.polls += 1
        return RenderResult.model_validate(response)


@pytest.fixture
def mock_sleep(monkeypatch):
    """Replace asyncio.sleep with an instant version that records delays."""
    delays: list[float] = []

    async def instant_sleep(delay, *args, **kwargs):
        delays.append(delay)

    monkeypatch.setattr(asyncio, "sleep", instant_sleep)
    return delays


@pytest.fixture
def fast_polling():
    """Polling policy without waits, for tests hitting a mocked HTTP layer."""
    return PollingPolicy(initial_delay=0, default_interval=0, max_attempts=5)


@pytest.fixture
def client_config(fast_polling):
    """Client configuration pointing at a test endpoint."""
    return ClientConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, polling=fast_polling)


@pytest.fixture
def fake_transport():
    """Factory for scripted in-memory transports."""
    return FakeTransport


@pytest.fixture
def compress():
    """base64+gzip encoder matching the service wire format."""
    return gzip_base64
