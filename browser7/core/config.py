"""Configuration settings for the Browser7 client."""

import os
from dataclasses import dataclass, field

from ..constants import CONSTANTS
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class PollingPolicy:
    """Timing rules for awaiting a render job.

    The first status check happens after ``initial_delay`` seconds. Later
    checks wait for the server's ``retryAfter`` hint, falling back to
    ``default_interval`` when the hint is missing or zero.
    """

    initial_delay: float = CONSTANTS.INITIAL_POLL_DELAY
    default_interval: float = CONSTANTS.DEFAULT_POLL_INTERVAL
    max_attempts: int = CONSTANTS.MAX_POLL_ATTEMPTS

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.initial_delay < 0:
            raise ConfigurationError("initial_delay must not be negative")
        if self.default_interval < 0:
            raise ConfigurationError("default_interval must not be negative")
        if self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1")

    def next_delay(self, retry_after: float | None) -> float:
        """Seconds to wait before the next status check."""
        if retry_after and retry_after > 0:
            return float(retry_after)
        return self.default_interval


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration shared by every request."""

    api_key: str
    base_url: str = CONSTANTS.DEFAULT_BASE_URL
    request_timeout: float = CONSTANTS.DEFAULT_REQUEST_TIMEOUT
    user_agent: str = CONSTANTS.DEFAULT_USER_AGENT
    polling: PollingPolicy = field(default_factory=PollingPolicy)

    def __post_init__(self):
        """Validate configuration parameters."""
        if not self.api_key:
            raise ConfigurationError("API key is required")
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive")
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from ``BROWSER7_API_KEY`` and keyword overrides."""
        overrides.setdefault("api_key", os.environ.get(CONSTANTS.API_KEY_ENV_VAR, ""))
        return cls(**overrides)

    def url_for(self, path: str) -> str:
        """Join an endpoint path onto the base URL."""
        return f"{self.base_url}{path}"
