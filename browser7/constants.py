"""Centralized constants for the Browser7 client.

Runtime defaults are read from the environment once, at import time.
Everything else in the package refers to these names instead of literals.
"""

from os import environ

# API endpoint
PRODUCTION_BASE_URL: str = "https://api.browser7.com/v1"
DEFAULT_BASE_URL: str = environ.get("BROWSER7_API_URL", PRODUCTION_BASE_URL)
API_KEY_ENV_VAR: str = "BROWSER7_API_KEY"

# Endpoint paths
RENDERS_PATH: str = "/renders"
ACCOUNT_BALANCE_PATH: str = "/account/balance"

# Client identification
CLIENT_NAME: str = "browser7-python"
CLIENT_VERSION: str = "1.0.0"
DEFAULT_USER_AGENT: str = f"{CLIENT_NAME}/{CLIENT_VERSION}"

# HTTP configuration
DEFAULT_REQUEST_TIMEOUT: float = float(environ.get("BROWSER7_REQUEST_TIMEOUT", "30.0"))

# Polling configuration (seconds)
INITIAL_POLL_DELAY: float = float(environ.get("BROWSER7_INITIAL_POLL_DELAY", "2.0"))
DEFAULT_POLL_INTERVAL: float = float(environ.get("BROWSER7_POLL_INTERVAL", "1.0"))
MAX_POLL_ATTEMPTS: int = int(environ.get("BROWSER7_MAX_POLL_ATTEMPTS", "60"))

# Render statuses reported by the service
STATUS_COMPLETED: str = "completed"
STATUS_FAILED: str = "failed"
UNKNOWN_RENDER_ERROR: str = "Unknown error"

# Wait action limits (milliseconds)
WAIT_DELAY_MIN_MS: int = 100
WAIT_DELAY_MAX_MS: int = 60000
WAIT_TIMEOUT_MIN_MS: int = 1000
WAIT_TIMEOUT_MAX_MS: int = 60000
DEFAULT_WAIT_TIMEOUT_MS: int = 30000
DEFAULT_SELECTOR_STATE: str = "visible"

# Compressed result fields
COMPRESSED_TEXT_FIELDS: tuple[str, ...] = ("html",)
COMPRESSED_JSON_FIELDS: tuple[str, ...] = ("fetchResponses",)

# HTTP Status codes
HTTP_STATUS_OK: int = 200
HTTP_STATUS_MULTIPLE_CHOICES: int = 300

# Logging Configuration
LOG_LEVEL: str = environ.get("LOG_LEVEL", "INFO")


class AppConstants:  # pylint: disable=too-few-public-methods
    """Attribute access to the module level constants."""

    def __getattr__(self, name: str):
        """Redirect to module level constants."""
        import sys  # pylint: disable=import-outside-toplevel

        return getattr(sys.modules[__name__], name)


CONSTANTS = AppConstants()
