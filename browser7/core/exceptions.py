"""Exceptions raised by the Browser7 client."""


class Browser7Error(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, url: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.url = url
        self.cause = cause

    def __str__(self) -> str:
        msg = super().__str__()
        if self.url:
            msg = f"{msg} (URL: {self.url})"
        if self.cause:
            msg = f"{msg} (Caused by: {self.cause})"
        return msg


class ConfigurationError(Browser7Error):
    """Exception raised for invalid client configuration."""

    pass


class APIConnectionError(Browser7Error):
    """Exception raised when the API endpoint cannot be reached."""

    def __init__(self, url: str, cause: Exception | None = None):
        super().__init__(f"Failed to connect to {url}", cause=cause)
        self.url = url

    def __str__(self) -> str:
        msg = self.args[0]
        if self.cause:
            msg = f"{msg} (Caused by: {self.cause})"
        return msg


class HTTPStatusError(Browser7Error):
    """Exception raised when the API answers with a non-success status."""

    def __init__(self, message: str, status: int, body: str, url: str | None = None):
        super().__init__(f"{message}: {status} {body}", url=url)
        self.status = status
        self.body = body


class RenderError(Browser7Error):
    """Base exception for render lifecycle errors."""

    def __init__(self, message: str, render_id: str | None = None):
        super().__init__(message)
        self.render_id = render_id

    def __str__(self) -> str:
        msg = super().__str__()
        if self.render_id:
            msg = f"{msg} (Render ID: {self.render_id})"
        return msg


class RenderFailedError(RenderError):
    """Exception raised when the service reports a failed render."""

    def __init__(self, server_error: str, render_id: str | None = None):
        super().__init__(f"Render failed: {server_error}", render_id=render_id)
        self.server_error = server_error


class RenderTimeoutError(RenderError):
    """Exception raised when polling gives up before a terminal status."""

    def __init__(self, attempts: int, render_id: str | None = None):
        super().__init__(f"Render timed out after {attempts} attempts", render_id=render_id)
        self.attempts = attempts


class RenderCancelledError(RenderError):
    """Exception raised when a caller cancels an in-flight render."""

    def __init__(self, render_id: str | None = None):
        super().__init__("Render cancelled", render_id=render_id)
