"""Unit tests for client exceptions."""

from browser7.core.exceptions import (
    APIConnectionError,
    Browser7Error,
    HTTPStatusError,
    RenderCancelledError,
    RenderError,
    RenderFailedError,
    RenderTimeoutError,
)


class TestExceptionMessages:
    """Test exception attributes and string forms."""

    def test_base_error_context(self):
        """Test URL and cause are appended to the message."""
        error = Browser7Error("Boom", url="https://x", cause=ValueError("bad"))
        assert str(error) == "Boom (URL: https://x) (Caused by: bad)"

    def test_connection_error(self):
        """Test connection errors name the URL and the cause."""
        cause = OSError("connection refused")
        error = APIConnectionError("https://api/renders", cause=cause)

        assert error.url == "https://api/renders"
        assert error.cause is cause
        assert str(error) == (
            "Failed to connect to https://api/renders (Caused by: connection refused)"
        )

    def test_connection_error_names_url_once(self):
        """Test the URL appears once when there is no cause."""
        error = APIConnectionError("https://api/renders")
        assert str(error) == "Failed to connect to https://api/renders"

    def test_http_status_error(self):
        """Test HTTP errors keep status and body."""
        error = HTTPStatusError("Failed to get render status", 503, "Service Unavailable")

        assert error.status == 503
        assert error.body == "Service Unavailable"
        assert str(error) == "Failed to get render status: 503 Service Unavailable"

    def test_render_failed(self):
        """Test render failures carry the server message."""
        error = RenderFailedError("blocked", render_id="r1")

        assert error.server_error == "blocked"
        assert str(error) == "Render failed: blocked (Render ID: r1)"

    def test_render_timeout(self):
        """Test timeouts name the attempt count."""
        error = RenderTimeoutError(60)

        assert error.attempts == 60
        assert str(error) == "Render timed out after 60 attempts"

    def test_hierarchy(self):
        """Test every lifecycle error is a Browser7Error."""
        for error in (
            RenderFailedError("x"),
            RenderTimeoutError(1),
            RenderCancelledError(),
        ):
            assert isinstance(error, RenderError)
            assert isinstance(error, Browser7Error)
        assert isinstance(APIConnectionError("u"), Browser7Error)
        assert not isinstance(APIConnectionError("u"), HTTPStatusError)
