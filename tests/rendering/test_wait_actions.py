"""Unit tests for wait action builders."""

import pytest

from browser7.core.client import Browser7Client
from browser7.rendering.wait_actions import (
    wait_for_click,
    wait_for_delay,
    wait_for_selector,
    wait_for_text,
)


class TestWaitActionShapes:
    """Test the descriptors produced by each builder."""

    def test_delay(self):
        """Test delay action shape."""
        assert wait_for_delay(500) == {"type": "delay", "duration": 500}

    def test_selector_defaults(self):
        """Test selector action defaults."""
        assert wait_for_selector(".content") == {
            "type": "selector",
            "selector": ".content",
            "state": "visible",
            "timeout": 30000,
        }

    def test_selector_custom(self):
        """Test selector action with explicit state and timeout."""
        action = wait_for_selector("#spinner", state="hidden", timeout=5000)
        assert action["state"] == "hidden"
        assert action["timeout"] == 5000

    def test_text_without_selector(self):
        """Test the selector key is absent when no selector is given."""
        action = wait_for_text("Hello")
        assert action == {"type": "text", "text": "Hello", "timeout": 30000}
        assert "selector" not in action

    def test_text_with_selector(self):
        """Test the selector key is present when a selector is given."""
        action = wait_for_text("Hello", ".sel")
        assert action == {"type": "text", "text": "Hello", "selector": ".sel", "timeout": 30000}

    def test_text_with_empty_selector(self):
        """Test an empty selector counts as no selector."""
        assert "selector" not in wait_for_text("Hello", "")

    def test_click(self):
        """Test click action shape."""
        assert wait_for_click("button.accept", timeout=2000) == {
            "type": "click",
            "selector": "button.accept",
            "timeout": 2000,
        }

    def test_client_static_helpers(self):
        """Test the builders are reachable from the client class."""
        assert Browser7Client.wait_for_delay(100) == wait_for_delay(100)
        assert Browser7Client.wait_for_text("Hi", ".x") == wait_for_text("Hi", ".x")
        assert Browser7Client.wait_for_selector("#a") == wait_for_selector("#a")
        assert Browser7Client.wait_for_click("#b") == wait_for_click("#b")


class TestWaitActionValidation:
    """Test range validation of builder arguments."""

    @pytest.mark.parametrize("duration", [100, 60000])
    def test_delay_bounds_accepted(self, duration):
        """Test delay bounds are inclusive."""
        assert wait_for_delay(duration)["duration"] == duration

    @pytest.mark.parametrize("duration", [0, 99, 60001])
    def test_delay_out_of_range(self, duration):
        """Test delays outside 100-60000 ms are rejected."""
        with pytest.raises(ValueError):
            wait_for_delay(duration)

    @pytest.mark.parametrize("timeout", [999, 60001])
    def test_timeout_out_of_range(self, timeout):
        """Test timeouts outside 1000-60000 ms are rejected for every variant."""
        with pytest.raises(ValueError):
            wait_for_selector(".a", timeout=timeout)
        with pytest.raises(ValueError):
            wait_for_text("a", timeout=timeout)
        with pytest.raises(ValueError):
            wait_for_click(".a", timeout=timeout)

    def test_invalid_selector_state(self):
        """Test unknown element states are rejected."""
        with pytest.raises(ValueError):
            wait_for_selector(".a", state="present")

    def test_empty_selector_rejected(self):
        """Test selector and click need a selector."""
        with pytest.raises(ValueError):
            wait_for_selector("")
        with pytest.raises(ValueError):
            wait_for_click("")
