"""Builders for the wait actions the service runs while rendering.

Each builder validates its arguments and returns a plain ``dict`` ready to be
placed in ``RenderOptions.wait_for``. Durations and timeouts are in
milliseconds. Out of range values raise ``ValueError`` before any request is
sent.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import CONSTANTS

SelectorState = Literal["visible", "hidden", "attached"]


def _timeout_field() -> Any:
    return Field(
        default=CONSTANTS.DEFAULT_WAIT_TIMEOUT_MS,
        ge=CONSTANTS.WAIT_TIMEOUT_MIN_MS,
        le=CONSTANTS.WAIT_TIMEOUT_MAX_MS,
        description="Timeout in milliseconds",
    )


class WaitAction(BaseModel):
    """Common base for wait action descriptors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str

    def to_payload(self) -> dict[str, Any]:
        """Wire form; unset optional keys are left out."""
        return self.model_dump(exclude_none=True)


class DelayAction(WaitAction):
    """Pause for a fixed duration."""

    type: Literal["delay"] = "delay"
    duration: int = Field(
        ge=CONSTANTS.WAIT_DELAY_MIN_MS,
        le=CONSTANTS.WAIT_DELAY_MAX_MS,
        description="Duration in milliseconds",
    )


class SelectorAction(WaitAction):
    """Wait until an element reaches a state."""

    type: Literal["selector"] = "selector"
    selector: str = Field(min_length=1, description="CSS selector")
    state: SelectorState = Field(default=CONSTANTS.DEFAULT_SELECTOR_STATE)
    timeout: int = _timeout_field()


class TextAction(WaitAction):
    """Wait until text appears, optionally inside a selector."""

    type: Literal["text"] = "text"
    text: str = Field(min_length=1, description="Text to wait for")
    selector: Optional[str] = Field(default=None, description="Limits the search scope")
    timeout: int = _timeout_field()


class ClickAction(WaitAction):
    """Click an element."""

    type: Literal["click"] = "click"
    selector: str = Field(min_length=1, description="CSS selector of the element to click")
    timeout: int = _timeout_field()


def wait_for_delay(duration: int) -> dict[str, Any]:
    """Create a delay wait action.

    Args:
        duration: Duration in milliseconds (100-60000)
    """
    return DelayAction(duration=duration).to_payload()


def wait_for_selector(
    selector: str,
    state: SelectorState = "visible",
    timeout: int = CONSTANTS.DEFAULT_WAIT_TIMEOUT_MS,
) -> dict[str, Any]:
    """Create a selector wait action.

    Args:
        selector: CSS selector to wait for
        state: 'visible', 'hidden' or 'attached'
        timeout: Timeout in milliseconds (1000-60000)
    """
    return SelectorAction(selector=selector, state=state, timeout=timeout).to_payload()


def wait_for_text(
    text: str,
    selector: str | None = None,
    timeout: int = CONSTANTS.DEFAULT_WAIT_TIMEOUT_MS,
) -> dict[str, Any]:
    """Create a text wait action.

    The ``selector`` key is only present when a selector is given.

    Args:
        text: Text to wait for
        selector: Optional CSS selector to limit the search scope
        timeout: Timeout in milliseconds (1000-60000)
    """
    return TextAction(text=text, selector=selector or None, timeout=timeout).to_payload()


def wait_for_click(
    selector: str, timeout: int = CONSTANTS.DEFAULT_WAIT_TIMEOUT_MS
) -> dict[str, Any]:
    """Create a click wait action.

    Args:
        selector: CSS selector of element to click
        timeout: Timeout in milliseconds (1000-60000)
    """
    return ClickAction(selector=selector, timeout=timeout).to_payload()
