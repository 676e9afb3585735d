"""Progress events emitted while a render job is awaited."""

import inspect
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import RenderResult


class ProgressEventType(Enum):
    """Lifecycle transitions reported to callers."""

    STARTED = "started"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProgressEvent(BaseModel):
    """A single lifecycle notification. Never reused or re-sent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ProgressEventType
    render_id: str = Field(alias="renderId")
    timestamp: datetime = Field(default_factory=_utcnow)
    status: Optional[str] = None
    attempt: Optional[int] = None
    retry_after: Optional[float] = Field(default=None, alias="retryAfter")
    result: Optional[RenderResult] = Field(default=None, exclude=True, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Wire-style representation with camelCase keys and ISO timestamp."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


ProgressCallback = Callable[[ProgressEvent], Union[None, Awaitable[None]]]


async def emit(callback: ProgressCallback | None, event: ProgressEvent) -> None:
    """Deliver ``event`` to ``callback``.

    Coroutine callbacks are awaited so delivery order matches emission
    order. Exceptions raised by the callback propagate to the caller.
    """
    if callback is None:
        return
    outcome = callback(event)
    if inspect.isawaitable(outcome):
        await outcome
