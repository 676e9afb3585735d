"""Render job lifecycle: submit, wait, poll until a terminal status.

The controller never tracks job state locally. Every decision is taken on a
fresh status fetched from the service:

    create -> started -> initial delay -> [get -> polling -> delay]* ->
    completed (return) | failed (raise) | attempts exhausted (raise)
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any, Protocol

import structlog

from ..constants import CONSTANTS
from ..core.config import PollingPolicy
from ..core.exceptions import RenderCancelledError, RenderFailedError, RenderTimeoutError
from .events import ProgressCallback, ProgressEvent, ProgressEventType, emit
from .models import RenderJob, RenderResult
from .options import RenderOptions

logger = structlog.get_logger(__name__)


class RenderTransport(Protocol):
    """Operations the lifecycle needs from the API client."""

    async def create_render(
        self, url: str, options: RenderOptions | dict[str, Any] | None = None
    ) -> RenderJob: ...

    async def get_render(self, render_id: str) -> RenderResult: ...


class RenderLifecycle:
    """Drives one or more render jobs to completion over a transport.

    Holds no per-job state, so a single instance may run any number of
    concurrent renders.
    """

    def __init__(self, transport: RenderTransport, policy: PollingPolicy | None = None):
        self.transport = transport
        self.policy = policy or PollingPolicy()

    async def events(
        self,
        url: str,
        options: RenderOptions | dict[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> AsyncIterator[ProgressEvent]:
        """Run a render and yield its progress events as they happen.

        The ``completed`` event carries the final result in ``event.result``.
        After the ``failed`` event, the next iteration raises
        ``RenderFailedError``.

        Raises:
            RenderFailedError: The service reported a failed render
            RenderTimeoutError: No terminal status within ``max_attempts``
            RenderCancelledError: ``cancel_event`` was set during a wait
        """
        job = await self.transport.create_render(url, options)
        render_id = job.render_id
        log = logger.bind(render_id=render_id)
        log.info("Render job created", url=url)

        yield ProgressEvent(type=ProgressEventType.STARTED, render_id=render_id)

        await self._wait(self.policy.initial_delay, render_id, cancel_event)

        for attempt in range(1, self.policy.max_attempts + 1):
            result = await self.transport.get_render(render_id)
            log.debug(
                "Render status checked",
                attempt=attempt,
                status=result.status,
                retry_after=result.retry_after,
            )

            yield ProgressEvent(
                type=ProgressEventType.POLLING,
                render_id=render_id,
                status=result.status,
                attempt=attempt,
                retry_after=result.retry_after,
            )

            if result.is_completed:
                log.info("Render completed", attempts=attempt)
                yield ProgressEvent(
                    type=ProgressEventType.COMPLETED,
                    render_id=render_id,
                    status=result.status,
                    result=result,
                )
                return

            if result.is_failed:
                server_error = result.error or CONSTANTS.UNKNOWN_RENDER_ERROR
                log.warning("Render failed", attempts=attempt, error=server_error)
                yield ProgressEvent(
                    type=ProgressEventType.FAILED, render_id=render_id, status=result.status
                )
                raise RenderFailedError(server_error, render_id=render_id)

            await self._wait(self.policy.next_delay(result.retry_after), render_id, cancel_event)

        log.warning("Render timed out", attempts=self.policy.max_attempts)
        raise RenderTimeoutError(self.policy.max_attempts, render_id=render_id)

    async def run(
        self,
        url: str,
        options: RenderOptions | dict[str, Any] | None = None,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> RenderResult:
        """Run a render to completion, reporting progress to ``on_progress``."""
        async with aclosing(self.events(url, options, cancel_event)) as stream:
            async for event in stream:
                await emit(on_progress, event)
                if event.type is ProgressEventType.COMPLETED and event.result is not None:
                    return event.result

        # events() either returns after COMPLETED or raises
        raise RuntimeError("Render event stream ended without a result")

    async def _wait(
        self, delay: float, render_id: str, cancel_event: asyncio.Event | None
    ) -> None:
        if cancel_event is None:
            await asyncio.sleep(delay)
            return
        if cancel_event.is_set():
            raise RenderCancelledError(render_id=render_id)
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        except TimeoutError:
            return
        logger.info("Render cancelled", render_id=render_id)
        raise RenderCancelledError(render_id=render_id)
