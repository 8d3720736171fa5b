"""
Frame scheduling primitives.

An overlay never sleeps or blocks: it asks the scheduler to call it back at
the next frame and returns. :class:`FrameScheduler` dispatches frames when
told to (tests, scripts); :class:`AsyncioFrameScheduler` dispatches them at a
fixed refresh rate on the running event loop.
"""

import asyncio
import contextlib
import itertools
import logging
import time
from typing import Callable, Dict, Optional

from fps_overlay.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


def monotonic_ms() -> float:
    """Monotonic clock reading in milliseconds."""
    return time.perf_counter() * 1000.0


class FrameScheduler:
    """Manually driven per-frame callback queue.

    Each requested callback runs exactly once, on the next call to
    :meth:`fire`. Callbacks requested while a frame is being dispatched are
    deferred to the following frame.
    """

    def __init__(self) -> None:
        self._pending: Dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)
        self._frames_fired = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def frames_fired(self) -> int:
        return self._frames_fired

    def is_pending(self, handle: Optional[int]) -> bool:
        return handle is not None and handle in self._pending

    def request_frame(self, callback: FrameCallback) -> int:
        """Queue *callback* for the next frame and return its handle."""
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def fire(self, timestamp: float) -> int:
        """Dispatch one frame at *timestamp*.

        Returns:
            Number of callbacks invoked.
        """
        due, self._pending = self._pending, {}
        self._frames_fired += 1
        for callback in due.values():
            callback(timestamp)
        return len(due)


class AsyncioFrameScheduler(FrameScheduler):
    """Fires frames from an asyncio task at *frame_rate* Hz.

    Args:
        frame_rate: Frames per second to dispatch. Must be positive.
        clock: Millisecond clock used to stamp each frame.
    """

    def __init__(
        self,
        frame_rate: float = 60.0,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        super().__init__()
        if frame_rate <= 0:
            raise ConfigurationError(
                f"Frame rate must be positive, got {frame_rate}"
            )
        self._interval = 1.0 / frame_rate
        self._clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Begin dispatching frames on the running event loop."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(
            "Frame scheduler started (%.1f Hz).", 1.0 / self._interval
        )

    async def stop(self) -> None:
        """Stop dispatching frames. Pending callbacks stay queued."""
        if self._task is None:
            return
        if self._task.done():
            # A failed frame task was already logged in _run
            if not self._task.cancelled():
                self._task.exception()
        else:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        self._task = None
        logger.info("Frame scheduler stopped.")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.fire(self._clock())
            except Exception:
                logger.exception("Frame callback failed; stopping scheduler")
                raise
