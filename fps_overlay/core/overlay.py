"""
Overlay module.

Composes the ring buffer, rate sampler and graph renderer into a unit that
can be toggled on and off. While enabled, a tick runs on every frame: it
feeds the sampler, stores any new sample and redraws the graph, then asks
the scheduler for the next frame.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fps_overlay.core.errors import ConfigurationError
from fps_overlay.core.rate_sampler import RateSampler
from fps_overlay.core.ring_buffer import RingBuffer
from fps_overlay.core.scheduler import FrameScheduler, monotonic_ms
from fps_overlay.render.canvas_surface import CanvasSurface
from fps_overlay.render.graph_renderer import GraphRenderer
from fps_overlay.render.surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlayConfig:
    """Surface size and history length of an overlay."""

    width: int = 120
    height: int = 80
    graph_capacity: int = 30

    def __post_init__(self) -> None:
        for name in ("width", "height", "graph_capacity"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(
                    f"Overlay {name} must be positive, got {value}"
                )


class Overlay:
    """Frame-rate overlay driven by a cooperative per-frame tick.

    Args:
        scheduler: Source of frame callbacks.
        config: Surface size and graph capacity.
        surface: Drawing surface; a :class:`CanvasSurface` of the configured
            size is created when omitted.
        clock: Millisecond clock used when the overlay is enabled.

    Disabling does not retract an already requested frame: that tick still
    runs, sees the overlay disabled and returns without touching the buffer
    or the surface.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        config: Optional[OverlayConfig] = None,
        surface: Optional[DrawingSurface] = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self.config = config or OverlayConfig()
        if surface is None:
            surface = CanvasSurface(self.config.width, self.config.height)
        elif (surface.width, surface.height) != (self.config.width, self.config.height):
            raise ConfigurationError(
                f"Surface is {surface.width}x{surface.height}, overlay "
                f"configured for {self.config.width}x{self.config.height}"
            )

        self.enabled = False
        self.buffer = RingBuffer(self.config.graph_capacity)
        self.sampler = RateSampler()
        self.pending_tick: Optional[int] = None
        self._scheduler = scheduler
        self._clock = clock
        self._renderer = GraphRenderer(surface, self.config.graph_capacity)

    @property
    def surface(self) -> DrawingSurface:
        return self._renderer.surface

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def toggle(self) -> bool:
        """Flip between enabled and disabled.

        Returns:
            The new ``enabled`` state.
        """
        if self.enabled:
            self.enabled = False
            logger.info("FPS overlay disabled")
            return False

        self.sampler.reset(self._clock())
        self.enabled = True
        logger.info("FPS overlay enabled")
        # A tick left over from the previous enabled period keeps the chain
        if self.pending_tick is None:
            self._schedule()
        return True

    def get_status(self) -> Dict:
        """Return a snapshot of the overlay state."""
        return {
            "enabled": self.enabled,
            "capacity": self.buffer.capacity,
            "samples": self.buffer.length,
            "current": self.buffer.latest if self.buffer.length else None,
            "tick_pending": self.pending_tick is not None,
        }

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def _schedule(self) -> None:
        self.pending_tick = self._scheduler.request_frame(self._tick)

    def _tick(self, timestamp: float) -> None:
        self.pending_tick = None
        if not self.enabled:
            logger.debug("Dropped tick at %.1f ms: overlay disabled", timestamp)
            return

        sample = self.sampler.accumulate(timestamp)
        if sample is not None:
            self.buffer.push(sample)

        self._renderer.draw(self.buffer)
        self._schedule()
