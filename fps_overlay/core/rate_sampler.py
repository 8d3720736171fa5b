"""
Rate sampler module.

Turns a stream of frame timestamps into a smoothed frames-per-second value.
Ticks are counted over a ~100 ms window to get an instantaneous rate, and
the last few instantaneous rates are averaged into the published value.
"""

import math
from collections import deque
from typing import Deque, List, Optional

from fps_overlay.core.errors import ConfigurationError

WINDOW_MS = 100.0
SMOOTHING_WINDOW = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    ``round()`` would give 62 for 62.5; the overlay shows 63.
    """
    return int(math.floor(value + 0.5))


class RateSampler:
    """Windowed tick-rate sampler with a moving-average output.

    Args:
        window_ms: Minimum accumulation window in milliseconds.
        smoothing: Number of instantaneous rates averaged per output.

    Raises:
        ConfigurationError: If either argument is not positive.
    """

    def __init__(
        self,
        window_ms: float = WINDOW_MS,
        smoothing: int = SMOOTHING_WINDOW,
    ) -> None:
        if window_ms <= 0:
            raise ConfigurationError(
                f"Sampler window must be positive, got {window_ms}"
            )
        if smoothing <= 0:
            raise ConfigurationError(
                f"Sampler smoothing depth must be positive, got {smoothing}"
            )
        self._window_ms = window_ms
        self._tick_count = 0
        self._window_start_time = 0.0
        self._recent_rates: Deque[int] = deque(maxlen=smoothing)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def window_start_time(self) -> float:
        return self._window_start_time

    @property
    def recent_rates(self) -> List[int]:
        """Instantaneous rates in the smoothing window, oldest first."""
        return list(self._recent_rates)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def reset(self, now: float) -> None:
        """Start a fresh window at *now* and forget previous rates."""
        self._tick_count = 0
        self._window_start_time = now
        self._recent_rates.clear()

    def accumulate(self, timestamp: float) -> Optional[int]:
        """Record one tick at *timestamp* (milliseconds).

        Returns:
            The smoothed rate when the window has elapsed, otherwise
            ``None``.
        """
        self._tick_count += 1
        elapsed = timestamp - self._window_start_time
        if elapsed < self._window_ms:
            return None

        rate = round_half_up(self._tick_count * 1000 / elapsed)
        # deque(maxlen) drops the oldest rate
        self._recent_rates.append(rate)
        smoothed = round_half_up(
            sum(self._recent_rates) / len(self._recent_rates)
        )

        self._tick_count = 0
        self._window_start_time = timestamp
        return smoothed
