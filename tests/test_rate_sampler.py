"""
Tests for the rate sampler module.
"""

import pytest

from fps_overlay.core.errors import ConfigurationError
from fps_overlay.core.rate_sampler import RateSampler, round_half_up


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _feed_window(sampler: RateSampler, start: float, ticks: int, length: float = 100.0):
    """Feed *ticks* evenly spaced ticks, the last one closing the window.

    Returns the result of the final ``accumulate`` call.
    """
    result = None
    for j in range(1, ticks + 1):
        result = sampler.accumulate(start + length * j / ticks)
        if j < ticks:
            assert result is None
    return result


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0), (0.49, 0), (0.5, 1), (2.5, 3), (62.5, 63), (7.4999, 7)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestRateSampler:

    def test_initial_state(self):
        sampler = RateSampler()
        assert sampler.tick_count == 0
        assert sampler.window_start_time == 0.0
        assert sampler.recent_rates == []

    @pytest.mark.parametrize("kwargs", [{"window_ms": 0}, {"smoothing": 0}, {"window_ms": -5}])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ConfigurationError):
            RateSampler(**kwargs)

    def test_no_sample_before_window(self):
        sampler = RateSampler()
        sampler.reset(1000.0)
        assert sampler.accumulate(1016.0) is None
        assert sampler.accumulate(1099.9) is None
        assert sampler.tick_count == 2
        assert sampler.window_start_time == 1000.0

    def test_sample_at_window_boundary(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        assert sampler.accumulate(100.0) == 10
        assert sampler.tick_count == 0
        assert sampler.window_start_time == 100.0
        assert sampler.recent_rates == [10]

    def test_steady_one_tick_per_window(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        outputs = [sampler.accumulate(100.0 * i) for i in range(1, 7)]
        assert outputs == [10] * 6
        assert sampler.recent_rates == [10] * 5

    @pytest.mark.parametrize("interval, expected", [(20.0, 50), (10.0, 100), (16.0, 63)])
    def test_steady_interval_converges(self, interval, expected):
        sampler = RateSampler()
        sampler.reset(0.0)
        outputs = []
        for i in range(1, 200):
            out = sampler.accumulate(interval * i)
            if out is not None:
                outputs.append(out)
        assert len(outputs) >= 5
        assert outputs[-1] == expected
        assert all(rate == expected for rate in sampler.recent_rates)

    def test_history_never_exceeds_five(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        for i in range(1, 50):
            sampler.accumulate(100.0 * i)
            assert len(sampler.recent_rates) <= 5

    def test_fifo_eviction_and_mean(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        outputs = []
        for n, ticks in enumerate([1, 2, 3, 4, 5, 6]):
            outputs.append(_feed_window(sampler, 100.0 * n, ticks))
        # Instantaneous rates 10..60; the first is evicted on the sixth window
        assert sampler.recent_rates == [20, 30, 40, 50, 60]
        assert outputs == [10, 15, 20, 25, 30, 40]

    def test_smoothed_value_rounds_half_up(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        assert sampler.accumulate(200.0) == 5  # 1 tick over 200 ms
        assert sampler.accumulate(300.0) == 8  # mean(5, 10) = 7.5
        assert sampler.recent_rates == [5, 10]

    def test_long_window_lowers_rate(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        assert sampler.accumulate(1000.0) == 1

    def test_reset_clears_state(self):
        sampler = RateSampler()
        sampler.reset(0.0)
        _feed_window(sampler, 0.0, 3)
        sampler.accumulate(150.0)
        sampler.reset(5000.0)
        assert sampler.tick_count == 0
        assert sampler.window_start_time == 5000.0
        assert sampler.recent_rates == []
