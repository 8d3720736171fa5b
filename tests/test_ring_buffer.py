"""
Tests for the ring buffer module.
"""

import pytest

from fps_overlay.core.errors import ConfigurationError
from fps_overlay.core.ring_buffer import SENTINEL, RingBuffer


class TestRingBuffer:

    def test_empty_buffer(self):
        buf = RingBuffer(4)
        assert buf.length == 0
        assert len(buf) == 0
        assert buf.capacity == 4
        assert buf.snapshot() == []

    @pytest.mark.parametrize("capacity", [0, -1, -30])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(ConfigurationError):
            RingBuffer(capacity)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RingBuffer(0)

    def test_partial_fill_keeps_order(self):
        buf = RingBuffer(5)
        for v in (7, 8, 9):
            buf.push(v)
        assert buf.length == 3
        assert [buf.get(i) for i in range(3)] == [7, 8, 9]

    def test_overwrite_oldest_when_full(self):
        buf = RingBuffer(3)
        for v in (1, 2, 3, 4):
            buf.push(v)
        assert buf.length == 3
        assert buf.get(0) == 2
        assert buf.get(1) == 3
        assert buf.get(2) == 4

    @pytest.mark.parametrize("extra", [0, 1, 4, 10, 23])
    def test_wraps_after_many_pushes(self, extra):
        capacity = 6
        values = list(range(1, capacity + extra + 1))
        buf = RingBuffer(capacity)
        for v in values:
            buf.push(v)
        assert buf.length == capacity
        assert buf.get(0) == values[extra]
        assert buf.get(capacity - 1) == values[-1]
        assert buf.snapshot() == values[-capacity:]

    def test_out_of_range_returns_sentinel(self):
        buf = RingBuffer(3)
        buf.push(42)
        assert buf.get(-1) == SENTINEL
        assert buf.get(1) == SENTINEL
        assert buf.get(3) == SENTINEL
        assert buf.get(100) == SENTINEL
        assert SENTINEL == 0

    def test_sentinel_on_full_buffer(self):
        buf = RingBuffer(2)
        for v in (5, 6, 7):
            buf.push(v)
        assert buf.get(-2) == 0
        assert buf.get(2) == 0

    def test_latest(self):
        buf = RingBuffer(2)
        assert buf.latest == 0
        buf.push(10)
        buf.push(20)
        buf.push(30)
        assert buf.latest == 30

    def test_iteration_oldest_first(self):
        buf = RingBuffer(3)
        for v in (1, 2, 3, 4, 5):
            buf.push(v)
        assert list(buf) == [3, 4, 5]

    def test_capacity_one(self):
        buf = RingBuffer(1)
        buf.push(1)
        buf.push(2)
        assert buf.length == 1
        assert buf.get(0) == 2
