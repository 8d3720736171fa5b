"""
Ring buffer module.

Fixed-capacity circular store used for the overlay's graph history. Once
full, every push overwrites the oldest sample.
"""

from typing import Iterator, List, Union

from fps_overlay.core.errors import ConfigurationError

Number = Union[int, float]

# Returned by out-of-range reads instead of raising
SENTINEL = 0


class RingBuffer:
    """Circular buffer of numeric samples with oldest-to-newest indexing.

    Args:
        capacity: Maximum number of samples retained. Must be positive.

    Raises:
        ConfigurationError: If *capacity* is not positive.

    Example::

        buf = RingBuffer(3)
        for v in (1, 2, 3, 4):
            buf.push(v)
        buf.get(0)  # 2, the oldest retained sample
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ConfigurationError(
                f"Ring buffer capacity must be positive, got {capacity}"
            )
        self._capacity = capacity
        self._store: List[Number] = [0] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        """Number of valid samples currently held."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def push(self, value: Number) -> None:
        """Append *value*, overwriting the oldest sample when full."""
        self._store[self._head] = value
        self._head = (self._head + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1

    def get(self, index: int) -> Number:
        """Return the *index*-th oldest sample.

        Args:
            index: Logical position, 0 being the oldest retained sample.

        Returns:
            The sample, or :data:`SENTINEL` for any index outside
            ``0 <= index < length``.
        """
        if index < 0 or index >= self._count:
            return SENTINEL
        start = (self._head - self._count + self._capacity) % self._capacity
        return self._store[(start + index) % self._capacity]

    @property
    def latest(self) -> Number:
        """Newest sample, or :data:`SENTINEL` when empty."""
        return self.get(self._count - 1)

    def snapshot(self) -> List[Number]:
        """Return the retained samples as a list, oldest first."""
        return [self.get(i) for i in range(self._count)]

    def __iter__(self) -> Iterator[Number]:
        return iter(self.snapshot())
