"""Fixed-capacity rolling series of portfolio value samples."""

import threading
from collections import deque
from decimal import Decimal

from tradesim.domain.views import ValueSample


class RollingValueSeries:
    """
    Bounded, ordered buffer of (sequence_index, value) samples.

    Appending beyond capacity evicts the oldest sample (FIFO); samples are
    never pruned by age. Sequence indexes keep increasing across evictions,
    so they can serve directly as the x-axis of a trend chart.
    """

    def __init__(self, capacity: int = 20):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._samples: deque[ValueSample] = deque(maxlen=capacity)
        self._next_index = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: Decimal) -> ValueSample:
        """Add a sample, evicting the oldest one when full."""
        with self._lock:
            sample = ValueSample(sequence_index=self._next_index, value=value)
            self._samples.append(sample)
            self._next_index += 1
            return sample

    def samples(self) -> list[ValueSample]:
        """Return retained samples, oldest first."""
        with self._lock:
            return list(self._samples)

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)
