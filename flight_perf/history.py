"""Fixed-capacity sample history (ring buffer) for one sensor channel."""

from __future__ import annotations

import numpy as np

IAS_HISTORY_CAPACITY = 20

# Synthetic history: readings of centre + (i % 7) - 3
SYNTHETIC_READINGS = 30
SYNTHETIC_PERIOD = 7
SYNTHETIC_OFFSET_KT = 3.0


class SampleHistory:
    """
    Bounded history of the most recent readings of one scalar channel.

    Backed by a numpy array allocated once at construction. Appends write at
    the cursor and wrap, so once the buffer is full every new reading
    replaces the oldest one. The capacity never grows.
    """

    def __init__(self, capacity: int = IAS_HISTORY_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._data = np.zeros(capacity, dtype=float)
        self._head = 0   # next slot to write
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def append(self, value: float) -> None:
        self._data[self._head] = value
        self._head = (self._head + 1) % self.capacity
        if self._count < self.capacity:
            self._count += 1

    def extend(self, values) -> None:
        for v in values:
            self.append(v)

    def snapshot(self) -> np.ndarray:
        """Copy of the retained samples, oldest first."""
        if not self.is_full:
            return self._data[: self._count].copy()
        # once full, the cursor points at the oldest sample
        return np.concatenate((self._data[self._head:], self._data[: self._head]))


def seed_synthetic_history(history: SampleHistory, centre_kts: float, readings: int = SYNTHETIC_READINGS) -> SampleHistory:
    """
    Fill a history with a repeating sawtooth around centre_kts.

    Used when no live IAS stream is available (CLI, MFD demo page).
    """
    for i in range(readings):
        history.append(centre_kts + float(i % SYNTHETIC_PERIOD) - SYNTHETIC_OFFSET_KT)
    return history
