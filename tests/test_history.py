"""Tests for the IAS ring buffer in history.py"""

import numpy as np
import pytest

from flight_perf.history import SampleHistory, seed_synthetic_history, IAS_HISTORY_CAPACITY


class TestSampleHistory:
    """Tests for the SampleHistory ring buffer."""

    def test_default_capacity(self):
        """Default capacity is the IAS history size."""
        history = SampleHistory()
        assert history.capacity == IAS_HISTORY_CAPACITY == 20
        assert len(history) == 0

    def test_empty_snapshot(self):
        """A fresh buffer has no samples."""
        assert len(SampleHistory(capacity=5).snapshot()) == 0

    def test_partial_fill_keeps_insertion_order(self):
        """Before wrapping, the snapshot is the appended values in order."""
        history = SampleHistory(capacity=5)
        history.extend([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(history.snapshot(), [1.0, 2.0, 3.0])
        assert len(history) == 3
        assert not history.is_full

    def test_exactly_full(self):
        """Filling to capacity does not drop anything."""
        history = SampleHistory(capacity=4)
        history.extend([1.0, 2.0, 3.0, 4.0])
        assert history.is_full
        np.testing.assert_array_equal(history.snapshot(), [1.0, 2.0, 3.0, 4.0])

    def test_overflow_keeps_last_capacity_values(self):
        """More appends than capacity keep exactly the newest values, oldest first."""
        history = SampleHistory(capacity=20)
        history.extend(float(i) for i in range(25))

        snap = history.snapshot()
        assert len(snap) == 20
        np.testing.assert_array_equal(snap, np.arange(5, 25, dtype=float))

    @pytest.mark.parametrize("n", [21, 39, 40, 41, 97])
    def test_count_never_exceeds_capacity(self, n):
        """Count saturates at capacity for any number of appends."""
        history = SampleHistory(capacity=20)
        history.extend(float(i) for i in range(n))
        assert len(history) == 20
        assert set(history.snapshot()) == set(float(i) for i in range(n - 20, n))

    def test_snapshot_is_a_copy(self):
        """Mutating a snapshot does not touch the buffer."""
        history = SampleHistory(capacity=3)
        history.extend([1.0, 2.0, 3.0, 4.0])
        snap = history.snapshot()
        snap[:] = 0.0
        np.testing.assert_array_equal(history.snapshot(), [2.0, 3.0, 4.0])

    def test_deterministic(self):
        """The same append sequence gives the same state."""
        a = SampleHistory(capacity=7)
        b = SampleHistory(capacity=7)
        values = [150.0 + (i % 5) for i in range(23)]
        a.extend(values)
        b.extend(values)
        np.testing.assert_array_equal(a.snapshot(), b.snapshot())

    def test_rejects_non_positive_capacity(self):
        """A buffer needs at least one slot."""
        with pytest.raises(ValueError):
            SampleHistory(capacity=0)


class TestSeedSyntheticHistory:
    """Tests for the simulated IAS history."""

    def test_fills_buffer(self):
        """30 synthetic readings overflow a 20-slot buffer."""
        history = seed_synthetic_history(SampleHistory(), 150.0)
        assert history.is_full

    def test_values_follow_sawtooth(self):
        """Retained readings are centre + (i % 7) - 3 for i = 10..29."""
        history = seed_synthetic_history(SampleHistory(), 150.0)
        expected = [150.0 + (i % 7) - 3.0 for i in range(10, 30)]
        np.testing.assert_array_equal(history.snapshot(), expected)

    def test_values_stay_within_band(self):
        """Synthetic readings stay within -3..+3 kt of the centre."""
        snap = seed_synthetic_history(SampleHistory(), 120.0).snapshot()
        assert snap.min() >= 117.0
        assert snap.max() <= 123.0
