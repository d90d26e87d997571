"""
Segment Tracker Unit Tests
"""

import math

import pytest

from app.tracking.segments import SEGMENT_SECONDS, SegmentTracker


class TestRecordTick:
    """Tests for bucketing playback positions."""

    def test_ticks_map_to_ten_second_buckets(self):
        tracker = SegmentTracker()

        for t in (0, 9.9, 10, 25, 35):
            tracker.record_tick(t)

        assert tracker.segments == {0, 1, 2, 3}
        assert SEGMENT_SECONDS == 10

    def test_new_segment_reported_once(self):
        tracker = SegmentTracker()

        assert tracker.record_tick(12) is True
        assert tracker.record_tick(17) is False

    @pytest.mark.parametrize("bad_time", [-1, math.nan, math.inf, None])
    def test_invalid_times_are_ignored(self, bad_time):
        tracker = SegmentTracker()

        assert tracker.record_tick(bad_time) is False
        assert tracker.segment_count == 0
        assert tracker.current_time == 0.0

    def test_segment_set_never_shrinks(self):
        tracker = SegmentTracker()
        sizes = []

        for t in (5, 15, 3, 45, 12, 0, 45):
            tracker.record_tick(t)
            sizes.append(tracker.segment_count)

        assert sizes == sorted(sizes)


class TestEffectiveWatched:
    """Tests for the effective watched estimate."""

    def test_uses_segment_estimate(self):
        tracker = SegmentTracker()
        for t in (5, 15, 25, 35):
            tracker.record_tick(t)

        assert tracker.effective_watched() == 40

    def test_uses_current_time_when_larger(self):
        tracker = SegmentTracker()
        tracker.record_tick(19)

        assert tracker.effective_watched() == 19

    def test_rewatching_does_not_inflate(self):
        tracker = SegmentTracker()
        tracker.record_tick(5)
        tracker.record_tick(15)
        before = tracker.effective_watched()

        tracker.record_tick(2)
        tracker.record_tick(8)

        assert tracker.effective_watched() == before

    def test_seek_back_after_scrub_keeps_high_water_mark(self):
        tracker = SegmentTracker()
        tracker.record_tick(95)
        assert tracker.effective_watched() == 95

        tracker.record_tick(5)

        assert tracker.effective_watched() == 95

    def test_credit_raises_floor(self):
        tracker = SegmentTracker()
        tracker.record_tick(5)
        tracker.credit(120)

        assert tracker.effective_watched() == 120


class TestResume:
    """Tests for reconstructing state from persisted progress."""

    def test_prepopulates_buckets_before_saved_position(self):
        tracker = SegmentTracker(watched_duration=35)

        assert tracker.segments == {0, 1, 2}
        assert tracker.effective_watched() == 35

    def test_zero_progress_starts_empty(self):
        tracker = SegmentTracker(watched_duration=0)

        assert tracker.segment_count == 0
        assert tracker.effective_watched() == 0

    def test_rejects_non_positive_segment_width(self):
        with pytest.raises(ValueError):
            SegmentTracker(segment_seconds=0)
