"""
Segment Tracker

Discretizes a playback clock into 10-second buckets so that re-watching a
part of a video does not inflate progress.
"""

import math
from typing import FrozenSet, Set

SEGMENT_SECONDS = 10


class SegmentTracker:
    """
    Tracks which segments of a video were visited during one session.

    ``effective_watched()`` is the larger of the raw playback position and
    ``segment_count * segment_seconds``. It also never drops below the
    highest value it has reported (or the progress the session was resumed
    from), so seeking backward after a forward scrub cannot lower it.

    Attributes:
        segment_seconds: Bucket width in seconds.
        current_time: Last playback position seen.
    """

    def __init__(self, watched_duration: float = 0, segment_seconds: int = SEGMENT_SECONDS):
        if segment_seconds <= 0:
            raise ValueError("segment_seconds must be positive")

        self.segment_seconds = segment_seconds
        self.current_time = 0.0

        watched_duration = max(0.0, float(watched_duration or 0))
        # Approximation: assume everything before the saved position was seen
        self._segments: Set[int] = set(range(int(watched_duration // segment_seconds)))
        self._high_water = watched_duration

    @property
    def segments(self) -> FrozenSet[int]:
        return frozenset(self._segments)

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def record_tick(self, time: float) -> bool:
        """
        Record the current playback position.

        Args:
            time: Playback position in seconds.

        Returns:
            True if the tick visited a segment for the first time.
        """
        if time is None or not math.isfinite(time) or time < 0:
            return False

        self.current_time = float(time)
        segment = int(self.current_time // self.segment_seconds)
        if segment in self._segments:
            return False

        self._segments.add(segment)
        return True

    def credit(self, watched: float) -> None:
        """Raise the effective watched floor, e.g. when the video ended."""
        self._high_water = max(self._high_water, float(watched))

    def effective_watched(self) -> float:
        estimate = max(self.current_time, self.segment_count * self.segment_seconds)
        self._high_water = max(self._high_water, estimate)
        return self._high_water

    def __repr__(self) -> str:
        return (
            f"<SegmentTracker(segments={self.segment_count}, "
            f"current_time={self.current_time})>"
        )
