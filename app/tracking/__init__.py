"""
AviLearn Backend - Watch-Progress Tracking

Player-side progress engine, independent of any UI framework:
segment tracking, sync throttling, completion classification and the
write-behind session that ties them together.
"""

from app.tracking.completion import COMPLETION_THRESHOLD, is_complete, watched_percent
from app.tracking.segments import SEGMENT_SECONDS, SegmentTracker
from app.tracking.session import ProgressReport, ProgressSink, WatchSession
from app.tracking.sources import MediaElementSource, PlaybackSource, SimulatedClockSource
from app.tracking.throttle import DEFAULT_SYNC_INTERVAL, SyncThrottle

__all__ = [
    "COMPLETION_THRESHOLD",
    "DEFAULT_SYNC_INTERVAL",
    "SEGMENT_SECONDS",
    "is_complete",
    "watched_percent",
    "SegmentTracker",
    "SyncThrottle",
    "ProgressReport",
    "ProgressSink",
    "WatchSession",
    "PlaybackSource",
    "MediaElementSource",
    "SimulatedClockSource",
]
