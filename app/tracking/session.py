"""
Watch Session

Glues the segment tracker, sync throttle and completion classifier for one
playback session of one video. Local state is authoritative for display;
syncs are written behind as fire-and-forget asyncio tasks.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Set

from app.tracking.completion import COMPLETION_THRESHOLD, is_complete, watched_percent
from app.tracking.segments import SegmentTracker
from app.tracking.throttle import SyncThrottle


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressReport:
    """Payload of one progress sync."""

    video_id: int
    watched_duration: int
    completed: bool

    def to_payload(self) -> dict:
        return {
            "video_id": self.video_id,
            "watched_duration": self.watched_duration,
            "completed": self.completed,
        }


class ProgressSink(Protocol):
    """Anything that can persist a progress report (usually the API client)."""

    async def send_progress(self, report: ProgressReport) -> Any:
        ...


ErrorHandler = Callable[[ProgressReport, Exception], None]


class WatchSession:
    """
    Progress bookkeeping for a single playback session.

    Playback sources call :meth:`tick` on every time update, :meth:`end` when
    playback reaches the end, and :meth:`mark_complete` on the explicit user
    action. Ticks are synchronous and never block on the network.

    Args:
        video_id: Video being watched.
        sink: Destination for progress syncs.
        duration: Total duration in seconds, if already known.
        watched_duration: Previously persisted progress to resume from.
        completed: Previously persisted completion flag.
        threshold: Completion threshold.
        throttle: Sync policy; a 15 second SyncThrottle by default.
        on_error: Called with the report and the exception when a sync
            fails. Meant for a non-blocking notification (toast).
    """

    def __init__(
        self,
        video_id: int,
        sink: ProgressSink,
        duration: Optional[float] = None,
        watched_duration: float = 0,
        completed: bool = False,
        threshold: float = COMPLETION_THRESHOLD,
        throttle: Optional[SyncThrottle] = None,
        on_error: Optional[ErrorHandler] = None,
    ):
        self.video_id = video_id
        self.duration = duration
        self.completed = completed
        self.threshold = threshold
        self.tracker = SegmentTracker(watched_duration)
        self.throttle = throttle or SyncThrottle()
        self.last_error: Optional[Exception] = None

        self._sink = sink
        self._on_error = on_error
        self._pending: Set[asyncio.Task] = set()
        self._closed = False

    # ============== Derived state ==============

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def effective_watched(self) -> float:
        watched = self.tracker.effective_watched()
        # A partially visited last segment counts in full
        if self.duration:
            watched = min(watched, float(self.duration))
        return watched

    @property
    def percent(self) -> float:
        """Optimistic watched percentage for display."""
        return watched_percent(self.effective_watched, self.duration)

    @property
    def pending_syncs(self) -> int:
        return len(self._pending)

    # ============== Playback events ==============

    def set_duration(self, duration: Optional[float]) -> None:
        """Update the duration once media metadata is loaded."""
        if duration is not None and duration > 0:
            self.duration = duration

    def tick(self, time: float, now: Optional[float] = None) -> Optional[ProgressReport]:
        """
        Handle a playback time update.

        Returns:
            The report that was dispatched, or None when throttled.
        """
        if self._closed:
            return None

        self.tracker.record_tick(time)
        if not self.throttle.should_sync(now):
            return None

        watched = self.effective_watched
        self.completed = self.completed or is_complete(watched, self.duration, self.threshold)
        return self._dispatch(watched)

    def end(self, now: Optional[float] = None) -> Optional[ProgressReport]:
        """Playback reached the end: completed regardless of the threshold."""
        return self._complete(now)

    def mark_complete(self, now: Optional[float] = None) -> Optional[ProgressReport]:
        """Explicit "mark complete" user action."""
        return self._complete(now)

    def close(self) -> None:
        """Stop accepting ticks. In-flight syncs are left to finish."""
        self._closed = True

    async def drain(self) -> None:
        """Wait for every in-flight sync to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ============== Internals ==============

    def _complete(self, now: Optional[float]) -> Optional[ProgressReport]:
        if self._closed:
            return None

        if self.duration:
            self.tracker.credit(self.duration)
        self.completed = True
        self.throttle.force(now)
        return self._dispatch(self.duration or self.effective_watched)

    def _dispatch(self, watched: float) -> ProgressReport:
        report = ProgressReport(
            video_id=self.video_id,
            watched_duration=int(round(watched)),
            completed=self.completed,
        )
        task = asyncio.get_running_loop().create_task(self._send(report))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return report

    async def _send(self, report: ProgressReport) -> None:
        try:
            await self._sink.send_progress(report)
        except Exception as exc:
            # Playback must keep going; the next throttle window retries
            self.last_error = exc
            logger.warning(
                "Progress sync failed for video %s: %s", report.video_id, exc
            )
            if self._on_error is not None:
                try:
                    self._on_error(report, exc)
                except Exception:
                    logger.exception(
                        "Progress error handler failed for video %s", report.video_id
                    )
        else:
            self.last_error = None
            logger.debug(
                "Synced video %s: %ss completed=%s",
                report.video_id, report.watched_duration, report.completed,
            )

    def __repr__(self) -> str:
        return (
            f"<WatchSession(video_id={self.video_id}, "
            f"watched={self.effective_watched}, completed={self.completed})>"
        )
