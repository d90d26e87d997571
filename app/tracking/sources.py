"""
Playback Sources

Thin adapters that turn player-specific events into WatchSession calls.
Every player variant (native media element, Google Drive link, iframe
embed) is one of these; the progress logic itself lives in WatchSession.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from app.tracking.session import WatchSession


logger = logging.getLogger(__name__)

SIMULATED_TICK_SECONDS = 1.0


class PlaybackSource:
    """Base adapter bound to one WatchSession."""

    def __init__(self, session: WatchSession):
        self.session = session

    def stop(self) -> None:
        """Detach from the session; no further events are forwarded."""
        self.session.close()


class MediaElementSource(PlaybackSource):
    """
    Adapter for players that expose real media events.

    Wire ``loadedmetadata``, ``timeupdate``, ``ended`` and the explicit
    "mark complete" button to the matching methods.
    """

    def on_loaded_metadata(self, duration: float) -> None:
        self.session.set_duration(duration)

    def on_time_update(self, current_time: float, now: Optional[float] = None):
        return self.session.tick(current_time, now)

    def on_ended(self, now: Optional[float] = None):
        return self.session.end(now)

    def on_mark_complete(self, now: Optional[float] = None):
        return self.session.mark_complete(now)


class SimulatedClockSource(PlaybackSource):
    """
    Fake playback clock for embed-only players (e.g. an iframe preview)
    where no media events are available.

    While playing, the position advances by ``tick_seconds`` every tick and
    is fed to the session. Reaching the known duration ends the video.

    Args:
        session: Session to drive.
        start_at: Initial playback position in seconds.
        tick_seconds: Interval between simulated time updates.
        sleep: Awaitable sleep, replaceable in tests.
    """

    def __init__(
        self,
        session: WatchSession,
        start_at: float = 0.0,
        tick_seconds: float = SIMULATED_TICK_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__(session)
        self.position = max(0.0, start_at)
        self.tick_seconds = tick_seconds
        self._sleep = sleep
        self._playing = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    @property
    def is_playing(self) -> bool:
        return self._playing.is_set()

    def play(self) -> None:
        """Start or resume the clock."""
        self._playing.set()
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self._run())

    def pause(self) -> None:
        self._playing.clear()

    def seek(self, position: float) -> None:
        self.position = max(0.0, position)
        if self.session.duration:
            self.position = min(self.position, float(self.session.duration))

    def stop(self) -> None:
        self._playing.clear()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        super().stop()

    async def wait(self) -> None:
        """Wait until the clock loop finishes (video ended or stopped)."""
        if self._task is not None:
            try:
                await asyncio.shield(self._task)
            except asyncio.CancelledError:
                # Only a stopped clock loop ends quietly
                if not self._task.cancelled():
                    raise

    async def _run(self) -> None:
        while not self.session.closed:
            await self._playing.wait()
            await self._sleep(self.tick_seconds)
            if not self._playing.is_set():
                continue

            self.position += self.tick_seconds
            duration = self.session.duration
            if duration and self.position >= duration:
                self.position = float(duration)
                self._playing.clear()
                logger.debug("Simulated playback of video %s ended", self.session.video_id)
                self.session.end()
                return

            self.session.tick(self.position)
