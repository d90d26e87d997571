"""
Throttled Sync Policy

Bounds how often progress is persisted, independent of how often the
playback clock ticks.
"""

import time
from typing import Callable, Optional

DEFAULT_SYNC_INTERVAL = 15.0  # seconds


class SyncThrottle:
    """
    Allows one sync per ``interval`` seconds of wall-clock time.

    The first call always syncs. Attempted syncs count, whether or not the
    request later succeeds; a failed sync is retried by the next window.
    """

    def __init__(
        self,
        interval: float = DEFAULT_SYNC_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._clock = clock
        self._last_sync: Optional[float] = None

    @property
    def last_sync(self) -> Optional[float]:
        return self._last_sync

    def should_sync(self, now: Optional[float] = None) -> bool:
        """
        Check the window and claim it when open.

        Args:
            now: Current time; read from the clock when omitted.

        Returns:
            True when the caller should sync now.
        """
        now = self._clock() if now is None else now
        if self._last_sync is not None and now - self._last_sync <= self.interval:
            return False
        self._last_sync = now
        return True

    def force(self, now: Optional[float] = None) -> None:
        """Record an unconditional sync (video end, mark complete)."""
        self._last_sync = self._clock() if now is None else now
