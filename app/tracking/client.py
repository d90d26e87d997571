"""
Progress API Client

httpx-based client for the progress endpoints. Implements the
``ProgressSink`` protocol used by WatchSession and knows how to open a
session resumed from the learner's saved progress.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from app.core.http_client import request_with_retry
from app.tracking.completion import COMPLETION_THRESHOLD
from app.tracking.session import ErrorHandler, ProgressReport, WatchSession
from app.tracking.throttle import DEFAULT_SYNC_INTERVAL, SyncThrottle


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ProgressSyncError(Exception):
    """Raised when the server rejects a progress sync."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"Progress sync failed ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


@dataclass(frozen=True)
class TrackingConfig:
    """Server-provided tracking parameters."""

    completion_threshold: float = COMPLETION_THRESHOLD
    sync_interval_seconds: float = DEFAULT_SYNC_INTERVAL


class ProgressApiClient:
    """
    Client for ``/api/v1/progress``.

    Args:
        base_url: Server root, e.g. ``http://localhost:8000``.
        access_token: Bearer token of the learner.
    """

    def __init__(self, base_url: str, access_token: str):
        self.base_url = base_url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {access_token}"}

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_PREFIX}{path}"

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ProgressSyncError(response.status_code, str(detail))
        return response.json()

    async def send_progress(self, report: ProgressReport) -> Dict[str, Any]:
        """
        POST one progress report.

        Single attempt: a failed sync is retried by the next throttle window
        rather than here.
        """
        response = await request_with_retry(
            "POST",
            self._url("/progress"),
            max_retries=0,
            json=report.to_payload(),
            headers=self._headers,
        )
        return self._json(response)

    async def mark_complete(self, video_id: int) -> Dict[str, Any]:
        response = await request_with_retry(
            "POST",
            self._url("/progress/complete"),
            max_retries=0,
            json={"video_id": video_id},
            headers=self._headers,
        )
        return self._json(response)

    async def list_progress(self) -> List[Dict[str, Any]]:
        response = await request_with_retry(
            "GET", self._url("/progress"), headers=self._headers
        )
        return self._json(response)

    async def get_progress(self, video_id: int) -> Dict[str, Any]:
        response = await request_with_retry(
            "GET", self._url(f"/progress/{video_id}"), headers=self._headers
        )
        return self._json(response)

    async def get_config(self) -> TrackingConfig:
        response = await request_with_retry(
            "GET", self._url("/progress/config"), headers=self._headers
        )
        data = self._json(response)
        return TrackingConfig(
            completion_threshold=data["completion_threshold"],
            sync_interval_seconds=data["sync_interval_seconds"],
        )

    async def open_session(
        self,
        video_id: int,
        duration: Optional[float] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> WatchSession:
        """
        Start a WatchSession resumed from the saved progress of ``video_id``.

        Args:
            video_id: Video to watch.
            duration: Video duration if known (from the video metadata).
            on_error: Sync failure notifier.

        Returns:
            WatchSession wired to this client.
        """
        config = await self.get_config()
        saved = await self.get_progress(video_id)

        logger.info(
            "Resuming video %s at %ss (completed=%s)",
            video_id, saved["watched_duration"], saved["completed"],
        )
        return WatchSession(
            video_id=video_id,
            sink=self,
            duration=duration,
            watched_duration=saved["watched_duration"],
            completed=saved["completed"],
            threshold=config.completion_threshold,
            throttle=SyncThrottle(interval=config.sync_interval_seconds),
            on_error=on_error,
        )
