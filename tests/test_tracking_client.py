"""
Progress API Client Tests

Tests for the httpx-backed sync sink with request_with_retry mocked.
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.tracking.client import ProgressApiClient, ProgressSyncError, TrackingConfig
from app.tracking.session import ProgressReport


@pytest.fixture
def client() -> ProgressApiClient:
    return ProgressApiClient("http://localhost:8000/", access_token="token-123")


class TestSendProgress:

    @pytest.mark.asyncio
    async def test_posts_report_once(self, client, mock_httpx_response):
        response = mock_httpx_response(200, {"video_id": 4, "watched_duration": 30, "completed": False})
        report = ProgressReport(video_id=4, watched_duration=30, completed=False)

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(return_value=response),
        ) as request:
            data = await client.send_progress(report)

        assert data["watched_duration"] == 30
        args, kwargs = request.call_args
        assert args == ("POST", "http://localhost:8000/api/v1/progress")
        assert kwargs["max_retries"] == 0
        assert kwargs["json"] == report.to_payload()
        assert kwargs["headers"] == {"Authorization": "Bearer token-123"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self, client, mock_httpx_response):
        response = mock_httpx_response(404, {"detail": "Video with ID 4 not found"})
        report = ProgressReport(video_id=4, watched_duration=30, completed=False)

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(return_value=response),
        ):
            with pytest.raises(ProgressSyncError) as exc_info:
                await client.send_progress(report)

        assert exc_info.value.status_code == 404
        assert "not found" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_mark_complete(self, client, mock_httpx_response):
        response = mock_httpx_response(200, {"video_id": 4, "watched_duration": 600, "completed": True})

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(return_value=response),
        ) as request:
            data = await client.mark_complete(4)

        assert data["completed"] is True
        assert request.call_args.kwargs["json"] == {"video_id": 4}


class TestOpenSession:

    @pytest.mark.asyncio
    async def test_resumes_from_saved_progress(self, client, mock_httpx_response):
        config = mock_httpx_response(200, {
            "completion_threshold": 0.9,
            "sync_interval_seconds": 30,
            "segment_seconds": 10,
        })
        saved = mock_httpx_response(200, {
            "video_id": 4,
            "watched_duration": 55,
            "completed": False,
            "last_watched_at": None,
        })

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(side_effect=[config, saved]),
        ) as request:
            session = await client.open_session(4, duration=600)

        assert session.video_id == 4
        assert session.effective_watched == 55
        assert session.tracker.segments == {0, 1, 2, 3, 4}
        assert session.threshold == 0.9
        assert session.throttle.interval == 30
        assert request.call_args_list[1].args[1].endswith("/api/v1/progress/4")

    @pytest.mark.asyncio
    async def test_get_config(self, client, mock_httpx_response):
        response = mock_httpx_response(200, {
            "completion_threshold": 0.8,
            "sync_interval_seconds": 15,
            "segment_seconds": 10,
        })

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(return_value=response),
        ):
            config = await client.get_config()

        assert config == TrackingConfig(completion_threshold=0.8, sync_interval_seconds=15)

    @pytest.mark.asyncio
    async def test_session_syncs_through_client(self, client, mock_httpx_response):
        config = mock_httpx_response(200, {
            "completion_threshold": 0.8,
            "sync_interval_seconds": 15,
            "segment_seconds": 10,
        })
        saved = mock_httpx_response(200, {"video_id": 4, "watched_duration": 0, "completed": False})
        synced = mock_httpx_response(200, {"video_id": 4, "watched_duration": 10, "completed": False})

        with patch(
            "app.tracking.client.request_with_retry",
            new=AsyncMock(side_effect=[config, saved, synced]),
        ) as request:
            session = await client.open_session(4, duration=600)
            session.tick(5, now=0)
            await session.drain()

        assert session.last_error is None
        assert request.call_args_list[2].kwargs["json"] == {
            "video_id": 4,
            "watched_duration": 10,
            "completed": False,
        }
