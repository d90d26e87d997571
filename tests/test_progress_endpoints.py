"""
Progress API Tests

Endpoint behaviour with the service layer mocked out.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from app.api.deps import get_current_active_user, get_current_user
from app.models.watch_progress import WatchProgress
from app.schemas.progress import ProgressSummary


def _progress(user, video_id=5, watched=120, completed=False) -> WatchProgress:
    return WatchProgress(
        id=1,
        user_id=user.id,
        video_id=video_id,
        watched_duration=watched,
        completed=completed,
        last_watched_at=datetime.now(timezone.utc),
    )


class TestProgressAuth:

    def test_requires_token(self, api_client):
        response = api_client.post(
            "/api/v1/progress",
            json={"video_id": 5, "watched_duration": 10, "completed": False},
        )

        assert response.status_code == 401

    def test_unapproved_account_is_rejected(self, api_client, student_user):
        student_user.is_approved = False
        api_client.app.dependency_overrides[get_current_user] = lambda: student_user

        response = api_client.get("/api/v1/progress")

        assert response.status_code == 403


class TestSyncProgress:

    def test_identity_comes_from_token(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user
        stored = _progress(student_user, watched=120)

        with patch(
            "app.services.progress_service.record_progress",
            new=AsyncMock(return_value=stored),
        ) as record:
            response = api_client.post(
                "/api/v1/progress",
                json={
                    "video_id": 5,
                    "watched_duration": 120,
                    "completed": False,
                    "user_id": "someone-else",
                },
            )

        assert response.status_code == 200
        assert response.json()["watched_duration"] == 120
        kwargs = record.call_args.kwargs
        assert kwargs["user"] is student_user
        assert kwargs["video_id"] == 5
        assert kwargs["watched_duration"] == 120
        assert kwargs["completed"] is False

    def test_negative_duration_is_rejected(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user

        response = api_client.post(
            "/api/v1/progress",
            json={"video_id": 5, "watched_duration": -1},
        )

        assert response.status_code == 422

    def test_mark_complete(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user
        stored = _progress(student_user, watched=600, completed=True)

        with patch(
            "app.services.progress_service.complete_video",
            new=AsyncMock(return_value=stored),
        ) as complete:
            response = api_client.post("/api/v1/progress/complete", json={"video_id": 5})

        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert complete.call_args.kwargs["video_id"] == 5


class TestReadProgress:

    def test_missing_progress_returns_placeholder(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user

        with patch(
            "app.services.progress_service.get_video_progress",
            new=AsyncMock(return_value=None),
        ):
            response = api_client.get("/api/v1/progress/42")

        assert response.status_code == 200
        assert response.json() == {
            "video_id": 42,
            "watched_duration": 0,
            "completed": False,
            "last_watched_at": None,
        }

    def test_list_progress(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user
        rows = [_progress(student_user, video_id=1), _progress(student_user, video_id=2)]

        with patch(
            "app.services.progress_service.get_user_progress",
            new=AsyncMock(return_value=rows),
        ):
            response = api_client.get("/api/v1/progress")

        assert response.status_code == 200
        assert [r["video_id"] for r in response.json()] == [1, 2]

    def test_summary(self, api_client, student_user):
        api_client.app.dependency_overrides[get_current_active_user] = lambda: student_user
        summary = ProgressSummary(
            completed_videos=1,
            total_videos=4,
            overall_percent=25,
            total_duration=2400,
            watched_duration=900,
        )

        with patch(
            "app.services.progress_service.get_progress_summary",
            new=AsyncMock(return_value=summary),
        ):
            response = api_client.get("/api/v1/progress/summary")

        assert response.status_code == 200
        assert response.json()["overall_percent"] == 25

    def test_tracking_config(self, api_client):
        response = api_client.get("/api/v1/progress/config")

        assert response.status_code == 200
        assert response.json() == {
            "completion_threshold": 0.8,
            "sync_interval_seconds": 15.0,
            "segment_seconds": 10,
        }
