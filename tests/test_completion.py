"""
Completion Classifier Unit Tests
"""

import pytest

from app.tracking.completion import COMPLETION_THRESHOLD, is_complete, watched_percent


class TestIsComplete:

    def test_canonical_threshold(self):
        assert COMPLETION_THRESHOLD == 0.8

    @pytest.mark.parametrize(
        "watched, duration, expected",
        [
            (80, 100, True),
            (79, 100, False),
            (100, 100, True),
            (150, 100, True),
            (10, 0, False),
            (10, None, False),
            (10, -5, False),
        ],
    )
    def test_threshold_boundaries(self, watched, duration, expected):
        assert is_complete(watched, duration) is expected

    def test_custom_threshold(self):
        assert is_complete(85, 100, threshold=0.9) is False
        assert is_complete(90, 100, threshold=0.9) is True


class TestWatchedPercent:

    def test_percentage(self):
        assert watched_percent(30, 120) == 25.0

    def test_clamped_to_hundred(self):
        assert watched_percent(130, 120) == 100.0

    def test_unknown_duration_is_zero(self):
        assert watched_percent(30, None) == 0.0
        assert watched_percent(30, 0) == 0.0
