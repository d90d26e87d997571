"""
Completion Classifier

Decides whether a video counts as completed from the effective watched
duration. One canonical threshold is used everywhere (80%).
"""

from typing import Optional

COMPLETION_THRESHOLD = 0.8


def is_complete(
    effective_watched: float,
    total_duration: Optional[float],
    threshold: float = COMPLETION_THRESHOLD,
) -> bool:
    """
    Return True when the watched fraction reaches ``threshold``.

    A missing, zero or negative duration never counts as complete.

    >>> is_complete(80, 100)
    True
    >>> is_complete(79, 100)
    False
    >>> is_complete(10, 0)
    False
    """
    if not total_duration or total_duration <= 0:
        return False
    return effective_watched / total_duration >= threshold


def watched_percent(effective_watched: float, total_duration: Optional[float]) -> float:
    """Watched percentage clamped to [0, 100]; 0 while the duration is unknown."""
    if not total_duration or total_duration <= 0:
        return 0.0
    return max(0.0, min(100.0, effective_watched / total_duration * 100))
