"""
Active Time Calculation

Elapsed time within a window minus any overlapping pause time.
"""

from datetime import datetime
from typing import Iterable

from .models import PauseInterval


def _overlap_seconds(
    start: datetime, end: datetime, pause: PauseInterval
) -> float:
    """Length of the intersection of [start, end] with a pause (0 if disjoint)"""
    overlap_start = max(start, pause.start)
    overlap_end = min(end, pause.end)
    if overlap_end <= overlap_start:
        return 0.0
    return (overlap_end - overlap_start).total_seconds()


def calculate_active_time(
    start: datetime, end: datetime, pause_intervals: Iterable[PauseInterval]
) -> float:
    """
    Calculate active seconds between two times, excluding paused intervals.

    Pause intervals are not merged: overlapping pauses are each subtracted,
    and the result is clamped to zero.

    Args:
        start: Start of the window
        end: End of the window
        pause_intervals: Intervals when the workout was paused

    Returns:
        Active time in seconds (total time - paused time, never negative)
    """
    total_seconds = (end - start).total_seconds()
    paused_seconds = sum(_overlap_seconds(start, end, p) for p in pause_intervals)
    return max(0.0, total_seconds - paused_seconds)
