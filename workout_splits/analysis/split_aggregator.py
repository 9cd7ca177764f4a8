"""
Split Aggregator

Converts chronologically ordered distance segments into fixed-distance
splits:
- Time is apportioned linearly across a segment that crosses a split boundary
- A single long segment may complete several consecutive splits
- Paused time is excluded per split, not per segment
- A trailing remainder becomes a partial split when it is long enough
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from .active_time import calculate_active_time
from .models import DistanceSegment, PauseInterval, Split
from .pace import calculate_pace

logger = logging.getLogger(__name__)


class SplitAggregator:
    """Aggregates distance segments into splits"""

    # Trailing distances at or below this are floating-point residue
    MIN_PARTIAL_SPLIT_M = 0.1

    def calculate_splits(
        self,
        segments: Sequence[DistanceSegment],
        split_distance_m: float,
        pause_intervals: Sequence[PauseInterval] = (),
        activity_start: Optional[datetime] = None,
    ) -> List[Split]:
        """
        Calculate splits from distance segments.

        Segments are processed in order, accumulating distance until a split
        boundary is reached. When a segment reaches a boundary, the time
        needed to get there is its share of the segment's total distance,
        applied to the segment's total duration. The same segment keeps
        producing splits while it has distance left to allocate.

        Args:
            segments: Distance segments sorted by start time
            split_distance_m: Target distance for each split (> 0, validated by caller)
            pause_intervals: Paused intervals to exclude (empty to keep elapsed time)
            activity_start: Start of the first split (defaults to the first segment start)

        Returns:
            Splits numbered from 1, with at most one trailing partial split
        """
        if not segments:
            return []

        splits: List[Split] = []

        cumulative_distance = 0.0
        current_split_start_distance = 0.0
        current_split_start_time = (
            activity_start if activity_start is not None else segments[0].start_time
        )
        split_index = 1

        for segment in segments:
            segment_distance = segment.distance_meters
            segment_duration = segment.duration_seconds

            remaining_distance = segment_distance
            time_offset = 0.0

            while remaining_distance > 0:
                distance_to_boundary = split_distance_m - (
                    cumulative_distance - current_split_start_distance
                )

                if remaining_distance >= distance_to_boundary:
                    # Fraction of the whole segment, not of what is left of it
                    time_fraction = distance_to_boundary / segment_distance
                    time_for_portion = segment_duration * time_fraction

                    split_end_time = segment.start_time + timedelta(
                        seconds=time_offset + time_for_portion
                    )

                    splits.append(
                        self._build_split(
                            split_index,
                            split_distance_m,
                            current_split_start_time,
                            split_end_time,
                            pause_intervals,
                            is_partial=False,
                        )
                    )
                    split_index += 1

                    cumulative_distance += distance_to_boundary
                    current_split_start_distance = cumulative_distance
                    current_split_start_time = split_end_time
                    remaining_distance -= distance_to_boundary
                    time_offset += time_for_portion
                else:
                    cumulative_distance += remaining_distance
                    remaining_distance = 0.0

        remainder = cumulative_distance - current_split_start_distance
        if remainder > self.MIN_PARTIAL_SPLIT_M:
            splits.append(
                self._build_split(
                    split_index,
                    remainder,
                    current_split_start_time,
                    segments[-1].end_time,
                    pause_intervals,
                    is_partial=True,
                )
            )
        elif remainder > 0:
            logger.debug(f"Dropping trailing remainder of {remainder:.4f}m")

        return splits

    @staticmethod
    def _build_split(
        index: int,
        distance_m: float,
        start_time: datetime,
        end_time: datetime,
        pause_intervals: Sequence[PauseInterval],
        is_partial: bool,
    ) -> Split:
        active_seconds = calculate_active_time(start_time, end_time, pause_intervals)
        return Split(
            index=index,
            distance_meters=distance_m,
            duration_seconds=active_seconds,
            pace_meters_per_second=calculate_pace(distance_m, active_seconds),
            end_timestamp=end_time,
            is_partial=is_partial,
        )


def calculate_splits(
    segments: Sequence[DistanceSegment],
    split_distance_m: float,
    pause_intervals: Sequence[PauseInterval] = (),
    activity_start: Optional[datetime] = None,
) -> List[Split]:
    """Module-level shortcut for SplitAggregator().calculate_splits"""
    return SplitAggregator().calculate_splits(
        segments, split_distance_m, pause_intervals, activity_start
    )
