"""
Split Calculator

Orchestrates split calculation for a completed workout:
validates the configuration and workout, retrieves distance segments,
extracts pause intervals when paused time is excluded, and runs the
split aggregator.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from .errors import (
    InsufficientDistanceDataError,
    NoDistanceDataError,
    WorkoutTooShortError,
)
from .models import DistanceSegment, Split, SplitConfiguration, WorkoutActivity
from .pause_intervals import extract_pause_intervals
from .split_aggregator import SplitAggregator

logger = logging.getLogger(__name__)


class SegmentSource(ABC):
    """Where distance segments for a workout come from"""

    def check_access(self) -> None:
        """
        Verify the source can be read.

        Raises:
            DataSourceUnavailableError: If the source is not available
            NotAuthorizedError: If read access has not been granted
        """

    @abstractmethod
    def fetch_segments(self, activity: WorkoutActivity) -> List[DistanceSegment]:
        """Return the activity's segments from a single source, sorted by start time"""


class ActivitySegmentSource(SegmentSource):
    """Serves the segments already attached to a parsed activity"""

    def fetch_segments(self, activity: WorkoutActivity) -> List[DistanceSegment]:
        return sorted(activity.segments, key=lambda s: s.start_time)


class SplitCalculator:
    """
    Calculates distance splits for completed workouts.

    Example:
        calculator = SplitCalculator()
        config = SplitConfiguration.miles(1.0, exclude_paused_time=True)
        splits = calculator.calculate_splits(activity, config)
    """

    def __init__(self, source: SegmentSource = None):
        self.source = source or ActivitySegmentSource()
        self.aggregator = SplitAggregator()

    def calculate_splits(
        self, activity: WorkoutActivity, configuration: SplitConfiguration
    ) -> List[Split]:
        """
        Calculate splits for a workout.

        Args:
            activity: The workout to split
            configuration: Split distance and pause handling

        Returns:
            Splits for the workout (never empty)

        Raises:
            InvalidConfigurationError: If the configuration is invalid
            WorkoutTooShortError: If the workout has no recorded distance
            DataSourceUnavailableError / NotAuthorizedError: From the segment source
            NoDistanceDataError: If no distance segments were found
            InsufficientDistanceDataError: If the segments produced no splits
        """
        configuration.validate()

        if not activity.total_distance_m or activity.total_distance_m <= 0:
            raise WorkoutTooShortError(
                "Workout distance is too short to calculate splits"
            )

        self.source.check_access()
        segments = self.source.fetch_segments(activity)

        if not segments:
            raise NoDistanceDataError(
                f"No distance data found for activity {activity.activity_id}"
            )

        self._log_segment_summary(activity, segments)

        pause_intervals = (
            extract_pause_intervals(activity.events, activity.end_time)
            if configuration.exclude_paused_time
            else ()
        )

        splits = self.aggregator.calculate_splits(
            segments,
            configuration.split_distance_m,
            pause_intervals,
            activity.start_time,
        )

        if not splits:
            raise InsufficientDistanceDataError(
                "Insufficient distance data to calculate splits"
            )

        return splits

    @staticmethod
    def _log_segment_summary(
        activity: WorkoutActivity, segments: List[DistanceSegment]
    ) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return

        segment_distance = sum(s.distance_meters for s in segments)
        logger.debug(
            f"Fetched {len(segments)} segments from '{activity.source_name or 'unknown'}', "
            f"total distance {segment_distance:.2f}m"
        )
        if activity.total_distance_m:
            diff_pct = (
                abs(segment_distance - activity.total_distance_m)
                / activity.total_distance_m
                * 100
            )
            logger.debug(
                f"Workout distance: {activity.total_distance_m:.2f}m (diff: {diff_pct:.1f}%)"
            )
