"""
Analysis Module

Distance split calculation for completed GPX/FIT workouts.
"""

from .active_time import calculate_active_time
from .errors import (
    DataSourceUnavailableError,
    InsufficientDistanceDataError,
    InvalidConfigurationError,
    NoDistanceDataError,
    NotAuthorizedError,
    SplitCalculatorError,
    WorkoutTooShortError,
)
from .fit_parser import build_fit_activity, parse_fit_content
from .gpx_segments import GPXActivityParser, parse_gpx_activity
from .models import (
    DistanceSegment,
    EventKind,
    PauseInterval,
    RawEvent,
    Split,
    SplitConfiguration,
    WorkoutActivity,
)
from .pace import calculate_pace, format_duration, format_pace
from .pause_intervals import (
    activity_active_seconds,
    extract_pause_intervals,
    has_pauses,
    total_paused_seconds,
)
from .split_aggregator import calculate_splits, SplitAggregator
from .split_calculator import ActivitySegmentSource, SegmentSource, SplitCalculator
from .units import DistanceUnit, METERS_PER_KILOMETER, METERS_PER_MILE

__all__ = [
    "DistanceSegment",
    "DistanceUnit",
    "METERS_PER_MILE",
    "METERS_PER_KILOMETER",
    "EventKind",
    "PauseInterval",
    "RawEvent",
    "Split",
    "SplitConfiguration",
    "WorkoutActivity",
    "SplitCalculatorError",
    "DataSourceUnavailableError",
    "NotAuthorizedError",
    "NoDistanceDataError",
    "InsufficientDistanceDataError",
    "InvalidConfigurationError",
    "WorkoutTooShortError",
    "extract_pause_intervals",
    "has_pauses",
    "total_paused_seconds",
    "activity_active_seconds",
    "calculate_active_time",
    "calculate_pace",
    "format_pace",
    "format_duration",
    "SplitAggregator",
    "calculate_splits",
    "SegmentSource",
    "ActivitySegmentSource",
    "SplitCalculator",
    "GPXActivityParser",
    "parse_gpx_activity",
    "build_fit_activity",
    "parse_fit_content",
]
