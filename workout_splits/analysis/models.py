"""
Split Data Models

Shared data types for split calculation:
- Distance segments (the atomic input unit)
- Pause/resume events and the pause intervals derived from them
- Split configuration and the resulting splits
"""

import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import InvalidConfigurationError
from .pace import minutes_per_kilometer, minutes_per_mile
from .units import DistanceUnit


class EventKind(Enum):
    """Kinds of raw workout events"""

    PAUSE = "pause"
    RESUME = "resume"
    OTHER = "other"


@dataclass(frozen=True)
class DistanceSegment:
    """Distance covered over a single time window"""

    distance_meters: float
    start_time: datetime
    end_time: datetime

    def __post_init__(self):
        if self.distance_meters < 0:
            raise ValueError(
                f"Segment distance must be non-negative (got {self.distance_meters})"
            )
        if self.end_time < self.start_time:
            raise ValueError("Segment end time precedes its start time")

    @property
    def duration_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()


@dataclass(frozen=True)
class PauseInterval:
    """A closed time range during which the workout was paused"""

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError("Pause interval end precedes its start")

    @property
    def duration_seconds(self) -> float:
        return (self.end - self.start).total_seconds()


@dataclass(frozen=True)
class RawEvent:
    """A discrete workout event (pause, resume or anything else)"""

    kind: EventKind
    timestamp: datetime


@dataclass(frozen=True)
class Split:
    """A fixed-distance slice of an activity"""

    index: int  # 1-based
    distance_meters: float
    duration_seconds: float  # active time, pauses excluded when configured
    pace_meters_per_second: float
    end_timestamp: datetime
    is_partial: bool

    @property
    def minutes_per_mile(self) -> float:
        return minutes_per_mile(self.pace_meters_per_second)

    @property
    def minutes_per_kilometer(self) -> float:
        return minutes_per_kilometer(self.pace_meters_per_second)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["end_timestamp"] = self.end_timestamp.isoformat()
        return result

    def __str__(self) -> str:
        partial = " (partial)" if self.is_partial else ""
        return (
            f"Split {self.index}: {self.distance_meters:.2f}m "
            f"in {self.duration_seconds:.1f}s{partial}"
        )


@dataclass(frozen=True)
class SplitConfiguration:
    """
    Target distance for each split and pause handling.

    Example:
        SplitConfiguration.miles(1.0, exclude_paused_time=True)
        SplitConfiguration.kilometers(5.0)
        SplitConfiguration(split_distance_m=400)
    """

    split_distance_m: float
    exclude_paused_time: bool = False

    @classmethod
    def miles(cls, distance: float, exclude_paused_time: bool = False):
        return cls.from_unit(distance, DistanceUnit.MILES, exclude_paused_time)

    @classmethod
    def kilometers(cls, distance: float, exclude_paused_time: bool = False):
        return cls.from_unit(distance, DistanceUnit.KILOMETERS, exclude_paused_time)

    @classmethod
    def meters(cls, distance: float, exclude_paused_time: bool = False):
        return cls.from_unit(distance, DistanceUnit.METERS, exclude_paused_time)

    @classmethod
    def from_unit(
        cls, value: float, unit: DistanceUnit, exclude_paused_time: bool = False
    ) -> "SplitConfiguration":
        return cls(
            split_distance_m=unit.to_meters(value),
            exclude_paused_time=exclude_paused_time,
        )

    def validate(self) -> None:
        """
        Reject configurations that cannot produce splits.

        Raises:
            InvalidConfigurationError: If the split distance is not a positive number
        """
        distance = self.split_distance_m
        if distance is None or not math.isfinite(distance) or distance <= 0:
            raise InvalidConfigurationError("Split distance must be greater than zero")


@dataclass
class WorkoutActivity:
    """A completed workout with its distance segments and raw events"""

    activity_id: str
    start_time: datetime
    end_time: datetime
    total_distance_m: Optional[float]
    segments: List[DistanceSegment] = field(default_factory=list)
    events: List[RawEvent] = field(default_factory=list)
    sport: Optional[str] = None
    source_name: Optional[str] = None

    @property
    def elapsed_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()
