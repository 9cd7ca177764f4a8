"""
Distance Units

Unit constants and the units a split distance can be expressed in.
"""

from enum import Enum

# Meters per unit
METERS_PER_MILE = 1609.344
METERS_PER_KILOMETER = 1000.0


class DistanceUnit(Enum):
    """Units a split distance can be expressed in"""

    MILES = "mi"
    KILOMETERS = "km"
    METERS = "m"

    def to_meters(self, value: float) -> float:
        if self is DistanceUnit.MILES:
            return value * METERS_PER_MILE
        if self is DistanceUnit.KILOMETERS:
            return value * METERS_PER_KILOMETER
        return value
