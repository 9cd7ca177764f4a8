"""
Split Calculation Errors

Errors raised by the orchestration layer around the split aggregator.
The aggregator itself never raises; an empty result is mapped to
InsufficientDistanceDataError by the caller.
"""


class SplitCalculatorError(Exception):
    """Base class for split calculation failures"""

    code = "split_calculator_error"
    failure_reason = "Split calculation failed"
    recovery_suggestion = ""

    def __init__(self, message: str = None):
        self.message = message or self.failure_reason
        super().__init__(self.message)

    def to_dict(self):
        return {
            "error": self.message,
            "error_code": self.code,
            "failure_reason": self.failure_reason,
            "recovery_suggestion": self.recovery_suggestion,
        }


class DataSourceUnavailableError(SplitCalculatorError):
    code = "data_source_unavailable"
    failure_reason = "The distance data source is not available"
    recovery_suggestion = "Check that the data source is reachable and supported"


class NotAuthorizedError(SplitCalculatorError):
    code = "not_authorized"
    failure_reason = "Read access to distance data has not been granted"
    recovery_suggestion = "Grant read access to workout and distance data"


class NoDistanceDataError(SplitCalculatorError):
    code = "no_distance_data"
    failure_reason = "No distance samples were found within the workout time period"
    recovery_suggestion = (
        "Ensure the workout was recorded with a device that tracks distance. "
        "Some workout types do not record distance data."
    )


class InsufficientDistanceDataError(SplitCalculatorError):
    code = "insufficient_distance_data"
    failure_reason = "Distance samples are too sparse or incomplete"
    recovery_suggestion = (
        "Try a workout with more complete distance tracking, "
        "or check that the workout was recorded properly"
    )


class InvalidConfigurationError(SplitCalculatorError, ValueError):
    code = "invalid_configuration"
    failure_reason = "The split configuration contains invalid values"
    recovery_suggestion = "Verify that the split distance is a positive value"

    def __init__(self, message: str = None):
        detail = message or self.failure_reason
        super().__init__(f"Invalid configuration: {detail}")


class WorkoutTooShortError(SplitCalculatorError):
    code = "workout_too_short"
    failure_reason = "The workout's total distance is zero or negligible"
    recovery_suggestion = (
        "Select a workout with measurable distance, or try a smaller split distance"
    )
