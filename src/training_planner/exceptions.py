"""Exception hierarchy for the training planner engine."""

from __future__ import annotations


class PlannerError(Exception):
    """Base exception for all training_planner errors."""


class InvalidDuration(PlannerError, ValueError):
    """A plan length below one week was requested."""

    def __init__(self, total_weeks: object) -> None:
        super().__init__(f"Plan must be at least 1 week, got {total_weeks!r}")
        self.total_weeks = total_weeks


class PhaseCoverageError(PlannerError):
    """A week number is not covered by any phase range."""

    def __init__(self, week: int, last_week: int) -> None:
        super().__init__(f"Week {week} is outside plan range (1-{last_week})")
        self.week = week
        self.last_week = last_week


class SerializationError(PlannerError, ValueError):
    """A persisted plan or workout payload could not be decoded."""
