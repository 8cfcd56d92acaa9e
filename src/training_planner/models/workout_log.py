"""Logged actual workouts, owned and persisted outside the engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ActualWorkout:
    """What the athlete really did on a given day.

    ``discipline`` is a free-form tag (``"easy_run"``, ``"crossfit"``...)
    resolved through the adherence equivalence classes.
    """

    date: date
    discipline: str
    duration_min: float | None = None
    distance_km: float | None = None
    effort: float | None = None  # RPE 1-10
    workout_id: str | None = None
