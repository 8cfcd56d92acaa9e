"""Race goal and athlete preferences: the inputs to plan assembly."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from training_planner.models.enums import (
    DEFAULT_LONG_RUN_PACE_MIN_PER_KM,
    DEFAULT_TARGET_DISTANCE_KM,
)


@dataclass(frozen=True)
class Goal:
    """Immutable race/target descriptor.

    Every field is optional: missing numbers are defaulted downstream
    rather than rejected.
    """

    race_name: str | None = None
    target_distance_km: float | None = None
    target_elevation_m: float | None = None
    target_date: date | None = None
    total_weeks: int | None = None

    @property
    def distance_or_default(self) -> float:
        """Goal distance, falling back to a half marathon when unset or zero."""
        return self.target_distance_km or DEFAULT_TARGET_DISTANCE_KM

    @property
    def elevation_ratio(self) -> float:
        """Metres of climbing per km of the goal race (0 when distance unknown)."""
        if not self.target_distance_km:
            return 0.0
        return (self.target_elevation_m or 0.0) / self.target_distance_km


@dataclass(frozen=True)
class Preferences:
    """Athlete preferences that shape session content."""

    long_run_pace_min_per_km: float = DEFAULT_LONG_RUN_PACE_MIN_PER_KM
