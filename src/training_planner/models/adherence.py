"""Adherence report: ephemeral diff between a prescribed week and reality."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from training_planner.models.session import Session
from training_planner.models.workout_log import ActualWorkout


@dataclass(frozen=True)
class Deviation:
    """Differences between a prescribed session and its matched workout."""

    duration_min: float = 0.0  # actual - planned
    distance_km: float = 0.0  # actual - planned
    intensity: str | None = None  # "higher" / "lower" when effort deviates
    notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_significant(self) -> bool:
        return len(self.notes) > 0


@dataclass(frozen=True)
class MatchedSession:
    """A prescribed session paired with the workout that fulfilled it."""

    planned: Session
    actual: ActualWorkout
    deviation: Deviation = field(default_factory=Deviation)


@dataclass(frozen=True)
class LoadDelta:
    """Actual minus planned load for one week."""

    distance_km: float = 0.0
    strength_sessions: int = 0
    total_minutes: float = 0.0


@dataclass(frozen=True)
class AdherenceReport:
    """Classified comparison of one week.

    ``completed``, ``modified`` and ``skipped`` partition the prescribed
    sessions; ``extra`` holds in-window workouts that matched nothing.
    """

    week_start: date
    completed: tuple[MatchedSession, ...] = field(default_factory=tuple)
    modified: tuple[MatchedSession, ...] = field(default_factory=tuple)
    skipped: tuple[Session, ...] = field(default_factory=tuple)
    extra: tuple[ActualWorkout, ...] = field(default_factory=tuple)
    load_delta: LoadDelta = field(default_factory=LoadDelta)

    @property
    def total_prescribed(self) -> int:
        return len(self.completed) + len(self.modified) + len(self.skipped)

    @property
    def completion_rate(self) -> int:
        """Percentage of prescribed sessions done (as planned or modified)."""
        total = self.total_prescribed
        if total == 0:
            return 0
        done = len(self.completed) + len(self.modified)
        return int(done * 100 / total + 0.5)


@dataclass(frozen=True)
class VolumeAdherence:
    """Planned vs completed running volume over a block."""

    planned_km: float
    completed_km: float
    percentage: int
    band: str  # "perfect" / "good" / "under" / "over"


@dataclass(frozen=True)
class TypeAdherence:
    """Completion counts for one session category."""

    category: str
    planned: int
    completed: int
    percentage: int

    @property
    def missed(self) -> int:
        return self.planned - self.completed


@dataclass(frozen=True)
class AdherenceTrend:
    """Completion of the later half of a block relative to the earlier half."""

    direction: str  # "improving" / "declining" / "stable" / "insufficient_data"
    change: int = 0
    first_half_pct: int = 0
    second_half_pct: int = 0


@dataclass(frozen=True)
class BlockSummary:
    """Multi-week adherence analytics."""

    weeks_analyzed: int
    completion_rate: int
    volume: VolumeAdherence
    distribution: tuple[TypeAdherence, ...]
    weak_areas: tuple[TypeAdherence, ...]
    trend: AdherenceTrend
