"""Plan models: phase ranges, weekly plans and the assembled multi-week plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from training_planner.models.enums import TrainingPhase
from training_planner.models.goal import Goal
from training_planner.models.session import Session


@dataclass(frozen=True)
class PhaseSpec:
    """A single training phase within the macrocycle."""

    phase: TrainingPhase
    start_week: int  # 1-indexed
    end_week: int  # inclusive; start_week - 1 for a zero-length phase
    duration_weeks: int

    def contains(self, week: int) -> bool:
        return self.start_week <= week <= self.end_week


@dataclass(frozen=True)
class WeekLoad:
    """Aggregate load of one plan week."""

    distance_km: float = 0.0
    strength_sessions: int = 0
    estimated_hours: float = 0.0


@dataclass(frozen=True)
class WeekPlan:
    """One calendar week: 7 sessions Monday..Sunday plus summary data."""

    week_number: int
    week_start: date
    phase: TrainingPhase
    is_deload: bool
    focus: str
    load: WeekLoad
    sessions: tuple[Session, ...] = field(default_factory=tuple)

    @property
    def total_duration_min(self) -> int:
        return sum(s.duration_min for s in self.sessions)

    @property
    def training_sessions(self) -> tuple[Session, ...]:
        """Sessions that are not rest days."""
        return tuple(s for s in self.sessions if not s.is_rest)


@dataclass(frozen=True)
class Plan:
    """The full assembled plan. Never mutated after assembly."""

    plan_id: str
    created_at: datetime
    goal: Goal
    phases: tuple[PhaseSpec, ...]
    weeks: tuple[WeekPlan, ...]
    overall_strategy: str

    @property
    def total_weeks(self) -> int:
        return len(self.weeks)

    def week(self, week_number: int) -> WeekPlan:
        """Return the WeekPlan for a 1-indexed week number."""
        if not 1 <= week_number <= len(self.weeks):
            raise IndexError(
                f"Week {week_number} is outside plan range (1-{len(self.weeks)})"
            )
        return self.weeks[week_number - 1]

    def week_containing(self, day: date) -> WeekPlan | None:
        """Return the plan week whose 7-day window contains *day*, if any."""
        for week in self.weeks:
            if 0 <= (day - week.week_start).days < 7:
                return week
        return None
