"""PlanAssembler: drives the scheduler and generator across a whole plan."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable

from training_planner.math.periodization import (
    compute_phases,
    get_phase_spec,
    is_deload_week,
    phase_for_week,
    round_half_up,
)
from training_planner.models.enums import DEFAULT_TOTAL_WEEKS, SessionType, TrainingPhase
from training_planner.models.goal import Goal, Preferences
from training_planner.models.plan import Plan, PhaseSpec, WeekLoad, WeekPlan
from training_planner.models.session import Session
from training_planner.workout_builder.week_generator import generate_week

logger = logging.getLogger(__name__)

DELOAD_FOCUS = "Deload week: reduced volume for recovery and adaptation."

_PHASE_FOCUS: dict[TrainingPhase, str] = {
    TrainingPhase.BASE: "Base: build the aerobic foundation with high volume and low intensity.",
    TrainingPhase.BUILD: "Build: raise intensity with threshold and tempo work.",
    TrainingPhase.PEAK: "Peak: maximal race-specific training to sharpen form.",
    TrainingPhase.TAPER: "Taper: cut volume, keep intensity. Rest is training!",
}

# One-line intent per phase for the strategy narrative
_PHASE_INTENT: dict[TrainingPhase, str] = {
    TrainingPhase.BASE: "Build volume.",
    TrainingPhase.BUILD: "Add intensity.",
    TrainingPhase.PEAK: "Sharpen.",
    TrainingPhase.TAPER: "Rest for race day.",
}


def snap_to_monday(day: date) -> date:
    """Align an anchor date to a Monday.

    Sunday moves forward one day, Monday stays, any other day moves back to
    the preceding Monday.
    """
    weekday = day.weekday()  # Monday=0, Sunday=6
    if weekday == 6:
        return day + timedelta(days=1)
    return day - timedelta(days=weekday)


def plan_anchor(goal: Goal, total_weeks: int, today: date) -> date:
    """First Monday of the plan.

    Counted back ``total_weeks`` weeks from the target date, or from
    *today* when the goal has no date.
    """
    if goal.target_date is not None:
        start = goal.target_date - timedelta(days=total_weeks * 7)
    else:
        start = today
    return snap_to_monday(start)


def week_focus(phase: TrainingPhase, is_deload: bool) -> str:
    """Human-readable focus statement for a week."""
    if is_deload:
        return DELOAD_FOCUS
    return _PHASE_FOCUS.get(phase, "General training.")


def summarize_load(sessions: tuple[Session, ...] | list[Session]) -> WeekLoad:
    """Aggregate run distance, strength count and hours for a week."""
    distance = sum(
        s.distance_km or 0 for s in sessions if s.session_type == SessionType.RUN
    )
    minutes = sum(s.duration_min for s in sessions)
    strength = sum(1 for s in sessions if s.is_strength)
    return WeekLoad(
        distance_km=float(distance),
        strength_sessions=strength,
        estimated_hours=round_half_up(minutes / 60, 1),
    )


def _week_range(spec: PhaseSpec | None) -> str:
    if spec is None or spec.duration_weeks == 0:
        return "weeks ?"
    if spec.duration_weeks == 1:
        return f"week {spec.start_week}"
    return f"weeks {spec.start_week}-{spec.end_week}"


def overall_strategy(
    goal: Goal, total_weeks: int, phases: list[PhaseSpec] | tuple[PhaseSpec, ...]
) -> str:
    """Narrative strategy string naming each phase's weeks and intent."""
    race = goal.race_name or "your race"
    distance = (
        f"{goal.target_distance_km:g} km" if goal.target_distance_km else "distance TBD"
    )
    parts = [f"Periodised {total_weeks}-week plan towards {race} ({distance})."]
    for phase in TrainingPhase:
        spec = get_phase_spec(phase, phases)
        parts.append(
            f"{phase.label.capitalize()} ({_week_range(spec)}): {_PHASE_INTENT[phase]}"
        )
    return " ".join(parts)


class PlanAssembler:
    """Builds complete multi-week plans from a goal.

    Usage:
        assembler = PlanAssembler()
        plan = assembler.assemble(goal, preferences)

    The clock is injectable so calendar anchoring is deterministic in tests.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self.clock = clock or datetime.now

    def assemble(
        self,
        goal: Goal,
        preferences: Preferences | None = None,
        now: datetime | None = None,
    ) -> Plan:
        """Assemble a complete plan.

        Args:
            goal: Race goal (total_weeks defaults to 12).
            preferences: Athlete preferences.
            now: Override for the injected clock.

        Returns:
            A Plan covering weeks 1..total_weeks in order.

        Raises:
            InvalidDuration: If the goal's total_weeks is below 1.
        """
        now = now or self.clock()
        total_weeks = (
            DEFAULT_TOTAL_WEEKS if goal.total_weeks is None else goal.total_weeks
        )
        phases = compute_phases(total_weeks)
        anchor = plan_anchor(goal, total_weeks, now.date())

        weeks = tuple(
            self.assemble_week(week, goal, phases, anchor, preferences)
            for week in range(1, total_weeks + 1)
        )

        plan = Plan(
            plan_id=f"plan_{int(now.timestamp() * 1000)}",
            created_at=now,
            goal=goal,
            phases=tuple(phases),
            weeks=weeks,
            overall_strategy=overall_strategy(goal, total_weeks, phases),
        )
        logger.info(
            "Assembled %s: %d weeks from %s (%s)",
            plan.plan_id,
            total_weeks,
            anchor.isoformat(),
            ", ".join(f"{p.phase.label}={p.duration_weeks}" for p in phases),
        )
        return plan

    def assemble_week(
        self,
        week_number: int,
        goal: Goal,
        phases: list[PhaseSpec] | tuple[PhaseSpec, ...],
        anchor: date,
        preferences: Preferences | None = None,
    ) -> WeekPlan:
        """Assemble one week. Safe to call incrementally and out of order."""
        phase = phase_for_week(week_number, phases)
        sessions = generate_week(week_number, phase, goal, preferences, phases)
        deload = is_deload_week(week_number)
        return WeekPlan(
            week_number=week_number,
            week_start=anchor + timedelta(days=(week_number - 1) * 7),
            phase=phase,
            is_deload=deload,
            focus=week_focus(phase, deload),
            load=summarize_load(sessions),
            sessions=sessions,
        )


def assemble_plan(
    goal: Goal,
    preferences: Preferences | None = None,
    now: datetime | None = None,
) -> Plan:
    """Convenience wrapper around ``PlanAssembler().assemble``."""
    return PlanAssembler().assemble(goal, preferences, now=now)
