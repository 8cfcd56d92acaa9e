"""Weekly session generator: week number + phase -> 7 daily sessions."""

from __future__ import annotations

import dataclasses

from training_planner.math.periodization import (
    compute_phases,
    deload_factor,
    easy_run_distance,
    elevation_target,
    is_deload_week,
    long_run_distance,
    taper_factor,
)
from training_planner.models.enums import DEFAULT_TOTAL_WEEKS, TrainingPhase, Weekday
from training_planner.models.goal import Goal, Preferences
from training_planner.models.plan import PhaseSpec
from training_planner.models.session import Session
from training_planner.workout_builder.day_templates import WeekContext, build_day


def build_week_context(
    week_number: int,
    phase: TrainingPhase,
    goal: Goal,
    preferences: Preferences | None = None,
    phases: list[PhaseSpec] | tuple[PhaseSpec, ...] | None = None,
    apply_deload: bool = True,
) -> WeekContext:
    """Resolve all volume factors and distances for one week.

    The taper factor is only applied when ``phase`` is TAPER, and is
    measured from the start of the allocated taper phase. Inside the taper
    it replaces the deload multiplier, so taper volume never climbs back
    up after a deload week.
    """
    if phases is None:
        phases = compute_phases(goal.total_weeks or DEFAULT_TOTAL_WEEKS)

    is_deload = is_deload_week(week_number)
    if phase == TrainingPhase.TAPER:
        volume = 1.0
        taper = taper_factor(week_number, phases)
    else:
        volume = deload_factor(week_number) if apply_deload else 1.0
        taper = 1.0

    long_km = long_run_distance(week_number, goal, volume * taper)
    easy_km = easy_run_distance(long_km)

    return WeekContext(
        week_number=week_number,
        phase=phase,
        goal=goal,
        preferences=preferences or Preferences(),
        is_deload=is_deload,
        volume_factor=volume,
        taper_factor=taper,
        long_run_km=long_km,
        long_run_elevation_m=elevation_target(long_km, goal),
        easy_run_km=easy_km,
        easy_run_elevation_m=elevation_target(easy_km, goal),
    )


def generate_week(
    week_number: int,
    phase: TrainingPhase,
    goal: Goal,
    preferences: Preferences | None = None,
    phases: list[PhaseSpec] | tuple[PhaseSpec, ...] | None = None,
    apply_deload: bool = True,
) -> tuple[Session, ...]:
    """Generate the 7 sessions (Monday..Sunday) of one plan week.

    Deterministic: the same inputs always give the same sessions.

    Args:
        week_number: 1-indexed week in the plan.
        phase: The week's training phase.
        goal: Race goal; missing numbers fall back to defaults.
        preferences: Athlete preferences (defaults when None).
        phases: The plan's phase allocation. Derived from
            ``goal.total_weeks`` (default 12) when omitted.
        apply_deload: Set False to compute the week without the deload
            multiplier (the deload flag is still reported).

    Returns:
        Tuple of 7 Sessions, rest days included.
    """
    ctx = build_week_context(
        week_number, phase, goal, preferences, phases, apply_deload
    )

    return tuple(
        dataclasses.replace(
            build_day(day, ctx),
            week_number=week_number,
            phase=phase,
            is_deload=ctx.is_deload,
        )
        for day in Weekday
    )
