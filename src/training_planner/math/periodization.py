"""Periodization math: phase allocation, deload/taper factors, progression.

Implements a two-regime percentage split of the macrocycle:
- Short-prep plans (< 12 weeks): base/build/peak = 20/50/20 %, taper = rest
  with a one-week floor.
- Standard plans (>= 12 weeks): base/build/peak = 45/35/10 %, taper = rest.

The taper absorbs all rounding error so phase durations always sum to the
plan length. Deload weeks fall on every 4th week of the plan.
"""

from __future__ import annotations

import logging
import math

from training_planner.exceptions import InvalidDuration, PhaseCoverageError
from training_planner.models.enums import (
    DELOAD_INTERVAL_WEEKS,
    DELOAD_VOLUME_FACTOR,
    EASY_RUN_FRACTION,
    LONG_RUN_CAP_FRACTION,
    LONG_RUN_START_KM,
    LONG_RUN_WEEKLY_GROWTH,
    SHORT_PREP_MIN_TAPER_WEEKS,
    SHORT_PREP_SPLIT_PCT,
    SHORT_PREP_THRESHOLD_WEEKS,
    STANDARD_MIN_TAPER_WEEKS,
    STANDARD_SPLIT_PCT,
    TAPER_DECAY_PER_WEEK,
    TAPER_MIN_FACTOR,
    TrainingPhase,
)
from training_planner.models.goal import Goal
from training_planner.models.plan import PhaseSpec

logger = logging.getLogger(__name__)

_PHASE_ORDER = (
    TrainingPhase.BASE,
    TrainingPhase.BUILD,
    TrainingPhase.PEAK,
    TrainingPhase.TAPER,
)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves away from zero for positive values (2.5 -> 3).

    Python's built-in round() uses banker's rounding, which would turn a
    2.5-week share into 2.
    """
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def _percent_of_weeks(total_weeks: int, percent: int) -> int:
    """Half-up rounded ``total_weeks * percent / 100`` on exact integers."""
    return (2 * total_weeks * percent + 100) // 200


def compute_phases(total_weeks: int) -> list[PhaseSpec]:
    """Split a plan of ``total_weeks`` into base/build/peak/taper.

    Args:
        total_weeks: Plan length in weeks (>= 1).

    Returns:
        Four PhaseSpecs in chronological order. Durations are >= 0,
        contiguous from week 1, and sum to exactly ``total_weeks``.
        Zero-length phases are kept with ``end_week == start_week - 1``.

    Raises:
        InvalidDuration: If total_weeks is not a positive integer.
    """
    if isinstance(total_weeks, bool) or not isinstance(total_weeks, int):
        raise InvalidDuration(total_weeks)
    if total_weeks < 1:
        raise InvalidDuration(total_weeks)

    if total_weeks < SHORT_PREP_THRESHOLD_WEEKS:
        split = SHORT_PREP_SPLIT_PCT
        min_taper = SHORT_PREP_MIN_TAPER_WEEKS
    else:
        split = STANDARD_SPLIT_PCT
        min_taper = STANDARD_MIN_TAPER_WEEKS

    durations = [_percent_of_weeks(total_weeks, pct) for pct in split]
    taper = max(min_taper, total_weeks - sum(durations))

    # A floored taper can push the total past the plan length on very short
    # plans; take the overflow back from the longest phase, later phase first.
    overflow = sum(durations) + taper - total_weeks
    while overflow > 0:
        longest = max(range(len(durations)), key=lambda i: (durations[i], i))
        durations[longest] -= 1
        overflow -= 1

    durations.append(taper)

    phases: list[PhaseSpec] = []
    current_week = 1
    for phase, duration in zip(_PHASE_ORDER, durations):
        phases.append(
            PhaseSpec(
                phase=phase,
                start_week=current_week,
                end_week=current_week + duration - 1,
                duration_weeks=duration,
            )
        )
        current_week += duration

    return phases


def phase_for_week(
    week: int, phases: list[PhaseSpec] | tuple[PhaseSpec, ...], strict: bool = True
) -> TrainingPhase:
    """Determine which training phase a given week falls in.

    Args:
        week: 1-indexed week number.
        phases: Phase allocation from compute_phases().
        strict: Raise when no range covers the week. When False, log a
            warning and fall back to BASE.

    Raises:
        PhaseCoverageError: If ``strict`` and the week is not covered.
    """
    for spec in phases:
        if spec.contains(week):
            return spec.phase

    last_week = phases[-1].end_week if phases else 0
    if strict:
        raise PhaseCoverageError(week, last_week)
    logger.warning(
        "Week %d not covered by phases (1-%d), falling back to base",
        week,
        last_week,
    )
    return TrainingPhase.BASE


def get_phase_spec(
    phase: TrainingPhase, phases: list[PhaseSpec] | tuple[PhaseSpec, ...]
) -> PhaseSpec | None:
    """Return the PhaseSpec for *phase*, or None if it is not allocated."""
    for spec in phases:
        if spec.phase == phase:
            return spec
    return None


def is_deload_week(week: int) -> bool:
    """Every 4th week of the plan is a deload week."""
    return week % DELOAD_INTERVAL_WEEKS == 0


def deload_factor(week: int) -> float:
    """Volume multiplier for the deload cycle (0.6 on deload weeks)."""
    return DELOAD_VOLUME_FACTOR if is_deload_week(week) else 1.0


def taper_factor(
    week: int, phases: list[PhaseSpec] | tuple[PhaseSpec, ...]
) -> float:
    """Volume multiplier inside the taper phase.

    Decays by 0.2 for each week into the taper, counted from the actual
    taper start (first taper week = 0.8), floored at 0.3. Weeks outside the
    taper get 1.0.
    """
    taper = get_phase_spec(TrainingPhase.TAPER, phases)
    if taper is None or not taper.contains(week):
        return 1.0
    weeks_into_taper = week - taper.start_week + 1
    return max(TAPER_MIN_FACTOR, 1.0 - weeks_into_taper * TAPER_DECAY_PER_WEEK)


def long_run_distance(week: int, goal: Goal, volume_factor: float = 1.0) -> int:
    """Progressive long-run distance in km for a week.

    8 km growing 10 % per week, capped at 120 % of the goal distance
    (21 km when unset), scaled by ``volume_factor`` and rounded.
    """
    raw = LONG_RUN_START_KM * LONG_RUN_WEEKLY_GROWTH ** (week - 1)
    raw = min(raw, goal.distance_or_default * LONG_RUN_CAP_FRACTION)
    return int(round_half_up(raw * volume_factor))


def easy_run_distance(long_run_km: float) -> int:
    """Secondary easy-run distance: half the long run, rounded."""
    return int(round_half_up(long_run_km * EASY_RUN_FRACTION))


def elevation_target(distance_km: float, goal: Goal) -> int:
    """Climbing target in metres proportional to the goal's vert/km ratio."""
    return int(round_half_up(distance_km * goal.elevation_ratio))
