"""Adherence analyzer: classify a week's logged workouts against the plan.

Each prescribed session is matched to a logged workout on the same calendar
day, or within one day either side, whose discipline falls in the same
equivalence class. Matched pairs are then checked for significant deviation
in duration, distance and perceived effort.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from training_planner.adherence.equivalence import (
    is_run_tag,
    is_same_type,
    is_strength_tag,
)
from training_planner.models.adherence import (
    AdherenceReport,
    Deviation,
    LoadDelta,
    MatchedSession,
)
from training_planner.models.enums import (
    DEFAULT_EXPECTED_EFFORT,
    DISTANCE_TOLERANCE_KM,
    DURATION_TOLERANCE_MIN,
    EFFORT_TOLERANCE,
    MATCH_DAY_TOLERANCE,
    ZONE_EXPECTED_EFFORT,
)
from training_planner.models.plan import WeekPlan
from training_planner.models.session import Session
from training_planner.models.workout_log import ActualWorkout

logger = logging.getLogger(__name__)


def session_date(session: Session, week_start: date) -> date:
    """Calendar date of a session within the week starting at *week_start*."""
    return week_start + timedelta(days=int(session.day) - 1)


def workouts_in_window(
    workouts: Iterable[ActualWorkout], week_start: date
) -> list[ActualWorkout]:
    """Workouts dated in ``[week_start, week_start + 7)``, oldest first."""
    week_end = week_start + timedelta(days=7)
    return sorted(
        (w for w in workouts if week_start <= w.date < week_end),
        key=lambda w: w.date,
    )


def matches_session(workout: ActualWorkout, session: Session, week_start: date) -> bool:
    """Day +/-1 and equivalent discipline."""
    day_diff = abs((workout.date - session_date(session, week_start)).days)
    return day_diff <= MATCH_DAY_TOLERANCE and is_same_type(workout.discipline, session)


def find_matching_workout(
    workouts: list[ActualWorkout], session: Session, week_start: date
) -> ActualWorkout | None:
    """Prefer a same-day workout; fall back to +/-1 day."""
    planned_date = session_date(session, week_start)
    for workout in workouts:
        if workout.date == planned_date and is_same_type(workout.discipline, session):
            return workout
    for workout in workouts:
        if matches_session(workout, session, week_start):
            return workout
    return None


def expected_effort(zone: int) -> int:
    """Expected RPE for an intensity zone."""
    return ZONE_EXPECTED_EFFORT.get(zone, DEFAULT_EXPECTED_EFFORT)


def calculate_deviation(workout: ActualWorkout, session: Session) -> Deviation:
    """Compare a matched workout with its prescription.

    A check only runs when both sides carry the value (a zero planned
    duration or a rest-zone session is not compared).
    """
    notes: list[str] = []
    duration_diff = 0.0
    distance_diff = 0.0
    intensity: str | None = None

    if workout.duration_min and session.duration_min:
        duration_diff = workout.duration_min - session.duration_min
        if abs(duration_diff) > DURATION_TOLERANCE_MIN:
            if duration_diff > 0:
                notes.append(f"{duration_diff:g} min longer than planned")
            else:
                notes.append(f"{abs(duration_diff):g} min shorter than planned")

    planned_km = session.distance_km
    if workout.distance_km and planned_km:
        distance_diff = workout.distance_km - planned_km
        if abs(distance_diff) > DISTANCE_TOLERANCE_KM:
            if distance_diff > 0:
                notes.append(f"{distance_diff:.1f} km longer than planned")
            else:
                notes.append(f"{abs(distance_diff):.1f} km shorter than planned")

    zone = session.intensity_zone
    if workout.effort is not None and zone > 0:
        expected = expected_effort(zone)
        if abs(workout.effort - expected) > EFFORT_TOLERANCE:
            intensity = "higher" if workout.effort > expected else "lower"
            notes.append(f"{intensity.capitalize()} intensity than planned")

    return Deviation(
        duration_min=duration_diff,
        distance_km=distance_diff,
        intensity=intensity,
        notes=tuple(notes),
    )


def calculate_load_delta(week: WeekPlan, workouts: list[ActualWorkout]) -> LoadDelta:
    """Actual minus planned run distance, strength sessions and minutes.

    Only run-tagged workouts contribute distance, matching the planned side
    which sums RUN sessions alone.
    """
    actual_km = sum(
        w.distance_km or 0.0 for w in workouts if is_run_tag(w.discipline)
    )
    actual_strength = sum(1 for w in workouts if is_strength_tag(w.discipline))
    actual_minutes = sum(w.duration_min or 0.0 for w in workouts)

    return LoadDelta(
        distance_km=actual_km - week.load.distance_km,
        strength_sessions=actual_strength - week.load.strength_sessions,
        total_minutes=actual_minutes - week.total_duration_min,
    )


def compare_actual_vs_planned(
    week: WeekPlan,
    actual_workouts: Iterable[ActualWorkout],
    include_rest: bool = True,
) -> AdherenceReport:
    """Classify a week's prescribed sessions and logged workouts.

    Args:
        week: The prescribed week (its ``week_start`` anchors the window).
        actual_workouts: Logged workouts; anything outside the week's
            7-day window is ignored.
        include_rest: Treat rest-type sessions as prescribed (the default).
            Pass False to classify training sessions only; rest days are
            then neither completed nor skipped.

    Returns:
        AdherenceReport whose completed/modified/skipped lists partition
        the prescribed sessions.
    """
    window = workouts_in_window(actual_workouts, week.week_start)
    prescribed = week.sessions if include_rest else week.training_sessions

    completed: list[MatchedSession] = []
    modified: list[MatchedSession] = []
    skipped: list[Session] = []

    for session in prescribed:
        workout = find_matching_workout(window, session, week.week_start)
        if workout is None:
            skipped.append(session)
            continue

        deviation = calculate_deviation(workout, session)
        pair = MatchedSession(planned=session, actual=workout, deviation=deviation)
        if deviation.is_significant:
            modified.append(pair)
        else:
            completed.append(pair)

    extra = tuple(
        w
        for w in window
        if not any(matches_session(w, s, week.week_start) for s in prescribed)
    )

    report = AdherenceReport(
        week_start=week.week_start,
        completed=tuple(completed),
        modified=tuple(modified),
        skipped=tuple(skipped),
        extra=extra,
        load_delta=calculate_load_delta(week, window),
    )
    logger.debug(
        "Week %d adherence: %d completed, %d modified, %d skipped, %d extra",
        week.week_number,
        len(report.completed),
        len(report.modified),
        len(report.skipped),
        len(report.extra),
    )
    return report
