"""Shared test fixtures: goals, a fixed clock, assembled plans, readiness."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from training_planner.assembler import PlanAssembler
from training_planner.models.enums import SessionType, TrainingPhase, Weekday
from training_planner.models.goal import Goal, Preferences
from training_planner.models.plan import Plan
from training_planner.models.readiness import ReadinessSnapshot
from training_planner.models.session import Session

# Wednesday 2026-03-04 09:00, so "today" snaps back to Monday 2026-03-02
FIXED_NOW = datetime(2026, 3, 4, 9, 0, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def half_marathon_goal() -> Goal:
    """12-week flat half marathon, no target date."""
    return Goal(race_name="Oslo Half", target_distance_km=21.1, total_weeks=12)


@pytest.fixture
def trail_goal() -> Goal:
    """16-week hilly 30 km trail race with a fixed race date (a Saturday)."""
    return Goal(
        race_name="Trail 30K",
        target_distance_km=30.0,
        target_elevation_m=1500.0,
        target_date=date(2026, 9, 12),
        total_weeks=16,
    )


@pytest.fixture
def empty_goal() -> Goal:
    """Goal with every field missing."""
    return Goal()


@pytest.fixture
def preferences() -> Preferences:
    return Preferences(long_run_pace_min_per_km=6.0)


@pytest.fixture
def assembler(fixed_now) -> PlanAssembler:
    return PlanAssembler(clock=lambda: fixed_now)


@pytest.fixture
def twelve_week_plan(assembler, half_marathon_goal, preferences) -> Plan:
    return assembler.assemble(half_marathon_goal, preferences)


@pytest.fixture
def interval_session() -> Session:
    """60-minute zone-3 Tuesday interval session."""
    return Session(
        day=Weekday.TUESDAY,
        session_type=SessionType.RUN,
        subtype="intervals_aerobic",
        title="Aerobic intervals",
        description="4 x 8 min in zone 3 with 2 min easy between.",
        duration_min=60,
        details={"intensity_zone": 3, "intervals": "4 x 8 min @ Z3"},
        week_number=2,
        phase=TrainingPhase.BASE,
    )


@pytest.fixture
def long_run_session() -> Session:
    """12 km Sunday long run."""
    return Session(
        day=Weekday.SUNDAY,
        session_type=SessionType.RUN,
        subtype="long_run",
        title="Long run",
        description="12 km at conversational pace (zone 2).",
        duration_min=72,
        details={"distance_km": 12, "elevation_m": 0, "intensity_zone": 2},
        week_number=5,
        phase=TrainingPhase.BASE,
    )


@pytest.fixture
def good_readiness() -> ReadinessSnapshot:
    return ReadinessSnapshot(score=75.0, sleep_performance=85.0)
