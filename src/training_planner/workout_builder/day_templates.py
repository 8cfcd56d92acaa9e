"""Day templates: the fixed weekly structure, one pure function per day.

Each template receives the WeekContext for the week being generated and
returns the Session for its day slot. Week/phase/deload metadata is stamped
afterwards by the generator, so templates only decide content.

Weekly structure:
    Monday     mobility / rest
    Tuesday    structured endurance (interval type depends on phase)
    Wednesday  hybrid strength (rest in taper)
    Thursday   easy recovery run
    Friday     high-intensity circuit (rest on deload weeks and in taper)
    Saturday   light active recovery
    Sunday     long run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from training_planner.math.periodization import round_half_up
from training_planner.models.enums import SessionType, TrainingPhase, Weekday
from training_planner.models.goal import Goal, Preferences
from training_planner.models.session import Session


@dataclass(frozen=True)
class WeekContext:
    """Everything a day template needs to know about the current week."""

    week_number: int
    phase: TrainingPhase
    goal: Goal
    preferences: Preferences
    is_deload: bool
    volume_factor: float  # deload multiplier
    taper_factor: float
    long_run_km: int
    long_run_elevation_m: int
    easy_run_km: int
    easy_run_elevation_m: int


def _minutes(value: float) -> int:
    return int(round_half_up(value))


def rest_day(day: Weekday, description: str = "Active recovery or full rest.") -> Session:
    """Default template: an explicit rest day."""
    return Session(
        day=day,
        session_type=SessionType.REST,
        subtype="rest",
        title="Rest day",
        description=description,
        duration_min=0,
        details={"intensity_zone": 0},
    )


def _monday(ctx: WeekContext) -> Session:
    return Session(
        day=Weekday.MONDAY,
        session_type=SessionType.REST,
        subtype="mobility",
        title="Mobility / Rest",
        description="Mobility work, foam rolling, or full rest.",
        duration_min=0,
        details={"intensity_zone": 0},
    )


# Tuesday quality session by phase: (subtype, title, description, base minutes,
# zone, interval notation, purpose)
_TUESDAY_QUALITY = {
    TrainingPhase.BASE: (
        "intervals_aerobic",
        "Aerobic intervals",
        "4 x 8 min in zone 3 with 2 min easy between.",
        60,
        3,
        "4 x 8 min @ Z3",
        "Build aerobic capacity",
    ),
    TrainingPhase.BUILD: (
        "threshold",
        "Threshold session",
        "3 x 10 min at threshold pace (zone 4).",
        60,
        4,
        "3 x 10 min @ Z4",
        "Raise lactate threshold",
    ),
    TrainingPhase.PEAK: (
        "vo2max",
        "VO2max intervals",
        "10 x 400m at maximal effort.",
        50,
        5,
        "10 x 400m @ max",
        "Peak VO2max",
    ),
}


def _tuesday(ctx: WeekContext) -> Session:
    if ctx.phase == TrainingPhase.TAPER:
        return Session(
            day=Weekday.TUESDAY,
            session_type=SessionType.RUN,
            subtype="easy",
            title="Easy run",
            description="Easy running in zone 2. Stay fresh!",
            duration_min=_minutes(30 * ctx.taper_factor),
            details={"intensity_zone": 2, "purpose": "Maintenance before race day"},
        )

    subtype, title, description, minutes, zone, intervals, purpose = _TUESDAY_QUALITY[
        ctx.phase
    ]
    return Session(
        day=Weekday.TUESDAY,
        session_type=SessionType.RUN,
        subtype=subtype,
        title=title,
        description=description,
        duration_min=_minutes(minutes * ctx.volume_factor),
        details={"intensity_zone": zone, "intervals": intervals, "purpose": purpose},
    )


def _wednesday(ctx: WeekContext) -> Session:
    if ctx.phase == TrainingPhase.TAPER:
        return rest_day(Weekday.WEDNESDAY, "Rest day for optimal recovery.")
    return Session(
        day=Weekday.WEDNESDAY,
        session_type=SessionType.HYROX,
        subtype="strength",
        title="Hyrox strength",
        description="Focus on sled push/pull, wall balls and farmers carry.",
        duration_min=_minutes(75 * ctx.volume_factor),
        details={
            "intensity_zone": 4,
            "exercises": ["Sled Push", "Sled Pull", "Wall Balls", "Farmers Carry", "Lunges"],
            "format": "Strength focus",
            "purpose": "Build Hyrox-specific strength",
        },
    )


def _thursday(ctx: WeekContext) -> Session:
    return Session(
        day=Weekday.THURSDAY,
        session_type=SessionType.RUN,
        subtype="easy",
        title="Recovery run",
        description=f"{ctx.easy_run_km} km at an easy, comfortable pace (zone 2).",
        duration_min=_minutes(45 * ctx.volume_factor * ctx.taper_factor),
        details={
            "distance_km": ctx.easy_run_km,
            "elevation_m": ctx.easy_run_elevation_m,
            "intensity_zone": 2,
            "purpose": "Active recovery",
        },
    )


def _friday(ctx: WeekContext) -> Session:
    if ctx.is_deload or ctx.phase == TrainingPhase.TAPER:
        return rest_day(Weekday.FRIDAY, "Rest day.")
    return Session(
        day=Weekday.FRIDAY,
        session_type=SessionType.HYROX,
        subtype="metcon",
        title="Hyrox metcon",
        description="High-intensity circuit with Hyrox movements.",
        duration_min=_minutes(60 * ctx.volume_factor),
        details={
            "intensity_zone": 5,
            "exercises": ["SkiErg", "Burpee Broad Jump", "Rowing", "Box Jumps"],
            "format": "AMRAP or For Time",
            "purpose": "Race simulation and conditioning",
        },
    )


def _saturday(ctx: WeekContext) -> Session:
    return Session(
        day=Weekday.SATURDAY,
        session_type=SessionType.REST,
        subtype="active_recovery",
        title="Active recovery",
        description="Light activity: walking, swimming, yoga.",
        duration_min=30,
        details={"intensity_zone": 1, "purpose": "Active recovery before the long run"},
    )


def _sunday(ctx: WeekContext) -> Session:
    description = f"{ctx.long_run_km} km at conversational pace (zone 2)."
    if ctx.long_run_elevation_m > 0:
        description += f" Target: {ctx.long_run_elevation_m} m of climbing."
    return Session(
        day=Weekday.SUNDAY,
        session_type=SessionType.RUN,
        subtype="long_run",
        title="Long run",
        description=description,
        # Distance is already deload/taper scaled
        duration_min=_minutes(ctx.long_run_km * ctx.preferences.long_run_pace_min_per_km),
        details={
            "distance_km": ctx.long_run_km,
            "elevation_m": ctx.long_run_elevation_m,
            "intensity_zone": 2,
            "purpose": "Build aerobic endurance and mental toughness",
        },
    )


DAY_TEMPLATES: dict[Weekday, Callable[[WeekContext], Session]] = {
    Weekday.MONDAY: _monday,
    Weekday.TUESDAY: _tuesday,
    Weekday.WEDNESDAY: _wednesday,
    Weekday.THURSDAY: _thursday,
    Weekday.FRIDAY: _friday,
    Weekday.SATURDAY: _saturday,
    Weekday.SUNDAY: _sunday,
}


def build_day(day: Weekday, ctx: WeekContext) -> Session:
    """Run the template for *day*, falling back to a plain rest day."""
    template = DAY_TEMPLATES.get(day)
    if template is None:
        return rest_day(day)
    return template(ctx)
