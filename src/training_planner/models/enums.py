"""Enumerations and fixed heuristics for the training planner.

Every percentage, threshold and multiplier used by the engine lives here so
the rules are auditable in one place.
"""

from enum import IntEnum, auto


class TrainingPhase(IntEnum):
    """Macrocycle phases, in chronological order."""

    BASE = auto()
    BUILD = auto()
    PEAK = auto()
    TAPER = auto()

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "TrainingPhase":
        return cls[label.strip().upper()]


class SessionType(IntEnum):
    """Discipline tag of a prescribed session."""

    REST = auto()
    RUN = auto()
    HYROX = auto()
    STRENGTH = auto()

    @property
    def label(self) -> str:
        return self.name.lower()


class Weekday(IntEnum):
    """Day slots of a plan week (1=Monday, 7=Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def label(self) -> str:
        return self.name.lower()


class ReadinessStatus(IntEnum):
    """Recovery classification of a single readiness score."""

    CRITICAL = auto()
    WARNING = auto()
    MODERATE = auto()
    GOOD = auto()
    PRIME = auto()

    @property
    def label(self) -> str:
        return self.name.lower()


# ---------------------------------------------------------------------------
# Phase allocation
# ---------------------------------------------------------------------------
# Plans shorter than this use the short-prep split
SHORT_PREP_THRESHOLD_WEEKS = 12

# Whole-number percentages of total weeks (base, build, peak); taper gets the rest
SHORT_PREP_SPLIT_PCT = (20, 50, 20)
STANDARD_SPLIT_PCT = (45, 35, 10)

# Short-prep plans always keep at least one taper week
SHORT_PREP_MIN_TAPER_WEEKS = 1
STANDARD_MIN_TAPER_WEEKS = 0

DEFAULT_TOTAL_WEEKS = 12

# ---------------------------------------------------------------------------
# Load scaling
# ---------------------------------------------------------------------------
DELOAD_INTERVAL_WEEKS = 4  # every 4th week is a deload week
DELOAD_VOLUME_FACTOR = 0.6

TAPER_DECAY_PER_WEEK = 0.2
TAPER_MIN_FACTOR = 0.3

LONG_RUN_START_KM = 8.0
LONG_RUN_WEEKLY_GROWTH = 1.10  # +10% per week, geometric
LONG_RUN_CAP_FRACTION = 1.2  # of the goal distance
EASY_RUN_FRACTION = 0.5  # of the long-run distance

DEFAULT_TARGET_DISTANCE_KM = 21.0
DEFAULT_LONG_RUN_PACE_MIN_PER_KM = 6.0

# ---------------------------------------------------------------------------
# Adherence matching
# ---------------------------------------------------------------------------
MATCH_DAY_TOLERANCE = 1
DURATION_TOLERANCE_MIN = 15
DISTANCE_TOLERANCE_KM = 2.0
EFFORT_TOLERANCE = 2

# Intensity zone -> expected RPE (1-10)
ZONE_EXPECTED_EFFORT = {
    1: 3,
    2: 4,
    3: 6,
    4: 8,
    5: 9,
}
DEFAULT_EXPECTED_EFFORT = 5

# ---------------------------------------------------------------------------
# Readiness thresholds (0-100 recovery score)
# ---------------------------------------------------------------------------
READINESS_CRITICAL_THRESHOLD = 33
READINESS_WARNING_THRESHOLD = 50
READINESS_MODERATE_THRESHOLD = 67
READINESS_PRIME_THRESHOLD = 85

READINESS_VOLUME_FACTOR = {
    ReadinessStatus.CRITICAL: 0.3,
    ReadinessStatus.WARNING: 0.6,
    ReadinessStatus.MODERATE: 0.85,
    ReadinessStatus.GOOD: 1.0,
    ReadinessStatus.PRIME: 1.0,
}

SLEEP_PENALTY_THRESHOLD = 60  # sleep performance %, strictly below triggers
SLEEP_PENALTY_FACTOR = 0.85

# ---------------------------------------------------------------------------
# Block analytics
# ---------------------------------------------------------------------------
WEAK_AREA_MAX_PCT = 70
WEAK_AREA_MIN_PLANNED = 3
TREND_CHANGE_THRESHOLD_PCT = 10

# Volume adherence bands (completed km as % of planned km, inclusive)
VOLUME_PERFECT_BAND = (95, 105)
VOLUME_GOOD_BAND = (85, 115)
