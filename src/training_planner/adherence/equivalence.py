"""Discipline equivalence classes for matching logged workouts to sessions.

Each class groups tags that count as the same kind of training. Tags not
listed anywhere form a class of their own, so an unknown tag still matches
an identical tag.
"""

from __future__ import annotations

from training_planner.models.enums import SessionType
from training_planner.models.session import Session

EQUIVALENCE_CLASSES: dict[str, frozenset[str]] = {
    "easy_run": frozenset({"easy", "easy_run", "recovery", "recovery_run"}),
    "long_run": frozenset({"long_run"}),
    "tempo": frozenset({"tempo", "threshold"}),
    "interval": frozenset({"interval", "intervals", "intervals_aerobic", "vo2max"}),
    "hybrid_strength": frozenset(
        {"hyrox", "crossfit", "metcon", "strength", "weights", "gym"}
    ),
    "rest": frozenset({"rest", "mobility", "active_recovery", "yoga", "walk", "walking"}),
}

# Generic tags that match any session of a discipline (e.g. an untyped
# "run" uploaded from a watch fulfils any prescribed run)
GENERIC_TAGS: dict[str, SessionType] = {
    "run": SessionType.RUN,
    "running": SessionType.RUN,
}

# Actual-workout tags counted as strength sessions in load totals
STRENGTH_TAGS: frozenset[str] = EQUIVALENCE_CLASSES["hybrid_strength"]

# Actual-workout tags whose distance counts as running volume
RUN_TAGS: frozenset[str] = frozenset(GENERIC_TAGS).union(
    *(EQUIVALENCE_CLASSES[name] for name in ("easy_run", "long_run", "tempo", "interval"))
)

_TAG_TO_CLASS: dict[str, str] = {
    tag: class_name
    for class_name, tags in EQUIVALENCE_CLASSES.items()
    for tag in tags
}


def normalize_tag(tag: str) -> str:
    return tag.strip().lower().replace(" ", "_").replace("-", "_")


def equivalence_class(tag: str) -> str:
    """Return the class name for a discipline tag (the tag itself if unknown)."""
    normalized = normalize_tag(tag)
    return _TAG_TO_CLASS.get(normalized, normalized)


def session_class(session: Session) -> str:
    """Equivalence class of a prescribed session.

    Rest-type sessions always belong to ``rest``. Others are classified by
    subtype, so a Hyrox ``strength`` day matches a logged ``crossfit`` or
    ``strength`` workout.
    """
    if session.is_rest:
        return "rest"
    return equivalence_class(session.subtype)


def is_same_type(discipline: str, session: Session) -> bool:
    """True if a logged discipline tag is interchangeable with the session."""
    generic = GENERIC_TAGS.get(normalize_tag(discipline))
    if generic is not None:
        return session.session_type == generic
    return equivalence_class(discipline) == session_class(session)


def is_strength_tag(discipline: str) -> bool:
    return normalize_tag(discipline) in STRENGTH_TAGS


def is_run_tag(discipline: str) -> bool:
    return normalize_tag(discipline) in RUN_TAGS
