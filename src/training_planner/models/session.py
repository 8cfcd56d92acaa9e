"""Session: one prescribed unit of training for a single day."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from training_planner.models.enums import SessionType, TrainingPhase, Weekday


@dataclass(frozen=True)
class Session:
    """A single day's prescription.

    ``details`` holds discipline-specific data: ``intensity_zone`` always,
    plus ``intervals`` for structured work, ``distance_km``/``elevation_m``
    for endurance work, and ``exercises``/``format`` for strength/circuit
    work. Rest days are explicit sessions with ``SessionType.REST``.
    """

    day: Weekday
    session_type: SessionType
    subtype: str
    title: str
    description: str
    duration_min: int = 0
    details: dict[str, Any] = field(default_factory=dict)
    week_number: int = 1
    phase: TrainingPhase = TrainingPhase.BASE
    is_deload: bool = False

    @property
    def is_rest(self) -> bool:
        return self.session_type == SessionType.REST

    @property
    def is_strength(self) -> bool:
        return self.session_type in (SessionType.HYROX, SessionType.STRENGTH)

    @property
    def distance_km(self) -> float | None:
        return self.details.get("distance_km")

    @property
    def intensity_zone(self) -> int:
        return int(self.details.get("intensity_zone") or 0)
