"""Tests for the per-day session templates."""

from training_planner.models.enums import SessionType, TrainingPhase, Weekday
from training_planner.models.goal import Goal, Preferences
from training_planner.workout_builder import DAY_TEMPLATES, WeekContext
from training_planner.workout_builder.day_templates import build_day, rest_day


def _ctx(**overrides) -> WeekContext:
    values = dict(
        week_number=1,
        phase=TrainingPhase.BASE,
        goal=Goal(),
        preferences=Preferences(),
        is_deload=False,
        volume_factor=1.0,
        taper_factor=1.0,
        long_run_km=10,
        long_run_elevation_m=0,
        easy_run_km=5,
        easy_run_elevation_m=0,
    )
    values.update(overrides)
    return WeekContext(**values)


class TestTemplates:
    def test_every_weekday_has_a_template(self) -> None:
        assert set(DAY_TEMPLATES) == set(Weekday)

    def test_templates_return_their_own_day(self) -> None:
        ctx = _ctx()
        for day in Weekday:
            assert build_day(day, ctx).day == day

    def test_rest_day_is_explicit(self) -> None:
        session = rest_day(Weekday.FRIDAY, "Rest day.")
        assert session.session_type == SessionType.REST
        assert session.duration_min == 0
        assert session.intensity_zone == 0
        assert session.description == "Rest day."

    def test_volume_factor_scales_quality_and_strength(self) -> None:
        ctx = _ctx(volume_factor=0.6)
        assert build_day(Weekday.TUESDAY, ctx).duration_min == 36
        assert build_day(Weekday.WEDNESDAY, ctx).duration_min == 45
        assert build_day(Weekday.THURSDAY, ctx).duration_min == 27

    def test_saturday_is_fixed(self) -> None:
        session = build_day(Weekday.SATURDAY, _ctx(volume_factor=0.6))
        assert session.duration_min == 30
        assert session.is_rest

    def test_sunday_uses_context_distance(self) -> None:
        session = build_day(Weekday.SUNDAY, _ctx(long_run_km=14, long_run_elevation_m=300))
        assert session.distance_km == 14
        assert session.duration_min == 84
        assert session.details["elevation_m"] == 300

    def test_strength_sessions_carry_exercises(self) -> None:
        wednesday = build_day(Weekday.WEDNESDAY, _ctx())
        friday = build_day(Weekday.FRIDAY, _ctx())
        assert wednesday.is_strength and friday.is_strength
        assert "Sled Push" in wednesday.details["exercises"]
        assert friday.details["format"] == "AMRAP or For Time"
