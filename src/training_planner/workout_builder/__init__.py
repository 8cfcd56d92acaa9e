"""Workout builder: day templates and the weekly session generator."""

from training_planner.workout_builder.day_templates import DAY_TEMPLATES, WeekContext
from training_planner.workout_builder.week_generator import generate_week

__all__ = ["DAY_TEMPLATES", "WeekContext", "generate_week"]
