"""Training-plan periodization and adaptation engine."""

from training_planner.adherence import compare_actual_vs_planned, generate_summary
from training_planner.assembler import PlanAssembler, assemble_plan
from training_planner.math.periodization import compute_phases, phase_for_week
from training_planner.readiness import recommend
from training_planner.workout_builder import generate_week

__all__ = [
    "PlanAssembler",
    "assemble_plan",
    "compare_actual_vs_planned",
    "compute_phases",
    "generate_summary",
    "generate_week",
    "phase_for_week",
    "recommend",
]
