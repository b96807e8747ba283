from .analysis import analyze_health_status, analyze_nutrition, compute_bmi, determine_fitness_level
from .catalog import load_catalog, filter_by_equipment, filter_by_duration
from .candidates import generate_candidates, select_focus_areas
from .personalize import personalize
from .scheduler import build_schedule, build_week
from .engine import PlanGenerator, generate_workout_plan, generate_workout_recommendations
from .export import to_csv, to_json, to_markdown, to_pdf

__all__ = [
    "analyze_health_status",
    "analyze_nutrition",
    "compute_bmi",
    "determine_fitness_level",
    "load_catalog",
    "filter_by_equipment",
    "filter_by_duration",
    "generate_candidates",
    "select_focus_areas",
    "personalize",
    "build_schedule",
    "build_week",
    "PlanGenerator",
    "generate_workout_plan",
    "generate_workout_recommendations",
    "to_csv",
    "to_json",
    "to_markdown",
    "to_pdf",
]
