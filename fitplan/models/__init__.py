from .workout import (
    WEEKDAYS,
    Difficulty,
    Equipment,
    Intensity,
    MuscleGroup,
    NutritionalFocus,
    Weekday,
    WorkoutRecommendation,
    WorkoutType,
)
from .user_profile import ActivityLevel, UserProfile
from .health import HealthAnalysis, HealthReport, NutritionAnalysis, NutritionItem
from .plan import ProgressTracking, WeeklyWorkout, WorkoutPlan
from .engine_io import (
    Issue,
    PlanRequest,
    PlanResponse,
    RecommendationRequest,
    RecommendationResponse,
    ValidationReport,
    ValidationRequest,
)

__all__ = [
    "WEEKDAYS",
    "Difficulty",
    "Equipment",
    "Intensity",
    "MuscleGroup",
    "NutritionalFocus",
    "Weekday",
    "WorkoutRecommendation",
    "WorkoutType",
    "ActivityLevel",
    "UserProfile",
    "HealthAnalysis",
    "HealthReport",
    "NutritionAnalysis",
    "NutritionItem",
    "ProgressTracking",
    "WeeklyWorkout",
    "WorkoutPlan",
    "Issue",
    "PlanRequest",
    "PlanResponse",
    "RecommendationRequest",
    "RecommendationResponse",
    "ValidationReport",
    "ValidationRequest",
]
