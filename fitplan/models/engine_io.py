from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .health import HealthReport, NutritionItem
from .plan import WorkoutPlan
from .user_profile import UserProfile
from .workout import Equipment, Weekday, WorkoutRecommendation, WorkoutType


class RecommendationRequest(BaseModel):
    profile: UserProfile
    nutrition_items: List[NutritionItem] = Field(default_factory=list)
    health_report: HealthReport
    available_equipment: Optional[List[Equipment]] = None
    preferred_types: Optional[List[WorkoutType]] = None
    available_time: Optional[int] = Field(None, ge=0)
    workout_days: Optional[List[Weekday]] = None


class RecommendationResponse(BaseModel):
    recommendations: List[WorkoutRecommendation]
    rationale: str = ""


class PlanRequest(BaseModel):
    profile: UserProfile
    recommendations: List[WorkoutRecommendation]
    duration_weeks: Optional[int] = None
    workout_days_per_week: Optional[int] = None


class PlanResponse(BaseModel):
    plan: WorkoutPlan


class Issue(BaseModel):
    code: Literal[
        "WEEK_COUNT_MISMATCH",
        "REST_DAY_OVERLAP",
        "EXCEEDS_WORKOUT_DAYS",
        "EQUIPMENT_BLOCKED",
        "EXCEEDS_TIME_BUDGET",
    ]
    message: str


class ValidationRequest(BaseModel):
    plan: WorkoutPlan
    available_equipment: List[Equipment] = Field(default_factory=list)
    available_time: Optional[int] = None
    workout_days_per_week: Optional[int] = None


class ValidationReport(BaseModel):
    ok: bool
    issues: List[Issue] = Field(default_factory=list)
