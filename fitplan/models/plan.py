from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .workout import Weekday, WorkoutRecommendation


class WeeklyWorkout(BaseModel):
    week_number: int = Field(..., ge=1)
    daily_workouts: Dict[Weekday, List[WorkoutRecommendation]] = Field(default_factory=dict)
    rest_days: List[Weekday] = Field(default_factory=list)
    weekly_goals: List[str] = Field(default_factory=list)


class ProgressTracking(BaseModel):
    weight_goal: Optional[float] = None
    strength_goals: Dict[str, float] = Field(default_factory=dict)
    endurance_goals: Dict[str, int] = Field(default_factory=dict)
    flexibility_goals: Dict[str, float] = Field(default_factory=dict)


class WorkoutPlan(BaseModel):
    id: str
    name: str
    description: str
    duration: int = Field(..., ge=1, description="weeks")
    workouts: List[WeeklyWorkout]
    goals: List[str] = Field(default_factory=list)
    nutritional_guidelines: List[str] = Field(default_factory=list)
    progress_tracking: ProgressTracking = Field(default_factory=ProgressTracking)
