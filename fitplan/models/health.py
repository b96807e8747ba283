from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class NutritionItem(BaseModel):
    name: str = ""
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


class HealthReport(BaseModel):
    id: str = ""
    user_id: str = ""
    date: str = ""
    weight: float = 0.0
    body_fat_percentage: float = 0.0
    muscle_mass: float = 0.0
    heart_rate: int = Field(..., description="resting bpm")
    blood_pressure: int = Field(..., description="systolic")
    flexibility_score: float = Field(..., description="0-10 scale")
    stress_level: float = Field(..., description="0-10 scale")
    fatigue_level: float = Field(..., description="0-10 scale")
    sleep_quality: float = 5.0
    energy_level: float = 5.0
    mood: float = 5.0
    notes: str = ""
    measurements: Dict[str, float] = Field(default_factory=dict)
    symptoms: List[str] = Field(default_factory=list)


class HealthAnalysis(BaseModel):
    bmi: float
    is_weight_loss_needed: bool
    is_muscle_gain_needed: bool
    is_endurance_needed: bool
    is_flexibility_needed: bool
    is_stress_relief_needed: bool
    is_recovery_needed: bool
    fitness_level: int = Field(..., ge=1, le=10)


class NutritionAnalysis(BaseModel):
    total_calories: int = 0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    is_high_protein: bool = False
    is_high_carb: bool = False
    is_high_fat: bool = False
    is_balanced: bool = False
