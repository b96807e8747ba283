from __future__ import annotations

from typing import Any, Dict, List, Literal
from pydantic import BaseModel, Field, field_validator


ActivityLevel = Literal[
    "sedentary",
    "lightly_active",
    "moderately_active",
    "very_active",
    "extremely_active",
]


class UserProfile(BaseModel):
    id: str = ""
    name: str = ""
    age: int = Field(..., ge=0)
    gender: str = ""
    height: float = Field(..., gt=0, description="cm")
    weight: float = Field(..., gt=0, description="kg")
    goal: str = Field("maintenance", description="e.g. weight_loss, muscle_gain, maintenance")
    activity_level: ActivityLevel = "moderately_active"
    fitness_level: int = Field(5, description="1-10 scale, clamped")

    medical_conditions: List[str] = Field(default_factory=list)
    injuries: List[str] = Field(default_factory=list)
    preferences: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("fitness_level")
    @classmethod
    def _clamp_fitness_level(cls, v: int) -> int:
        return max(1, min(10, v))
