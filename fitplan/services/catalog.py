from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from fitplan.models.workout import (
    Equipment,
    Intensity,
    MuscleGroup,
    NutritionalFocus,
    WorkoutRecommendation,
    WorkoutType,
)

CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "candidate_catalog.json"

FocusArea = Literal[
    "weight_loss",
    "muscle_gain",
    "endurance",
    "flexibility",
    "balanced",
    "stress_relief",
    "recovery",
]


class CandidateTemplate(BaseModel):
    """Static content of one candidate workout; per-user fields are filled in by the generator."""

    id: str
    name: str
    description: str
    workout_type: WorkoutType
    intensity: Intensity
    duration: int = Field(..., ge=1, description="Upper bound in minutes")
    muscle_groups: List[MuscleGroup]
    equipment: List[Equipment] = Field(..., description="Equipment the session can be done with")
    requires_equipment: Optional[Equipment] = None
    nutritional_focus: NutritionalFocus
    contraindications: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    reasoning: str = ""


@lru_cache(maxsize=1)
def load_catalog() -> Dict[FocusArea, List[CandidateTemplate]]:
    with CATALOG_PATH.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return {area: [CandidateTemplate.model_validate(item) for item in items] for area, items in raw.items()}


def templates_for(area: FocusArea) -> List[CandidateTemplate]:
    return list(load_catalog().get(area, []))


def filter_by_equipment(
    workouts: Sequence[WorkoutRecommendation], available: Sequence[Equipment]
) -> List[WorkoutRecommendation]:
    available_set = set(available)
    return [w for w in workouts if not available_set.isdisjoint(w.equipment)]


def filter_by_duration(workouts: Sequence[WorkoutRecommendation], max_minutes: int) -> List[WorkoutRecommendation]:
    return [w for w in workouts if w.duration <= max_minutes]
