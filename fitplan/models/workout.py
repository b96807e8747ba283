from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List, Literal, Optional


WorkoutType = Literal[
    "STRENGTH_TRAINING",
    "CARDIO",
    "YOGA",
    "PILATES",
    "HIIT",
    "FLEXIBILITY",
    "BALANCE",
    "SPORTS",
    "DANCE",
    "SWIMMING",
    "CYCLING",
    "RUNNING",
    "WALKING",
    "BODYWEIGHT",
    "FUNCTIONAL_TRAINING",
]

Intensity = Literal["LOW", "MODERATE", "HIGH", "VERY_HIGH"]

MuscleGroup = Literal[
    "CHEST",
    "BACK",
    "SHOULDERS",
    "BICEPS",
    "TRICEPS",
    "FOREARMS",
    "CORE",
    "GLUTES",
    "QUADRICEPS",
    "HAMSTRINGS",
    "CALVES",
    "FULL_BODY",
]

Equipment = Literal[
    "NONE",
    "DUMBBELLS",
    "BARBELL",
    "RESISTANCE_BANDS",
    "YOGA_MAT",
    "PULL_UP_BAR",
    "BENCH",
    "CARDIO_MACHINE",
    "WEIGHT_MACHINE",
    "KETTLEBELL",
    "MEDICINE_BALL",
    "FOAM_ROLLER",
]

Difficulty = Literal["BEGINNER", "INTERMEDIATE", "ADVANCED", "EXPERT"]

NutritionalFocus = Literal[
    "WEIGHT_LOSS",
    "MUSCLE_GAIN",
    "ENDURANCE",
    "FLEXIBILITY",
    "STRENGTH",
    "RECOVERY",
    "ENERGY_BOOST",
    "STRESS_RELIEF",
    "BALANCE",
]

Weekday = Literal[
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]

WEEKDAYS: tuple[Weekday, ...] = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)


class WorkoutRecommendation(BaseModel):
    id: str = Field(..., description="Catalog ID, e.g., wl_hiit_1")
    name: str
    description: str
    workout_type: WorkoutType
    intensity: Intensity
    duration: int = Field(..., ge=0, description="minutes")
    calories_burn: int = Field(..., ge=0)
    muscle_groups: List[MuscleGroup]
    equipment: List[Equipment]
    difficulty: Difficulty
    nutritional_focus: NutritionalFocus
    recommended_days: List[Weekday] = Field(default_factory=list)
    contraindications: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    video_url: Optional[str] = None
    image_url: Optional[str] = None
    is_recommended: bool = False
    reasoning: str = ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "wl_hiit_1",
                    "name": "HIIT Cardio Blast",
                    "description": "High-intensity interval training for maximum calorie burn",
                    "workout_type": "HIIT",
                    "intensity": "HIGH",
                    "duration": 45,
                    "calories_burn": 450,
                    "muscle_groups": ["FULL_BODY"],
                    "equipment": ["NONE"],
                    "difficulty": "INTERMEDIATE",
                    "nutritional_focus": "WEIGHT_LOSS",
                    "recommended_days": ["MONDAY", "WEDNESDAY", "FRIDAY"],
                    "is_recommended": True,
                }
            ]
        }
    }
