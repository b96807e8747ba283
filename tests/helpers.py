from __future__ import annotations

from typing import List

from fitplan.models import HealthReport, UserProfile, WorkoutRecommendation


def build_profile(weight: float = 80, height: float = 175, fitness_level: int = 5, goal: str = "weight_loss",
                  age: int = 35, activity_level: str = "moderately_active") -> UserProfile:
    return UserProfile(
        id="u1",
        name="Test User",
        age=age,
        gender="female",
        height=height,
        weight=weight,
        goal=goal,
        activity_level=activity_level,  # type: ignore[arg-type]
        fitness_level=fitness_level,
    )


def build_report(heart_rate: int = 85, blood_pressure: int = 130, flexibility_score: float = 5,
                 stress_level: float = 8, fatigue_level: float = 4) -> HealthReport:
    return HealthReport(
        heart_rate=heart_rate,
        blood_pressure=blood_pressure,
        flexibility_score=flexibility_score,
        stress_level=stress_level,
        fatigue_level=fatigue_level,
    )


def make_rec(rec_id: str, workout_type: str, intensity: str = "MODERATE", duration: int = 30,
             equipment: List[str] | None = None, focus: str = "BALANCE") -> WorkoutRecommendation:
    return WorkoutRecommendation(
        id=rec_id,
        name=rec_id.replace("_", " ").title(),
        description="",
        workout_type=workout_type,  # type: ignore[arg-type]
        intensity=intensity,  # type: ignore[arg-type]
        duration=duration,
        calories_burn=100,
        muscle_groups=["FULL_BODY"],
        equipment=equipment if equipment is not None else ["NONE"],  # type: ignore[arg-type]
        difficulty="INTERMEDIATE",
        nutritional_focus=focus,  # type: ignore[arg-type]
    )
