from __future__ import annotations

import logging
from typing import Dict, Sequence

from fitplan.models.health import HealthAnalysis, HealthReport, NutritionAnalysis, NutritionItem
from fitplan.models.user_profile import UserProfile

logger = logging.getLogger(__name__)

ACTIVITY_ADJUSTMENT: Dict[str, int] = {
    "sedentary": -2,
    "lightly_active": -1,
    "moderately_active": 0,
    "very_active": 1,
    "extremely_active": 2,
}

# Reference macro targets (g) and the tolerance band around each for "balanced"
BALANCED_BANDS = {
    "protein": (80.0, 20.0),
    "carbs": (150.0, 30.0),
    "fat": (50.0, 15.0),
}


def compute_bmi(weight: float, height_cm: float) -> float:
    meters = height_cm / 100.0
    return weight / (meters * meters)


def determine_fitness_level(profile: UserProfile, report: HealthReport) -> int:
    level = 5

    if profile.age < 30:
        level += 1
    elif profile.age > 50:
        level -= 1

    level += ACTIVITY_ADJUSTMENT.get(profile.activity_level, 0)

    if report.heart_rate < 70:
        level += 1
    if report.blood_pressure < 120:
        level += 1
    if report.flexibility_score > 7:
        level += 1

    return max(1, min(10, level))


def analyze_health_status(profile: UserProfile, report: HealthReport) -> HealthAnalysis:
    bmi = compute_bmi(profile.weight, profile.height)
    analysis = HealthAnalysis(
        bmi=bmi,
        is_weight_loss_needed=bmi > 25.0,
        is_muscle_gain_needed=bmi < 18.5 or profile.goal == "muscle_gain",
        is_endurance_needed=report.heart_rate > 80 or report.blood_pressure > 120,
        is_flexibility_needed=report.flexibility_score < 7.0,
        is_stress_relief_needed=report.stress_level > 7.0,
        is_recovery_needed=report.fatigue_level > 7.0,
        fitness_level=determine_fitness_level(profile, report),
    )
    logger.debug("health analysis for %s: %s", profile.id or "<anonymous>", analysis.model_dump())
    return analysis


def analyze_nutrition(items: Sequence[NutritionItem]) -> NutritionAnalysis:
    total_calories = sum(int(it.calories or 0) for it in items)
    protein = sum(float(it.protein or 0) for it in items)
    carbs = sum(float(it.carbs or 0) for it in items)
    fat = sum(float(it.fat or 0) for it in items)

    def within(value: float, key: str) -> bool:
        ref, tol = BALANCED_BANDS[key]
        return abs(value - ref) < tol

    return NutritionAnalysis(
        total_calories=total_calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        is_high_protein=protein > 100,
        is_high_carb=carbs > 200,
        is_high_fat=fat > 60,
        is_balanced=within(protein, "protein") and within(carbs, "carbs") and within(fat, "fat"),
    )
