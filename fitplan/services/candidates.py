from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from fitplan.models.health import HealthAnalysis
from fitplan.models.user_profile import UserProfile
from fitplan.models.workout import Difficulty, Equipment, Intensity, Weekday, WorkoutRecommendation
from .catalog import CandidateTemplate, FocusArea, templates_for

logger = logging.getLogger(__name__)

# kcal per minute for a 70 kg reference body
BASE_BURN_RATE: Dict[Intensity, float] = {
    "LOW": 3.0,
    "MODERATE": 6.0,
    "HIGH": 10.0,
    "VERY_HIGH": 15.0,
}
REFERENCE_WEIGHT_KG = 70.0

# Evaluated top to bottom; the first matching need picks the primary catalog section.
PRIMARY_FOCUS_CHAIN: List[Tuple[Callable[[HealthAnalysis], bool], FocusArea]] = [
    (lambda a: a.is_weight_loss_needed, "weight_loss"),
    (lambda a: a.is_muscle_gain_needed, "muscle_gain"),
    (lambda a: a.is_endurance_needed, "endurance"),
    (lambda a: a.is_flexibility_needed, "flexibility"),
    (lambda a: True, "balanced"),
]

# Appended after the primary section, each independently.
OVERLAYS: List[Tuple[Callable[[HealthAnalysis], bool], FocusArea]] = [
    (lambda a: a.is_stress_relief_needed, "stress_relief"),
    (lambda a: a.is_recovery_needed, "recovery"),
]


def primary_focus(analysis: HealthAnalysis) -> FocusArea:
    return next(area for predicate, area in PRIMARY_FOCUS_CHAIN if predicate(analysis))


def select_focus_areas(analysis: HealthAnalysis) -> List[FocusArea]:
    areas: List[FocusArea] = [primary_focus(analysis)]
    areas.extend(area for predicate, area in OVERLAYS if predicate(analysis))
    return areas


def calculate_calories_burn(weight: float, intensity: Intensity, minutes: int) -> int:
    return int(BASE_BURN_RATE[intensity] * minutes * (weight / REFERENCE_WEIGHT_KG))


def determine_difficulty(fitness_level: int) -> Difficulty:
    if fitness_level < 3:
        return "BEGINNER"
    if fitness_level < 6:
        return "INTERMEDIATE"
    if fitness_level < 8:
        return "ADVANCED"
    return "EXPERT"


def build_candidate(
    template: CandidateTemplate,
    profile: UserProfile,
    available_equipment: Sequence[Equipment],
    available_time: int,
    workout_days: Sequence[Weekday],
) -> WorkoutRecommendation:
    minutes = min(template.duration, available_time)
    usable = set(template.equipment)
    return WorkoutRecommendation(
        id=template.id,
        name=template.name,
        description=template.description,
        workout_type=template.workout_type,
        intensity=template.intensity,
        duration=minutes,
        calories_burn=calculate_calories_burn(profile.weight, template.intensity, minutes),
        muscle_groups=list(template.muscle_groups),
        equipment=[eq for eq in available_equipment if eq in usable],
        difficulty=determine_difficulty(profile.fitness_level),
        nutritional_focus=template.nutritional_focus,
        recommended_days=list(workout_days),
        contraindications=list(template.contraindications),
        instructions=list(template.instructions),
        reasoning=template.reasoning,
    )


def generate_candidates(
    profile: UserProfile,
    analysis: HealthAnalysis,
    available_equipment: Sequence[Equipment],
    available_time: int,
    workout_days: Sequence[Weekday],
) -> List[WorkoutRecommendation]:
    areas = select_focus_areas(analysis)
    logger.info("candidate focus areas: %s", ", ".join(areas))

    # de-duplicate while keeping order; the caller's sequence decides equipment order
    equipment = list(dict.fromkeys(available_equipment))
    out: List[WorkoutRecommendation] = []
    for area in areas:
        for template in templates_for(area):
            if template.requires_equipment and template.requires_equipment not in equipment:
                continue
            out.append(build_candidate(template, profile, equipment, available_time, workout_days))
    return out
