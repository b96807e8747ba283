from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from fitplan.models.plan import ProgressTracking
from fitplan.models.user_profile import UserProfile
from fitplan.models.workout import NutritionalFocus, WorkoutRecommendation

PLAN_NAMES: Dict[NutritionalFocus, str] = {
    "WEIGHT_LOSS": "Weight Loss & Fitness Plan",
    "MUSCLE_GAIN": "Muscle Building Plan",
    "ENDURANCE": "Endurance & Cardio Plan",
    "FLEXIBILITY": "Flexibility & Balance Plan",
    "STRENGTH": "Strength & Power Plan",
}
DEFAULT_PLAN_NAME = "Comprehensive Fitness Plan"

PLAN_DESCRIPTIONS: Dict[NutritionalFocus, str] = {
    "WEIGHT_LOSS": (
        "A comprehensive {weeks}-week plan designed to help you lose weight, build lean muscle, and improve "
        "overall fitness through a combination of strength training, cardio, and flexibility work."
    ),
    "MUSCLE_GAIN": (
        "A progressive {weeks}-week plan focused on building muscle mass, increasing strength, and improving "
        "body composition through targeted strength training and proper recovery."
    ),
    "ENDURANCE": (
        "A structured {weeks}-week plan to enhance cardiovascular fitness, improve endurance, and build stamina "
        "through progressive cardio training and functional movements."
    ),
    "FLEXIBILITY": (
        "A mindful {weeks}-week plan designed to improve flexibility, balance, and mind-body connection through "
        "yoga, stretching, and gentle movement practices."
    ),
    "STRENGTH": (
        "A challenging {weeks}-week plan focused on building raw strength, power, and functional movement "
        "patterns through progressive overload training."
    ),
}
DEFAULT_DESCRIPTION = (
    "A balanced {weeks}-week fitness plan that combines strength, cardio, flexibility, and recovery to improve "
    "overall health and fitness."
)

PLAN_GOALS: Dict[NutritionalFocus, List[str]] = {
    "WEIGHT_LOSS": [
        "Lose 2-4 kg of body fat",
        "Improve cardiovascular fitness",
        "Build lean muscle mass",
        "Increase energy levels",
    ],
    "MUSCLE_GAIN": [
        "Gain 2-3 kg of muscle mass",
        "Increase strength in major lifts",
        "Improve body composition",
        "Enhance recovery capacity",
    ],
    "ENDURANCE": [
        "Improve cardiovascular endurance",
        "Increase stamina and work capacity",
        "Reduce resting heart rate",
        "Enhance aerobic fitness",
    ],
    "FLEXIBILITY": [
        "Improve overall flexibility",
        "Enhance balance and coordination",
        "Reduce stress and tension",
        "Improve posture and alignment",
    ],
}
DEFAULT_GOALS = [
    "Improve overall fitness",
    "Build strength and endurance",
    "Enhance flexibility and mobility",
    "Establish consistent exercise habits",
]

NUTRITIONAL_GUIDELINES: Dict[NutritionalFocus, List[str]] = {
    "WEIGHT_LOSS": [
        "Create a moderate caloric deficit (300-500 calories per day)",
        "Prioritize protein intake (1.6-2.2g per kg body weight)",
        "Include plenty of vegetables and fiber",
        "Stay hydrated (2-3 liters of water per day)",
        "Time meals around workouts for optimal performance",
    ],
    "MUSCLE_GAIN": [
        "Maintain a slight caloric surplus (200-300 calories per day)",
        "High protein intake (2.0-2.4g per kg body weight)",
        "Include complex carbohydrates for energy",
        "Consume protein within 2 hours post-workout",
        "Ensure adequate sleep (7-9 hours per night)",
    ],
    "ENDURANCE": [
        "Maintain adequate carbohydrate intake for energy",
        "Moderate protein intake (1.4-1.8g per kg body weight)",
        "Stay well-hydrated during workouts",
        "Include electrolyte replacement for longer sessions",
        "Focus on whole, nutrient-dense foods",
    ],
}
DEFAULT_GUIDELINES = [
    "Maintain balanced macronutrient ratios",
    "Adequate protein for muscle maintenance (1.2-1.6g per kg)",
    "Include variety of fruits and vegetables",
    "Stay hydrated throughout the day",
    "Listen to hunger and fullness cues",
]

WEIGHT_GOAL_FACTORS: Dict[NutritionalFocus, float] = {
    "WEIGHT_LOSS": 0.95,
    "MUSCLE_GAIN": 1.03,
}

# name -> (target below fitness level 5, target at 5 and above)
STRENGTH_TARGETS: Dict[str, Tuple[float, float]] = {
    "Push-ups": (20.0, 30.0),
    "Squats": (25.0, 40.0),
    "Plank hold": (60.0, 120.0),
}
ENDURANCE_TARGETS: Dict[str, Tuple[int, int]] = {
    "Running distance": (3, 5),
    "Cycling duration": (20, 30),
    "Swimming laps": (10, 20),
}
FLEXIBILITY_TARGETS: Dict[str, Tuple[float, float]] = {
    "Forward fold": (15.0, 25.0),
    "Shoulder mobility": (45.0, 60.0),
    "Hip flexibility": (30.0, 45.0),
}
TIER_THRESHOLD = 5


def primary_focus(recommendations: Sequence[WorkoutRecommendation]) -> Optional[NutritionalFocus]:
    return recommendations[0].nutritional_focus if recommendations else None


def plan_name(focus: Optional[NutritionalFocus], weeks: int) -> str:
    title = PLAN_NAMES.get(focus, DEFAULT_PLAN_NAME) if focus else DEFAULT_PLAN_NAME
    return f"{weeks}-Week {title}"


def plan_description(focus: Optional[NutritionalFocus], weeks: int) -> str:
    template = PLAN_DESCRIPTIONS.get(focus, DEFAULT_DESCRIPTION) if focus else DEFAULT_DESCRIPTION
    return template.format(weeks=weeks)


def plan_goals(focus: Optional[NutritionalFocus]) -> List[str]:
    return list(PLAN_GOALS.get(focus, DEFAULT_GOALS) if focus else DEFAULT_GOALS)


def nutritional_guidelines(focus: Optional[NutritionalFocus]) -> List[str]:
    return list(NUTRITIONAL_GUIDELINES.get(focus, DEFAULT_GUIDELINES) if focus else DEFAULT_GUIDELINES)


def progress_tracking(profile: UserProfile, focus: Optional[NutritionalFocus]) -> ProgressTracking:
    factor = WEIGHT_GOAL_FACTORS.get(focus) if focus else None
    tier = 0 if profile.fitness_level < TIER_THRESHOLD else 1
    return ProgressTracking(
        weight_goal=profile.weight * factor if factor is not None else None,
        strength_goals={k: v[tier] for k, v in STRENGTH_TARGETS.items()},
        endurance_goals={k: v[tier] for k, v in ENDURANCE_TARGETS.items()},
        flexibility_goals={k: v[tier] for k, v in FLEXIBILITY_TARGETS.items()},
    )
