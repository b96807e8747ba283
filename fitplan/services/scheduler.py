from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from fitplan.models.plan import WeeklyWorkout
from fitplan.models.workout import WEEKDAYS, Weekday, WorkoutRecommendation, WorkoutType

logger = logging.getLogger(__name__)

Selector = Callable[[Sequence[WorkoutRecommendation]], Optional[WorkoutRecommendation]]


def _nth_of_types(types: Tuple[WorkoutType, ...], n: int = 0) -> Selector:
    def select(recs: Sequence[WorkoutRecommendation]) -> Optional[WorkoutRecommendation]:
        matches = [r for r in recs if r.workout_type in types]
        if not matches:
            return None
        return matches[n] if len(matches) > n else matches[0]

    return select


def _first_low_intensity(recs: Sequence[WorkoutRecommendation]) -> Optional[WorkoutRecommendation]:
    return next((r for r in recs if r.intensity == "LOW"), None)


# Day archetypes
DAY_RULES: Dict[Weekday, Selector] = {
    "MONDAY": _nth_of_types(("STRENGTH_TRAINING",)),
    "TUESDAY": _nth_of_types(("CARDIO", "HIIT")),
    "WEDNESDAY": _nth_of_types(("FLEXIBILITY", "YOGA")),
    # second strength session if there is one
    "THURSDAY": _nth_of_types(("STRENGTH_TRAINING",), n=1),
    "FRIDAY": _nth_of_types(("CARDIO", "FUNCTIONAL_TRAINING")),
    "SATURDAY": _nth_of_types(("YOGA", "FLEXIBILITY")),
    "SUNDAY": _first_low_intensity,
}

FALLBACKS: List[Selector] = [
    _nth_of_types(("FUNCTIONAL_TRAINING",)),
    lambda recs: recs[0] if recs else None,
]

WEEKLY_GOALS: Dict[int, List[str]] = {
    1: [
        "Establish workout routine",
        "Learn proper exercise form",
        "Complete all scheduled workouts",
    ],
    2: [
        "Increase workout intensity",
        "Improve exercise technique",
        "Maintain consistency",
    ],
    3: [
        "Push through plateaus",
        "Increase weights/reps",
        "Focus on progression",
    ],
    4: [
        "Complete final week strong",
        "Assess progress",
        "Plan next phase",
    ],
}
MAINTENANCE_GOALS = ["Maintain consistency", "Focus on form", "Listen to your body"]


def weekly_goals(week_number: int) -> List[str]:
    return list(WEEKLY_GOALS.get(week_number, MAINTENANCE_GOALS))


def select_workout_days(workout_days_per_week: int) -> Tuple[List[Weekday], List[Weekday]]:
    n = max(0, min(len(WEEKDAYS), workout_days_per_week))
    return list(WEEKDAYS[:n]), list(WEEKDAYS[n:])


def select_workouts_for_day(day: Weekday, recs: Sequence[WorkoutRecommendation]) -> List[WorkoutRecommendation]:
    for selector in [DAY_RULES[day], *FALLBACKS]:
        picked = selector(recs)
        if picked is not None:
            return [picked]
    return []


def build_week(
    week_number: int,
    recommendations: Sequence[WorkoutRecommendation],
    workout_days_per_week: int,
) -> WeeklyWorkout:
    days, rest = select_workout_days(workout_days_per_week)
    daily = {day: select_workouts_for_day(day, recommendations) for day in days}
    return WeeklyWorkout(
        week_number=week_number,
        daily_workouts=daily,
        rest_days=rest,
        weekly_goals=weekly_goals(week_number),
    )


def build_schedule(
    recommendations: Sequence[WorkoutRecommendation],
    duration_weeks: int,
    workout_days_per_week: int,
) -> List[WeeklyWorkout]:
    weeks = [build_week(w, recommendations, workout_days_per_week) for w in range(1, duration_weeks + 1)]
    if weeks:
        empty = [d for d, recs in weeks[0].daily_workouts.items() if not recs]
        if empty:
            logger.info("no workout available for %s", ", ".join(empty))
    return weeks
