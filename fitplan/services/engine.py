from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Sequence

from fitplan.config import get_settings
from fitplan.models.health import HealthAnalysis, HealthReport, NutritionItem
from fitplan.models.plan import WorkoutPlan
from fitplan.models.user_profile import UserProfile
from fitplan.models.workout import Equipment, Weekday, WorkoutRecommendation, WorkoutType
from . import narrative
from .analysis import analyze_health_status, analyze_nutrition
from .candidates import generate_candidates
from .personalize import personalize
from .scheduler import build_schedule

logger = logging.getLogger(__name__)

DEFAULT_EQUIPMENT: List[Equipment] = ["NONE"]
DEFAULT_WORKOUT_DAYS: List[Weekday] = ["MONDAY", "WEDNESDAY", "FRIDAY"]

IdFactory = Callable[[], str]


def generate_workout_recommendations(
    profile: UserProfile,
    nutrition_items: Sequence[NutritionItem],
    health_report: HealthReport,
    available_equipment: Sequence[Equipment] | None = None,
    preferred_types: Sequence[WorkoutType] | None = None,
    available_time: int | None = None,
    workout_days: Sequence[Weekday] | None = None,
) -> List[WorkoutRecommendation]:
    nutrition = analyze_nutrition(nutrition_items)
    logger.debug("nutrition summary: %s", nutrition.model_dump())
    health = analyze_health_status(profile, health_report)
    return recommend_for_analysis(profile, health, available_equipment, preferred_types, available_time, workout_days)


def recommend_for_analysis(
    profile: UserProfile,
    health: HealthAnalysis,
    available_equipment: Sequence[Equipment] | None = None,
    preferred_types: Sequence[WorkoutType] | None = None,
    available_time: int | None = None,
    workout_days: Sequence[Weekday] | None = None,
) -> List[WorkoutRecommendation]:
    """Generate and personalize candidates for an already analyzed profile."""
    settings = get_settings()
    equipment = list(available_equipment) if available_equipment is not None else list(DEFAULT_EQUIPMENT)
    preferred = list(preferred_types or [])
    minutes = settings.DEFAULT_AVAILABLE_TIME if available_time is None else available_time
    days = list(workout_days) if workout_days is not None else list(DEFAULT_WORKOUT_DAYS)

    candidates = generate_candidates(profile, health, equipment, minutes, days)
    return personalize(candidates, preferred, equipment, minutes)


def _default_id_factory() -> str:
    return f"{get_settings().PLAN_ID_PREFIX}{uuid.uuid4().hex}"


class PlanGenerator:
    """Assembles a WorkoutPlan from a ranked recommendation list.

    The plan id comes from an injectable factory so output can be reproduced in tests:

        PlanGenerator().with_id_factory(lambda: "plan_1").generate(profile, recs)
    """

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self.settings = get_settings()
        self.id_factory: IdFactory = id_factory or _default_id_factory

    def with_id_factory(self, id_factory: IdFactory) -> "PlanGenerator":
        return PlanGenerator(id_factory=id_factory)

    def generate(
        self,
        profile: UserProfile,
        recommendations: Sequence[WorkoutRecommendation],
        duration_weeks: int | None = None,
        workout_days_per_week: int | None = None,
    ) -> WorkoutPlan:
        weeks = self.settings.DEFAULT_DURATION_WEEKS if duration_weeks is None else duration_weeks
        days = self.settings.DEFAULT_WORKOUT_DAYS_PER_WEEK if workout_days_per_week is None else workout_days_per_week
        if weeks < 1:
            raise ValueError(f"Plan duration must be at least one week, got {weeks}.")

        recs = list(recommendations)
        focus = narrative.primary_focus(recs)
        plan = WorkoutPlan(
            id=self.id_factory(),
            name=narrative.plan_name(focus, weeks),
            description=narrative.plan_description(focus, weeks),
            duration=weeks,
            workouts=build_schedule(recs, weeks, days),
            goals=narrative.plan_goals(focus),
            nutritional_guidelines=narrative.nutritional_guidelines(focus),
            progress_tracking=narrative.progress_tracking(profile, focus),
        )
        logger.info("generated plan %s (%s, %d weeks, %d days/week)", plan.id, focus or "default", weeks, days)
        return plan


def generate_workout_plan(
    profile: UserProfile,
    recommendations: Sequence[WorkoutRecommendation],
    duration_weeks: int | None = None,
    workout_days_per_week: int | None = None,
    id_factory: IdFactory | None = None,
) -> WorkoutPlan:
    return PlanGenerator(id_factory).generate(profile, recommendations, duration_weeks, workout_days_per_week)
