from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from fitplan.config import get_settings
from fitplan.models import (
    HealthAnalysis,
    NutritionAnalysis,
    PlanRequest,
    PlanResponse,
    RecommendationRequest,
    RecommendationResponse,
    ValidationReport,
    ValidationRequest,
)
from fitplan.services.engine import DEFAULT_EQUIPMENT, IdFactory
from .nodes import analysis_node, plan_node, recommendation_node, validate_node

logger = logging.getLogger(__name__)


@dataclass
class GraphState:
    rec_req: RecommendationRequest | None = None
    health: HealthAnalysis | None = None
    nutrition: NutritionAnalysis | None = None
    rec_res: RecommendationResponse | None = None
    plan_req: PlanRequest | None = None
    plan_res: PlanResponse | None = None
    validation_req: ValidationRequest | None = None
    validation: ValidationReport | None = None


class FitnessGraph:
    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self.settings = get_settings()
        self.id_factory = id_factory

    def invoke(
        self,
        request: RecommendationRequest,
        duration_weeks: int | None = None,
        workout_days_per_week: int | None = None,
    ) -> Dict[str, Any]:
        state = GraphState(rec_req=request)
        # analysis
        state.health, state.nutrition = analysis_node(request)
        # recommendations
        state.rec_res = recommendation_node(request, state.health)
        # plan
        state.plan_req = PlanRequest(
            profile=request.profile,
            recommendations=state.rec_res.recommendations,
            duration_weeks=duration_weeks,
            workout_days_per_week=workout_days_per_week,
        )
        state.plan_res = plan_node(state.plan_req, self.id_factory)
        # validate
        state.validation_req = ValidationRequest(
            plan=state.plan_res.plan,
            available_equipment=(
                request.available_equipment
                if request.available_equipment is not None
                else list(DEFAULT_EQUIPMENT)
            ),
            available_time=(
                request.available_time if request.available_time is not None else self.settings.DEFAULT_AVAILABLE_TIME
            ),
            workout_days_per_week=(
                workout_days_per_week
                if workout_days_per_week is not None
                else self.settings.DEFAULT_WORKOUT_DAYS_PER_WEEK
            ),
        )
        state.validation = validate_node(state.validation_req)
        if not state.validation.ok:
            logger.warning("plan %s failed validation: %s", state.plan_res.plan.id, state.validation.issues)
        return state.__dict__
