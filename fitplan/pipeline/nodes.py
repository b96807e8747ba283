from __future__ import annotations

from typing import Dict, List, Tuple

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
from fitplan.services.analysis import analyze_health_status, analyze_nutrition
from fitplan.services.candidates import select_focus_areas
from fitplan.services.engine import IdFactory, PlanGenerator, recommend_for_analysis


def analysis_node(req: RecommendationRequest) -> Tuple[HealthAnalysis, NutritionAnalysis]:
    return analyze_health_status(req.profile, req.health_report), analyze_nutrition(req.nutrition_items)


def recommendation_node(req: RecommendationRequest, health: HealthAnalysis) -> RecommendationResponse:
    recs = recommend_for_analysis(
        req.profile,
        health,
        available_equipment=req.available_equipment,
        preferred_types=req.preferred_types,
        available_time=req.available_time,
        workout_days=req.workout_days,
    )
    rationale = (
        f"Focus areas: {', '.join(select_focus_areas(health))}. "
        "Filtered by equipment and time, preferred types first, top picks flagged."
    )
    return RecommendationResponse(recommendations=recs, rationale=rationale)


def plan_node(req: PlanRequest, id_factory: IdFactory | None = None) -> PlanResponse:
    plan = PlanGenerator(id_factory).generate(
        req.profile,
        req.recommendations,
        duration_weeks=req.duration_weeks,
        workout_days_per_week=req.workout_days_per_week,
    )
    return PlanResponse(plan=plan)


def validate_node(req: ValidationRequest) -> ValidationReport:
    issues: List[Dict[str, str]] = []
    plan = req.plan
    if len(plan.workouts) != plan.duration:
        issues.append({
            "code": "WEEK_COUNT_MISMATCH",
            "message": f"Plan lasts {plan.duration} weeks but has {len(plan.workouts)} weekly schedules.",
        })
    available = set(req.available_equipment)
    for week in plan.workouts:
        overlap = sorted(set(week.rest_days) & set(week.daily_workouts))
        if overlap:
            issues.append({
                "code": "REST_DAY_OVERLAP",
                "message": f"Week {week.week_number} schedules workouts on rest days: {', '.join(overlap)}",
            })
        if req.workout_days_per_week is not None and len(week.daily_workouts) > req.workout_days_per_week:
            issues.append({
                "code": "EXCEEDS_WORKOUT_DAYS",
                "message": f"Week {week.week_number} has {len(week.daily_workouts)} workout days.",
            })
        for day, workouts in week.daily_workouts.items():
            for w in workouts:
                if available and available.isdisjoint(w.equipment):
                    issues.append({
                        "code": "EQUIPMENT_BLOCKED",
                        "message": f"Week {week.week_number} {day}: {w.name} needs unavailable equipment.",
                    })
                if req.available_time is not None and w.duration > req.available_time:
                    issues.append({
                        "code": "EXCEEDS_TIME_BUDGET",
                        "message": f"Week {week.week_number} {day}: {w.name} lasts {w.duration} min.",
                    })
    ok = len(issues) == 0
    return ValidationReport(ok=ok, issues=issues)  # type: ignore[arg-type]
