from __future__ import annotations

from fitplan.models import (
    NutritionItem,
    RecommendationRequest,
    ValidationRequest,
    WeeklyWorkout,
    WorkoutPlan,
)
from fitplan.pipeline import FitnessGraph, nodes, validate_node
from fitplan.services import engine
from fitplan.services.analysis import analyze_health_status
from tests.helpers import build_profile, build_report, make_rec


def build_request(**overrides) -> RecommendationRequest:
    values = dict(
        profile=build_profile(),
        nutrition_items=[NutritionItem(name="oats", calories=380, protein=13, carbs=66, fat=7)],
        health_report=build_report(),
        available_equipment=["NONE", "YOGA_MAT"],
    )
    values.update(overrides)
    return RecommendationRequest(**values)


def test_graph_end_to_end() -> None:
    graph = FitnessGraph(id_factory=lambda: "plan_graph")
    state = graph.invoke(build_request(), duration_weeks=2, workout_days_per_week=3)

    assert state["health"].is_weight_loss_needed
    assert state["nutrition"].total_calories == 380
    assert "weight_loss" in state["rec_res"].rationale
    plan = state["plan_res"].plan
    assert plan.id == "plan_graph"
    assert len(plan.workouts) == 2
    assert all(len(w.rest_days) == 4 for w in plan.workouts)
    assert state["validation"].ok, state["validation"].issues


def test_graph_balanced_profile_uses_functional_training() -> None:
    request = build_request(
        profile=build_profile(weight=65, height=175, goal="maintenance"),
        health_report=build_report(heart_rate=65, blood_pressure=115, flexibility_score=8, stress_level=3),
        available_equipment=["DUMBBELLS"],
    )
    state = FitnessGraph().invoke(request)

    recs = state["rec_res"].recommendations
    assert [r.id for r in recs] == ["balance_functional_1"]
    plan = state["plan_res"].plan
    assert plan.name == "4-Week Comprehensive Fitness Plan"
    assert all(
        [w.id for w in day] == ["balance_functional_1"]
        for week in plan.workouts
        for day in week.daily_workouts.values()
    )


def test_validate_node_reports_issues() -> None:
    rec = make_rec("long_barbell", "STRENGTH_TRAINING", duration=90, equipment=["BARBELL"])
    week = WeeklyWorkout(week_number=1, daily_workouts={"MONDAY": [rec], "TUESDAY": []}, rest_days=["MONDAY"])
    plan = WorkoutPlan(id="p", name="n", description="d", duration=2, workouts=[week])

    report = validate_node(ValidationRequest(
        plan=plan,
        available_equipment=["NONE"],
        available_time=60,
        workout_days_per_week=1,
    ))

    codes = {i.code for i in report.issues}
    assert not report.ok
    assert codes == {
        "WEEK_COUNT_MISMATCH",
        "REST_DAY_OVERLAP",
        "EXCEEDS_WORKOUT_DAYS",
        "EQUIPMENT_BLOCKED",
        "EXCEEDS_TIME_BUDGET",
    }


def test_graph_analyzes_health_once(monkeypatch) -> None:
    calls = []

    def counting(profile, report):
        calls.append(profile.id)
        return analyze_health_status(profile, report)

    monkeypatch.setattr(nodes, "analyze_health_status", counting)
    monkeypatch.setattr(engine, "analyze_health_status", counting)

    state = FitnessGraph(id_factory=lambda: "plan_once").invoke(build_request())

    assert len(calls) == 1
    assert [r.id for r in state["rec_res"].recommendations] == ["wl_hiit_1", "wl_strength_1", "yoga_stress_1"]
