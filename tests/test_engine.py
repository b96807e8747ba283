from __future__ import annotations

import itertools

import pytest

from fitplan.models import NutritionItem
from fitplan.services.engine import PlanGenerator, generate_workout_plan, generate_workout_recommendations
from tests.helpers import build_profile, build_report, make_rec


def counter_ids():
    counter = itertools.count(1)
    return lambda: f"plan_{next(counter)}"


def test_recommendations_example_profile() -> None:
    recs = generate_workout_recommendations(
        build_profile(weight=80, height=175),
        [NutritionItem(name="salad", calories=250, protein=10, carbs=20, fat=12)],
        build_report(heart_rate=85, blood_pressure=130, flexibility_score=5, stress_level=8, fatigue_level=4),
        available_equipment=["NONE", "YOGA_MAT"],
    )

    assert [r.id for r in recs] == ["wl_hiit_1", "wl_strength_1", "yoga_stress_1"]
    assert all(r.is_recommended for r in recs)
    assert recs[0].nutritional_focus == "WEIGHT_LOSS"


def test_recommendation_defaults() -> None:
    recs = generate_workout_recommendations(build_profile(), [], build_report())

    # default equipment is bodyweight only, so the yoga overlay drops out
    assert [r.id for r in recs] == ["wl_hiit_1", "wl_strength_1"]
    assert recs[0].recommended_days == ["MONDAY", "WEDNESDAY", "FRIDAY"]
    assert all(r.duration <= 60 for r in recs)


def test_preferred_types_reorder_output() -> None:
    recs = generate_workout_recommendations(
        build_profile(),
        [],
        build_report(),
        available_equipment=["NONE", "YOGA_MAT"],
        preferred_types=["YOGA"],
        available_time=30,
    )

    assert recs[0].id == "yoga_stress_1"
    assert all(r.duration <= 30 for r in recs)


def test_plan_shape_for_defaults() -> None:
    profile = build_profile()
    recs = generate_workout_recommendations(profile, [], build_report(), available_equipment=["NONE", "YOGA_MAT"])
    plan = generate_workout_plan(profile, recs, id_factory=lambda: "plan_fixed")

    assert plan.id == "plan_fixed"
    assert plan.duration == 4 and len(plan.workouts) == 4
    assert plan.name == "4-Week Weight Loss & Fitness Plan"
    assert plan.progress_tracking.weight_goal == pytest.approx(76.0)
    for week in plan.workouts:
        assert len(week.rest_days) == 3
        assert len(week.daily_workouts) <= 4
    first = plan.workouts[0]
    assert [w.id for w in first.daily_workouts["MONDAY"]] == ["wl_strength_1"]
    assert [w.id for w in first.daily_workouts["TUESDAY"]] == ["wl_hiit_1"]
    assert [w.id for w in first.daily_workouts["WEDNESDAY"]] == ["yoga_stress_1"]
    assert [w.id for w in first.daily_workouts["THURSDAY"]] == ["wl_strength_1"]


def test_plan_is_deterministic_apart_from_id() -> None:
    profile = build_profile()
    recs = [make_rec("s", "STRENGTH_TRAINING", focus="STRENGTH"), make_rec("c", "CARDIO")]
    generator = PlanGenerator().with_id_factory(counter_ids())

    first = generator.generate(profile, recs, duration_weeks=3, workout_days_per_week=5)
    second = generator.generate(profile, recs, duration_weeks=3, workout_days_per_week=5)

    assert (first.id, second.id) == ("plan_1", "plan_2")
    assert first.model_dump(exclude={"id"}) == second.model_dump(exclude={"id"})


def test_default_ids_are_unique() -> None:
    profile = build_profile()
    a = generate_workout_plan(profile, [])
    b = generate_workout_plan(profile, [])
    assert a.id != b.id and a.id.startswith("plan_")


def test_empty_recommendations_degrade_gracefully() -> None:
    plan = generate_workout_plan(build_profile(), [], duration_weeks=2, workout_days_per_week=3)

    assert plan.name == "2-Week Comprehensive Fitness Plan"
    assert plan.progress_tracking.weight_goal is None
    assert all(recs == [] for week in plan.workouts for recs in week.daily_workouts.values())


def test_invalid_duration_raises() -> None:
    with pytest.raises(ValueError):
        generate_workout_plan(build_profile(), [], duration_weeks=0)
