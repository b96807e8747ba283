from __future__ import annotations

import csv
import io
import json

from fitplan.services.engine import generate_workout_plan, generate_workout_recommendations
from fitplan.services.export import to_csv, to_json, to_markdown, to_pdf
from tests.helpers import build_profile, build_report


def build_plan():
    profile = build_profile()
    recs = generate_workout_recommendations(profile, [], build_report(), available_equipment=["NONE", "YOGA_MAT"])
    return generate_workout_plan(profile, recs, id_factory=lambda: "plan_export")


def test_csv_has_a_row_per_day() -> None:
    plan = build_plan()
    rows = list(csv.reader(io.StringIO(to_csv(plan).decode("utf-8"))))

    assert rows[0][0] == "week"
    assert len(rows) == 1 + 4 * 7
    assert rows[1][:4] == ["1", "Monday", "wl_strength_1", "Full Body Strength Circuit"]
    assert rows[5][3] == "Rest"


def test_markdown_and_json() -> None:
    plan = build_plan()
    md = to_markdown(plan)
    data = json.loads(to_json(plan))

    assert md.startswith("# 4-Week Weight Loss & Fitness Plan")
    assert "## Week 4" in md and "**Sunday**: Rest" in md
    assert data["id"] == "plan_export"
    assert len(data["workouts"]) == 4


def test_export_pdf() -> None:
    pdf_bytes = to_pdf(build_plan())
    assert isinstance(pdf_bytes, (bytes, bytearray)) and pdf_bytes.startswith(b"%PDF")


def test_csv_keeps_unassigned_workout_days() -> None:
    plan = generate_workout_plan(build_profile(), [], duration_weeks=1, workout_days_per_week=4)
    rows = list(csv.reader(io.StringIO(to_csv(plan).decode("utf-8"))))

    assert len(rows) == 1 + 7
    assert [r[1] for r in rows[1:5]] == ["Monday", "Tuesday", "Wednesday", "Thursday"]
    assert all(r[2] == "" and r[3] == "-" for r in rows[1:5])
    assert [r[3] for r in rows[5:]] == ["Rest", "Rest", "Rest"]
