from __future__ import annotations

import csv
import io
from typing import List

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from fitplan.models.plan import WorkoutPlan
from fitplan.models.workout import WEEKDAYS


def _day_label(day: str) -> str:
    return day.capitalize()


def to_json(plan: WorkoutPlan) -> str:
    return plan.model_dump_json(indent=2)


def to_csv(plan: WorkoutPlan) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "week",
        "day",
        "workout_id",
        "workout_name",
        "workout_type",
        "intensity",
        "duration_min",
        "calories_burn",
        "equipment",
        "recommended",
    ])
    for week in plan.workouts:
        for day in WEEKDAYS:
            if day in week.rest_days:
                writer.writerow([week.week_number, _day_label(day), "", "Rest", "", "", 0, 0, "", ""])
                continue
            workouts = week.daily_workouts.get(day, [])
            if not workouts:
                writer.writerow([week.week_number, _day_label(day), "", "-", "", "", 0, 0, "", ""])
            for w in workouts:
                writer.writerow([
                    week.week_number,
                    _day_label(day),
                    w.id,
                    w.name,
                    w.workout_type,
                    w.intensity,
                    w.duration,
                    w.calories_burn,
                    ";".join(w.equipment),
                    "yes" if w.is_recommended else "",
                ])
    return output.getvalue().encode("utf-8")


def _plan_lines(plan: WorkoutPlan) -> List[str]:
    lines: List[str] = []
    for week in plan.workouts:
        lines.append(f"Week {week.week_number}")
        for day in WEEKDAYS:
            if day in week.rest_days:
                lines.append(f"  {_day_label(day)}: Rest")
                continue
            workouts = week.daily_workouts.get(day, [])
            if not workouts:
                lines.append(f"  {_day_label(day)}: -")
            for w in workouts:
                lines.append(f"  {_day_label(day)}: {w.name} ({w.duration} min, {w.intensity.lower()}, ~{w.calories_burn} kcal)")
    return lines


def to_markdown(plan: WorkoutPlan) -> str:
    lines: List[str] = []
    lines.append(f"# {plan.name}\n")
    lines.append(plan.description)
    if plan.goals:
        lines.append("\n## Goals")
        lines.extend(f"- {g}" for g in plan.goals)
    for week in plan.workouts:
        lines.append(f"\n## Week {week.week_number}")
        for day in WEEKDAYS:
            if day in week.rest_days:
                lines.append(f"- **{_day_label(day)}**: Rest")
                continue
            names = ", ".join(w.name for w in week.daily_workouts.get(day, [])) or "-"
            lines.append(f"- **{_day_label(day)}**: {names}")
        if week.weekly_goals:
            lines.append(f"\n_Weekly goals_: {'; '.join(week.weekly_goals)}")
    if plan.nutritional_guidelines:
        lines.append("\n## Nutrition")
        lines.extend(f"- {g}" for g in plan.nutritional_guidelines)
    tracking = plan.progress_tracking
    lines.append("\n## Progress targets")
    if tracking.weight_goal is not None:
        lines.append(f"- Weight: {tracking.weight_goal:.1f} kg")
    for k, v in {**tracking.strength_goals, **tracking.endurance_goals, **tracking.flexibility_goals}.items():
        lines.append(f"- {k}: {v:g}")
    return "\n".join(lines) + "\n"


def to_pdf(plan: WorkoutPlan) -> bytes:
    """Render a simple PDF for the plan."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    margin = 36
    x = margin
    y = height - margin

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, plan.name)
    y -= 24

    c.setFont("Helvetica", 10)
    for line in _plan_lines(plan):
        if y < margin + 24:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - margin
        if line.startswith("Week "):
            y -= 6
            c.setFont("Helvetica-Bold", 12)
            c.drawString(x, y, line)
            c.setFont("Helvetica", 10)
            y -= 16
            continue
        # wrap long lines manually (simple)
        max_chars = 95
        for part in [line[i:i + max_chars] for i in range(0, len(line), max_chars)]:
            c.drawString(x + 12, y, part.strip())
            y -= 14

    if plan.nutritional_guidelines:
        if y < margin + 60:
            c.showPage()
            y = height - margin
        c.setFont("Helvetica-Bold", 12)
        c.drawString(x, y, "Nutrition:")
        y -= 16
        c.setFont("Helvetica", 10)
        for g in plan.nutritional_guidelines:
            if y < margin + 18:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = height - margin
            c.drawString(x + 12, y, f"- {g}")
            y -= 14

    c.showPage()
    c.save()
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
