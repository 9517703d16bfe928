"""Utility helpers bridging the Streamlit UI and the coaching engine.

Pure functions for formatting, presentation-side filtering, host-side
bookkeeping, demo data, and club-file persistence.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from pathlib import Path

import pandas as pd

from coaching_engine.math.coverage import classify_progress, progress_bar_fraction
from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.enums import (
    Cadence,
    Category,
    ProgressStatus,
    StudentLevel,
)
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import WorkType
from coaching_engine.serialization import load_snapshot, save_snapshot

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_percentage(value: float) -> str:
    """e.g. 66.666 -> '66.7%'."""
    return f"{value:.1f}%"


def format_date_range(start: date, end: date) -> str:
    """e.g. 2025-03-03, 2025-03-09 -> '03 Mar - 09 Mar 2025'."""
    if start.year == end.year:
        return f"{start:%d %b} - {end:%d %b %Y}"
    return f"{start:%d %b %Y} - {end:%d %b %Y}"


def days_remaining(goal: Goal, today: date) -> int:
    """Whole days left until the goal's end date; 0 once it has passed."""
    return max(0, (goal.end_date - today).days)


# ---------------------------------------------------------------------------
# Color maps and labels
# ---------------------------------------------------------------------------

CATEGORY_COLORS: dict[Category, str] = {
    Category.PHYSICAL: "#EF4444",   # red
    Category.TECHNICAL: "#3B82F6",  # blue
    Category.MENTAL: "#8B5CF6",     # purple
    Category.TACTICAL: "#F59E0B",   # amber
}

STATUS_COLORS: dict[ProgressStatus, str] = {
    ProgressStatus.COMPLETED: "#16A34A",
    ProgressStatus.AT_RISK: "#CA8A04",
    ProgressStatus.BEHIND: "#DC2626",
}

CADENCE_LABELS: dict[Cadence, str] = {
    Cadence.DAILY: "Daily",
    Cadence.WEEKLY: "Weekly",
    Cadence.QUARTERLY: "Quarterly",
}

LEVEL_LABELS: dict[StudentLevel, str] = {
    StudentLevel.BEGINNER: "Beginner",
    StudentLevel.INTERMEDIATE: "Intermediate",
    StudentLevel.ADVANCED: "Advanced",
    StudentLevel.COMPETITOR: "Competitor",
    StudentLevel.ELITE: "Elite",
}

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# (lower bound, label, color), checked top-down
_CONFIDENCE_BANDS: tuple[tuple[int, str, str], ...] = (
    (90, "very high", "#16A34A"),
    (70, "high", "#2563EB"),
    (50, "medium", "#CA8A04"),
    (0, "low", "#EA580C"),
)


def confidence_band(confidence: int) -> tuple[str, str]:
    """Return the (label, color) band a confidence score falls into."""
    for lower, label, color in _CONFIDENCE_BANDS:
        if confidence >= lower:
            return label, color
    return _CONFIDENCE_BANDS[-1][1], _CONFIDENCE_BANDS[-1][2]


# ---------------------------------------------------------------------------
# Presentation-side filtering
# ---------------------------------------------------------------------------


def filter_recommendations(
    recommendations: Iterable[Recommendation],
    min_confidence: int = 0,
    search_term: str = "",
) -> list[Recommendation]:
    """Apply the UI's confidence threshold and search box to engine output.

    The search term matches name or description, case-insensitively. The
    result stays ordered by confidence, highest first.
    """
    needle = search_term.strip().lower()
    kept = [
        rec
        for rec in recommendations
        if rec.confidence >= min_confidence
        and (not needle or needle in rec.name.lower() or needle in rec.description.lower())
    ]
    return sorted(kept, key=lambda r: r.confidence, reverse=True)


# ---------------------------------------------------------------------------
# Host-side bookkeeping
# ---------------------------------------------------------------------------


def count_completed_days(goal: Goal, week_plans: Iterable[WeekPlan]) -> int:
    """Distinct days in the goal's window with a completed required work type.

    A day counts when it is marked completed and carries at least one of the
    goal's work types. Days appearing in more than one plan count once.
    """
    required = set(goal.work_types)
    days: set[date] = set()
    for plan in week_plans:
        for day in plan.days:
            if not goal.start_date <= day.date <= goal.end_date:
                continue
            if day.is_completed and required & day.work_types:
                days.add(day.date)
    return len(days)


def completed_days_by_goal(snapshot: ClubSnapshot) -> dict[str, int]:
    """count_completed_days() for every goal in the snapshot."""
    return {g.id: count_completed_days(g, snapshot.week_plans) for g in snapshot.goals}


def current_week_plan(snapshot: ClubSnapshot, today: date) -> WeekPlan | None:
    """The first non-template plan whose week contains *today*."""
    for plan in snapshot.week_plans:
        if not plan.is_template and plan.contains(today):
            return plan
    return None


def replace_week_plan(snapshot: ClubSnapshot, plan: WeekPlan) -> ClubSnapshot:
    """Swap in an edited plan by id, or append it if the id is new."""
    plans = list(snapshot.week_plans)
    for i, existing in enumerate(plans):
        if existing.id == plan.id:
            plans[i] = plan
            break
    else:
        plans.append(plan)
    return dataclasses.replace(snapshot, week_plans=tuple(plans))


def progress_frame(snapshot: ClubSnapshot) -> pd.DataFrame:
    """One row per goal with its progress against target."""
    rows = []
    for goal in snapshot.goals:
        progress = snapshot.progress_for(goal.id) or GoalProgress.initial(goal)
        rows.append(
            {
                "goal": goal.name,
                "cadence": CADENCE_LABELS[goal.cadence],
                "level": LEVEL_LABELS[goal.student_level],
                "progress": round(progress.current_percentage, 1),
                "target": goal.target_percentage,
                "days": f"{progress.completed_days}/{progress.total_days}",
                "status": classify_progress(goal, progress).name.replace("_", " ").title(),
                "bar": progress_bar_fraction(goal, progress),
                "active": goal.is_active,
            }
        )
    return pd.DataFrame(rows)


def work_type_names(ids: Iterable[str], catalog: Sequence[WorkType]) -> list[str]:
    """Resolve ids to names, skipping ids no longer in the catalog."""
    by_id = {wt.id: wt.name for wt in catalog}
    return [by_id[i] for i in ids if i in by_id]


# ---------------------------------------------------------------------------
# Demo data
# ---------------------------------------------------------------------------


def sample_snapshot(today: date) -> ClubSnapshot:
    """A small club with one work type per category, one goal, and one week."""
    work_types = (
        WorkType("wt1", "Jab Technique", Category.TECHNICAL, "#3B82F6", "Refining the jab"),
        WorkType("wt2", "Cardio Endurance", Category.PHYSICAL, "#EF4444", "Aerobic capacity"),
        WorkType("wt3", "Reaction and Reflexes", Category.MENTAL, "#8B5CF6", "Reaction time"),
        WorkType("wt4", "Fight Strategy", Category.TACTICAL, "#F59E0B", "Tactical planning"),
    )
    goal = Goal(
        id="g1",
        name="Weekly Technical Focus",
        description="Technical refinement for intermediate students",
        cadence=Cadence.WEEKLY,
        work_types=("wt1", "wt3"),
        target_percentage=90,
        student_level=StudentLevel.INTERMEDIATE,
        start_date=today,
        end_date=today + timedelta(days=7),
    )
    plan = WeekPlan.for_week("wp1", today, name="Preparation Week")
    for i in range(7):
        plan = plan.with_work_type(i, "wt1" if i % 2 == 0 else "wt2")
    blocks = (
        TrainingBlock("b1", "Shadow Boxing Rounds", ("jab technique", "warmup"), "3 x 3 min"),
        TrainingBlock("b2", "Reaction Ball Drills", ("reaction and reflexes",), "Partner drills"),
    )
    return ClubSnapshot(
        work_types=work_types,
        goals=(goal,),
        progress=(GoalProgress.initial(goal),),
        week_plans=(plan,),
        blocks=blocks,
        completed_work_type_ids=frozenset({"wt2"}),
    )


# ---------------------------------------------------------------------------
# Club persistence
# ---------------------------------------------------------------------------

_CLUBS_DIR = Path(__file__).parent / "clubs"


def _ensure_clubs_dir() -> Path:
    _CLUBS_DIR.mkdir(parents=True, exist_ok=True)
    return _CLUBS_DIR


def save_club(name: str, snapshot: ClubSnapshot) -> Path:
    """Save a club snapshot as JSON. Returns the file path."""
    d = _ensure_clubs_dir()
    # Sanitise filename
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name).strip()
    if not safe:
        safe = "club"
    return save_snapshot(snapshot, d / f"{safe}.json")


def load_club(name: str) -> ClubSnapshot:
    """Load a club snapshot from JSON."""
    return load_snapshot(_CLUBS_DIR / f"{name}.json")


def list_clubs() -> list[str]:
    """List available club names (without .json extension)."""
    d = _ensure_clubs_dir()
    return sorted(p.stem for p in d.glob("*.json"))
