"""Shared test fixtures: work-type catalogs, goals, week plans, block libraries."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.enums import Cadence, Category, StudentLevel
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import WorkType

MONDAY = date(2025, 3, 3)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def catalog() -> tuple[WorkType, ...]:
    """One work type per category, in the order a club would create them."""
    return (
        WorkType("wt1", "Jab Technique", Category.TECHNICAL, "#3B82F6", "Refining the jab"),
        WorkType("wt2", "Cardio Endurance", Category.PHYSICAL, "#EF4444", "Aerobic capacity"),
        WorkType("wt3", "Reaction", Category.MENTAL, "#8B5CF6", "Reaction time"),
        WorkType("wt4", "Fight Strategy", Category.TACTICAL, "#F59E0B", "Tactical planning"),
    )


@pytest.fixture
def wide_catalog(catalog) -> tuple[WorkType, ...]:
    """Seven work types: enough candidates to exceed the variety cap."""
    return catalog + (
        WorkType("wt5", "Footwork", Category.TECHNICAL),
        WorkType("wt6", "Explosiveness", Category.PHYSICAL),
        WorkType("wt7", "Mental Load", Category.MENTAL),
    )


@pytest.fixture
def make_goal() -> Callable[..., Goal]:
    """Factory for goals with sensible defaults."""

    def _make(
        work_types: tuple[str, ...] = ("wt1", "wt2"),
        target_percentage: int = 90,
        cadence: Cadence = Cadence.WEEKLY,
        goal_id: str = "g1",
        is_active: bool = True,
    ) -> Goal:
        return Goal(
            id=goal_id,
            name="Weekly Technical Focus",
            work_types=work_types,
            start_date=MONDAY,
            end_date=date(2025, 3, 9),
            cadence=cadence,
            target_percentage=target_percentage,
            student_level=StudentLevel.INTERMEDIATE,
            is_active=is_active,
        )

    return _make


@pytest.fixture
def make_week() -> Callable[..., WeekPlan]:
    """Factory: ``make_week({0: ["wt1"], 3: ["wt1", "wt2"]})``."""

    def _make(assignments: dict[int, list[str]] | None = None, plan_id: str = "wp1") -> WeekPlan:
        plan = WeekPlan.for_week(plan_id, MONDAY)
        for day_index, ids in (assignments or {}).items():
            for wt_id in ids:
                plan = plan.with_work_type(day_index, wt_id)
        return plan

    return _make


@pytest.fixture
def blocks() -> tuple[TrainingBlock, ...]:
    return (
        TrainingBlock("b1", "Shadow Boxing Rounds", ("JAB TECHNIQUE drills", "warmup"), "3 x 3 min"),
        TrainingBlock("b2", "Reaction Ball", ("reaction",), "Partner drills"),
        TrainingBlock("b3", "Conditioning Circuit", ("cardio endurance", "jab technique"), "Circuit"),
    )


@pytest.fixture
def snapshot(catalog, make_goal, make_week, blocks) -> ClubSnapshot:
    goal = make_goal(work_types=("wt1", "wt3"))
    other = make_goal(work_types=("wt3",), goal_id="g2")
    return ClubSnapshot(
        work_types=catalog,
        goals=(goal, other),
        progress=(GoalProgress.initial(goal), GoalProgress.initial(other)),
        week_plans=(make_week({0: ["wt1", "wt3"], 2: ["wt3"], 4: ["wt2"]}),),
        blocks=blocks,
        completed_work_type_ids=frozenset({"wt2", "wt3"}),
    )
