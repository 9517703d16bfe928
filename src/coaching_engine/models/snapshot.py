"""Club snapshot — the immutable aggregate a host hands to the engine.

The host owns persistence and mutation; it passes a fresh snapshot on every
call. The engine reads snapshots and only ever returns new ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import WorkType


@dataclass(frozen=True)
class ClubSnapshot:
    """Everything the engine needs about one club, at one moment."""

    work_types: tuple[WorkType, ...] = field(default_factory=tuple)  # catalog order
    goals: tuple[Goal, ...] = field(default_factory=tuple)
    progress: tuple[GoalProgress, ...] = field(default_factory=tuple)
    week_plans: tuple[WeekPlan, ...] = field(default_factory=tuple)
    blocks: tuple[TrainingBlock, ...] = field(default_factory=tuple)
    completed_work_type_ids: frozenset[str] = field(default_factory=frozenset)

    def work_type(self, work_type_id: str) -> WorkType | None:
        for wt in self.work_types:
            if wt.id == work_type_id:
                return wt
        return None

    def goal(self, goal_id: str | None) -> Goal | None:
        for g in self.goals:
            if g.id == goal_id:
                return g
        return None

    def progress_for(self, goal_id: str) -> GoalProgress | None:
        for p in self.progress:
            if p.goal_id == goal_id:
                return p
        return None

    def week_plan(self, plan_id: str) -> WeekPlan | None:
        for plan in self.week_plans:
            if plan.id == plan_id:
                return plan
        return None

    @property
    def active_goals(self) -> tuple[Goal, ...]:
        return tuple(g for g in self.goals if g.is_active)
