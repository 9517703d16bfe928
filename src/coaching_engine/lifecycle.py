"""Lifecycle coordination over a ClubSnapshot.

Deleting a work type touches goals, week plans, and the completed set;
deleting a goal touches progress. Each event is handled by one function that
returns a new snapshot, so a cascade is applied all at once or not at all.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.work_type import WorkTypePreset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkTypeRemoved:
    """An instructor deleted a work type from the catalog."""

    work_type_id: str


@dataclass(frozen=True)
class GoalDeleted:
    """An instructor hard-deleted a goal."""

    goal_id: str


def remove_work_type(snapshot: ClubSnapshot, event: WorkTypeRemoved) -> ClubSnapshot:
    """Remove a work type and every reference to it.

    The id is dropped from the catalog, from each goal's ``work_types``, from
    each day of each week plan, and from the completed set. A goal whose
    only required work type was removed can no longer exist, so it is
    deleted along with its progress record.
    """
    wt_id = event.work_type_id
    goals: list[Goal] = []
    orphaned: set[str] = set()
    for goal in snapshot.goals:
        if wt_id not in goal.work_types:
            goals.append(goal)
            continue
        remaining = tuple(g for g in goal.work_types if g != wt_id)
        if remaining:
            goals.append(dataclasses.replace(goal, work_types=remaining))
        else:
            orphaned.add(goal.id)

    if orphaned:
        logger.warning(
            "Deleting goals left without work types after removing %s: %s",
            wt_id,
            sorted(orphaned),
        )

    updated = dataclasses.replace(
        snapshot,
        work_types=tuple(wt for wt in snapshot.work_types if wt.id != wt_id),
        goals=tuple(goals),
        progress=tuple(p for p in snapshot.progress if p.goal_id not in orphaned),
        week_plans=tuple(plan.without_work_type(wt_id) for plan in snapshot.week_plans),
        completed_work_type_ids=snapshot.completed_work_type_ids - {wt_id},
    )
    logger.info("Removed work type %s", wt_id)
    return updated


def delete_goal(snapshot: ClubSnapshot, event: GoalDeleted) -> ClubSnapshot:
    """Hard-delete a goal together with its progress record."""
    logger.info("Deleted goal %s", event.goal_id)
    return dataclasses.replace(
        snapshot,
        goals=tuple(g for g in snapshot.goals if g.id != event.goal_id),
        progress=tuple(p for p in snapshot.progress if p.goal_id != event.goal_id),
    )


def register_goal(
    snapshot: ClubSnapshot, goal: Goal, now: datetime | None = None
) -> ClubSnapshot:
    """Add a goal and its zero-progress record."""
    if snapshot.goal(goal.id) is not None:
        raise InvalidEntityError("Goal", f"id {goal.id!r} already exists")
    return dataclasses.replace(
        snapshot,
        goals=snapshot.goals + (goal,),
        progress=tuple(p for p in snapshot.progress if p.goal_id != goal.id)
        + (GoalProgress.initial(goal, now),),
    )


def deactivate_goal(snapshot: ClubSnapshot, goal_id: str) -> ClubSnapshot:
    """Mark a superseded goal inactive; its progress history is kept."""
    return dataclasses.replace(
        snapshot,
        goals=tuple(
            dataclasses.replace(g, is_active=False) if g.id == goal_id else g
            for g in snapshot.goals
        ),
    )


def add_work_type_preset(
    snapshot: ClubSnapshot, preset: WorkTypePreset, work_type_id: str
) -> ClubSnapshot:
    """Append a preset to the catalog unless its name is already taken.

    Names are compared case-insensitively; an existing match leaves the
    snapshot unchanged.
    """
    name = preset.name.lower()
    if any(wt.name.lower() == name for wt in snapshot.work_types):
        logger.debug("Preset %r already in catalog", preset.name)
        return snapshot
    if snapshot.work_type(work_type_id) is not None:
        raise InvalidEntityError("WorkType", f"id {work_type_id!r} already exists")
    return dataclasses.replace(
        snapshot,
        work_types=snapshot.work_types + (preset.to_work_type(work_type_id),),
    )
