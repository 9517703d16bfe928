"""Goal progress: coverage of a goal's required work types.

Progress is a coverage ratio over the goal's required work-type set, not a
time-based ratio. ``completed_days`` is bookkeeping supplied by the host's
day-level tracking and is stored as given.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from coaching_engine.models.enums import AT_RISK_TARGET_FRACTION, ProgressStatus
from coaching_engine.models.goal import Goal, GoalProgress


def coverage_percentage(goal: Goal, completed_work_type_ids: Iterable[str]) -> float:
    """Percentage of the goal's required work types present in the completed set.

    Ids that no longer exist in the catalog still count: a stale reference on
    the goal stays in the denominator, and in the numerator when it is marked
    completed.

    Args:
        goal: A validated goal (``work_types`` is never empty).
        completed_work_type_ids: Work-type ids completed in the current window.

    Returns:
        ``k / n * 100`` as a non-negative float.
    """
    completed = set(completed_work_type_ids)
    satisfied = sum(1 for wt_id in goal.work_types if wt_id in completed)
    return max(0.0, satisfied / len(goal.work_types) * 100)


def compute_progress(
    goal: Goal,
    completed_work_type_ids: Iterable[str],
    completed_days: int = 0,
    now: datetime | None = None,
) -> GoalProgress:
    """Compute a fresh GoalProgress record for *goal*.

    Inactive goals are computed too so their history is preserved; it is up
    to the host not to present them as actionable.

    Args:
        goal: The goal to evaluate.
        completed_work_type_ids: Work-type ids completed in the current window.
        completed_days: Distinct days in the goal's window on which at least
            one required work type was completed, as counted by the host.
        now: Timestamp to stamp the record with. Defaults to the current time.

    Returns:
        A new GoalProgress; ``total_days`` is the cadence window length.
    """
    percentage = coverage_percentage(goal, completed_work_type_ids)
    return GoalProgress(
        goal_id=goal.id,
        current_percentage=percentage,
        completed_days=completed_days,
        total_days=goal.window_days,
        is_completed=percentage >= goal.target_percentage,
        last_updated=now or datetime.now(),
    )


def classify_progress(goal: Goal, progress: GoalProgress) -> ProgressStatus:
    """Traffic-light status: completed, within 80% of target, or behind."""
    if progress.current_percentage >= goal.target_percentage:
        return ProgressStatus.COMPLETED
    if progress.current_percentage >= goal.target_percentage * AT_RISK_TARGET_FRACTION:
        return ProgressStatus.AT_RISK
    return ProgressStatus.BEHIND


def progress_bar_fraction(goal: Goal, progress: GoalProgress) -> float:
    """Fill fraction for a progress bar measured against the goal's target, capped at 1."""
    return min(1.0, progress.current_percentage / goal.target_percentage)
