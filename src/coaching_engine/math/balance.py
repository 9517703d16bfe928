"""Weekly balance: per-work-type distribution and imbalance detection.

Two rules only:
    - over-concentration: a work type on more than 50% of the week's days
    - category gap: a catalog category with no scheduled work this week

The analyzer is independent of any Goal; it reads the week and the catalog.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from coaching_engine.models.balance import BalanceIssue, BalanceReport, WorkTypeShare
from coaching_engine.models.enums import (
    DAYS_PER_WEEK,
    OVER_CONCENTRATION_THRESHOLD_PCT,
    BalanceIssueKind,
    Category,
)
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import WorkType


def category_label(category: Category) -> str:
    """Lowercase display label for a category, e.g. ``"tactical"``."""
    return category.name.lower()


def assignment_matrix(week_plan: WeekPlan, catalog: Sequence[WorkType]) -> np.ndarray:
    """Boolean days x work-types matrix; True where the day carries the work type.

    Ids assigned to a day but absent from the catalog do not appear.
    """
    ids = [wt.id for wt in catalog]
    rows = [[wt_id in day.work_types for wt_id in ids] for day in week_plan.days]
    return np.array(rows, dtype=bool).reshape(len(week_plan.days), len(ids))


def analyze_balance(week_plan: WeekPlan, catalog: Sequence[WorkType]) -> BalanceReport:
    """Compute the week's work-type distribution and flag imbalances.

    Args:
        week_plan: A validated 7-day plan.
        catalog: All known work types, in catalog order.

    Returns:
        A BalanceReport whose distribution holds one entry per catalog work
        type, sorted by count descending (ties keep catalog order), and
        whose issues list over-concentrated work types followed by
        unaddressed categories.
    """
    counts = assignment_matrix(week_plan, catalog).sum(axis=0)
    order = np.argsort(-counts, kind="stable")

    distribution = tuple(
        WorkTypeShare(
            work_type=catalog[i],
            count=int(counts[i]),
            percentage=int(counts[i]) / DAYS_PER_WEEK * 100,
        )
        for i in order
    )

    issues: list[BalanceIssue] = []
    for share in distribution:
        if share.percentage > OVER_CONCENTRATION_THRESHOLD_PCT:
            issues.append(
                BalanceIssue(
                    kind=BalanceIssueKind.OVER_CONCENTRATION,
                    subject=share.work_type.name,
                    message=(
                        f'"{share.work_type.name}" appears on more than '
                        f"{OVER_CONCENTRATION_THRESHOLD_PCT:.0f}% of the week's days "
                        f"({share.count}/{DAYS_PER_WEEK}, {share.percentage:.1f}%)."
                    ),
                )
            )

    covered = {share.work_type.category for share in distribution if share.count > 0}
    # dict.fromkeys keeps catalog first-appearance order
    for category in dict.fromkeys(wt.category for wt in catalog):
        if category not in covered:
            label = category_label(category)
            issues.append(
                BalanceIssue(
                    kind=BalanceIssueKind.CATEGORY_GAP,
                    subject=label,
                    message=f'No "{label}" work is scheduled this week.',
                )
            )

    return BalanceReport(distribution=distribution, issues=tuple(issues))


def distribution_frame(report: BalanceReport) -> pd.DataFrame:
    """Tabular view of a report's distribution, in report order."""
    return pd.DataFrame(
        [
            {
                "work_type_id": share.work_type.id,
                "work_type": share.work_type.name,
                "category": category_label(share.work_type.category),
                "count": share.count,
                "percentage": round(share.percentage, 1),
            }
            for share in report.distribution
        ],
        columns=["work_type_id", "work_type", "category", "count", "percentage"],
    )
