"""Tests for goal coverage: compute_progress, classify_progress, progress_bar_fraction."""

from __future__ import annotations

from datetime import datetime

import pytest

from coaching_engine.math.coverage import (
    classify_progress,
    compute_progress,
    coverage_percentage,
    progress_bar_fraction,
)
from coaching_engine.models.enums import Cadence, ProgressStatus
from coaching_engine.models.goal import GoalProgress

_IDS = ("a", "b", "c", "d", "e", "f")


class TestCoverageRatio:
    """k of n required work types completed -> exactly k / n * 100."""

    @pytest.mark.parametrize(
        "n, k",
        [(n, k) for n in range(1, len(_IDS) + 1) for k in range(0, n + 1)],
    )
    def test_percentage_is_exact_ratio(self, make_goal, n: int, k: int) -> None:
        goal = make_goal(work_types=_IDS[:n], target_percentage=50)
        progress = compute_progress(goal, set(_IDS[:k]))
        assert progress.current_percentage == k / n * 100

    @pytest.mark.parametrize("target", [50, 67, 90, 95, 100])
    @pytest.mark.parametrize("k", [0, 1, 2, 3])
    def test_completion_flag_matches_threshold(self, make_goal, target: int, k: int) -> None:
        goal = make_goal(work_types=("a", "b", "c"), target_percentage=target)
        progress = compute_progress(goal, set(_IDS[:k]))
        assert progress.is_completed == (k / 3 * 100 >= target)

    def test_extra_completed_ids_ignored(self, make_goal) -> None:
        goal = make_goal(work_types=("a", "b"))
        assert coverage_percentage(goal, {"a", "x", "y", "z"}) == 50.0

    def test_never_exceeds_full_coverage(self, make_goal) -> None:
        goal = make_goal(work_types=("a", "b"))
        progress = compute_progress(goal, set(_IDS) | {"x", "y"})
        assert progress.current_percentage == 100.0

    def test_stale_ids_still_count(self, make_goal) -> None:
        # "gone" is not in any catalog; it still sits in numerator and denominator
        goal = make_goal(work_types=("a", "gone"))
        assert coverage_percentage(goal, {"gone"}) == 50.0
        assert coverage_percentage(goal, set()) == 0.0

    def test_accepts_any_iterable(self, make_goal) -> None:
        goal = make_goal(work_types=("a", "b"))
        assert coverage_percentage(goal, ["a", "a"]) == 50.0


class TestComputeProgress:
    @pytest.mark.parametrize(
        "cadence, total",
        [(Cadence.DAILY, 1), (Cadence.WEEKLY, 7), (Cadence.QUARTERLY, 90)],
    )
    def test_total_days_is_cadence_window(self, make_goal, cadence, total: int) -> None:
        progress = compute_progress(make_goal(cadence=cadence), set())
        assert progress.total_days == total

    def test_completed_days_passed_through(self, make_goal) -> None:
        progress = compute_progress(make_goal(), {"wt1"}, completed_days=4)
        assert progress.completed_days == 4

    def test_completed_days_default_zero(self, make_goal) -> None:
        assert compute_progress(make_goal(), set()).completed_days == 0

    def test_timestamp(self, make_goal) -> None:
        now = datetime(2025, 3, 5, 20, 0)
        assert compute_progress(make_goal(), set(), now=now).last_updated == now

    def test_default_timestamp_is_current(self, make_goal) -> None:
        before = datetime.now()
        progress = compute_progress(make_goal(), set())
        assert before <= progress.last_updated <= datetime.now()

    def test_inactive_goal_still_computed(self, make_goal) -> None:
        goal = make_goal(work_types=("wt1", "wt2"), is_active=False)
        progress = compute_progress(goal, {"wt1", "wt2"})
        assert progress.current_percentage == 100.0
        assert progress.is_completed

    def test_goal_id_carried(self, make_goal) -> None:
        assert compute_progress(make_goal(goal_id="g7"), set()).goal_id == "g7"


class TestEndToEndScenario:
    def test_half_then_full(self, make_goal) -> None:
        goal = make_goal(work_types=("wt1", "wt2"), target_percentage=90)

        half = compute_progress(goal, {"wt2"})
        assert half.current_percentage == 50
        assert half.is_completed is False

        full = compute_progress(goal, {"wt1", "wt2"})
        assert full.current_percentage == 100
        assert full.is_completed is True


def _progress(pct: float) -> GoalProgress:
    return GoalProgress(
        goal_id="g1",
        current_percentage=pct,
        completed_days=0,
        total_days=7,
        is_completed=False,
    )


class TestClassifyProgress:
    @pytest.mark.parametrize(
        "pct, expected",
        [
            (100.0, ProgressStatus.COMPLETED),
            (90.0, ProgressStatus.COMPLETED),
            (89.9, ProgressStatus.AT_RISK),
            (72.5, ProgressStatus.AT_RISK),
            (71.9, ProgressStatus.BEHIND),
            (0.0, ProgressStatus.BEHIND),
        ],
    )
    def test_bands_for_target_90(self, make_goal, pct: float, expected) -> None:
        goal = make_goal(target_percentage=90)
        assert classify_progress(goal, _progress(pct)) == expected


class TestProgressBarFraction:
    def test_partial(self, make_goal) -> None:
        goal = make_goal(target_percentage=80)
        assert progress_bar_fraction(goal, _progress(40.0)) == pytest.approx(0.5)

    def test_capped_at_one(self, make_goal) -> None:
        goal = make_goal(target_percentage=50)
        assert progress_bar_fraction(goal, _progress(100.0)) == 1.0
