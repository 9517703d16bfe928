"""Tests for Goal invariants and GoalProgress construction."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import Cadence, StudentLevel
from coaching_engine.models.goal import Goal, GoalProgress, default_target_for


def _goal(**overrides) -> Goal:
    fields = dict(
        id="g1",
        name="Technique",
        work_types=("wt1",),
        start_date=date(2025, 3, 3),
        end_date=date(2025, 3, 9),
    )
    fields.update(overrides)
    return Goal(**fields)


class TestGoalInvariants:
    def test_valid_goal(self) -> None:
        goal = _goal()
        assert goal.cadence == Cadence.WEEKLY
        assert goal.target_percentage == 90
        assert goal.is_active

    def test_empty_work_types_rejected(self) -> None:
        with pytest.raises(InvalidEntityError, match="at least one work type"):
            _goal(work_types=())

    def test_duplicate_work_types_rejected(self) -> None:
        with pytest.raises(InvalidEntityError, match="more than once"):
            _goal(work_types=("wt1", "wt1"))

    @pytest.mark.parametrize("target", [49, 101, 0, -5])
    def test_target_out_of_range_rejected(self, target: int) -> None:
        with pytest.raises(InvalidEntityError, match="target_percentage"):
            _goal(target_percentage=target)

    @pytest.mark.parametrize("target", [50, 75, 100])
    def test_target_bounds_inclusive(self, target: int) -> None:
        assert _goal(target_percentage=target).target_percentage == target

    def test_non_integer_target_rejected(self) -> None:
        with pytest.raises(InvalidEntityError, match="integer"):
            _goal(target_percentage=90.5)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(InvalidEntityError, match="before start_date"):
            _goal(start_date=date(2025, 3, 9), end_date=date(2025, 3, 3))

    def test_same_day_window_allowed(self) -> None:
        goal = _goal(start_date=date(2025, 3, 3), end_date=date(2025, 3, 3))
        assert goal.start_date == goal.end_date

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(InvalidEntityError, match="name"):
            _goal(name="  ")

    def test_invalid_entity_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            _goal(work_types=())


class TestCadenceWindow:
    @pytest.mark.parametrize(
        "cadence, days",
        [(Cadence.DAILY, 1), (Cadence.WEEKLY, 7), (Cadence.QUARTERLY, 90)],
    )
    def test_window_days(self, cadence: Cadence, days: int) -> None:
        assert _goal(cadence=cadence).window_days == days


class TestDefaultTargets:
    @pytest.mark.parametrize(
        "level, target",
        [
            (StudentLevel.BEGINNER, 90),
            (StudentLevel.INTERMEDIATE, 90),
            (StudentLevel.ADVANCED, 95),
            (StudentLevel.COMPETITOR, 95),
            (StudentLevel.ELITE, 95),
        ],
    )
    def test_default_target_by_level(self, level: StudentLevel, target: int) -> None:
        assert default_target_for(level) == target


class TestInitialProgress:
    def test_zero_progress(self) -> None:
        now = datetime(2025, 3, 3, 9, 0)
        progress = GoalProgress.initial(_goal(cadence=Cadence.QUARTERLY), now=now)
        assert progress.goal_id == "g1"
        assert progress.current_percentage == 0.0
        assert progress.completed_days == 0
        assert progress.total_days == 90
        assert progress.is_completed is False
        assert progress.last_updated == now
