"""Goals and their derived progress records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import (
    CADENCE_WINDOW_DAYS,
    DEFAULT_TARGET_PERCENTAGE,
    MAX_TARGET_PERCENTAGE,
    MIN_TARGET_PERCENTAGE,
    Cadence,
    StudentLevel,
)


def default_target_for(level: StudentLevel) -> int:
    """Default target percentage offered for a student level."""
    return DEFAULT_TARGET_PERCENTAGE[level]


@dataclass(frozen=True)
class Goal:
    """A target level of work-type coverage over a cadence window.

    Invariants are enforced on construction so the engine never sees an
    empty ``work_types`` tuple or an out-of-range target.
    """

    id: str
    name: str
    work_types: tuple[str, ...]  # WorkType ids, in the order the instructor picked them
    start_date: date
    end_date: date
    cadence: Cadence = Cadence.WEEKLY
    target_percentage: int = 90
    student_level: StudentLevel = StudentLevel.INTERMEDIATE
    description: str = ""
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvalidEntityError("Goal", f"name must not be blank (id={self.id!r})")
        if not self.work_types:
            raise InvalidEntityError("Goal", f"{self.id!r} must require at least one work type")
        if len(set(self.work_types)) != len(self.work_types):
            raise InvalidEntityError("Goal", f"{self.id!r} lists a work type more than once")
        if isinstance(self.target_percentage, bool) or not isinstance(self.target_percentage, int):
            raise InvalidEntityError(
                "Goal", f"target_percentage must be an integer, got {self.target_percentage!r}"
            )
        if not MIN_TARGET_PERCENTAGE <= self.target_percentage <= MAX_TARGET_PERCENTAGE:
            raise InvalidEntityError(
                "Goal",
                f"target_percentage must be in [{MIN_TARGET_PERCENTAGE}, "
                f"{MAX_TARGET_PERCENTAGE}], got {self.target_percentage}",
            )
        if self.end_date < self.start_date:
            raise InvalidEntityError(
                "Goal", f"end_date {self.end_date} is before start_date {self.start_date}"
            )

    @property
    def window_days(self) -> int:
        """Canonical length of the cadence window in days."""
        return CADENCE_WINDOW_DAYS[self.cadence]


@dataclass(frozen=True)
class GoalProgress:
    """Derived tracking record, one per Goal.

    ``current_percentage`` is a coverage ratio in [0, 100]; ``is_completed``
    always mirrors ``current_percentage >= target``.
    """

    goal_id: str
    current_percentage: float
    completed_days: int
    total_days: int
    is_completed: bool
    last_updated: datetime = field(default_factory=datetime.now)

    @classmethod
    def initial(cls, goal: Goal, now: datetime | None = None) -> GoalProgress:
        """Zero-progress record created alongside a new goal."""
        return cls(
            goal_id=goal.id,
            current_percentage=0.0,
            completed_days=0,
            total_days=goal.window_days,
            is_completed=False,
            last_updated=now or datetime.now(),
        )
