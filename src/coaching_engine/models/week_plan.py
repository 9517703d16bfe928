"""Week planning models: DayPlan and WeekPlan.

Index 0 of ``WeekPlan.days`` is always Monday. Plans only reason about
whole days; nothing here knows about clock time.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, timedelta

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import DAYS_PER_WEEK


def monday_of(day: date) -> date:
    """Return the Monday of the week containing *day*."""
    return day - timedelta(days=day.weekday())


@dataclass(frozen=True)
class DayPlan:
    """One calendar day's work-type assignment."""

    date: date
    work_types: frozenset[str] = field(default_factory=frozenset)
    notes: str = ""
    is_completed: bool = False
    completion_percentage: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.completion_percentage <= 100.0:
            raise InvalidEntityError(
                "DayPlan",
                f"completion_percentage must be in [0, 100], got {self.completion_percentage}",
            )


@dataclass(frozen=True)
class WeekPlan:
    """Seven consecutive DayPlans starting on a Monday."""

    id: str
    name: str
    start_date: date
    end_date: date
    days: tuple[DayPlan, ...]
    description: str = ""
    is_template: bool = False

    def __post_init__(self) -> None:
        if len(self.days) != DAYS_PER_WEEK:
            raise InvalidEntityError(
                "WeekPlan", f"{self.id!r} must have exactly {DAYS_PER_WEEK} days, got {len(self.days)}"
            )
        if self.start_date != self.days[0].date:
            raise InvalidEntityError(
                "WeekPlan", f"{self.id!r} start_date does not match the first day"
            )
        if self.start_date.weekday() != 0:
            raise InvalidEntityError(
                "WeekPlan", f"{self.id!r} must start on a Monday, got {self.start_date:%A}"
            )
        for prev, nxt in zip(self.days, self.days[1:]):
            if nxt.date - prev.date != timedelta(days=1):
                raise InvalidEntityError(
                    "WeekPlan", f"{self.id!r} day dates must increase by exactly one day"
                )
        if self.end_date != self.start_date + timedelta(days=DAYS_PER_WEEK - 1):
            raise InvalidEntityError(
                "WeekPlan", f"{self.id!r} end_date must be start_date + 6 days"
            )

    # -- Factories --------------------------------------------------------

    @classmethod
    def for_week(
        cls,
        plan_id: str,
        any_day: date,
        name: str | None = None,
        description: str = "",
        is_template: bool = False,
    ) -> WeekPlan:
        """Create an empty plan for the Monday-aligned week containing *any_day*."""
        start = monday_of(any_day)
        days = tuple(DayPlan(date=start + timedelta(days=i)) for i in range(DAYS_PER_WEEK))
        return cls(
            id=plan_id,
            name=name or f"Week of {start.isoformat()}",
            start_date=start,
            end_date=days[-1].date,
            days=days,
            description=description,
            is_template=is_template,
        )

    def duplicate(self, new_id: str, new_start: date) -> WeekPlan:
        """Copy this plan onto another week, resetting completion state."""
        start = monday_of(new_start)
        shift = start - self.start_date
        days = tuple(
            dataclasses.replace(
                d, date=d.date + shift, is_completed=False, completion_percentage=0.0
            )
            for d in self.days
        )
        return dataclasses.replace(
            self,
            id=new_id,
            name=f"{self.name} (copy)",
            start_date=start,
            end_date=self.end_date + shift,
            days=days,
        )

    # -- Assignment helpers ----------------------------------------------

    def with_work_type(self, day_index: int, work_type_id: str) -> WeekPlan:
        """Assign a work type to one day. Assigning twice is a no-op."""
        day = self.days[day_index]
        if work_type_id in day.work_types:
            return self
        return self._replace_day(
            day_index, dataclasses.replace(day, work_types=day.work_types | {work_type_id})
        )

    def without_work_type_on(self, day_index: int, work_type_id: str) -> WeekPlan:
        """Remove a work type from one day."""
        day = self.days[day_index]
        return self._replace_day(
            day_index, dataclasses.replace(day, work_types=day.work_types - {work_type_id})
        )

    def without_work_type(self, work_type_id: str) -> WeekPlan:
        """Remove a work type from every day of the week."""
        days = tuple(
            dataclasses.replace(d, work_types=d.work_types - {work_type_id})
            if work_type_id in d.work_types
            else d
            for d in self.days
        )
        return dataclasses.replace(self, days=days)

    def with_day_completed(self, day_index: int, completed: bool = True) -> WeekPlan:
        """Mark one day done (100%) or reopen it (0%)."""
        day = self.days[day_index]
        return self._replace_day(
            day_index,
            dataclasses.replace(
                day, is_completed=completed, completion_percentage=100.0 if completed else 0.0
            ),
        )

    def _replace_day(self, day_index: int, day: DayPlan) -> WeekPlan:
        days = list(self.days)
        days[day_index] = day
        return dataclasses.replace(self, days=tuple(days))

    # -- Queries ----------------------------------------------------------

    @property
    def assignment_count(self) -> int:
        """Total work-type assignments across the week."""
        return sum(len(d.work_types) for d in self.days)

    def contains(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date
