"""Data models for the coaching engine."""

from coaching_engine.models.balance import BalanceIssue, BalanceReport, WorkTypeShare
from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.enums import (
    BalanceIssueKind,
    Cadence,
    Category,
    PassOrder,
    ProgressStatus,
    RecommendationKind,
    StudentLevel,
)
from coaching_engine.models.goal import Goal, GoalProgress, default_target_for
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.trace import PassResult, PassStatus, RecommendationTrace
from coaching_engine.models.week_plan import DayPlan, WeekPlan, monday_of
from coaching_engine.models.work_type import PREDEFINED_WORK_TYPES, WorkType, WorkTypePreset

__all__ = [
    "BalanceIssue",
    "BalanceIssueKind",
    "BalanceReport",
    "Cadence",
    "Category",
    "ClubSnapshot",
    "DayPlan",
    "Goal",
    "GoalProgress",
    "PREDEFINED_WORK_TYPES",
    "PassOrder",
    "PassResult",
    "PassStatus",
    "ProgressStatus",
    "Recommendation",
    "RecommendationKind",
    "RecommendationTrace",
    "StudentLevel",
    "TrainingBlock",
    "WeekPlan",
    "WorkType",
    "WorkTypePreset",
    "WorkTypeShare",
    "default_target_for",
    "monday_of",
]
