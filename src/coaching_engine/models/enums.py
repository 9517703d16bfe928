"""Enumerations and product constants for the coaching engine.

The thresholds below are product-chosen values carried over from the club's
planning tool; none of them is fitted from data.
"""

from enum import IntEnum, auto


class Category(IntEnum):
    """Classification axis of a work type."""

    PHYSICAL = auto()
    TECHNICAL = auto()
    MENTAL = auto()
    TACTICAL = auto()


class Cadence(IntEnum):
    """Recurrence window of a goal."""

    DAILY = auto()
    WEEKLY = auto()
    QUARTERLY = auto()


class StudentLevel(IntEnum):
    """Level of the students a goal is written for."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()
    COMPETITOR = auto()
    ELITE = auto()


class RecommendationKind(IntEnum):
    """What a recommendation points at."""

    WORK_TYPE = auto()
    BLOCK = auto()


class PassOrder(IntEnum):
    """Recommendation passes run in this order — lower value runs first.

    Within equal confidence, earlier passes keep their earlier position.
    """

    REQUIRED = 1
    BLOCK_MATCH = 2
    VARIETY = 3


class ProgressStatus(IntEnum):
    """Traffic-light reading of a goal's progress against its target."""

    COMPLETED = auto()
    AT_RISK = auto()
    BEHIND = auto()


class BalanceIssueKind(IntEnum):
    """Kinds of imbalance the weekly analyzer reports."""

    OVER_CONCENTRATION = auto()
    CATEGORY_GAP = auto()


# ---------------------------------------------------------------------------
# Goal constants
# ---------------------------------------------------------------------------
CADENCE_WINDOW_DAYS = {
    Cadence.DAILY: 1,
    Cadence.WEEKLY: 7,
    Cadence.QUARTERLY: 90,
}

MIN_TARGET_PERCENTAGE = 50
MAX_TARGET_PERCENTAGE = 100

# Default target by level: 90% up to intermediate, 95% from advanced upwards
DEFAULT_TARGET_PERCENTAGE = {
    StudentLevel.BEGINNER: 90,
    StudentLevel.INTERMEDIATE: 90,
    StudentLevel.ADVANCED: 95,
    StudentLevel.COMPETITOR: 95,
    StudentLevel.ELITE: 95,
}

# A goal at or above this fraction of its target (but below it) is "at risk"
AT_RISK_TARGET_FRACTION = 0.8

# ---------------------------------------------------------------------------
# Weekly balance constants
# ---------------------------------------------------------------------------
DAYS_PER_WEEK = 7

# A work type on more than this share of the week's days is over-represented
OVER_CONCENTRATION_THRESHOLD_PCT = 50.0

# ---------------------------------------------------------------------------
# Recommendation constants
# ---------------------------------------------------------------------------
REQUIRED_WORK_TYPE_CONFIDENCE = 95
MATCHING_BLOCK_CONFIDENCE = 85
VARIETY_CONFIDENCE = 60

# Only the first N eligible catalog work types are offered for variety
VARIETY_RECOMMENDATION_LIMIT = 3

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100
