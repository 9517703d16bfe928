"""Recommendation trace — audit trail of which passes produced what."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from coaching_engine.models.recommendation import Recommendation


class PassStatus(IntEnum):
    """Whether a pass produced recommendations or had nothing to add."""

    FIRED = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class PassResult:
    """Record of a single pass's run during a recommend() call."""

    pass_id: str
    status: PassStatus
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)
    explanation: str = ""


@dataclass(frozen=True)
class RecommendationTrace:
    """Complete audit trail for one recommend() call."""

    goal_id: str | None = None
    pass_results: tuple[PassResult, ...] = field(default_factory=tuple)
    ranking_notes: str = ""

    @property
    def fired_pass_ids(self) -> list[str]:
        return [r.pass_id for r in self.pass_results if r.status == PassStatus.FIRED]
