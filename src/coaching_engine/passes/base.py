"""Abstract base class and shared context for recommendation passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.enums import PassOrder
from coaching_engine.models.goal import Goal
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.models.work_type import WorkType


@dataclass(frozen=True)
class RecommendationContext:
    """Frozen inputs of one recommend() call, shared by every pass."""

    goal: Goal
    catalog: tuple[WorkType, ...]
    completed_work_type_ids: frozenset[str] = field(default_factory=frozenset)
    blocks: tuple[TrainingBlock, ...] = field(default_factory=tuple)

    @classmethod
    def build(
        cls,
        goal: Goal,
        catalog: Sequence[WorkType],
        completed_work_type_ids,
        blocks: Sequence[TrainingBlock] = (),
    ) -> RecommendationContext:
        return cls(
            goal=goal,
            catalog=tuple(catalog),
            completed_work_type_ids=frozenset(completed_work_type_ids),
            blocks=tuple(blocks),
        )

    @property
    def missing_work_type_ids(self) -> tuple[str, ...]:
        """Required ids not yet completed, in goal order (stale ids included)."""
        return tuple(
            wt_id for wt_id in self.goal.work_types if wt_id not in self.completed_work_type_ids
        )

    @property
    def missing_work_types(self) -> tuple[WorkType, ...]:
        """Missing required work types that still resolve in the catalog."""
        resolved = []
        for wt_id in self.missing_work_type_ids:
            work_type = self.lookup(wt_id)
            if work_type is not None:
                resolved.append(work_type)
        return tuple(resolved)

    def lookup(self, work_type_id: str) -> WorkType | None:
        for wt in self.catalog:
            if wt.id == work_type_id:
                return wt
        return None


class RecommendationPass(ABC):
    """Base class for one generation pass of the recommendation engine.

    Passes are discovered automatically by the PassRegistry and run by the
    CoachingEngine in ``order``. Each pass only appends; ranking happens once
    all passes have run.

    Subclasses must define:
        pass_id: unique identifier (e.g. "required_work_types")
        version: semantic version string
        order: PassOrder slot
        confidence: static confidence attached to every item it emits
        generate(): the pass's suggestion logic
    """

    pass_id: str
    version: str
    order: PassOrder
    confidence: int

    @abstractmethod
    def generate(self, context: RecommendationContext) -> list[Recommendation]:
        """Produce this pass's recommendations, in generation order.

        Returns an empty list when the pass has nothing to suggest.
        """
        ...
