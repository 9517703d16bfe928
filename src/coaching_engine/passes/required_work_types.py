"""Pass 1: required work types the goal still lacks.

Every required id that is not in the completed set and still resolves in the
catalog becomes a work-type suggestion. Ids of deleted work types cannot be
named or described, so they are skipped here.
"""

from __future__ import annotations

from coaching_engine.models.enums import (
    REQUIRED_WORK_TYPE_CONFIDENCE,
    PassOrder,
    RecommendationKind,
)
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.passes.base import RecommendationContext, RecommendationPass


class RequiredWorkTypesPass(RecommendationPass):
    """Suggests each missing required work type."""

    pass_id = "required_work_types"
    version = "1.0.0"
    order = PassOrder.REQUIRED
    confidence = REQUIRED_WORK_TYPE_CONFIDENCE

    def generate(self, context: RecommendationContext) -> list[Recommendation]:
        return [
            Recommendation(
                id=f"rec_wt_{work_type.id}",
                kind=RecommendationKind.WORK_TYPE,
                name=work_type.name,
                description=work_type.description,
                confidence=self.confidence,
                reason="Required by the goal and not yet completed.",
                related_work_type_id=work_type.id,
            )
            for work_type in context.missing_work_types
        ]
