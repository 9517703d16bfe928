"""Pass 3: variety — catalog work types outside the goal."""

from __future__ import annotations

from coaching_engine.models.enums import (
    VARIETY_CONFIDENCE,
    VARIETY_RECOMMENDATION_LIMIT,
    PassOrder,
    RecommendationKind,
)
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.passes.base import RecommendationContext, RecommendationPass


class VarietyPass(RecommendationPass):
    """Suggests the first few catalog work types neither required nor completed."""

    pass_id = "variety"
    version = "1.0.0"
    order = PassOrder.VARIETY
    confidence = VARIETY_CONFIDENCE
    limit = VARIETY_RECOMMENDATION_LIMIT

    def generate(self, context: RecommendationContext) -> list[Recommendation]:
        required = set(context.goal.work_types)
        candidates = [
            wt
            for wt in context.catalog
            if wt.id not in required and wt.id not in context.completed_work_type_ids
        ]
        return [
            Recommendation(
                id=f"rec_variety_{work_type.id}",
                kind=RecommendationKind.WORK_TYPE,
                name=work_type.name,
                description=work_type.description,
                confidence=self.confidence,
                reason="Adds variety to training.",
                related_work_type_id=work_type.id,
            )
            for work_type in candidates[: self.limit]
        ]
