"""Pass 2: library blocks tagged for a missing required work type.

A block matches when any of its tags contains the work type's name,
case-insensitively. A block that matches several missing work types is
suggested once per match; duplicates by block id are kept.
"""

from __future__ import annotations

from coaching_engine.models.enums import (
    MATCHING_BLOCK_CONFIDENCE,
    PassOrder,
    RecommendationKind,
)
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.passes.base import RecommendationContext, RecommendationPass


class MatchingBlocksPass(RecommendationPass):
    """Suggests blocks whose tags match a missing required work type."""

    pass_id = "matching_blocks"
    version = "1.0.0"
    order = PassOrder.BLOCK_MATCH
    confidence = MATCHING_BLOCK_CONFIDENCE

    def generate(self, context: RecommendationContext) -> list[Recommendation]:
        recommendations: list[Recommendation] = []
        for work_type in context.missing_work_types:
            for block in context.blocks:
                if not block.has_tag_matching(work_type.name):
                    continue
                recommendations.append(
                    Recommendation(
                        id=f"rec_block_{block.id}",
                        kind=RecommendationKind.BLOCK,
                        name=block.name,
                        description=block.description,
                        confidence=self.confidence,
                        reason=f'Block matches work type "{work_type.name}".',
                        related_work_type_id=work_type.id,
                        related_block_id=block.id,
                    )
                )
        return recommendations
