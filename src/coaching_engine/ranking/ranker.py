"""Confidence ranker: orders the combined output of all recommendation passes."""

from __future__ import annotations

import logging
from collections import Counter

from coaching_engine.exceptions import CoachingEngineError
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.ranking.strategies import RankingStrategy, StableConfidenceOrder

logger = logging.getLogger(__name__)


class ConfidenceRanker:
    """Orders recommendations with a pluggable strategy (StableConfidenceOrder by default).

    Strategies may only reorder. The ranker rejects a strategy that drops,
    duplicates or invents recommendations, since thresholds and search
    filtering are applied by the caller afterwards.
    """

    def __init__(self, strategy: RankingStrategy | None = None) -> None:
        self.strategy = strategy or StableConfidenceOrder()

    def rank(
        self, recommendations: list[Recommendation]
    ) -> tuple[list[Recommendation], str]:
        """Return the ranked list and ranking notes for the trace.

        Raises:
            CoachingEngineError: if the strategy changed the set of items.
        """
        ranked, notes = self.strategy.rank(list(recommendations))
        if Counter(ranked) != Counter(recommendations):
            raise CoachingEngineError(
                f"{type(self.strategy).__name__} must reorder recommendations, "
                f"not add or remove them ({len(recommendations)} in, {len(ranked)} out)"
            )
        logger.debug(notes)
        return ranked, notes

    @staticmethod
    def group_by_tier(
        recommendations: list[Recommendation],
    ) -> dict[int, list[Recommendation]]:
        """Group an already ranked list by confidence, keeping its order."""
        tiers: dict[int, list[Recommendation]] = {}
        for rec in recommendations:
            tiers.setdefault(rec.confidence, []).append(rec)
        return tiers
