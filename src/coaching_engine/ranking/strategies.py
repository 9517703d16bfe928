"""Ranking strategies for ordering generated recommendations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coaching_engine.models.recommendation import Recommendation


class RankingStrategy(ABC):
    """Base class for ranking strategies."""

    @abstractmethod
    def rank(
        self, recommendations: list[Recommendation]
    ) -> tuple[list[Recommendation], str]:
        """Order recommendations for presentation.

        Returns a new ordered list and a human-readable note for the trace.
        The input list is never mutated.
        """
        ...


class StableConfidenceOrder(RankingStrategy):
    """Highest confidence first; ties keep generation order.

    Because passes append in a fixed order, equal-confidence items stay in
    pass order and, within a pass, in generation order. Nothing is dropped:
    confidence thresholds and search filtering belong to the caller.
    """

    def rank(
        self, recommendations: list[Recommendation]
    ) -> tuple[list[Recommendation], str]:
        if not recommendations:
            return [], "No recommendations to rank."

        # sorted() is stable, so equal confidences keep their generation order
        ranked = sorted(recommendations, key=lambda r: r.confidence, reverse=True)
        tiers = sorted({r.confidence for r in ranked}, reverse=True)
        notes = f"Ranked {len(ranked)} recommendations across confidence tiers {tiers}"
        return ranked, notes
