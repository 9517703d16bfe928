"""Tests for ConfidenceRanker — stable confidence ordering."""

import pytest

from coaching_engine.exceptions import CoachingEngineError
from coaching_engine.models.enums import RecommendationKind
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.ranking.ranker import ConfidenceRanker
from coaching_engine.ranking.strategies import RankingStrategy, StableConfidenceOrder


def _rec(rec_id: str, confidence: int) -> Recommendation:
    return Recommendation(
        id=rec_id,
        kind=RecommendationKind.WORK_TYPE,
        name=rec_id,
        confidence=confidence,
        reason=f"Test recommendation {rec_id}",
    )


class TestStableConfidenceOrder:
    def setup_method(self) -> None:
        self.ranker = ConfidenceRanker(StableConfidenceOrder())

    def test_highest_confidence_first(self) -> None:
        ranked, _ = self.ranker.rank([_rec("a", 60), _rec("b", 95), _rec("c", 85)])
        assert [r.id for r in ranked] == ["b", "c", "a"]

    def test_ties_keep_generation_order(self) -> None:
        recs = [_rec("x", 85), _rec("a", 95), _rec("y", 85), _rec("b", 95), _rec("z", 85)]
        ranked, _ = self.ranker.rank(recs)
        assert [r.id for r in ranked] == ["a", "b", "x", "y", "z"]

    def test_nothing_dropped(self) -> None:
        recs = [_rec("a", 0), _rec("b", 1)]
        ranked, _ = self.ranker.rank(recs)
        assert len(ranked) == 2

    def test_input_not_mutated(self) -> None:
        recs = [_rec("a", 60), _rec("b", 95)]
        self.ranker.rank(recs)
        assert [r.id for r in recs] == ["a", "b"]

    def test_empty(self) -> None:
        ranked, notes = self.ranker.rank([])
        assert ranked == []
        assert notes == "No recommendations to rank."

    def test_notes_list_tiers(self) -> None:
        _, notes = self.ranker.rank([_rec("a", 60), _rec("b", 95)])
        assert "[95, 60]" in notes

    def test_default_strategy(self) -> None:
        assert isinstance(ConfidenceRanker().strategy, StableConfidenceOrder)


class _DropLowest(RankingStrategy):
    def rank(self, recommendations):
        ranked = sorted(recommendations, key=lambda r: r.confidence, reverse=True)
        return ranked[:-1], "dropped one"


class TestConfidenceRanker:
    def test_strategy_may_not_drop_items(self) -> None:
        ranker = ConfidenceRanker(_DropLowest())
        with pytest.raises(CoachingEngineError, match="2 in, 1 out"):
            ranker.rank([_rec("a", 60), _rec("b", 95)])

    def test_group_by_tier_keeps_order(self) -> None:
        ranked, _ = ConfidenceRanker().rank(
            [_rec("v1", 60), _rec("w1", 95), _rec("b1", 85), _rec("w2", 95), _rec("v2", 60)]
        )
        tiers = ConfidenceRanker.group_by_tier(ranked)
        assert list(tiers) == [95, 85, 60]
        assert [r.id for r in tiers[95]] == ["w1", "w2"]
        assert [r.id for r in tiers[60]] == ["v1", "v2"]

    def test_group_by_tier_empty(self) -> None:
        assert ConfidenceRanker.group_by_tier([]) == {}
