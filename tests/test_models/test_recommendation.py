"""Tests for Recommendation construction."""

import pytest

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import RecommendationKind
from coaching_engine.models.recommendation import Recommendation


def _rec(confidence: int) -> Recommendation:
    return Recommendation(
        id="rec_wt_wt1",
        kind=RecommendationKind.WORK_TYPE,
        name="Jab Technique",
        confidence=confidence,
        reason="Required by the goal and not yet completed.",
    )


class TestRecommendationConfidence:
    @pytest.mark.parametrize("confidence", [0, 60, 85, 95, 100])
    def test_valid_scores(self, confidence: int) -> None:
        assert _rec(confidence).confidence == confidence

    @pytest.mark.parametrize("confidence", [-1, 101, 250])
    def test_out_of_range_rejected(self, confidence: int) -> None:
        with pytest.raises(InvalidEntityError, match="confidence must be in"):
            _rec(confidence)
