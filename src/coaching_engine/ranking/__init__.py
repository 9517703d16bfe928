"""Ranking of generated recommendations."""

from coaching_engine.ranking.ranker import ConfidenceRanker
from coaching_engine.ranking.strategies import RankingStrategy, StableConfidenceOrder

__all__ = ["ConfidenceRanker", "RankingStrategy", "StableConfidenceOrder"]
