"""Goal progress, weekly balance and recommendation engine for club training."""

from coaching_engine.engine import CoachingEngine, recommend
from coaching_engine.math.balance import analyze_balance
from coaching_engine.math.coverage import compute_progress

__all__ = ["CoachingEngine", "analyze_balance", "compute_progress", "recommend"]
