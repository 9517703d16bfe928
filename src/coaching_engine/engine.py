"""CoachingEngine — orchestrates progress, balance and recommendation calls.

Every operation is a pure function of the snapshot it is given: nothing is
cached between calls and no input is mutated, so one engine may serve many
goals concurrently.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from functools import lru_cache

from coaching_engine.math.balance import analyze_balance
from coaching_engine.math.coverage import compute_progress
from coaching_engine.models.balance import BalanceReport
from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.recommendation import Recommendation
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.trace import PassResult, PassStatus, RecommendationTrace
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import WorkType
from coaching_engine.passes.base import RecommendationContext
from coaching_engine.ranking.ranker import ConfidenceRanker
from coaching_engine.registry import PassRegistry


class CoachingEngine:
    """Runs recommendation passes, ranks their output, and wraps the calculators.

    Usage:
        engine = CoachingEngine()
        progress = engine.compute_progress(goal, completed_ids)
        report = engine.analyze_balance(week_plan, catalog)
        recommendations = engine.recommend(goal, catalog, completed_ids, blocks)
    """

    def __init__(
        self,
        registry: PassRegistry | None = None,
        ranker: ConfidenceRanker | None = None,
    ) -> None:
        self.registry = registry or PassRegistry()
        self.ranker = ranker or ConfidenceRanker()

        # Auto-discover passes if using default registry
        if registry is None:
            self.registry.discover_passes()

    # -- Goal progress ----------------------------------------------------

    def compute_progress(
        self,
        goal: Goal,
        completed_work_type_ids: Iterable[str],
        completed_days: int = 0,
        now: datetime | None = None,
    ) -> GoalProgress:
        return compute_progress(goal, completed_work_type_ids, completed_days, now)

    def refresh_progress(
        self,
        snapshot: ClubSnapshot,
        completed_days_by_goal: Mapping[str, int] | None = None,
        now: datetime | None = None,
    ) -> ClubSnapshot:
        """Recompute the progress record of every goal in the snapshot.

        Args:
            snapshot: Current club state.
            completed_days_by_goal: Host-counted completed days per goal id.
                Goals missing from the mapping keep their previous count.
            now: Timestamp for every refreshed record.

        Returns:
            A new snapshot with one freshly computed record per goal, in goal
            order. Records of goals that no longer exist are dropped.
        """
        completed_days_by_goal = completed_days_by_goal or {}
        stamp = now or datetime.now()
        records = []
        for goal in snapshot.goals:
            previous = snapshot.progress_for(goal.id)
            days = completed_days_by_goal.get(
                goal.id, previous.completed_days if previous else 0
            )
            records.append(
                compute_progress(goal, snapshot.completed_work_type_ids, days, stamp)
            )
        return dataclasses.replace(snapshot, progress=tuple(records))

    # -- Weekly balance ---------------------------------------------------

    def analyze_balance(
        self, week_plan: WeekPlan, catalog: Sequence[WorkType]
    ) -> BalanceReport:
        return analyze_balance(week_plan, catalog)

    # -- Recommendations --------------------------------------------------

    def recommend(
        self,
        goal: Goal | None,
        catalog: Sequence[WorkType],
        completed_work_type_ids: Iterable[str],
        block_library: Sequence[TrainingBlock] = (),
    ) -> list[Recommendation]:
        """Ranked suggestions for what to train next towards *goal*.

        Returns an empty list when no goal is given.
        """
        recommendations, _ = self.recommend_with_trace(
            goal, catalog, completed_work_type_ids, block_library
        )
        return recommendations

    def recommend_with_trace(
        self,
        goal: Goal | None,
        catalog: Sequence[WorkType],
        completed_work_type_ids: Iterable[str],
        block_library: Sequence[TrainingBlock] = (),
    ) -> tuple[list[Recommendation], RecommendationTrace]:
        """Run every pass in order, then rank the combined output.

        Returns:
            A tuple of (ranked recommendations, RecommendationTrace).
        """
        if goal is None:
            return [], RecommendationTrace(ranking_notes="No goal selected.")

        context = RecommendationContext.build(
            goal, catalog, completed_work_type_ids, block_library
        )
        generated: list[Recommendation] = []
        pass_results: list[PassResult] = []

        for recommendation_pass in self.registry.get_all_passes():
            produced = recommendation_pass.generate(context)
            generated.extend(produced)
            if produced:
                pass_results.append(
                    PassResult(
                        pass_id=recommendation_pass.pass_id,
                        status=PassStatus.FIRED,
                        recommendations=tuple(produced),
                        explanation=(
                            f"{len(produced)} suggestion(s) at confidence "
                            f"{recommendation_pass.confidence}."
                        ),
                    )
                )
            else:
                pass_results.append(
                    PassResult(
                        pass_id=recommendation_pass.pass_id,
                        status=PassStatus.SKIPPED,
                        explanation="Pass had nothing to suggest.",
                    )
                )

        ranked, notes = self.ranker.rank(generated)
        trace = RecommendationTrace(
            goal_id=goal.id,
            pass_results=tuple(pass_results),
            ranking_notes=notes,
        )
        return ranked, trace


@lru_cache(maxsize=1)
def _default_engine() -> CoachingEngine:
    return CoachingEngine()


def recommend(
    goal: Goal | None,
    catalog: Sequence[WorkType],
    completed_work_type_ids: Iterable[str],
    block_library: Sequence[TrainingBlock] = (),
) -> list[Recommendation]:
    """Module-level shortcut for CoachingEngine().recommend()."""
    return _default_engine().recommend(goal, catalog, completed_work_type_ids, block_library)
