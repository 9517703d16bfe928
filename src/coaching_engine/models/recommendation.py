"""Recommendation output — one suggestion for what to train next."""

from __future__ import annotations

from dataclasses import dataclass

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import MAX_CONFIDENCE, MIN_CONFIDENCE, RecommendationKind


@dataclass(frozen=True)
class Recommendation:
    """A single suggestion produced by a recommendation pass.

    Not persisted. ``confidence`` is a static rule output in [0, 100], not a
    learned probability.
    """

    id: str
    kind: RecommendationKind
    name: str
    confidence: int
    reason: str
    description: str = ""
    related_work_type_id: str | None = None
    related_block_id: str | None = None

    def __post_init__(self) -> None:
        if not MIN_CONFIDENCE <= self.confidence <= MAX_CONFIDENCE:
            raise InvalidEntityError(
                "Recommendation",
                f"confidence must be in [{MIN_CONFIDENCE}, {MAX_CONFIDENCE}], got {self.confidence}",
            )
