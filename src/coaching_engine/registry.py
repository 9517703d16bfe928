"""Pass registry: finds the recommendation passes and fixes their run order."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import MAX_CONFIDENCE, MIN_CONFIDENCE, PassOrder
from coaching_engine.passes.base import RecommendationPass

logger = logging.getLogger(__name__)


class PassRegistry:
    """Holds one instance of each RecommendationPass, keyed by pass_id.

    ``discover_passes()`` imports every module of the passes package and
    instantiates the concrete passes defined there. Dropping a new module
    into that package is enough to add a pass.

    Registration checks what the engine relies on: the pass sits in a known
    PassOrder slot, its confidence is a valid score, and its pass_id is not
    already claimed by a different class.
    """

    def __init__(self) -> None:
        self._passes: dict[str, RecommendationPass] = {}

    def discover_passes(self) -> None:
        """Import the passes package and register each concrete pass it defines."""
        import coaching_engine.passes as passes_pkg

        for module_info in pkgutil.iter_modules(passes_pkg.__path__, passes_pkg.__name__ + "."):
            module = importlib.import_module(module_info.name)
            for _, cls in inspect.getmembers(module, inspect.isclass):
                # Classes imported into a module are registered by their own module
                if cls.__module__ != module.__name__:
                    continue
                if issubclass(cls, RecommendationPass) and not inspect.isabstract(cls):
                    self.register(cls())
        logger.debug("Discovered recommendation passes: %s", self.pass_ids)

    def register(self, recommendation_pass: RecommendationPass) -> None:
        """Add a pass; re-registering the same class replaces the instance.

        Raises:
            InvalidEntityError: if the pass has no valid order or confidence,
                or its pass_id belongs to another class.
        """
        pass_id = recommendation_pass.pass_id
        if not isinstance(recommendation_pass.order, PassOrder):
            raise InvalidEntityError(
                "RecommendationPass", f"{pass_id!r} has no PassOrder slot"
            )
        if not MIN_CONFIDENCE <= recommendation_pass.confidence <= MAX_CONFIDENCE:
            raise InvalidEntityError(
                "RecommendationPass",
                f"{pass_id!r} confidence {recommendation_pass.confidence} is outside "
                f"[{MIN_CONFIDENCE}, {MAX_CONFIDENCE}]",
            )
        existing = self._passes.get(pass_id)
        if existing is not None and type(existing) is not type(recommendation_pass):
            raise InvalidEntityError(
                "RecommendationPass",
                f"{pass_id!r} is already registered by {type(existing).__name__}",
            )
        self._passes[pass_id] = recommendation_pass

    def get(self, pass_id: str) -> RecommendationPass | None:
        return self._passes.get(pass_id)

    def get_all_passes(self) -> list[RecommendationPass]:
        """All passes in run order: PassOrder slot, then pass_id."""
        return sorted(self._passes.values(), key=lambda p: (p.order, p.pass_id))

    def passes_for(self, order: PassOrder) -> list[RecommendationPass]:
        """Passes sharing one PassOrder slot, in run order."""
        return [p for p in self.get_all_passes() if p.order == order]

    @property
    def confidence_by_pass(self) -> dict[str, int]:
        """Static confidence each pass attaches to its output, in run order."""
        return {p.pass_id: p.confidence for p in self.get_all_passes()}

    @property
    def pass_ids(self) -> list[str]:
        return list(self._passes.keys())
