"""Exception hierarchy for the coaching engine."""

from __future__ import annotations


class CoachingEngineError(Exception):
    """Base exception for all coaching_engine errors."""


class InvalidEntityError(CoachingEngineError, ValueError):
    """An entity was constructed or updated in violation of its invariants."""

    def __init__(self, entity: str, message: str) -> None:
        super().__init__(f"{entity}: {message}")
        self.entity = entity


class SnapshotFormatError(InvalidEntityError):
    """A stored club snapshot could not be decoded into entities."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__("snapshot", message)
        self.path = path
