"""Training blocks — reusable exercise bundles used for recommendation matching."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrainingBlock:
    """A read-only block library record. Only ``tags`` drive matching."""

    id: str
    name: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def has_tag_matching(self, text: str) -> bool:
        """True if any tag contains *text* as a case-insensitive substring."""
        needle = text.lower()
        return any(needle in tag.lower() for tag in self.tags)
