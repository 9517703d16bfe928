"""Work types — the categorized units of trainable effort."""

from __future__ import annotations

from dataclasses import dataclass

from coaching_engine.exceptions import InvalidEntityError
from coaching_engine.models.enums import Category


@dataclass(frozen=True)
class WorkType:
    """A named, colored category of training effort.

    Goals and day plans reference work types by ``id`` only.
    """

    id: str
    name: str
    category: Category
    color: str = "#3B82F6"  # display only
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id.strip():
            raise InvalidEntityError("WorkType", "id must not be blank")
        if not self.name.strip():
            raise InvalidEntityError("WorkType", f"name must not be blank (id={self.id!r})")


@dataclass(frozen=True)
class WorkTypePreset:
    """A ready-made work type an instructor can add to the catalog in one click."""

    name: str
    category: Category
    color: str
    description: str

    def to_work_type(self, work_type_id: str) -> WorkType:
        return WorkType(
            id=work_type_id,
            name=self.name,
            category=self.category,
            color=self.color,
            description=self.description,
        )


PREDEFINED_WORK_TYPES: tuple[WorkTypePreset, ...] = (
    WorkTypePreset("Reaction", Category.MENTAL, "#8B5CF6", "Response time and reflexes"),
    WorkTypePreset("Mental Load", Category.MENTAL, "#EC4899", "Psychological endurance under pressure"),
    WorkTypePreset("Explosiveness", Category.PHYSICAL, "#EF4444", "Power and top speed"),
    WorkTypePreset("Endurance", Category.PHYSICAL, "#F97316", "Aerobic and anaerobic capacity"),
    WorkTypePreset("Pure Technique", Category.TECHNICAL, "#3B82F6", "Clean technical execution"),
    WorkTypePreset("Combinations", Category.TECHNICAL, "#06B6D4", "Fluid strike sequences"),
    WorkTypePreset("Strategy", Category.TACTICAL, "#F59E0B", "Tactical planning and adaptation"),
    WorkTypePreset("Opponent Reading", Category.TACTICAL, "#84CC16", "Analysis and anticipation"),
)
