"""JSON codec for ClubSnapshot.

Enums are stored as lowercase member names and dates as ISO strings.
Decoding is the boundary where malformed records are rejected: any missing
key, unknown enum value, or invariant violation raises SnapshotFormatError.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TypeVar

from coaching_engine.exceptions import InvalidEntityError, SnapshotFormatError
from coaching_engine.models.block import TrainingBlock
from coaching_engine.models.enums import Cadence, Category, StudentLevel
from coaching_engine.models.goal import Goal, GoalProgress
from coaching_engine.models.snapshot import ClubSnapshot
from coaching_engine.models.week_plan import DayPlan, WeekPlan
from coaching_engine.models.work_type import WorkType

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=IntEnum)

FORMAT_VERSION = 1


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def snapshot_to_dict(snapshot: ClubSnapshot) -> dict:
    """Convert a ClubSnapshot to a JSON-compatible dict."""
    return {
        "version": FORMAT_VERSION,
        "work_types": [
            {
                "id": wt.id,
                "name": wt.name,
                "color": wt.color,
                "description": wt.description,
                "category": wt.category.name.lower(),
            }
            for wt in snapshot.work_types
        ],
        "goals": [
            {
                "id": g.id,
                "name": g.name,
                "description": g.description,
                "cadence": g.cadence.name.lower(),
                "work_types": list(g.work_types),
                "target_percentage": g.target_percentage,
                "student_level": g.student_level.name.lower(),
                "start_date": g.start_date.isoformat(),
                "end_date": g.end_date.isoformat(),
                "is_active": g.is_active,
            }
            for g in snapshot.goals
        ],
        "progress": [
            {
                "goal_id": p.goal_id,
                "current_percentage": p.current_percentage,
                "completed_days": p.completed_days,
                "total_days": p.total_days,
                "is_completed": p.is_completed,
                "last_updated": p.last_updated.isoformat(),
            }
            for p in snapshot.progress
        ],
        "week_plans": [
            {
                "id": plan.id,
                "name": plan.name,
                "description": plan.description,
                "start_date": plan.start_date.isoformat(),
                "end_date": plan.end_date.isoformat(),
                "is_template": plan.is_template,
                "days": [
                    {
                        "date": d.date.isoformat(),
                        "work_types": sorted(d.work_types),
                        "notes": d.notes,
                        "is_completed": d.is_completed,
                        "completion_percentage": d.completion_percentage,
                    }
                    for d in plan.days
                ],
            }
            for plan in snapshot.week_plans
        ],
        "blocks": [
            {
                "id": b.id,
                "name": b.name,
                "tags": list(b.tags),
                "description": b.description,
            }
            for b in snapshot.blocks
        ],
        "completed_work_type_ids": sorted(snapshot.completed_work_type_ids),
    }


def snapshot_to_json_string(snapshot: ClubSnapshot, indent: int = 2) -> str:
    """Convert a ClubSnapshot to a JSON string."""
    return json.dumps(snapshot_to_dict(snapshot), indent=indent)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def snapshot_from_dict(data: dict[str, Any]) -> ClubSnapshot:
    """Build a ClubSnapshot from its dict form.

    Raises:
        SnapshotFormatError: if any record is malformed or violates an
            entity invariant.
    """
    try:
        version = data.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise SnapshotFormatError(
                f"unsupported format version {version!r} (expected {FORMAT_VERSION})"
            )
        return ClubSnapshot(
            work_types=tuple(_work_type(r) for r in data.get("work_types", [])),
            goals=tuple(_goal(r) for r in data.get("goals", [])),
            progress=tuple(_progress(r) for r in data.get("progress", [])),
            week_plans=tuple(_week_plan(r) for r in data.get("week_plans", [])),
            blocks=tuple(_block(r) for r in data.get("blocks", [])),
            completed_work_type_ids=frozenset(_str_list(data, "completed_work_type_ids", [])),
        )
    except KeyError as exc:
        raise SnapshotFormatError(f"missing field {exc}") from exc
    except SnapshotFormatError:
        raise
    except InvalidEntityError as exc:
        raise SnapshotFormatError(str(exc)) from exc
    except (AttributeError, TypeError, ValueError) as exc:
        raise SnapshotFormatError(f"malformed value: {exc}") from exc


def _str_list(record: dict, key: str, default: list | None = None) -> list[str]:
    """Read a list-of-ids field; a bare string is rejected rather than split into characters."""
    value = record[key] if default is None else record.get(key, default)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SnapshotFormatError(f"{key} must be a list of strings, got {value!r}")
    return value


def _enum(enum_cls: type[_E], value: str) -> _E:
    try:
        return enum_cls[value.upper()]
    except KeyError:
        allowed = ", ".join(m.name.lower() for m in enum_cls)
        raise SnapshotFormatError(
            f"unknown {enum_cls.__name__} {value!r} (expected one of: {allowed})"
        ) from None


def _work_type(r: dict) -> WorkType:
    return WorkType(
        id=r["id"],
        name=r["name"],
        category=_enum(Category, r["category"]),
        color=r.get("color", "#3B82F6"),
        description=r.get("description", ""),
    )


def _goal(r: dict) -> Goal:
    return Goal(
        id=r["id"],
        name=r["name"],
        description=r.get("description", ""),
        cadence=_enum(Cadence, r["cadence"]),
        work_types=tuple(_str_list(r, "work_types")),
        target_percentage=r["target_percentage"],
        student_level=_enum(StudentLevel, r["student_level"]),
        start_date=date.fromisoformat(r["start_date"]),
        end_date=date.fromisoformat(r["end_date"]),
        is_active=r.get("is_active", True),
    )


def _progress(r: dict) -> GoalProgress:
    return GoalProgress(
        goal_id=r["goal_id"],
        current_percentage=float(r["current_percentage"]),
        completed_days=int(r["completed_days"]),
        total_days=int(r["total_days"]),
        is_completed=bool(r["is_completed"]),
        last_updated=datetime.fromisoformat(r["last_updated"]),
    )


def _day(r: dict) -> DayPlan:
    return DayPlan(
        date=date.fromisoformat(r["date"]),
        work_types=frozenset(_str_list(r, "work_types", [])),
        notes=r.get("notes", ""),
        is_completed=r.get("is_completed", False),
        completion_percentage=float(r.get("completion_percentage", 0.0)),
    )


def _week_plan(r: dict) -> WeekPlan:
    return WeekPlan(
        id=r["id"],
        name=r["name"],
        description=r.get("description", ""),
        start_date=date.fromisoformat(r["start_date"]),
        end_date=date.fromisoformat(r["end_date"]),
        days=tuple(_day(d) for d in r["days"]),
        is_template=r.get("is_template", False),
    )


def _block(r: dict) -> TrainingBlock:
    return TrainingBlock(
        id=r["id"],
        name=r["name"],
        tags=tuple(_str_list(r, "tags", [])),
        description=r.get("description", ""),
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def load_snapshot(path: Path | str) -> ClubSnapshot:
    """Read a snapshot from a JSON file.

    Raises:
        FileNotFoundError: if *path* does not exist.
        SnapshotFormatError: if the file is not valid JSON or not a valid snapshot.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SnapshotFormatError(f"invalid JSON: {exc}", path=str(path)) from exc
    try:
        snapshot = snapshot_from_dict(data)
    except SnapshotFormatError as exc:
        exc.path = str(path)
        raise
    logger.debug(
        "Loaded snapshot from %s: %d work types, %d goals, %d week plans",
        path,
        len(snapshot.work_types),
        len(snapshot.goals),
        len(snapshot.week_plans),
    )
    return snapshot


def save_snapshot(snapshot: ClubSnapshot, path: Path | str) -> Path:
    """Write a snapshot to a JSON file, creating parent directories. Returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot_to_dict(snapshot), f, indent=2)
    logger.info("Saved snapshot to %s", path)
    return path
