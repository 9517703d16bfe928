"""Serialization module — read and write club snapshots as JSON."""

from coaching_engine.serialization.json_snapshot import (
    load_snapshot,
    save_snapshot,
    snapshot_from_dict,
    snapshot_to_dict,
    snapshot_to_json_string,
)

__all__ = [
    "load_snapshot",
    "save_snapshot",
    "snapshot_from_dict",
    "snapshot_to_dict",
    "snapshot_to_json_string",
]
