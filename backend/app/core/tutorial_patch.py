"""Merge Patch: applies a partial field set over the current Tutorial fields.

Invariants:
    - Supplied keys overwrite, absent keys keep their current value
    - Keys outside MUTABLE_FIELDS are dropped (id and timestamps are never patched)
    - Pure: inputs are not mutated, no IO
"""

from app.core.domain_types import MUTABLE_FIELDS


def current_fields(record: object) -> dict:
    """Snapshot the mutable fields of an ORM record (or any attribute holder)."""
    return {name: getattr(record, name) for name in MUTABLE_FIELDS}


def apply_merge_patch(current: dict, patch: dict) -> dict:
    """Return the merged field set. An empty patch yields an unchanged copy."""
    merged = {name: current.get(name) for name in MUTABLE_FIELDS}
    for name, value in patch.items():
        if name in MUTABLE_FIELDS:
            merged[name] = value
    return merged

