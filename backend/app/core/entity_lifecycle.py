"""Entity Lifecycle — pure create/merge/uniqueness rules shared by every repository backing.

Invariants:
    - All functions are PURE: no IO, no clock reads (callers pass `now`)
    - id and created_at are immutable: merge_changes never overwrites them
    - updated_at never decreases: the new stamp is max(now, previous)
    - Partial merge is shallow and field-by-field; absent keys keep prior values

Design Decisions:
    - Backings (memory, SQL) own IO; the rules live here once so both behave the same
"""

import copy
import uuid
from datetime import datetime
from typing import Iterable

from app.core.domain_types import EntityId
from app.core.ordering import as_utc
from app.core.resource_definition import ResourceDefinition

IMMUTABLE_FIELDS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})


def new_entity_id() -> EntityId:
    return EntityId(str(uuid.uuid4()))


def build_new_row(
    definition: ResourceDefinition, payload: dict, now: datetime,
) -> dict:
    """Mint identity, apply declared defaults for unset fields, stamp timestamps."""
    row = {"id": new_entity_id()}
    row.update(copy.deepcopy(definition.field_defaults))
    row.update({
        k: copy.deepcopy(v) for k, v in payload.items()
        if k not in IMMUTABLE_FIELDS
    })
    if definition.stamp_created_at:
        row["created_at"] = now
    if definition.stamp_updated_at:
        row["updated_at"] = now
    return row


def merge_changes(
    definition: ResourceDefinition, existing: dict, changes: dict, now: datetime,
) -> dict:
    """Shallow merge of a partial payload onto an existing row."""
    merged = dict(existing)
    merged.update({
        k: copy.deepcopy(v) for k, v in changes.items()
        if k not in IMMUTABLE_FIELDS
    })
    if definition.stamp_updated_at:
        previous = existing.get("updated_at")
        merged["updated_at"] = max(now, as_utc(previous)) if previous else now
    return merged


def find_unique_conflict(
    definition: ResourceDefinition, rows: Iterable[dict], candidate: dict,
) -> str | None:
    """Return the first unique field `candidate` would duplicate among OTHER rows."""
    others = [r for r in rows if r.get("id") != candidate.get("id")]
    for field_name in definition.unique_fields:
        value = candidate.get(field_name)
        if value is None:
            continue
        if any(r.get(field_name) == value for r in others):
            return field_name
    return None
