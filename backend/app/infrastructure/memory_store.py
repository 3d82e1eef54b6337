"""In-Memory Repositories — dict-backed implementations of the repository protocols.

Invariants:
    - Collection rows live in an insertion-ordered dict keyed by id; list() sorts a copy
    - A singleton is a nullable holder, never a one-row collection
    - No `await` between reading a row and storing its replacement: each mutation
      runs to completion on the event loop, so concurrent updates cannot interleave
    - Every returned row is a deep copy

Design Decisions:
    - Default backing (storage_backend="memory"): zero setup, state lost on restart
      (ADR: single-process uvicorn, same trade-off as the session state it replaces)
"""

import copy
import logging
from datetime import datetime, timezone

from app.core.domain_types import EntityId
from app.core.entity_lifecycle import (
    build_new_row, find_unique_conflict, merge_changes,
)
from app.core.errors import ConflictError, ResourceNotFoundError
from app.core.ordering import sort_rows
from app.core.resource_definition import ResourceDefinition

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCollectionRepository:
    """CollectionRepository over a plain dict."""

    def __init__(self, definition: ResourceDefinition):
        self.definition = definition
        self._rows: dict[str, dict] = {}

    async def list(self) -> list[dict]:
        rows = [copy.deepcopy(r) for r in self._rows.values()]
        return sort_rows(rows, self.definition.ordering)

    async def get(self, entity_id: EntityId) -> dict:
        return copy.deepcopy(self._require(entity_id))

    async def create(self, payload: dict) -> dict:
        row = build_new_row(self.definition, payload, _now())
        self._check_unique(row)
        self._rows[row["id"]] = row
        logger.info(
            f"Created {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": row["id"]},
        )
        return copy.deepcopy(row)

    async def update(self, entity_id: EntityId, changes: dict) -> dict:
        existing = self._require(entity_id)
        merged = merge_changes(self.definition, existing, changes, _now())
        self._check_unique(merged)
        self._rows[entity_id] = merged
        logger.info(
            f"Updated {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": entity_id},
        )
        return copy.deepcopy(merged)

    async def delete(self, entity_id: EntityId) -> None:
        self._require(entity_id)
        del self._rows[entity_id]
        logger.info(
            f"Deleted {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": entity_id},
        )

    def _require(self, entity_id: EntityId) -> dict:
        row = self._rows.get(entity_id)
        if row is None:
            raise ResourceNotFoundError(self.definition.label, entity_id)
        return row

    def _check_unique(self, candidate: dict) -> None:
        clash = find_unique_conflict(self.definition, self._rows.values(), candidate)
        if clash:
            raise ConflictError(
                f"{self.definition.label} with this {clash} already exists",
                self.definition.label,
            )


class InMemorySingletonRepository:
    """SingletonRepository over a nullable holder."""

    def __init__(self, definition: ResourceDefinition):
        self.definition = definition
        self._row: dict | None = None

    async def get(self) -> dict | None:
        return copy.deepcopy(self._row)

    async def create(self, payload: dict) -> dict:
        if self._row is not None:
            raise ConflictError(
                f"{self.definition.label} already exists; update it instead",
                self.definition.label,
            )
        self._row = build_new_row(self.definition, payload, _now())
        logger.info(
            f"Created {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": self._row["id"]},
        )
        return copy.deepcopy(self._row)

    async def update(self, changes: dict) -> dict:
        if self._row is None:
            raise ResourceNotFoundError(self.definition.label)
        self._row = merge_changes(self.definition, self._row, changes, _now())
        logger.info(
            f"Updated {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": self._row["id"]},
        )
        return copy.deepcopy(self._row)
