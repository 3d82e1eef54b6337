"""Boundary Protocols — contracts between core and the storage backings.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Rows cross the boundary as plain dicts keyed by snake_case field names
    - Returned rows are copies: mutating them never changes stored state
    - Failures are raised as PortfolioError subclasses (core/errors.py), never swallowed:
        NotFound  -> ResourceNotFoundError
        Conflict  -> ConflictError
        Storage   -> StorageError

Design Decisions:
    - Protocol over ABC: structural subtyping, memory and SQL backings share no base class
    - One protocol per resource family (collection vs singleton): singletons have
      no list/delete, and their update is keyed to the single row instead of an id
    - Async in Protocol: the SQL backing does IO; the memory backing simply never awaits
"""

from typing import Protocol

from app.core.domain_types import EntityId
from app.core.resource_definition import ResourceDefinition


class CollectionRepository(Protocol):
    """Contract for many-row resources with manual or recency ordering."""
    definition: ResourceDefinition

    async def list(self) -> list[dict]: ...
    async def get(self, entity_id: EntityId) -> dict: ...
    async def create(self, payload: dict) -> dict: ...
    async def update(self, entity_id: EntityId, changes: dict) -> dict: ...
    async def delete(self, entity_id: EntityId) -> None: ...


class SingletonRepository(Protocol):
    """Contract for at-most-one-row resources (profile, settings, about)."""
    definition: ResourceDefinition

    async def get(self) -> dict | None: ...
    async def create(self, payload: dict) -> dict: ...
    async def update(self, changes: dict) -> dict: ...
