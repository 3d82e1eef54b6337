"""SQL Repositories — SQLAlchemy async implementations of the repository protocols.

Invariants:
    - One transaction per repository call (DatabaseSessionManager.session)
    - Updates lock the target row (SELECT ... FOR UPDATE) before merging, so a
      concurrent update cannot be lost; SQLite ignores the clause (single writer)
    - Uniqueness checked with a query first, then backed by the table's UNIQUE
      constraint: an IntegrityError on commit maps to ConflictError
    - Singleton create: existence check first, then the UNIQUE singleton_key
      column rejects a concurrent second insert (IntegrityError -> ConflictError)
    - Listing reads rows in pk (insertion) order, then applies the ordering policy
    - Datetimes leave this module timezone-aware (SQLite returns naive values)

Design Decisions:
    - Same pure lifecycle rules as the memory backing (core/entity_lifecycle.py);
      only IO differs
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityId
from app.core.entity_lifecycle import build_new_row, merge_changes
from app.core.errors import ConflictError, ResourceNotFoundError
from app.core.ordering import as_utc, sort_rows
from app.core.resource_definition import ResourceDefinition
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class _SqlRepositoryBase:
    """Row <-> dict mapping and commit handling shared by both SQL repositories."""

    def __init__(
        self,
        definition: ResourceDefinition,
        model: type[Base],
        db: DatabaseSessionManager,
    ):
        self.definition = definition
        self._model = model
        self._db = db

    def _to_dict(self, obj: Base) -> dict:
        row = {}
        for name in self.definition.stored_fields:
            value = getattr(obj, name)
            row[name] = as_utc(value) if isinstance(value, datetime) else value
        return row

    def _apply(self, obj: Base, row: dict) -> None:
        for name, value in row.items():
            if name != "id":
                setattr(obj, name, value)

    async def _commit(self, session: AsyncSession) -> None:
        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.warning(
                f"Unique constraint violated: {e.orig}",
                extra={"resource": self.definition.name},
            )
            raise ConflictError(
                f"{self.definition.label} violates a uniqueness constraint",
                self.definition.label,
            )

    async def _check_unique(self, session: AsyncSession, row: dict) -> None:
        for field_name in self.definition.unique_fields:
            value = row.get(field_name)
            if value is None:
                continue
            column = getattr(self._model, field_name)
            result = await session.execute(
                select(self._model.id)
                .where(column == value, self._model.id != row["id"])
                .limit(1),
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(
                    f"{self.definition.label} with this {field_name} already exists",
                    self.definition.label,
                )


class SqlCollectionRepository(_SqlRepositoryBase):
    """CollectionRepository backed by one table."""

    async def list(self) -> list[dict]:
        async with self._db.session() as session:
            result = await session.execute(
                select(self._model).order_by(self._model.pk),
            )
            rows = [self._to_dict(obj) for obj in result.scalars().all()]
        return sort_rows(rows, self.definition.ordering)

    async def get(self, entity_id: EntityId) -> dict:
        async with self._db.session() as session:
            obj = await self._require(session, entity_id)
            return self._to_dict(obj)

    async def create(self, payload: dict) -> dict:
        row = build_new_row(self.definition, payload, _now())
        async with self._db.session() as session:
            await self._check_unique(session, row)
            obj = self._model(id=row["id"])
            self._apply(obj, row)
            session.add(obj)
            await self._commit(session)
        logger.info(
            f"Created {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": row["id"]},
        )
        return row

    async def update(self, entity_id: EntityId, changes: dict) -> dict:
        async with self._db.session() as session:
            obj = await self._require(session, entity_id, for_update=True)
            merged = merge_changes(
                self.definition, self._to_dict(obj), changes, _now(),
            )
            await self._check_unique(session, merged)
            self._apply(obj, merged)
            await self._commit(session)
        logger.info(
            f"Updated {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": entity_id},
        )
        return merged

    async def delete(self, entity_id: EntityId) -> None:
        async with self._db.session() as session:
            obj = await self._require(session, entity_id, for_update=True)
            await session.delete(obj)
            await self._commit(session)
        logger.info(
            f"Deleted {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": entity_id},
        )

    async def _require(
        self, session: AsyncSession, entity_id: EntityId, for_update: bool = False,
    ) -> Base:
        query = select(self._model).where(self._model.id == entity_id)
        if for_update:
            query = query.with_for_update()
        result = await session.execute(query)
        obj = result.scalar_one_or_none()
        if obj is None:
            raise ResourceNotFoundError(self.definition.label, entity_id)
        return obj


class SqlSingletonRepository(_SqlRepositoryBase):
    """SingletonRepository backed by a table holding at most one row."""

    async def get(self) -> dict | None:
        async with self._db.session() as session:
            obj = await self._first(session)
            return self._to_dict(obj) if obj is not None else None

    async def create(self, payload: dict) -> dict:
        row = build_new_row(self.definition, payload, _now())
        async with self._db.session() as session:
            if await self._first(session, for_update=True) is not None:
                raise ConflictError(
                    f"{self.definition.label} already exists; update it instead",
                    self.definition.label,
                )
            obj = self._model(id=row["id"])
            self._apply(obj, row)
            session.add(obj)
            await self._commit(session)
        logger.info(
            f"Created {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": row["id"]},
        )
        return row

    async def update(self, changes: dict) -> dict:
        async with self._db.session() as session:
            obj = await self._first(session, for_update=True)
            if obj is None:
                raise ResourceNotFoundError(self.definition.label)
            merged = merge_changes(
                self.definition, self._to_dict(obj), changes, _now(),
            )
            self._apply(obj, merged)
            await self._commit(session)
        logger.info(
            f"Updated {self.definition.label}",
            extra={"resource": self.definition.name, "entity_id": merged["id"]},
        )
        return merged

    async def _first(self, session: AsyncSession, for_update: bool = False):
        query = select(self._model).order_by(self._model.pk).limit(1)
        if for_update:
            query = query.with_for_update()
        result = await session.execute(query)
        return result.scalar_one_or_none()
