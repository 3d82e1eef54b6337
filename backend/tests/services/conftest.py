"""Service test fixtures — repositories over a fresh in-memory SQLite database.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - Repositories use a real DatabaseSessionManager (rollback/error mapping exercised)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository tests
      (PostgreSQL-only behavior such as FOR UPDATE locking is not exercised here)
"""

import pytest

import app.models  # noqa: F401
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.services.content_store import build_sql_store


@pytest.fixture
async def sql_db():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await manager.dispose()


@pytest.fixture
async def sql_store(sql_db):
    return build_sql_store(sql_db)
