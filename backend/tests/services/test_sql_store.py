"""SQL Repositories — verifies the same contracts over SQLAlchemy + SQLite.

Invariants:
    - Rows round-trip through the table with timezone-aware datetimes
    - Ties in manual order keep insertion (pk) order
    - Duplicate slug → ConflictError (query check) and nothing is written
    - Singleton lifecycle matches the memory backing
    - A singleton table never holds two rows, even under concurrent creates
    - Driver failures surface as StorageError, never raw SQLAlchemy exceptions
"""

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.core.errors import ConflictError, ResourceNotFoundError, StorageError
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.models import UserInfo
from app.services.content_store import build_sql_store

PROJECT = {
    "title": "Portfolio",
    "description": "Site",
    "image": "x.png",
    "technologies": ["TS"],
    "category": "Web",
}


ABOUT = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "role": "Engineer",
    "avatar": "ada.png",
    "location": "London",
    "title": "About me",
    "description": "Bio",
    "intro_title": "Intro",
    "intro_description": "Hello",
    "work_title": "Work",
    "studies_title": "Studies",
    "technical_title": "Skills",
}


def _post(slug: str, **extra) -> dict:
    return {"title": slug, "slug": slug, "content": "c", "author": "a", **extra}


async def test_create_and_get_project(sql_store):
    repo = sql_store.collection("projects")
    created = await repo.create(PROJECT)
    fetched = await repo.get(created["id"])
    assert fetched["title"] == "Portfolio"
    assert fetched["technologies"] == ["TS"]
    assert fetched["status"] == "published"
    assert fetched["created_at"].tzinfo is not None
    assert fetched["created_at"] == created["created_at"]


async def test_projects_listed_descending_with_stable_ties(sql_store):
    repo = sql_store.collection("projects")
    a = await repo.create({**PROJECT, "order": 1})
    b = await repo.create({**PROJECT, "order": 2})
    c = await repo.create({**PROJECT, "order": 1})
    assert [r["id"] for r in await repo.list()] == [b["id"], a["id"], c["id"]]


async def test_education_listed_ascending(sql_store):
    repo = sql_store.collection("education")
    late = await repo.create({"name": "MSc", "description": "d", "order": 2})
    early = await repo.create({"name": "BSc", "description": "d", "order": 1})
    assert [r["id"] for r in await repo.list()] == [early["id"], late["id"]]


async def test_posts_listed_by_recency(sql_store):
    repo = sql_store.collection("blog-posts")
    old = await repo.create(_post("old", published_at=datetime(2023, 1, 1, tzinfo=timezone.utc)))
    new = await repo.create(_post("new", published_at=datetime(2024, 1, 1, tzinfo=timezone.utc)))
    assert [r["id"] for r in await repo.list()] == [new["id"], old["id"]]


async def test_update_merges_and_persists(sql_store):
    repo = sql_store.collection("projects")
    created = await repo.create(PROJECT)
    await repo.update(created["id"], {"featured": True, "year": 2024})
    fetched = await repo.get(created["id"])
    assert fetched["featured"] is True
    assert fetched["year"] == 2024
    assert fetched["description"] == "Site"
    assert fetched["created_at"] == created["created_at"]
    assert fetched["updated_at"] >= created["updated_at"]


async def test_unknown_id_not_found(sql_store):
    repo = sql_store.collection("skills")
    with pytest.raises(ResourceNotFoundError):
        await repo.get("missing")
    with pytest.raises(ResourceNotFoundError):
        await repo.update("missing", {"title": "x"})
    with pytest.raises(ResourceNotFoundError):
        await repo.delete("missing")


async def test_delete_removes_row(sql_store):
    repo = sql_store.collection("social-links")
    created = await repo.create({"name": "GitHub", "icon": "gh", "url": "https://g.it", "order": 1})
    await repo.delete(created["id"])
    assert await repo.list() == []


async def test_duplicate_slug_conflicts(sql_store):
    repo = sql_store.collection("blog-posts")
    await repo.create(_post("hello"))
    with pytest.raises(ConflictError):
        await repo.create(_post("hello"))
    assert len(await repo.list()) == 1


async def test_slug_update_to_taken_value_conflicts(sql_store):
    repo = sql_store.collection("blog-posts")
    await repo.create(_post("a"))
    b = await repo.create(_post("b"))
    with pytest.raises(ConflictError):
        await repo.update(b["id"], {"slug": "a"})
    assert (await repo.get(b["id"]))["slug"] == "b"


async def test_singleton_lifecycle(sql_store):
    repo = sql_store.singleton("about")
    assert await repo.get() is None
    with pytest.raises(ResourceNotFoundError):
        await repo.update({"title": "x"})
    created = await repo.create(ABOUT)
    with pytest.raises(ConflictError):
        await repo.create({**ABOUT, "first_name": "Grace"})
    updated = await repo.update({"title": "About Ada"})
    assert updated["id"] == created["id"]
    assert (await repo.get())["title"] == "About Ada"


async def test_settings_blob_stored_as_text(sql_store):
    repo = sql_store.singleton("settings")
    await repo.create({
        "site_name": "S", "site_description": "D", "site_url": "https://s.io",
        "theme": '{"primaryColor":"#000000"}',
    })
    assert (await repo.get())["theme"] == '{"primaryColor":"#000000"}'


async def test_driver_failure_maps_to_storage_error(sql_store, sql_db, monkeypatch):
    repo = sql_store.collection("projects")

    async def broken_execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.execute", broken_execute)
    with pytest.raises(StorageError) as exc:
        await repo.list()
    assert exc.value.message == "Storage operation failed"


async def test_store_readiness(sql_store):
    assert await sql_store.is_ready() is True


USER = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "title": "Engineer",
    "role": "Developer",
    "timezone": "Europe/London",
    "email": "ada@example.com",
}


async def _count_user_rows(db: DatabaseSessionManager) -> int:
    async with db.session() as session:
        result = await session.execute(select(func.count()).select_from(UserInfo))
        return result.scalar_one()


async def test_singleton_table_rejects_a_second_row(sql_store, sql_db):
    await sql_store.singleton("user-info").create(USER)
    with pytest.raises(StorageError):
        async with sql_db.session() as session:
            session.add(UserInfo(id="second", **USER))
            await session.commit()
    assert await _count_user_rows(sql_db) == 1


async def test_concurrent_singleton_creates_store_one_row(tmp_path):
    db = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'race.db'}")
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    repo = build_sql_store(db).singleton("user-info")

    results = await asyncio.gather(
        repo.create(USER), repo.create({**USER, "first_name": "Grace"}),
        return_exceptions=True,
    )

    created = [r for r in results if isinstance(r, dict)]
    rejected = [r for r in results if isinstance(r, ConflictError)]
    assert len(created) == 1
    assert len(rejected) == 1
    assert await _count_user_rows(db) == 1
    assert (await repo.get())["id"] == created[0]["id"]
    await db.dispose()
