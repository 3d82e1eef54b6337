"""Content Store — builds one repository per resource for the configured backing.

Invariants:
    - Exactly one repository per ResourceDefinition in ALL_RESOURCES
    - Collections get a CollectionRepository, singletons a SingletonRepository
    - The process-wide store is set once on startup (init_store) and read via get_store()

Design Decisions:
    - Same singleton-initialized-in-lifespan pattern as db_manager
    - Backing chosen by settings.storage_backend; callers never see which one
"""

import logging

from app.core.domain_types import StorageBackend
from app.core.repository_protocols import CollectionRepository, SingletonRepository
from app.core.resource_definition import ResourceDefinition
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.memory_store import (
    InMemoryCollectionRepository, InMemorySingletonRepository,
)
from app.infrastructure.sql_store import SqlCollectionRepository, SqlSingletonRepository
from app.models import (
    About, BlogPost, Education, Project, SiteSettings, Skill, SocialLink,
    UserInfo, WorkExperience,
)
from app.services.resource_catalog import ALL_RESOURCES

logger = logging.getLogger(__name__)

SQL_MODELS = {
    "projects": Project,
    "blog-posts": BlogPost,
    "social-links": SocialLink,
    "work-experiences": WorkExperience,
    "education": Education,
    "skills": Skill,
    "user-info": UserInfo,
    "settings": SiteSettings,
    "about": About,
}


class ContentStore:
    """Registry of repositories keyed by resource name."""

    def __init__(
        self,
        collections: dict[str, CollectionRepository],
        singletons: dict[str, SingletonRepository],
        db: DatabaseSessionManager | None = None,
    ):
        self._collections = collections
        self._singletons = singletons
        self.db = db

    def collection(self, name: str) -> CollectionRepository:
        return self._collections[name]

    def singleton(self, name: str) -> SingletonRepository:
        return self._singletons[name]

    async def is_ready(self) -> bool:
        """Readiness: memory is always ready; SQL needs a live connection."""
        if self.db is None:
            return True
        return await self.db.health_check()


def build_memory_store(
    resources: tuple[ResourceDefinition, ...] = ALL_RESOURCES,
) -> ContentStore:
    collections: dict[str, CollectionRepository] = {}
    singletons: dict[str, SingletonRepository] = {}
    for definition in resources:
        if definition.is_collection:
            collections[definition.name] = InMemoryCollectionRepository(definition)
        else:
            singletons[definition.name] = InMemorySingletonRepository(definition)
    return ContentStore(collections, singletons)


def build_sql_store(
    db: DatabaseSessionManager,
    resources: tuple[ResourceDefinition, ...] = ALL_RESOURCES,
) -> ContentStore:
    collections: dict[str, CollectionRepository] = {}
    singletons: dict[str, SingletonRepository] = {}
    for definition in resources:
        model = SQL_MODELS[definition.name]
        if definition.is_collection:
            collections[definition.name] = SqlCollectionRepository(definition, model, db)
        else:
            singletons[definition.name] = SqlSingletonRepository(definition, model, db)
    return ContentStore(collections, singletons, db=db)


# Singleton (initialized on startup)
content_store: ContentStore | None = None


def init_store(
    backend: StorageBackend, db: DatabaseSessionManager | None = None,
) -> ContentStore:
    global content_store
    if backend is StorageBackend.DATABASE:
        if db is None:
            raise RuntimeError("Database backing requires an initialized database")
        content_store = build_sql_store(db)
    else:
        content_store = build_memory_store()
    logger.info(f"Content store ready ({backend.value} backing)")
    return content_store


def get_store() -> ContentStore:
    """FastAPI dependency for the content store."""
    if not content_store:
        raise RuntimeError("Content store not initialized")
    return content_store
