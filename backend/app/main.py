"""Portfolio CMS API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly, one line per resource (no auto-discovery)
    - Global error handlers map PortfolioError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Content store (and database, when configured) initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main.py only registers them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health
from app.api.routes.collection_routes import build_collection_router
from app.api.routes.singleton_routes import build_singleton_router
from app.config import get_settings
from app.core.domain_types import StorageBackend
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging
from app.services import resource_catalog as catalog
from app.services.content_store import init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = None
    if settings.storage_backend is StorageBackend.DATABASE:
        db = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    init_store(settings.storage_backend, db)
    logger.info("Portfolio CMS API started")
    yield
    if db is not None:
        await db.dispose()
    logger.info("Portfolio CMS API shutting down")


app = FastAPI(
    title="Portfolio CMS API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(build_collection_router(catalog.PROJECTS))
app.include_router(build_collection_router(catalog.BLOG_POSTS))
app.include_router(build_collection_router(catalog.SOCIAL_LINKS))
app.include_router(build_collection_router(catalog.WORK_EXPERIENCES))
app.include_router(build_collection_router(catalog.EDUCATION))
app.include_router(build_collection_router(catalog.SKILLS))
app.include_router(build_singleton_router(catalog.USER_INFO))
app.include_router(build_singleton_router(catalog.SETTINGS))
app.include_router(build_singleton_router(catalog.ABOUT))

register_error_handlers(app)
