"""Singleton Routes — REST endpoints for an at-most-one-row resource.

Invariants:
    - GET  /api/<name>        → 200 with the row, or 200 with JSON null when none exists yet
    - POST /api/<name>        → 201 | 400 when a row already exists (use PUT instead)
    - PUT  /api/<name>/{id}   → 200 | 404 when no row exists yet (no create-on-demand)
    - No DELETE route: singletons live for the lifetime of the site

Design Decisions:
    - PUT keeps the {id} path segment for client compatibility, but the operation is
      keyed to the single row; the segment is not matched against the stored id
    - Absent singleton is 200/null rather than 404: the admin UI uses it to choose
      between its create and edit forms
"""

from fastapi import APIRouter, Depends, status

from app.core.resource_definition import ResourceDefinition
from app.services.content_store import ContentStore, get_store


def build_singleton_router(definition: ResourceDefinition) -> APIRouter:
    """Build the route family for a singleton resource."""
    if definition.is_collection:
        raise ValueError(f"'{definition.name}' is not a singleton resource")

    router = APIRouter(prefix=f"/api/{definition.name}", tags=[definition.name])
    create_schema = definition.create_schema
    update_schema = definition.update_schema
    response_schema = definition.response_schema

    @router.get("", response_model=response_schema | None)
    async def get_singleton(store: ContentStore = Depends(get_store)):
        return await store.singleton(definition.name).get()

    @router.post(
        "", response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_singleton(
        body: create_schema, store: ContentStore = Depends(get_store),
    ):
        return await store.singleton(definition.name).create(body.model_dump())

    @router.put("/{entity_id}", response_model=response_schema)
    async def update_singleton(
        entity_id: str,
        body: update_schema,
        store: ContentStore = Depends(get_store),
    ):
        """Partial update of the single row; entity_id is accepted but not matched."""
        return await store.singleton(definition.name).update(
            body.model_dump(exclude_unset=True),
        )

    return router
