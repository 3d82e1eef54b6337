"""Collection Routes — REST endpoints for one many-row resource, built from its definition.

Invariants:
    - GET    /api/<name>        → 200, full list in ordering-policy order (never paginated)
    - GET    /api/<name>/{id}   → 200 | 404
    - POST   /api/<name>        → 201 with the created entity
    - PUT    /api/<name>/{id}   → 200 with the merged entity | 404 | 400
    - DELETE /api/<name>/{id}   → 204 empty body | 404
    - Request bodies validated by the definition's pydantic schemas before reaching storage
    - Routes contain no business logic: repositories raise, error handlers map

Design Decisions:
    - Router factory over nine hand-written route modules: every collection
      follows the identical pattern; main.py still registers each router explicitly
    - Update payload dumped with exclude_unset so omitted fields are never applied
"""

from fastapi import APIRouter, Depends, status

from app.core.domain_types import EntityId
from app.core.resource_definition import ResourceDefinition
from app.services.content_store import ContentStore, get_store


def build_collection_router(definition: ResourceDefinition) -> APIRouter:
    """Build the route family for a collection resource."""
    if not definition.is_collection:
        raise ValueError(f"'{definition.name}' is not a collection resource")

    router = APIRouter(prefix=f"/api/{definition.name}", tags=[definition.name])
    create_schema = definition.create_schema
    update_schema = definition.update_schema
    response_schema = definition.response_schema

    @router.get("", response_model=list[response_schema])
    async def list_entities(store: ContentStore = Depends(get_store)):
        """List every row, sorted per the resource's ordering policy."""
        return await store.collection(definition.name).list()

    @router.get("/{entity_id}", response_model=response_schema)
    async def get_entity(entity_id: str, store: ContentStore = Depends(get_store)):
        return await store.collection(definition.name).get(EntityId(entity_id))

    @router.post(
        "", response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_entity(
        body: create_schema, store: ContentStore = Depends(get_store),
    ):
        return await store.collection(definition.name).create(body.model_dump())

    @router.put("/{entity_id}", response_model=response_schema)
    async def update_entity(
        entity_id: str,
        body: update_schema,
        store: ContentStore = Depends(get_store),
    ):
        """Partial update — only keys present in the body are applied."""
        return await store.collection(definition.name).update(
            EntityId(entity_id), body.model_dump(exclude_unset=True),
        )

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(
        entity_id: str, store: ContentStore = Depends(get_store),
    ):
        await store.collection(definition.name).delete(EntityId(entity_id))

    return router
