"""Collection Routes — verifies the REST surface shared by the six collection resources.

Invariants:
    - POST → 201 with generated id, defaults and camelCase keys
    - GET list follows the ordering policy (projects descending, stable ties)
    - PUT applies only supplied keys; unknown keys and null on required fields → 400
    - Wrong scalar types (string order, string or integer flags) → 400, nothing stored
    - Duplicate slug → 400 CONFLICT, stored post unchanged
    - DELETE → 204, then 404; DELETE of an unknown id → 404
    - StorageError → 500 with generic message; unexpected exceptions → 500 INTERNAL_ERROR
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.errors import StorageError
from app.main import app


async def test_create_project_returns_defaults(client, project_payload):
    res = await client.post("/api/projects", json=project_payload)
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["status"] == "published"
    assert body["featured"] is False
    assert body["order"] is None
    assert body["createdAt"] == body["updatedAt"]
    assert "created_at" not in body


async def test_equal_order_keeps_insertion_order(client, project_payload):
    a = (await client.post("/api/projects", json={**project_payload, "order": 5})).json()
    b = (await client.post("/api/projects", json={**project_payload, "order": 5})).json()
    res = await client.get("/api/projects")
    assert res.status_code == 200
    assert [p["id"] for p in res.json()] == [a["id"], b["id"]]


async def test_projects_listed_highest_order_first(client, project_payload):
    low = (await client.post("/api/projects", json={**project_payload, "order": 1})).json()
    high = (await client.post("/api/projects", json={**project_payload, "order": 9})).json()
    res = await client.get("/api/projects")
    assert [p["id"] for p in res.json()] == [high["id"], low["id"]]


async def test_skills_listed_lowest_order_first(client):
    for order, title in ((2, "Go"), (1, "Python")):
        await client.post(
            "/api/skills", json={"title": title, "description": "d", "order": order},
        )
    res = await client.get("/api/skills")
    assert [s["title"] for s in res.json()] == ["Python", "Go"]


async def test_empty_collection_lists_empty(client):
    res = await client.get("/api/work-experiences")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_by_id(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    res = await client.get(f"/api/projects/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_get_unknown_id_is_404(client):
    res = await client.get("/api/education/nope")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_missing_field_is_400(client, project_payload):
    del project_payload["title"]
    res = await client.post("/api/projects", json=project_payload)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("title") for d in error["details"])


async def test_create_unknown_field_is_400(client, project_payload):
    res = await client.post("/api/projects", json={**project_payload, "views": 3})
    assert res.status_code == 400


async def test_partial_update_preserves_other_fields(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    res = await client.put(f"/api/projects/{created['id']}", json={"featured": True})
    assert res.status_code == 200
    body = res.json()
    assert body["featured"] is True
    assert body["title"] == "Portfolio"
    assert body["technologies"] == ["TS"]
    assert body["createdAt"] == created["createdAt"]
    assert body["id"] == created["id"]


async def test_update_rejects_identity_fields(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    res = await client.put(f"/api/projects/{created['id']}", json={"id": "other"})
    assert res.status_code == 400


async def test_update_null_required_field_is_400(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    res = await client.put(f"/api/projects/{created['id']}", json={"title": None})
    assert res.status_code == 400
    check = await client.get(f"/api/projects/{created['id']}")
    assert check.json()["title"] == "Portfolio"


async def test_update_unknown_id_is_404(client):
    res = await client.put("/api/skills/nope", json={"title": "Go"})
    assert res.status_code == 404


async def test_duplicate_slug_on_create_is_conflict(client, blog_payload):
    await client.post("/api/blog-posts", json=blog_payload("hello"))
    res = await client.post("/api/blog-posts", json=blog_payload("hello"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "CONFLICT"


async def test_slug_update_to_taken_value_leaves_post_unchanged(client, blog_payload):
    await client.post("/api/blog-posts", json=blog_payload("first"))
    second = (await client.post("/api/blog-posts", json=blog_payload("second"))).json()
    res = await client.put(f"/api/blog-posts/{second['id']}", json={"slug": "first"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "CONFLICT"
    check = await client.get(f"/api/blog-posts/{second['id']}")
    assert check.json() == second


async def test_invalid_slug_is_400(client, blog_payload):
    res = await client.post("/api/blog-posts", json=blog_payload("no spaces allowed"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_blog_posts_newest_first(client, blog_payload):
    await client.post(
        "/api/blog-posts",
        json=blog_payload("old", publishedAt="2023-01-01T00:00:00Z", published=True),
    )
    await client.post(
        "/api/blog-posts",
        json=blog_payload("new", publishedAt="2024-06-01T00:00:00Z", published=True),
    )
    res = await client.get("/api/blog-posts")
    assert [p["slug"] for p in res.json()] == ["new", "old"]


async def test_delete_returns_204_then_404(client):
    created = (await client.post(
        "/api/social-links",
        json={"name": "GitHub", "icon": "github", "url": "https://g.it", "order": 1},
    )).json()
    res = await client.delete(f"/api/social-links/{created['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/social-links/{created['id']}")).status_code == 404


async def test_delete_unknown_skill_is_404(client):
    res = await client.delete("/api/skills/does-not-exist")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity_id"] == "does-not-exist"


async def test_storage_failure_is_500_without_details(client, store, monkeypatch):
    async def failing_list():
        raise StorageError("query")

    monkeypatch.setattr(store.collection("projects"), "list", failing_list)
    res = await client.get("/api/projects")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert error["message"] == "Storage operation failed"


async def test_unexpected_exception_is_500(store, monkeypatch):
    async def crashing_list():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(store.collection("education"), "list", crashing_list)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/education")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


@pytest.mark.parametrize("name", [
    "projects", "blog-posts", "social-links", "work-experiences", "education", "skills",
])
async def test_every_collection_is_mounted(client, name):
    res = await client.get(f"/api/{name}")
    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.parametrize("overrides", [
    {"order": "5"},
    {"featured": "yes"},
    {"year": True},
    {"featured": 1},
])
async def test_wrong_scalar_types_are_rejected(client, project_payload, overrides):
    res = await client.post("/api/projects", json={**project_payload, **overrides})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (await client.get("/api/projects")).json() == []


async def test_update_with_string_order_is_rejected(client):
    created = (await client.post(
        "/api/skills", json={"title": "Go", "description": "d", "order": 1},
    )).json()
    res = await client.put(f"/api/skills/{created['id']}", json={"order": "2"})
    assert res.status_code == 400
    assert (await client.get(f"/api/skills/{created['id']}")).json()["order"] == 1
