"""Singleton Routes — verifies the REST surface of user-info, settings and about.

Invariants:
    - GET before create → 200 with JSON null
    - POST → 201; second POST → 400 CONFLICT
    - PUT before create → 404; PUT after create merges, whatever id is in the path
    - No DELETE route (405)
    - Settings blobs accept objects or JSON text and come back as JSON text
"""

import json

import pytest


async def test_user_info_absent_then_created(client, user_info_payload):
    res = await client.get("/api/user-info")
    assert res.status_code == 200
    assert res.json() is None

    created = await client.post("/api/user-info", json=user_info_payload)
    assert created.status_code == 201
    body = created.json()
    assert body["firstName"] == "Ada"
    assert body["createdAt"] == body["updatedAt"]

    fetched = await client.get("/api/user-info")
    assert fetched.json() == body


async def test_second_create_is_conflict(client, user_info_payload):
    await client.post("/api/user-info", json=user_info_payload)
    res = await client.post("/api/user-info", json={**user_info_payload, "firstName": "Grace"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "CONFLICT"
    assert (await client.get("/api/user-info")).json()["firstName"] == "Ada"


async def test_update_before_create_is_404(client):
    res = await client.put("/api/user-info/anything", json={"bio": "Hello"})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "User info not found"


async def test_update_merges_regardless_of_path_id(client, user_info_payload):
    created = (await client.post("/api/user-info", json=user_info_payload)).json()
    res = await client.put("/api/user-info/not-the-id", json={"bio": "Mathematician"})
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == created["id"]
    assert body["bio"] == "Mathematician"
    assert body["email"] == "ada@example.com"
    assert body["createdAt"] == created["createdAt"]


async def test_update_rejects_unknown_keys(client, user_info_payload):
    created = (await client.post("/api/user-info", json=user_info_payload)).json()
    res = await client.put(f"/api/user-info/{created['id']}", json={"nickname": "A"})
    assert res.status_code == 400


async def test_singletons_have_no_delete(client, user_info_payload):
    created = (await client.post("/api/user-info", json=user_info_payload)).json()
    res = await client.delete(f"/api/user-info/{created['id']}")
    assert res.status_code == 405


async def test_about_flags_default(client):
    res = await client.post("/api/about", json={
        "firstName": "Ada", "lastName": "Lovelace", "role": "Engineer",
        "avatar": "ada.png", "location": "London", "title": "About",
        "description": "Bio", "introTitle": "Intro", "introDescription": "Hi",
        "workTitle": "Work", "studiesTitle": "Studies", "technicalTitle": "Skills",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["tableOfContentDisplay"] is True
    assert body["tableOfContentSubItems"] is False
    assert body["calendarDisplay"] is False
    assert "createdAt" not in body


SITE = {
    "siteName": "Ada's site",
    "siteDescription": "Notes",
    "siteUrl": "https://ada.dev",
}


async def test_settings_theme_object_stored_as_text(client):
    res = await client.post("/api/settings", json={**SITE, "theme": {"colorTheme": "light"}})
    assert res.status_code == 201
    theme = json.loads(res.json()["theme"])
    assert theme["colorTheme"] == "light"
    assert theme["primaryColor"] == "#3b82f6"


async def test_settings_theme_text_accepted(client):
    res = await client.post(
        "/api/settings", json={**SITE, "contactForm": '{"enabled": true}'},
    )
    assert res.status_code == 201
    assert json.loads(res.json()["contactForm"])["enabled"] is True


@pytest.mark.parametrize("theme", ["{broken", '{"background": "red"}'])
async def test_settings_invalid_theme_is_400(client, theme):
    res = await client.post("/api/settings", json={**SITE, "theme": theme})
    assert res.status_code == 400
    assert (await client.get("/api/settings")).json() is None


async def test_settings_update_replaces_one_blob(client):
    await client.post("/api/settings", json={**SITE, "theme": {"fontFamily": "Mono"}})
    res = await client.put(
        "/api/settings/x", json={"newsletter": {"enabled": True, "title": "News"}},
    )
    assert res.status_code == 200
    body = res.json()
    assert json.loads(body["newsletter"])["title"] == "News"
    assert json.loads(body["theme"])["fontFamily"] == "Mono"
    assert body["siteName"] == "Ada's site"
