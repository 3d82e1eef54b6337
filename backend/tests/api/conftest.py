"""API test fixtures — FastAPI test client over a fresh content store.

Invariants:
    - Every test gets an empty in-memory content store
    - The module-level content_store is restored after each test

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so the store is installed
      directly (same approach as patching db_manager for the database)
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.services.content_store as store_module
from app.main import app
from app.services.content_store import build_memory_store


@pytest.fixture
def store():
    original = store_module.content_store
    fresh = build_memory_store()
    store_module.content_store = fresh
    yield fresh
    store_module.content_store = original


@pytest.fixture
async def client(store):
    """FastAPI test client with an empty in-memory store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def project_payload():
    return {
        "title": "Portfolio",
        "description": "My portfolio site",
        "technologies": ["TS"],
        "category": "Web",
        "image": "x.png",
    }


@pytest.fixture
def blog_payload():
    def make(slug: str, **overrides):
        body = {
            "title": f"Post {slug}",
            "slug": slug,
            "content": "Body text",
            "author": "Ada",
        }
        body.update(overrides)
        return body
    return make


@pytest.fixture
def user_info_payload():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "title": "Engineer",
        "role": "Developer",
        "timezone": "Europe/London",
        "email": "ada@example.com",
    }
