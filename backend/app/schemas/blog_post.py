"""Blog Post Schemas — create/update/response contracts for blog content.

Invariants:
    - slug is URL-safe: letters, digits, '-', '_' (first char alphanumeric)
    - slug uniqueness is NOT checked here (needs storage); repositories enforce it
    - published defaults to False; publishedAt stays None until the caller sets it
    - naive publishedAt values are interpreted as UTC
"""

from datetime import datetime

from pydantic import Field, StrictBool

from app.schemas.base import EntityPayload, NonEmptyStr, UtcDatetime, partial_model

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


class BlogPostCreate(EntityPayload):
    """Blog post creation. The slug is the business key."""
    title: NonEmptyStr
    slug: str = Field(pattern=SLUG_PATTERN, max_length=200)
    content: NonEmptyStr
    excerpt: str | None = None
    author: NonEmptyStr
    published_at: UtcDatetime | None = None
    featured: StrictBool = False
    tags: list[str] | None = None
    category: str | None = None
    image: str | None = None
    published: StrictBool = False


BlogPostUpdate = partial_model(BlogPostCreate)


class BlogPostResponse(BlogPostCreate):
    id: str
    updated_at: datetime
