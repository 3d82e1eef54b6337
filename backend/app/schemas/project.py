"""Project Schemas — create/update/response contracts for portfolio projects.

Invariants:
    - title, description, image, technologies, category required on create
    - status defaults to "published", featured to False, order/year to None
    - technologies may be empty; each element must be text
"""

from datetime import datetime

from pydantic import StrictBool, StrictInt

from app.core.domain_types import ProjectStatus
from app.schemas.base import EntityPayload, NonEmptyStr, partial_model


class ProjectCreate(EntityPayload):
    """Project creation; manual `order` is optional for projects only."""
    title: NonEmptyStr
    description: NonEmptyStr
    long_description: str | None = None
    image: NonEmptyStr
    technologies: list[str]
    github_url: str | None = None
    live_url: str | None = None
    category: NonEmptyStr
    status: ProjectStatus = ProjectStatus.PUBLISHED
    featured: StrictBool = False
    order: StrictInt | None = None
    year: StrictInt | None = None


ProjectUpdate = partial_model(ProjectCreate)


class ProjectResponse(ProjectCreate):
    id: str
    created_at: datetime
    updated_at: datetime
