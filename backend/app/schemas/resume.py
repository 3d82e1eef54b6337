"""Resume Schemas — manually ordered collections shown on the about page.

Invariants:
    - `order` is required on create for every entity here (no auto-increment)
    - `images` fields are opaque text (comma/JSON list is a presentation concern)
"""

from pydantic import StrictInt

from app.schemas.base import EntityPayload, NonEmptyStr, partial_model


# --- Social links --------------------------------------------------------------

class SocialLinkCreate(EntityPayload):
    name: NonEmptyStr
    icon: NonEmptyStr
    url: NonEmptyStr
    order: StrictInt


SocialLinkUpdate = partial_model(SocialLinkCreate)


class SocialLinkResponse(SocialLinkCreate):
    id: str


# --- Work experience -----------------------------------------------------------

class WorkExperienceCreate(EntityPayload):
    company: NonEmptyStr
    timeframe: NonEmptyStr
    role: NonEmptyStr
    achievements: str | None = None
    images: str | None = None
    order: StrictInt


WorkExperienceUpdate = partial_model(WorkExperienceCreate)


class WorkExperienceResponse(WorkExperienceCreate):
    id: str


# --- Education -----------------------------------------------------------------

class EducationCreate(EntityPayload):
    name: NonEmptyStr
    description: NonEmptyStr
    order: StrictInt


EducationUpdate = partial_model(EducationCreate)


class EducationResponse(EducationCreate):
    id: str


# --- Skills --------------------------------------------------------------------

class SkillCreate(EntityPayload):
    title: NonEmptyStr
    description: NonEmptyStr
    images: str | None = None
    order: StrictInt


SkillUpdate = partial_model(SkillCreate)


class SkillResponse(SkillCreate):
    id: str
