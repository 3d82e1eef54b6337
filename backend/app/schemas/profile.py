"""Profile Schemas — the UserInfo and About singletons.

Invariants:
    - Both are singletons: at most one row, no delete
    - About visibility flags default to the original site layout
      (sections shown, calendar hidden, table of contents without sub-items)
"""

from datetime import datetime

from pydantic import StrictBool

from app.schemas.base import EntityPayload, NonEmptyStr, partial_model


class UserInfoCreate(EntityPayload):
    """Owner profile: contact and identity details."""
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    title: NonEmptyStr
    role: NonEmptyStr
    bio: str | None = None
    avatar: str | None = None
    location: str | None = None
    timezone: NonEmptyStr
    email: NonEmptyStr
    phone: str | None = None
    website: str | None = None
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    languages: list[str] | None = None
    social_links: str | None = None
    skills: list[str] | None = None
    resume: str | None = None


UserInfoUpdate = partial_model(UserInfoCreate)


class UserInfoResponse(UserInfoCreate):
    id: str
    created_at: datetime
    updated_at: datetime


class AboutCreate(EntityPayload):
    """About page: section titles plus per-section visibility flags."""
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    role: NonEmptyStr
    avatar: NonEmptyStr
    location: NonEmptyStr
    languages: str | None = None
    title: NonEmptyStr
    description: NonEmptyStr
    table_of_content_display: StrictBool = True
    table_of_content_sub_items: StrictBool = False
    avatar_display: StrictBool = True
    calendar_display: StrictBool = False
    calendar_link: str | None = None
    intro_display: StrictBool = True
    intro_title: NonEmptyStr
    intro_description: NonEmptyStr
    work_display: StrictBool = True
    work_title: NonEmptyStr
    studies_display: StrictBool = True
    studies_title: NonEmptyStr
    technical_display: StrictBool = True
    technical_title: NonEmptyStr


AboutUpdate = partial_model(AboutCreate)


class AboutResponse(AboutCreate):
    id: str
