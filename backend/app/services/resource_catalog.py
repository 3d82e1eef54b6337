"""Resource Catalog — the nine portfolio resources as ResourceDefinitions.

Invariants:
    - `name` is the URL segment under /api/ (e.g. "blog-posts")
    - Projects are the ONLY manual-order-descending resource
    - Blog posts are the ONLY recency-ordered resource and the only one with a unique key (slug)
    - Timestamp stamping follows each entity's stored fields (About carries none)

Design Decisions:
    - Explicit tuple of definitions over auto-discovery: the route table in main.py
      reads from here, so adding a resource is one definition plus one model
"""

from app.core.domain_types import OrderingPolicy, ResourceKind
from app.core.resource_definition import ResourceDefinition
from app.schemas.blog_post import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from app.schemas.profile import (
    AboutCreate, AboutResponse, AboutUpdate,
    UserInfoCreate, UserInfoResponse, UserInfoUpdate,
)
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.schemas.resume import (
    EducationCreate, EducationResponse, EducationUpdate,
    SkillCreate, SkillResponse, SkillUpdate,
    SocialLinkCreate, SocialLinkResponse, SocialLinkUpdate,
    WorkExperienceCreate, WorkExperienceResponse, WorkExperienceUpdate,
)
from app.schemas.site_settings import SettingsCreate, SettingsResponse, SettingsUpdate


# ─── Collections ─────────────────────────────────────────────────

PROJECTS = ResourceDefinition(
    name="projects", label="Project", kind=ResourceKind.COLLECTION,
    create_schema=ProjectCreate, update_schema=ProjectUpdate,
    response_schema=ProjectResponse,
    ordering=OrderingPolicy.MANUAL_DESC,
    stamp_created_at=True, stamp_updated_at=True,
)

BLOG_POSTS = ResourceDefinition(
    name="blog-posts", label="Blog post", kind=ResourceKind.COLLECTION,
    create_schema=BlogPostCreate, update_schema=BlogPostUpdate,
    response_schema=BlogPostResponse,
    ordering=OrderingPolicy.RECENCY_DESC,
    unique_fields=("slug",),
    stamp_updated_at=True,
)

SOCIAL_LINKS = ResourceDefinition(
    name="social-links", label="Social link", kind=ResourceKind.COLLECTION,
    create_schema=SocialLinkCreate, update_schema=SocialLinkUpdate,
    response_schema=SocialLinkResponse,
    ordering=OrderingPolicy.MANUAL_ASC,
)

WORK_EXPERIENCES = ResourceDefinition(
    name="work-experiences", label="Work experience", kind=ResourceKind.COLLECTION,
    create_schema=WorkExperienceCreate, update_schema=WorkExperienceUpdate,
    response_schema=WorkExperienceResponse,
    ordering=OrderingPolicy.MANUAL_ASC,
)

EDUCATION = ResourceDefinition(
    name="education", label="Education", kind=ResourceKind.COLLECTION,
    create_schema=EducationCreate, update_schema=EducationUpdate,
    response_schema=EducationResponse,
    ordering=OrderingPolicy.MANUAL_ASC,
)

SKILLS = ResourceDefinition(
    name="skills", label="Skill", kind=ResourceKind.COLLECTION,
    create_schema=SkillCreate, update_schema=SkillUpdate,
    response_schema=SkillResponse,
    ordering=OrderingPolicy.MANUAL_ASC,
)


# ─── Singletons ──────────────────────────────────────────────────

USER_INFO = ResourceDefinition(
    name="user-info", label="User info", kind=ResourceKind.SINGLETON,
    create_schema=UserInfoCreate, update_schema=UserInfoUpdate,
    response_schema=UserInfoResponse,
    stamp_created_at=True, stamp_updated_at=True,
)

SETTINGS = ResourceDefinition(
    name="settings", label="Settings", kind=ResourceKind.SINGLETON,
    create_schema=SettingsCreate, update_schema=SettingsUpdate,
    response_schema=SettingsResponse,
    stamp_updated_at=True,
)

ABOUT = ResourceDefinition(
    name="about", label="About", kind=ResourceKind.SINGLETON,
    create_schema=AboutCreate, update_schema=AboutUpdate,
    response_schema=AboutResponse,
)


COLLECTIONS: tuple[ResourceDefinition, ...] = (
    PROJECTS, BLOG_POSTS, SOCIAL_LINKS, WORK_EXPERIENCES, EDUCATION, SKILLS,
)
SINGLETONS: tuple[ResourceDefinition, ...] = (USER_INFO, SETTINGS, ABOUT)
ALL_RESOURCES: tuple[ResourceDefinition, ...] = COLLECTIONS + SINGLETONS
