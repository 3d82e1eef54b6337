"""ORM Models — SQLAlchemy declarative models for all portfolio entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column names equal the snake_case schema field names, so rows map 1:1 to payload dicts

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.project import Project  # noqa: F401
from app.models.blog_post import BlogPost  # noqa: F401
from app.models.social_link import SocialLink  # noqa: F401
from app.models.work_experience import WorkExperience  # noqa: F401
from app.models.education import Education  # noqa: F401
from app.models.skill import Skill  # noqa: F401
from app.models.user_info import UserInfo  # noqa: F401
from app.models.site_settings import SiteSettings  # noqa: F401
from app.models.about import About  # noqa: F401
