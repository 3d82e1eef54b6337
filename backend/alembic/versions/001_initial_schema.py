"""Initial schema — the nine portfolio content tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _identity() -> list[sa.Column]:
    return [
        sa.Column("pk", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(36), nullable=False, unique=True),
    ]


def _singleton_key() -> sa.Column:
    return sa.Column("singleton_key", sa.Integer, nullable=False, unique=True, server_default="1")


def upgrade() -> None:
    op.create_table(
        "projects",
        *_identity(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("image", sa.Text, nullable=False),
        sa.Column("technologies", sa.JSON, nullable=False),
        sa.Column("github_url", sa.Text, nullable=True),
        sa.Column("live_url", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="published"),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("order", sa.Integer, nullable=True),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "blog_posts",
        *_identity(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("slug", sa.String(200), nullable=False, unique=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("author", sa.Text, nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("tags", sa.JSON, nullable=True),
        sa.Column("category", sa.Text, nullable=True),
        sa.Column("image", sa.Text, nullable=True),
        sa.Column("published", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "social_links",
        *_identity(),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("icon", sa.Text, nullable=False),
        sa.Column("url", sa.Text, nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
    )

    op.create_table(
        "work_experiences",
        *_identity(),
        sa.Column("company", sa.Text, nullable=False),
        sa.Column("timeframe", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False),
        sa.Column("achievements", sa.Text, nullable=True),
        sa.Column("images", sa.Text, nullable=True),
        sa.Column("order", sa.Integer, nullable=False),
    )

    op.create_table(
        "education",
        *_identity(),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
    )

    op.create_table(
        "skills",
        *_identity(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("images", sa.Text, nullable=True),
        sa.Column("order", sa.Integer, nullable=False),
    )

    op.create_table(
        "user_info",
        *_identity(),
        _singleton_key(),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("avatar", sa.Text, nullable=True),
        sa.Column("location", sa.Text, nullable=True),
        sa.Column("timezone", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("phone", sa.Text, nullable=True),
        sa.Column("website", sa.Text, nullable=True),
        sa.Column("github", sa.Text, nullable=True),
        sa.Column("linkedin", sa.Text, nullable=True),
        sa.Column("twitter", sa.Text, nullable=True),
        sa.Column("languages", sa.JSON, nullable=True),
        sa.Column("social_links", sa.Text, nullable=True),
        sa.Column("skills", sa.JSON, nullable=True),
        sa.Column("resume", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "settings",
        *_identity(),
        _singleton_key(),
        sa.Column("site_name", sa.Text, nullable=False),
        sa.Column("site_description", sa.Text, nullable=False),
        sa.Column("site_url", sa.Text, nullable=False),
        sa.Column("newsletter", sa.Text, nullable=True),
        sa.Column("contact_form", sa.Text, nullable=True),
        sa.Column("theme", sa.Text, nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "about",
        *_identity(),
        _singleton_key(),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False),
        sa.Column("avatar", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("languages", sa.Text, nullable=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("table_of_content_display", sa.Boolean, server_default=sa.true()),
        sa.Column("table_of_content_sub_items", sa.Boolean, server_default=sa.false()),
        sa.Column("avatar_display", sa.Boolean, server_default=sa.true()),
        sa.Column("calendar_display", sa.Boolean, server_default=sa.false()),
        sa.Column("calendar_link", sa.Text, nullable=True),
        sa.Column("intro_display", sa.Boolean, server_default=sa.true()),
        sa.Column("intro_title", sa.Text, nullable=False),
        sa.Column("intro_description", sa.Text, nullable=False),
        sa.Column("work_display", sa.Boolean, server_default=sa.true()),
        sa.Column("work_title", sa.Text, nullable=False),
        sa.Column("studies_display", sa.Boolean, server_default=sa.true()),
        sa.Column("studies_title", sa.Text, nullable=False),
        sa.Column("technical_display", sa.Boolean, server_default=sa.true()),
        sa.Column("technical_title", sa.Text, nullable=False),
    )


def downgrade() -> None:
    for table in (
        "about", "settings", "user_info", "skills", "education",
        "work_experiences", "social_links", "blog_posts", "projects",
    ):
        op.drop_table(table)
