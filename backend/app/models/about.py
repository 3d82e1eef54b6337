"""About ORM — about-page content and section visibility flags (singleton table)."""

from sqlalchemy import Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, EntityRowMixin, SingletonRowMixin


class About(SingletonRowMixin, EntityRowMixin, Base):
    __tablename__ = "about"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    avatar: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    languages: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    table_of_content_display: Mapped[bool] = mapped_column(Boolean, default=True)
    table_of_content_sub_items: Mapped[bool] = mapped_column(Boolean, default=False)
    avatar_display: Mapped[bool] = mapped_column(Boolean, default=True)
    calendar_display: Mapped[bool] = mapped_column(Boolean, default=False)
    calendar_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    intro_display: Mapped[bool] = mapped_column(Boolean, default=True)
    intro_title: Mapped[str] = mapped_column(Text, nullable=False)
    intro_description: Mapped[str] = mapped_column(Text, nullable=False)
    work_display: Mapped[bool] = mapped_column(Boolean, default=True)
    work_title: Mapped[str] = mapped_column(Text, nullable=False)
    studies_display: Mapped[bool] = mapped_column(Boolean, default=True)
    studies_title: Mapped[str] = mapped_column(Text, nullable=False)
    technical_display: Mapped[bool] = mapped_column(Boolean, default=True)
    technical_title: Mapped[str] = mapped_column(Text, nullable=False)
