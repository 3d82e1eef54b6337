"""SiteSettings ORM — site-wide settings (singleton table).

Invariants:
    - newsletter / contact_form / theme are JSON-encoded TEXT, stored verbatim
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, EntityRowMixin, SingletonRowMixin


class SiteSettings(SingletonRowMixin, EntityRowMixin, Base):
    __tablename__ = "settings"

    site_name: Mapped[str] = mapped_column(Text, nullable=False)
    site_description: Mapped[str] = mapped_column(Text, nullable=False)
    site_url: Mapped[str] = mapped_column(Text, nullable=False)
    newsletter: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_form: Mapped[str | None] = mapped_column(Text, nullable=True)
    theme: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
