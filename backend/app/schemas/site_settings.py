"""Site Settings Schemas — the Settings singleton and its JSON-encoded sub-configs.

Invariants:
    - theme / newsletter / contactForm are STORED as JSON text (opaque to repositories)
    - On input each accepts JSON text OR an object; both are validated against the
      sub-schema and re-encoded canonically, so malformed blobs never reach storage
    - decode(None) returns the sub-config defaults (what the admin UI shows for a fresh site)

Design Decisions:
    - Typed sub-objects with explicit encode/decode instead of free-form strings:
      a partial update replacing one blob cannot corrupt it silently
    - Sub-configs forbid unknown keys, same policy as entity payloads
    - SettingsResponse.theme_config() and friends are read helpers for Python
      callers; the HTTP API returns the blobs as JSON text
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, StrictBool, ValidationError,
)
from pydantic.alias_generators import to_camel

from app.schemas.base import EntityPayload, NonEmptyStr, partial_model


class _SubConfig(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    def encode(self) -> str:
        """Canonical JSON text, camelCase keys."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def decode(cls, text: str | None):
        if not text:
            return cls()
        return cls.model_validate_json(text)


class ContactFormConfig(_SubConfig):
    enabled: StrictBool = False
    notification_email: str = ""
    auto_reply_message: str = ""


class NewsletterConfig(_SubConfig):
    enabled: StrictBool = False
    title: str = ""
    description: str = ""


class ThemeConfig(_SubConfig):
    primary_color: str = "#3b82f6"
    font_family: str = "Inter"
    color_theme: str = "dark"


def _encoded(config_cls: type[_SubConfig]):
    """Build a before-validator normalizing text/object input to canonical JSON text."""

    def normalize(value: Any) -> Any:
        if value is None:
            return None
        try:
            if isinstance(value, config_cls):
                return value.encode()
            if isinstance(value, dict):
                return config_cls.model_validate(value).encode()
            if isinstance(value, (str, bytes)):
                return config_cls.model_validate_json(value).encode()
        except ValidationError as e:
            raise ValueError(f"invalid {config_cls.__name__}: {e.errors()[0]['msg']}")
        return value

    return BeforeValidator(normalize)


ContactFormText = Annotated[str, _encoded(ContactFormConfig)]
NewsletterText = Annotated[str, _encoded(NewsletterConfig)]
ThemeText = Annotated[str, _encoded(ThemeConfig)]


class SettingsCreate(EntityPayload):
    """Site-wide settings: name, description, URL plus feature blobs."""
    site_name: NonEmptyStr
    site_description: NonEmptyStr
    site_url: NonEmptyStr
    newsletter: NewsletterText | None = None
    contact_form: ContactFormText | None = None
    theme: ThemeText | None = None


SettingsUpdate = partial_model(SettingsCreate)


class SettingsResponse(SettingsCreate):
    id: str
    updated_at: datetime

    def theme_config(self) -> ThemeConfig:
        return ThemeConfig.decode(self.theme)

    def newsletter_config(self) -> NewsletterConfig:
        return NewsletterConfig.decode(self.newsletter)

    def contact_form_config(self) -> ContactFormConfig:
        return ContactFormConfig.decode(self.contact_form)
