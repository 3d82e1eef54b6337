"""Schema Base — shared pydantic configuration and partial-update derivation.

Invariants:
    - Wire keys are camelCase (alias generator); snake_case names also accepted
    - Unknown keys are REJECTED on create and update (extra="forbid")
    - An update model accepts every create field as optional; explicit null
      only for fields that are nullable on create
    - int and bool fields are strict (StrictInt, StrictBool): "5", "yes", 1 and
      true are never coerced across types
    - validate_payload is PURE: (schema, raw input) -> dict | EntityValidationError.
      It is the helper for callers outside FastAPI request parsing (scripts,
      seeding, tests); routes get the same models through body parsing

Design Decisions:
    - Update models derived from create models (partial_model) instead of a
      second hand-written class per entity: field tables live in one place
    - Per-field transforms live in Annotated metadata (AfterValidator etc.),
      never in @field_validator, so partial_model carries them over
    - model_dump(exclude_unset=True) on updates: omitted fields never reach
      storage, so a partial update cannot clear them
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Optional, get_args

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, StringConstraints,
    ValidationError, create_model, model_validator,
)
from pydantic.alias_generators import to_camel

from app.core.errors import EntityValidationError
from app.core.ordering import as_utc

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class EntityPayload(BaseModel):
    """Base for create payloads: camelCase on the wire, unknown keys rejected."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )


class PartialPayload(EntityPayload):
    """Base for derived update payloads."""
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


def _is_nullable(annotation: Any) -> bool:
    return type(None) in get_args(annotation)


def partial_model(model: type[EntityPayload]) -> type[PartialPayload]:
    """Derive the update model: every field optional, constraints preserved."""
    fields: dict[str, Any] = {}
    nullable = set()
    for name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        if _is_nullable(info.annotation):
            nullable.add(name)
        fields[name] = (Optional[annotation], Field(default=None))

    partial = create_model(
        model.__name__.replace("Create", "Update"),
        __base__=PartialPayload,
        __module__=model.__module__,
        **fields,
    )
    partial.nullable_fields = frozenset(nullable)
    return partial


def validate_payload(
    schema: type[EntityPayload], raw: dict, *, partial: bool = False,
) -> dict:
    """Validate untyped input; return snake_case dict ready for a repository.

    partial=True drops unset fields so they are not applied on update.
    """
    try:
        model = schema.model_validate(raw)
    except ValidationError as e:
        fields = sorted({
            ".".join(str(loc) for loc in err["loc"]) or "__root__"
            for err in e.errors()
        })
        raise EntityValidationError(
            f"Invalid {schema.__name__} payload: {', '.join(fields)}", fields,
        ) from e
    return model.model_dump(exclude_unset=partial)
