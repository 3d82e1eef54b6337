"""Resource Definition — the per-entity table that parametrizes the generic CRUD pattern.

Invariants:
    - One frozen ResourceDefinition per entity; nothing entity-specific lives elsewhere
    - Collections MUST declare an ordering policy; singletons MUST NOT
    - unique_fields are checked against OTHER rows only (a row never conflicts with itself)

Design Decisions:
    - Data over subclasses: a new resource is a new definition, not a new repository class
"""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel

from app.core.domain_types import OrderingPolicy, ResourceKind


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything the repositories and routers need to know about one entity."""
    name: str
    label: str
    kind: ResourceKind
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    ordering: OrderingPolicy | None = None
    unique_fields: tuple[str, ...] = ()
    stamp_created_at: bool = False
    stamp_updated_at: bool = False
    field_defaults: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.kind is ResourceKind.COLLECTION and self.ordering is None:
            raise ValueError(f"Collection resource '{self.name}' needs an ordering policy")
        if self.kind is ResourceKind.SINGLETON and self.ordering is not None:
            raise ValueError(f"Singleton resource '{self.name}' cannot be ordered")
        defaults = {}
        for name, info in self.create_schema.model_fields.items():
            if info.is_required():
                continue
            value = info.get_default(call_default_factory=True)
            defaults[name] = value.value if isinstance(value, Enum) else value
        object.__setattr__(self, "field_defaults", defaults)

    @property
    def is_collection(self) -> bool:
        return self.kind is ResourceKind.COLLECTION

    @property
    def stored_fields(self) -> tuple[str, ...]:
        """Every key a stored row carries, identity and timestamps included."""
        names = ["id", *self.create_schema.model_fields]
        if self.stamp_created_at:
            names.append("created_at")
        if self.stamp_updated_at:
            names.append("updated_at")
        return tuple(names)
