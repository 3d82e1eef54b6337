"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the UUID4 string minted at creation; never reused
    - ResourceKind and OrderingPolicy are the only switches between resource behaviors
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Cardinality of a resource; decides which repository contract applies."""
    COLLECTION = "collection"
    SINGLETON = "singleton"


class OrderingPolicy(str, Enum):
    """How a collection is sorted for listing."""
    MANUAL_ASC = "manual_asc"
    MANUAL_DESC = "manual_desc"
    RECENCY_DESC = "recency_desc"


class ProjectStatus(str, Enum):
    """Project publication state, maps to the `status` field."""
    DRAFT = "draft"
    PUBLISHED = "published"


class StorageBackend(str, Enum):
    """Concrete repository backing selected from settings."""
    MEMORY = "memory"
    DATABASE = "database"
