"""Ordering Policy — stable sort of collection rows for listing.

Invariants:
    - sort_rows is PURE: returns a new list, never reorders the input
    - Sorting is stable: rows with equal keys keep their insertion order,
      both ascending and descending (sorted(reverse=True) preserves ties)
    - Manual order treats a missing/null `order` as 0
    - Recency uses published_at, else updated_at, else the oldest possible instant

Design Decisions:
    - Rows are plain dicts keyed by snake_case field names: same shape for
      the in-memory and SQL backings
"""

from datetime import datetime, timezone

from app.core.domain_types import OrderingPolicy

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so mixed inputs compare safely."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def manual_order_key(row: dict) -> int:
    return row.get("order") or 0


def recency_key(row: dict) -> datetime:
    stamp = row.get("published_at") or row.get("updated_at")
    return as_utc(stamp) if stamp else _OLDEST


def sort_rows(rows: list[dict], policy: OrderingPolicy) -> list[dict]:
    """Sort rows (given in insertion order) per the resource's ordering policy."""
    if policy is OrderingPolicy.MANUAL_ASC:
        return sorted(rows, key=manual_order_key)
    if policy is OrderingPolicy.MANUAL_DESC:
        return sorted(rows, key=manual_order_key, reverse=True)
    if policy is OrderingPolicy.RECENCY_DESC:
        return sorted(rows, key=recency_key, reverse=True)
    raise ValueError(f"Unknown ordering policy: {policy}")
