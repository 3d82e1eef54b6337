"""Services Layer — resource catalog and content store wiring.

Invariants:
    - The catalog is the single list of resources the API exposes
    - The content store is the only place that picks a storage backing
"""
