"""Route Modules — health checks plus the two generic resource route families.

Invariants:
    - Each router carries its own prefix and tags
    - Routes never contain business logic (delegate to repositories)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
