"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON (camelCase keys) except 204 deletes

Design Decisions:
    - Thin routes delegate to repositories; status codes come from error handlers
"""
