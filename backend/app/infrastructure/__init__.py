"""Infrastructure Layer — storage backings and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All storage failures mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Two interchangeable backings (memory, SQL) behind the same repository protocols
"""
