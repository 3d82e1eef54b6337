"""Core Layer — pure domain rules, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Lifecycle, ordering and uniqueness rules are pure and deterministic
      (the clock is read by callers and passed in)

Design Decisions:
    - Functional core separated from imperative shell: storage backings do IO
      around these rules
"""
