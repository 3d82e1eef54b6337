"""Database Definitions — SQLAlchemy Base and the identity columns shared by every table.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local/dev and tests
"""
