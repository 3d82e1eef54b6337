"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or the developer's .env choice of backing
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
