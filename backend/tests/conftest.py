"""Root conftest — shared test configuration."""

import os

# Never let tests reach a real store or a .env-provided one
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
