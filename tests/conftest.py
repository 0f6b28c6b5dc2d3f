"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or a shared seed
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RANDOMNESS_SEED", "00" * 32)
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")
