"""Root pytest configuration."""

import os

# Settings are cached on first use; point them at in-memory SQLite unless overridden.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
