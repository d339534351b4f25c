"""Database abstraction layer for PostgreSQL (asyncpg)."""

from trainerdex.db.connection import (
    Database,
    DatabasePool,
    Result,
)
from trainerdex.db.schema import ensure_schema, drop_schema
