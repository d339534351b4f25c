"""
Catalog lookups and column projections.

Table and column names come from the request, so they are checked against
information_schema and quoted before being placed in SQL text.
"""

from typing import Any, Dict, List, Optional

from trainerdex.db.connection import Database, DatabasePool
from trainerdex.errors import ErrorKind, StoreError


# Never exposed through the explorer
HIDDEN_COLUMNS = {("trainer", "password")}


def quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def _columns(db: Database, table: str) -> List[Dict[str, Any]]:
    rows = await db.fetch_all(
        """SELECT column_name, data_type
           FROM information_schema.columns
           WHERE table_schema = current_schema() AND table_name = $1
           ORDER BY ordinal_position""",
        table.lower(),
    )
    return [r for r in rows if (table.lower(), r["column_name"]) not in HIDDEN_COLUMNS]


async def fetch_table_names(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT table_name
               FROM information_schema.tables
               WHERE table_schema = current_schema() AND table_type = 'BASE TABLE'
               ORDER BY table_name"""
        )


async def fetch_column_names(pool: DatabasePool, table: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await _columns(db, table)


async def fetch_columns_from_table(
    pool: DatabasePool, table: str, columns: Optional[List[str]] = None
) -> List[Dict[str, Any]]:
    """Project ``columns`` (all when empty) out of ``table``."""
    async with pool.connection() as db:
        known = [c["column_name"] for c in await _columns(db, table)]
        if not known:
            raise StoreError(ErrorKind.NOT_FOUND, f"table '{table}' not found")

        wanted = [c.strip().lower() for c in (columns or []) if c.strip()] or known
        unknown = [c for c in wanted if c not in known]
        if unknown:
            raise StoreError(
                ErrorKind.INVALID_INPUT,
                f"unknown column(s) for '{table}': {', '.join(unknown)}",
            )

        projection = ", ".join(quote_ident(c) for c in wanted)
        return await db.fetch_all(f"SELECT {projection} FROM {quote_ident(table.lower())}")
