"""CRUD operations for DemoTable."""

import logging
from typing import Any, Dict, List

from trainerdex.db.connection import DatabasePool
from trainerdex.errors import ErrorKind, StoreError

logger = logging.getLogger(__name__)


async def fetch_demotable(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all("SELECT id, name FROM DemoTable ORDER BY id")


async def initiate_demotable(pool: DatabasePool) -> None:
    """Drop DemoTable if present and create it empty."""
    async with pool.connection() as db:
        await db.execute_script("""
            DROP TABLE IF EXISTS DemoTable;
            CREATE TABLE DemoTable (
                id INTEGER PRIMARY KEY,
                name VARCHAR(20)
            );
        """)
    logger.info("DemoTable recreated")


async def insert_demotable(pool: DatabasePool, id: int, name: str) -> None:
    async with pool.connection() as db:
        await db.execute("INSERT INTO DemoTable (id, name) VALUES ($1, $2)", id, name)


async def update_name_demotable(pool: DatabasePool, old_name: str, new_name: str) -> int:
    """Rename every row called ``old_name``. Returns the number of rows changed."""
    async with pool.connection() as db:
        result = await db.execute(
            "UPDATE DemoTable SET name = $1 WHERE name = $2", new_name, old_name
        )
    if result.rowcount == 0:
        raise StoreError(ErrorKind.NOT_FOUND, f"no DemoTable row named '{old_name}'")
    return result.rowcount


async def count_demotable(pool: DatabasePool) -> int:
    async with pool.connection() as db:
        return await db.fetch_val("SELECT COUNT(*) FROM DemoTable")
