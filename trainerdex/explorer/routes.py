"""FastAPI router for the table explorer."""

from typing import Optional

from fastapi import APIRouter

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.explorer import database as db

router = APIRouter(prefix="/tables", tags=["explorer"])


@router.get("")
@on_failure(data=[])
async def list_tables(pool: PoolDep):
    return {"data": await db.fetch_table_names(pool)}


@router.get("/{table}/columns")
@on_failure(data=[])
async def list_columns(table: str, pool: PoolDep):
    return {"data": await db.fetch_column_names(pool, table)}


@router.get("/{table}")
@on_failure(data=[])
async def project_table(table: str, pool: PoolDep, columns: Optional[str] = None):
    """Rows of ``table`` restricted to the comma separated ``columns``."""
    wanted = columns.split(",") if columns else []
    return {"data": await db.fetch_columns_from_table(pool, table, wanted)}
