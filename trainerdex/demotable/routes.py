"""FastAPI router for the demo table endpoints."""

from fastapi import APIRouter

from trainerdex.db.dependencies import PoolDep
from trainerdex.demotable import database as db
from trainerdex.demotable.models import DemoInsert, DemoRename
from trainerdex.errors import on_failure

router = APIRouter(tags=["demotable"])


@router.get("/demotable")
@on_failure(data=[])
async def get_demotable(pool: PoolDep):
    return {"data": await db.fetch_demotable(pool)}


@router.post("/initiate-demotable")
async def initiate_demotable(pool: PoolDep):
    await db.initiate_demotable(pool)
    return {"success": True}


@router.post("/insert-demotable")
async def insert_demotable(request: DemoInsert, pool: PoolDep):
    await db.insert_demotable(pool, request.id, request.name)
    return {"success": True}


@router.post("/update-name-demotable")
async def update_name_demotable(request: DemoRename, pool: PoolDep):
    await db.update_name_demotable(pool, request.old_name, request.new_name)
    return {"success": True}


@router.get("/count-demotable")
@on_failure(count=-1)
async def count_demotable(pool: PoolDep):
    count = await db.count_demotable(pool)
    return {"success": True, "count": count}
