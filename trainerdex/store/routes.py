"""FastAPI router for the item store."""

from typing import Annotated

from fastapi import APIRouter, Header

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.store import database as db
from trainerdex.store.models import Purchase

router = APIRouter(tags=["store"])


@router.get("/store")
@on_failure(data=[])
async def list_items(pool: PoolDep):
    return {"data": await db.fetch_items(pool)}


@router.get("/store_berry")
@on_failure(data=[])
async def list_berries(pool: PoolDep):
    return {"data": await db.fetch_berries(pool)}


@router.get("/store_medicine")
@on_failure(data=[])
async def list_medicine(pool: PoolDep):
    return {"data": await db.fetch_medicine(pool)}


@router.get("/store_alphabetical")
@on_failure(data=[])
async def list_items_alphabetic(pool: PoolDep):
    return {"data": await db.fetch_items_alphabetic(pool)}


@router.get("/store_summary")
@on_failure(data=[])
async def summarize_items(pool: PoolDep):
    return {"data": await db.summarize_items(pool)}


@router.get("/store/berry/{name}")
@on_failure(data=[])
async def get_berry(name: str, pool: PoolDep):
    return {"data": await db.fetch_berry_by_name(pool, name)}


@router.get("/store/medicine/{name}")
@on_failure(data=[])
async def get_medicine(name: str, pool: PoolDep):
    return {"data": await db.fetch_medicine_by_name(pool, name)}


@router.get("/store/{name}")
@on_failure(data=[])
async def get_item(name: str, pool: PoolDep):
    return {"data": await db.fetch_item_by_name(pool, name)}


@router.post("/store/purchase")
async def purchase_item(request: Purchase, pool: PoolDep):
    await db.purchase_item(pool, request.name, request.username, request.quantity)
    return {"success": True}


@router.get("/player-items")
@on_failure(data=[])
async def list_player_items(username: Annotated[str, Header()], pool: PoolDep):
    return {"data": await db.fetch_trainer_items(pool, username)}
