"""FastAPI router for leaderboards."""

from fastapi import APIRouter

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.leaderboards import database as db

router = APIRouter(prefix="/leaderboard", tags=["leaderboards"])


@router.get("/pokemon")
@on_failure(data=[])
async def pokemon_leaderboard(pool: PoolDep):
    return {"data": await db.fetch_pokemon_masters(pool)}


@router.get("/gyms")
@on_failure(data=[])
async def gym_leaderboard(pool: PoolDep):
    return {"data": await db.fetch_gym_leaderboard(pool)}


@router.get("/buyers")
@on_failure(data=[])
async def buyers_leaderboard(pool: PoolDep):
    return {"data": await db.fetch_frequent_buyers(pool)}
