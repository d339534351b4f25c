"""FastAPI router for gyms, badges and battles."""

from typing import Annotated

from fastapi import APIRouter, Header

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.gyms import database as db
from trainerdex.gyms.models import BadgeAward, BattleCreate, GymChallenge

router = APIRouter(tags=["gyms"])

UsernameHeader = Annotated[str, Header()]


@router.get("/gym")
@on_failure(data=[])
async def list_gyms(pool: PoolDep):
    return {"data": await db.fetch_gyms(pool)}


@router.get("/badges/{gym}")
@on_failure(data=[])
async def list_gym_badges(gym: str, pool: PoolDep):
    """Names of the badges a gym offers."""
    return {"data": await db.fetch_gym_badges(pool, gym)}


@router.get("/player-badges")
@on_failure(data=[])
async def list_player_badges(username: UsernameHeader, pool: PoolDep):
    return {"data": await db.fetch_player_badges(pool, username)}


@router.post("/player-badges")
async def award_player_badge(request: BadgeAward, pool: PoolDep):
    await db.insert_player_badge(pool, request.gym, request.username, request.badge)
    return {"success": True}


@router.get("/player-badges/{gym}")
@on_failure(data=[])
async def list_player_badges_remaining(gym: str, username: UsernameHeader, pool: PoolDep):
    """Badges from this gym the trainer still has to earn."""
    return {"data": await db.fetch_player_badges_remaining(pool, username, gym)}


@router.post("/insert-battle")
@on_failure(id=-1)
async def insert_battle(request: BattleCreate, pool: PoolDep):
    battle_id = await db.insert_battle(pool, request.battle_date, request.winner)
    return {"success": True, "id": battle_id}


@router.post("/challenge-gym")
async def challenge_gym(request: GymChallenge, pool: PoolDep):
    await db.insert_gym_challenge(pool, request.gym, request.username, request.battle)
    return {"success": True}
