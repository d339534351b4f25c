"""FastAPI router for a trainer's Pokémon."""

from typing import Annotated

from fastapi import APIRouter, Header

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.player_pokemon import database as db
from trainerdex.player_pokemon.models import (
    CatchRequest,
    LearnedMoveRequest,
    LevelUpdate,
    PlayerPokemonKey,
)

router = APIRouter(prefix="/player-pokemon", tags=["player-pokemon"])

UsernameHeader = Annotated[str, Header()]


@router.get("")
@on_failure(data=[])
async def get_player_pokemon(username: UsernameHeader, pool: PoolDep):
    return {"data": await db.fetch_player_pokemon(pool, username)}


@router.get("/count")
@on_failure(count=-1)
async def count_player_pokemon(username: UsernameHeader, pool: PoolDep):
    count = await db.count_player_pokemon(pool, username)
    return {"success": True, "count": count}


@router.get("/count-by-type")
@on_failure(data=[])
async def count_player_pokemon_by_type(username: UsernameHeader, pool: PoolDep):
    return {"data": await db.count_player_pokemon_by_type(pool, username)}


@router.post("/catch")
async def catch_pokemon(request: CatchRequest, pool: PoolDep):
    """Add a Pokémon to the trainer's party after catching it."""
    await db.insert_player_pokemon(
        pool, request.name, request.nickname, request.tr_username, request.pp_level
    )
    return {"success": True}


@router.post("/level")
async def update_level(request: LevelUpdate, pool: PoolDep):
    await db.update_pokemon_level(
        pool, request.name, request.nickname, request.tr_username, request.pp_level
    )
    return {"success": True}


@router.post("/release")
async def release_pokemon(request: PlayerPokemonKey, pool: PoolDep):
    await db.release_player_pokemon(pool, request.name, request.nickname, request.tr_username)
    return {"success": True}


@router.post("/learned-move")
async def add_learned_move(request: LearnedMoveRequest, pool: PoolDep):
    await db.insert_learned_move(
        pool, request.move, request.name, request.nickname, request.tr_username
    )
    return {"success": True}


@router.get("/learned-moves")
@on_failure(data=[])
async def get_learned_moves(username: UsernameHeader, name: str, nickname: str, pool: PoolDep):
    return {"data": await db.fetch_learned_moves(pool, username, name, nickname)}
