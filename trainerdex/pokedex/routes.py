"""FastAPI router for the Pokédex."""

from typing import Annotated, Optional

from fastapi import APIRouter, Header

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.pokedex import database as db

router = APIRouter(tags=["pokedex"])


@router.get("/pokedex")
@on_failure(data=[])
async def list_pokemon(pool: PoolDep):
    return {"data": await db.fetch_pokemon(pool)}


@router.get("/pokedex/evolutions")
@on_failure(data=[])
async def list_evolutions(pool: PoolDep):
    return {"data": await db.fetch_evolutions(pool)}


@router.get("/pokedex/find-by-name/{name}")
@on_failure(data=[])
async def find_by_name(name: str, pool: PoolDep):
    return {"data": await db.fetch_pokemon_by_name(pool, name)}


@router.get("/pokedex/type-filter/{poke_type}")
@on_failure(data=[])
async def filter_by_type(poke_type: str, pool: PoolDep):
    return {"data": await db.fetch_pokemon_by_type(pool, poke_type)}


@router.get("/pokedex/filter")
@on_failure(data=[])
async def filter_pokedex(
    pool: PoolDep,
    pokeattack: Optional[int] = None,
    pokedefence: Optional[int] = None,
    pokespeed: Optional[int] = None,
    poketype: Optional[str] = None,
):
    """Names of Pokémon meeting every given stat threshold and type."""
    params = {
        "pokeattack": pokeattack,
        "pokedefence": pokedefence,
        "pokespeed": pokespeed,
        "poketype": poketype,
    }
    return {"data": await db.filter_pokemon(pool, params)}


@router.get("/pokedex/effectiveness")
@on_failure(num=-1)
async def type_effectiveness(
    attack: Annotated[str, Header()],
    defence: Annotated[str, Header()],
    pool: PoolDep,
):
    multiplier = await db.fetch_type_matchup(pool, attack, defence)
    return {"success": True, "num": multiplier}


@router.get("/pokemon/stats/{name}")
@on_failure(data=[])
async def pokemon_stats(name: str, pool: PoolDep):
    return {"data": await db.fetch_pokemon_stats(pool, name)}
