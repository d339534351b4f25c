"""Read operations for the Pokédex tables."""

import logging
from typing import Any, Dict, List, Mapping

from trainerdex.db.connection import DatabasePool
from trainerdex.errors import ErrorKind, StoreError
from trainerdex.pokedex.filters import PokedexFilter, build_filter_query

logger = logging.getLogger(__name__)


async def fetch_pokemon(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all("SELECT name FROM Pokemon ORDER BY name")


async def fetch_evolutions(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT pre_evolution, post_evolution, method, min_level FROM Evolutions "
            "ORDER BY pre_evolution"
        )


def escape_like(text: str) -> str:
    """Make ``text`` match literally inside a LIKE pattern."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def fetch_pokemon_by_name(pool: DatabasePool, name: str) -> List[Dict[str, Any]]:
    """Pokémon whose name contains ``name`` (case-insensitive)."""
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name FROM Pokemon WHERE name ILIKE $1 ESCAPE '\\' ORDER BY name",
            f"%{escape_like(name)}%",
        )


async def filter_pokemon(pool: DatabasePool, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
    sql, args = build_filter_query(params)
    logger.debug(f"Pokédex filter: {sql} {args}")
    async with pool.connection() as db:
        return await db.fetch_all(sql, *args)


async def fetch_pokemon_by_type(pool: DatabasePool, poke_type: str) -> List[Dict[str, Any]]:
    return await filter_pokemon(pool, {PokedexFilter.TYPE.value: poke_type})


async def fetch_type_matchup(pool: DatabasePool, attack: str, defence: str) -> float:
    """Damage multiplier of an ``attack``-type move against a ``defence``-type
    Pokémon. Pairs absent from Type_Versus are neutral (1.0)."""
    async with pool.connection() as db:
        row = await db.fetch_one(
            """SELECT COALESCE(tv.effect_multiplier, 1.0) AS effect_multiplier
               FROM Types a
               CROSS JOIN Types d
               LEFT JOIN Type_Versus tv
                      ON tv.attack_type = a.type AND tv.defense_type = d.type
               WHERE a.type = $1 AND d.type = $2""",
            attack.lower(), defence.lower(),
        )
    if row is None:
        raise StoreError(ErrorKind.NOT_FOUND, f"unknown type pair '{attack}' vs '{defence}'")
    return float(row["effect_multiplier"])


async def fetch_pokemon_stats(pool: DatabasePool, name: str) -> List[Dict[str, Any]]:
    """One row per (type, learnable move) combination of the Pokémon."""
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT p.hp, p.attack, p.defence, p.speed, p.generation, t.type, l.move
               FROM Pokemon p
               JOIN Pokemon_Type t ON p.name = t.name
               JOIN Can_Learn l ON t.name = l.pokemon
               WHERE p.name = $1
               ORDER BY t.type, l.move""",
            name,
        )
