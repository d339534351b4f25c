"""CRUD operations for Player_Pokemon and Learned_Moves."""

from typing import Any, Dict, List

from trainerdex.db.connection import DatabasePool
from trainerdex.errors import ErrorKind, StoreError


async def fetch_player_pokemon(pool: DatabasePool, username: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT nickname, name, pp_level FROM Player_Pokemon "
            "WHERE tr_username = $1 ORDER BY name, nickname",
            username,
        )


async def count_player_pokemon(pool: DatabasePool, username: str) -> int:
    async with pool.connection() as db:
        return await db.fetch_val(
            "SELECT COUNT(*) FROM Player_Pokemon WHERE tr_username = $1", username
        )


async def count_player_pokemon_by_type(pool: DatabasePool, username: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT pt.type, COUNT(*) AS count
               FROM Player_Pokemon pp JOIN Pokemon_Type pt ON pp.name = pt.name
               WHERE pp.tr_username = $1
               GROUP BY pt.type
               ORDER BY pt.type""",
            username,
        )


async def insert_player_pokemon(
    pool: DatabasePool, name: str, nickname: str, tr_username: str, pp_level: int
) -> None:
    async with pool.connection() as db:
        await db.execute(
            "INSERT INTO Player_Pokemon (name, nickname, tr_username, pp_level) "
            "VALUES ($1, $2, $3, $4)",
            name, nickname, tr_username, pp_level,
        )


async def update_pokemon_level(
    pool: DatabasePool, name: str, nickname: str, tr_username: str, pp_level: int
) -> None:
    async with pool.connection() as db:
        result = await db.execute(
            """UPDATE Player_Pokemon SET pp_level = $1
               WHERE name = $2 AND nickname = $3 AND tr_username = $4""",
            pp_level, name, nickname, tr_username,
        )
    if result.rowcount == 0:
        raise StoreError(ErrorKind.NOT_FOUND, f"{tr_username} has no {name} called '{nickname}'")


async def release_player_pokemon(
    pool: DatabasePool, name: str, nickname: str, tr_username: str
) -> None:
    """Delete a caught Pokémon; its learned moves cascade."""
    async with pool.connection() as db:
        result = await db.execute(
            "DELETE FROM Player_Pokemon WHERE tr_username = $1 AND name = $2 AND nickname = $3",
            tr_username, name, nickname,
        )
    if result.rowcount == 0:
        raise StoreError(ErrorKind.NOT_FOUND, f"{tr_username} has no {name} called '{nickname}'")


async def insert_learned_move(
    pool: DatabasePool, move: str, name: str, nickname: str, tr_username: str
) -> None:
    async with pool.connection() as db:
        await db.execute(
            "INSERT INTO Learned_Moves (move, name, nickname, tr_username) "
            "VALUES ($1, $2, $3, $4)",
            move, name, nickname, tr_username,
        )


async def fetch_learned_moves(
    pool: DatabasePool, username: str, name: str, nickname: str
) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT move FROM Learned_Moves
               WHERE name = $1 AND nickname = $2 AND tr_username = $3
               ORDER BY move""",
            name, nickname, username,
        )
