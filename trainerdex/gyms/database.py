"""CRUD operations for Gym, Badge, Trainer_Badges, Battle and Gym_Challenges."""

from datetime import date
from typing import Any, Dict, List

from trainerdex.db.connection import DatabasePool


async def fetch_gyms(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all("SELECT name, location, leader, type FROM Gym ORDER BY name")


async def fetch_gym_badges(pool: DatabasePool, gym: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name FROM Badge WHERE gym_name = $1 ORDER BY name", gym
        )


async def fetch_player_badges(pool: DatabasePool, username: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT badge, gym FROM Trainer_Badges WHERE username = $1 ORDER BY gym, badge",
            username,
        )


async def fetch_player_badges_remaining(
    pool: DatabasePool, username: str, gym: str
) -> List[Dict[str, Any]]:
    """Badges offered by ``gym`` that the trainer has not earned yet."""
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT name AS badge FROM Badge WHERE gym_name = $1
               EXCEPT
               SELECT badge FROM Trainer_Badges WHERE username = $2 AND gym = $1
               ORDER BY badge""",
            gym, username,
        )


async def insert_player_badge(pool: DatabasePool, gym: str, username: str, badge: str) -> None:
    async with pool.connection() as db:
        await db.execute(
            "INSERT INTO Trainer_Badges (gym, username, badge) VALUES ($1, $2, $3)",
            gym, username, badge,
        )


async def insert_battle(pool: DatabasePool, battle_date: date, winner: str) -> int:
    """Insert a battle. Returns the generated battle ID."""
    async with pool.connection() as db:
        result = await db.execute(
            "INSERT INTO Battle (battle_date, winner) VALUES ($1, $2) RETURNING id",
            battle_date, winner,
        )
    return result.lastrowid


async def insert_gym_challenge(pool: DatabasePool, gym: str, username: str, battle_id: int) -> None:
    async with pool.connection() as db:
        await db.execute(
            "INSERT INTO Gym_Challenges (gym, username, battle_id) VALUES ($1, $2, $3)",
            gym, username, battle_id,
        )
