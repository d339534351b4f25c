"""Aggregate queries over trainers, badges and purchases."""

from typing import Any, Dict, List

from trainerdex.db.connection import DatabasePool


async def fetch_pokemon_masters(pool: DatabasePool) -> List[Dict[str, Any]]:
    """Trainers who have caught every species in the Pokédex."""
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT t.username, t.start_date
               FROM Trainer t
               WHERE NOT EXISTS (
                   SELECT p.name FROM Pokemon p
                   EXCEPT
                   SELECT pp.name FROM Player_Pokemon pp WHERE pp.tr_username = t.username
               )
               ORDER BY t.start_date, t.username"""
        )


async def fetch_gym_leaderboard(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT username, COUNT(badge) AS badge_count
               FROM Trainer_Badges
               GROUP BY username
               HAVING COUNT(badge) >= 1
               ORDER BY badge_count DESC, username"""
        )


async def fetch_frequent_buyers(pool: DatabasePool) -> List[Dict[str, Any]]:
    """Trainers whose total purchased quantity is at least the average."""
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT username, SUM(quantity) AS total_quantity
               FROM Trainer_Items
               GROUP BY username
               HAVING SUM(quantity) >= (
                   SELECT AVG(item_quantity)
                   FROM (
                       SELECT SUM(quantity) AS item_quantity
                       FROM Trainer_Items
                       GROUP BY username
                   ) totals
               )
               ORDER BY total_quantity DESC, username"""
        )
