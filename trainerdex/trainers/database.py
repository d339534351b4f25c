"""CRUD operations for Trainer and Timezone."""

import asyncio
from datetime import date
from typing import Any, Dict, List, Optional

from trainerdex.db.connection import Database, DatabasePool
from trainerdex.errors import ErrorKind, StoreError
from trainerdex.trainers.service import TrainerAuth

PROFILE_QUERY = """SELECT t.username, t.name, t.start_date, t.zip_postal_code, tz.timezone
    FROM Trainer t LEFT JOIN Timezone tz ON tz.zip_postal_code = t.zip_postal_code
    WHERE t.username = $1"""

CREDENTIALS_QUERY = """SELECT t.username, t.name, t.start_date, t.zip_postal_code, tz.timezone,
           t.password
    FROM Trainer t LEFT JOIN Timezone tz ON tz.zip_postal_code = t.zip_postal_code
    WHERE t.username = $1"""


async def fetch_trainer(pool: DatabasePool, username: str) -> Optional[Dict[str, Any]]:
    """Public trainer profile (never includes the password hash)."""
    async with pool.connection() as db:
        return await db.fetch_one(PROFILE_QUERY, username)


async def login(pool: DatabasePool, username: str, password: str) -> List[Dict[str, Any]]:
    """Return ``[profile]`` when the credentials match, otherwise ``[]``."""
    async with pool.connection() as db:
        row = await db.fetch_one(CREDENTIALS_QUERY, username)
    if row is None:
        return []
    hashed = row.pop("password")
    if not await asyncio.to_thread(TrainerAuth.verify_password, password, hashed):
        return []
    return [row]


async def _ensure_timezone(db: Database, zipcode: str, timezone: Optional[str]) -> None:
    if timezone:
        await db.execute(
            "INSERT INTO Timezone (zip_postal_code, timezone) VALUES ($1, $2) "
            "ON CONFLICT (zip_postal_code) DO NOTHING",
            zipcode, timezone,
        )


async def insert_trainer(
    pool: DatabasePool,
    username: str,
    name: str,
    password: str,
    start_date: date,
    zipcode: str,
    timezone: Optional[str] = None,
) -> None:
    """Register a trainer, creating the zipcode's Timezone row first if given."""
    hashed = await asyncio.to_thread(TrainerAuth.hash_password, password)

    async def action(db: Database) -> None:
        async with db.transaction():
            await _ensure_timezone(db, zipcode, timezone)
            await db.execute(
                "INSERT INTO Trainer (username, name, password, start_date, zip_postal_code) "
                "VALUES ($1, $2, $3, $4, $5)",
                username, name, hashed, start_date, zipcode,
            )

    await pool.run(action)


async def _update_trainer(pool: DatabasePool, column: str, value: Any, username: str) -> None:
    async with pool.connection() as db:
        result = await db.execute(
            f"UPDATE Trainer SET {column} = $1 WHERE username = $2", value, username
        )
    if result.rowcount == 0:
        raise StoreError(ErrorKind.NOT_FOUND, f"trainer '{username}' not found")


async def update_name(pool: DatabasePool, username: str, name: str) -> None:
    await _update_trainer(pool, "name", name, username)


async def update_password(pool: DatabasePool, username: str, password: str) -> None:
    hashed = await asyncio.to_thread(TrainerAuth.hash_password, password)
    await _update_trainer(pool, "password", hashed, username)


async def update_zipcode(
    pool: DatabasePool, username: str, zipcode: str, timezone: Optional[str] = None
) -> None:
    async def action(db: Database) -> int:
        async with db.transaction():
            await _ensure_timezone(db, zipcode, timezone)
            result = await db.execute(
                "UPDATE Trainer SET zip_postal_code = $1 WHERE username = $2",
                zipcode, username,
            )
        return result.rowcount

    if await pool.run(action) == 0:
        raise StoreError(ErrorKind.NOT_FOUND, f"trainer '{username}' not found")
