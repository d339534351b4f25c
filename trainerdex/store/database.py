"""Read operations for the store catalogue and writes for trainer inventories."""

from typing import Any, Dict, List

from trainerdex.db.connection import DatabasePool

# Berries are told apart from medicine by name
BERRY_PATTERN = "%berry%"


async def fetch_items(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all("SELECT name, effect, price FROM Items")


async def fetch_items_alphabetic(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all("SELECT name, effect, price FROM Items ORDER BY name")


async def fetch_berries(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name, effect, price FROM Items WHERE name ILIKE $1", BERRY_PATTERN
        )


async def fetch_medicine(pool: DatabasePool) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name, effect, price FROM Items WHERE name NOT ILIKE $1", BERRY_PATTERN
        )


async def fetch_item_by_name(pool: DatabasePool, name: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name, effect, price FROM Items WHERE name = $1", name
        )


async def fetch_berry_by_name(pool: DatabasePool, name: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name, flavour, firmness FROM Berries WHERE name = $1", name
        )


async def fetch_medicine_by_name(pool: DatabasePool, name: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            "SELECT name, heal_amount, cures FROM Medicine WHERE name = $1", name
        )


async def summarize_items(pool: DatabasePool) -> List[Dict[str, Any]]:
    """One row with the number of berries and medicines on sale."""
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT COUNT(CASE WHEN name ILIKE $1 THEN 1 END) AS berry_count,
                      COUNT(CASE WHEN name NOT ILIKE $1 THEN 1 END) AS medicine_count
               FROM Items""",
            BERRY_PATTERN,
        )


async def fetch_trainer_items(pool: DatabasePool, username: str) -> List[Dict[str, Any]]:
    async with pool.connection() as db:
        return await db.fetch_all(
            """SELECT ti.name, i.effect, ti.quantity
               FROM Trainer_Items ti JOIN Items i ON ti.name = i.name
               WHERE ti.username = $1
               ORDER BY ti.name""",
            username,
        )


async def purchase_item(pool: DatabasePool, name: str, username: str, quantity: int) -> None:
    """Add ``quantity`` of an item to the trainer's bag, creating the row if needed."""
    async with pool.connection() as db:
        await db.execute(
            """INSERT INTO Trainer_Items (name, username, quantity) VALUES ($1, $2, $3)
               ON CONFLICT (name, username)
               DO UPDATE SET quantity = Trainer_Items.quantity + EXCLUDED.quantity""",
            name, username, quantity,
        )
