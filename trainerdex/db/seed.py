"""
Create the schema and load the reference data (Pokédex, gyms, store) plus a
few demo trainers.

Usage:
    python -m trainerdex.db.seed --schema
    trainerdex-seed --reset --schema
"""
import argparse
import asyncio
import sys
from datetime import date
from decimal import Decimal

from trainerdex.config import DATABASE_URL
from trainerdex.db.connection import Database, DatabasePool
from trainerdex.db.schema import drop_schema, ensure_schema
from trainerdex.errors import StoreError
from trainerdex.trainers.service import TrainerAuth

TYPES = [
    "normal", "fire", "water", "grass", "electric", "ice", "fighting", "poison",
    "ground", "flying", "psychic", "bug", "rock", "ghost", "dragon",
]

# name, hp, attack, defence, speed, generation, types
POKEMON = [
    ("bulbasaur", 45, 49, 49, 45, 1, ["grass", "poison"]),
    ("ivysaur", 60, 62, 63, 60, 1, ["grass", "poison"]),
    ("venusaur", 80, 82, 83, 80, 1, ["grass", "poison"]),
    ("charmander", 39, 52, 43, 65, 1, ["fire"]),
    ("charmeleon", 58, 64, 58, 80, 1, ["fire"]),
    ("charizard", 78, 84, 78, 100, 1, ["fire", "flying"]),
    ("squirtle", 44, 48, 65, 43, 1, ["water"]),
    ("wartortle", 59, 63, 80, 58, 1, ["water"]),
    ("blastoise", 79, 83, 100, 78, 1, ["water"]),
    ("caterpie", 45, 30, 35, 45, 1, ["bug"]),
    ("metapod", 50, 20, 55, 30, 1, ["bug"]),
    ("butterfree", 60, 45, 50, 70, 1, ["bug", "flying"]),
    ("pikachu", 35, 55, 40, 90, 1, ["electric"]),
    ("raichu", 60, 90, 55, 110, 1, ["electric"]),
    ("vulpix", 38, 41, 40, 65, 1, ["fire"]),
    ("onix", 35, 45, 160, 70, 1, ["rock", "ground"]),
    ("cyndaquil", 39, 52, 43, 65, 2, ["fire"]),
    ("suicune", 100, 75, 115, 85, 2, ["water"]),
]

# Only non-neutral matchups are stored; missing pairs are 1.0
TYPE_VERSUS = [
    ("normal", "rock", 0.5), ("normal", "ghost", 0),
    ("fire", "fire", 0.5), ("fire", "water", 0.5), ("fire", "grass", 2),
    ("fire", "ice", 2), ("fire", "bug", 2), ("fire", "rock", 0.5), ("fire", "dragon", 0.5),
    ("water", "fire", 2), ("water", "water", 0.5), ("water", "grass", 0.5),
    ("water", "ground", 2), ("water", "rock", 2), ("water", "dragon", 0.5),
    ("grass", "fire", 0.5), ("grass", "water", 2), ("grass", "grass", 0.5),
    ("grass", "poison", 0.5), ("grass", "ground", 2), ("grass", "flying", 0.5),
    ("grass", "bug", 0.5), ("grass", "rock", 2), ("grass", "dragon", 0.5),
    ("electric", "water", 2), ("electric", "electric", 0.5), ("electric", "grass", 0.5),
    ("electric", "ground", 0), ("electric", "flying", 2), ("electric", "dragon", 0.5),
    ("ice", "grass", 2), ("ice", "ground", 2), ("ice", "flying", 2), ("ice", "dragon", 2),
    ("poison", "grass", 2), ("poison", "ground", 0.5), ("poison", "rock", 0.5),
    ("ground", "fire", 2), ("ground", "electric", 2), ("ground", "grass", 0.5),
    ("ground", "flying", 0), ("ground", "rock", 2), ("ground", "bug", 0.5),
    ("flying", "grass", 2), ("flying", "electric", 0.5), ("flying", "bug", 2), ("flying", "rock", 0.5),
    ("psychic", "poison", 2), ("psychic", "fighting", 2), ("psychic", "psychic", 0.5),
    ("bug", "fire", 0.5), ("bug", "grass", 2), ("bug", "flying", 0.5), ("bug", "psychic", 2),
    ("rock", "fire", 2), ("rock", "ice", 2), ("rock", "flying", 2), ("rock", "bug", 2), ("rock", "ground", 0.5),
]

# name, type, power, accuracy
MOVES = [
    ("tackle", "normal", 40, 100),
    ("growl", "normal", None, 100),
    ("quick attack", "normal", 40, 100),
    ("scratch", "normal", 40, 100),
    ("harden", "normal", None, None),
    ("bind", "normal", 15, 85),
    ("vine whip", "grass", 45, 100),
    ("razor leaf", "grass", 55, 95),
    ("ember", "fire", 40, 100),
    ("flamethrower", "fire", 90, 100),
    ("water gun", "water", 40, 100),
    ("bubble", "water", 40, 100),
    ("surf", "water", 90, 100),
    ("hydro pump", "water", 110, 80),
    ("aurora beam", "ice", 65, 100),
    ("thunder shock", "electric", 40, 100),
    ("thunderbolt", "electric", 90, 100),
    ("string shot", "bug", None, 95),
    ("bug bite", "bug", 60, 100),
    ("gust", "flying", 40, 100),
    ("air slash", "flying", 75, 95),
    ("wing attack", "flying", 60, 100),
    ("confusion", "psychic", 50, 100),
    ("rock throw", "rock", 50, 90),
]

CAN_LEARN = {
    "bulbasaur": ["tackle", "growl", "vine whip"],
    "ivysaur": ["tackle", "vine whip", "razor leaf"],
    "venusaur": ["vine whip", "razor leaf"],
    "charmander": ["scratch", "growl", "ember"],
    "charmeleon": ["scratch", "ember", "flamethrower"],
    "charizard": ["ember", "flamethrower", "wing attack", "air slash"],
    "squirtle": ["tackle", "bubble", "water gun"],
    "wartortle": ["bubble", "water gun", "surf"],
    "blastoise": ["water gun", "surf", "hydro pump"],
    "caterpie": ["tackle", "string shot", "bug bite"],
    "metapod": ["harden"],
    "butterfree": ["air slash", "bug bite", "confusion", "gust"],
    "pikachu": ["quick attack", "thunder shock", "thunderbolt"],
    "raichu": ["quick attack", "thunderbolt"],
    "vulpix": ["ember", "quick attack", "flamethrower"],
    "onix": ["tackle", "bind", "rock throw", "harden"],
    "cyndaquil": ["tackle", "ember", "quick attack"],
    "suicune": ["bubble", "surf", "aurora beam", "hydro pump"],
}

# pre, post, method, min_level
EVOLUTIONS = [
    ("bulbasaur", "ivysaur", "level", 16),
    ("ivysaur", "venusaur", "level", 32),
    ("charmander", "charmeleon", "level", 16),
    ("charmeleon", "charizard", "level", 36),
    ("squirtle", "wartortle", "level", 16),
    ("wartortle", "blastoise", "level", 36),
    ("caterpie", "metapod", "level", 7),
    ("metapod", "butterfree", "level", 10),
    ("pikachu", "raichu", "thunder stone", None),
]

TIMEZONES = [
    ("V6T1Z4", "America/Vancouver"),
    ("M5S1A1", "America/Toronto"),
    ("10001", "America/New_York"),
]

# username, name, password, start_date, zip_postal_code
TRAINERS = [
    ("Suicune7", "Eusine", "cpsc304IsCool", date(2023, 9, 5), "V6T1Z4"),
    ("AshK", "Ash Ketchum", "pikachuRules", date(2023, 4, 1), "10001"),
    ("MistyW", "Misty", "togepiForever", date(2023, 6, 18), "M5S1A1"),
]

# name, nickname, tr_username, pp_level
PLAYER_POKEMON = [
    ("suicune", "Sui", "Suicune7", 50),
    ("butterfree", "Flutter", "Suicune7", 22),
    ("charizard", "Blaze", "Suicune7", 41),
    ("pikachu", "Sparky", "AshK", 35),
    ("bulbasaur", "Bulby", "AshK", 18),
    ("squirtle", "Squirt", "AshK", 17),
    ("wartortle", "Shell", "MistyW", 28),
]

LEARNED_MOVES = [
    ("surf", "suicune", "Sui", "Suicune7"),
    ("aurora beam", "suicune", "Sui", "Suicune7"),
    ("gust", "butterfree", "Flutter", "Suicune7"),
    ("confusion", "butterfree", "Flutter", "Suicune7"),
    ("flamethrower", "charizard", "Blaze", "Suicune7"),
    ("thunderbolt", "pikachu", "Sparky", "AshK"),
    ("water gun", "wartortle", "Shell", "MistyW"),
]

# name, location, leader, type
GYMS = [
    ("Pewter Gym", "Pewter City", "Brock", "rock"),
    ("Cerulean Gym", "Cerulean City", "Misty", "water"),
    ("Vermilion Gym", "Vermilion City", "Lt. Surge", "electric"),
]

BADGES = [
    ("Boulder Badge", "Pewter Gym"),
    ("Cascade Badge", "Cerulean Gym"),
    ("Thunder Badge", "Vermilion Gym"),
]

# gym, username, badge
TRAINER_BADGES = [
    ("Pewter Gym", "Suicune7", "Boulder Badge"),
    ("Pewter Gym", "AshK", "Boulder Badge"),
    ("Cerulean Gym", "AshK", "Cascade Badge"),
]

# name, effect, price
ITEMS = [
    ("Oran Berry", "Restores 10 HP", 20),
    ("Sitrus Berry", "Restores 25% of max HP", 80),
    ("Pecha Berry", "Cures poison", 20),
    ("Potion", "Restores 20 HP", 200),
    ("Super Potion", "Restores 60 HP", 700),
    ("Antidote", "Cures poison", 100),
    ("Full Heal", "Cures all status conditions", 400),
]

BERRIES = [
    ("Oran Berry", "mild", "super hard"),
    ("Sitrus Berry", "mild", "very hard"),
    ("Pecha Berry", "sweet", "very soft"),
]

MEDICINE = [
    ("Potion", 20, None),
    ("Super Potion", 60, None),
    ("Antidote", None, "poison"),
    ("Full Heal", None, "all"),
]

# name, username, quantity
TRAINER_ITEMS = [
    ("Potion", "Suicune7", 3),
    ("Oran Berry", "Suicune7", 5),
    ("Potion", "AshK", 10),
    ("Antidote", "AshK", 2),
    ("Pecha Berry", "MistyW", 1),
]

# date, winner, challenged gym, challenger
BATTLES = [
    (date(2024, 1, 12), "Suicune7", "Pewter Gym", "Suicune7"),
    (date(2024, 2, 3), "Misty", "Cerulean Gym", "Suicune7"),
]


async def seed_reference_data(db: Database) -> None:
    """Insert the Pokédex, gym and store tables. Safe to run twice."""
    await db.execute_many(
        "INSERT INTO Types (type) VALUES ($1) ON CONFLICT DO NOTHING",
        [(t,) for t in TYPES],
    )
    await db.execute_many(
        "INSERT INTO Pokemon (name, hp, attack, defence, speed, generation) "
        "VALUES ($1, $2, $3, $4, $5, $6) ON CONFLICT DO NOTHING",
        [p[:6] for p in POKEMON],
    )
    await db.execute_many(
        "INSERT INTO Pokemon_Type (name, type) VALUES ($1, $2) ON CONFLICT DO NOTHING",
        [(p[0], t) for p in POKEMON for t in p[6]],
    )
    await db.execute_many(
        "INSERT INTO Type_Versus (attack_type, defense_type, effect_multiplier) "
        "VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        [(a, d, Decimal(str(m))) for a, d, m in TYPE_VERSUS],
    )
    await db.execute_many(
        "INSERT INTO Moves (name, type, power, accuracy) VALUES ($1, $2, $3, $4) ON CONFLICT DO NOTHING",
        MOVES,
    )
    await db.execute_many(
        "INSERT INTO Can_Learn (pokemon, move) VALUES ($1, $2) ON CONFLICT DO NOTHING",
        [(pokemon, move) for pokemon, moves in CAN_LEARN.items() for move in moves],
    )
    await db.execute_many(
        "INSERT INTO Evolutions (pre_evolution, post_evolution, method, min_level) "
        "VALUES ($1, $2, $3, $4) ON CONFLICT DO NOTHING",
        EVOLUTIONS,
    )
    await db.execute_many(
        "INSERT INTO Gym (name, location, leader, type) VALUES ($1, $2, $3, $4) ON CONFLICT DO NOTHING",
        GYMS,
    )
    await db.execute_many(
        "INSERT INTO Badge (name, gym_name) VALUES ($1, $2) ON CONFLICT DO NOTHING",
        BADGES,
    )
    await db.execute_many(
        "INSERT INTO Items (name, effect, price) VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        ITEMS,
    )
    await db.execute_many(
        "INSERT INTO Berries (name, flavour, firmness) VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        BERRIES,
    )
    await db.execute_many(
        "INSERT INTO Medicine (name, heal_amount, cures) VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        MEDICINE,
    )


async def seed_trainers(db: Database) -> None:
    """Insert the demo trainers and everything they own."""
    await db.execute_many(
        "INSERT INTO Timezone (zip_postal_code, timezone) VALUES ($1, $2) ON CONFLICT DO NOTHING",
        TIMEZONES,
    )
    await db.execute_many(
        "INSERT INTO Trainer (username, name, password, start_date, zip_postal_code) "
        "VALUES ($1, $2, $3, $4, $5) ON CONFLICT DO NOTHING",
        [
            (username, name, TrainerAuth.hash_password(password), start_date, zipcode)
            for username, name, password, start_date, zipcode in TRAINERS
        ],
    )
    await db.execute_many(
        "INSERT INTO Player_Pokemon (name, nickname, tr_username, pp_level) "
        "VALUES ($1, $2, $3, $4) ON CONFLICT DO NOTHING",
        PLAYER_POKEMON,
    )
    await db.execute_many(
        "INSERT INTO Learned_Moves (move, name, nickname, tr_username) "
        "VALUES ($1, $2, $3, $4) ON CONFLICT DO NOTHING",
        LEARNED_MOVES,
    )
    await db.execute_many(
        "INSERT INTO Trainer_Badges (gym, username, badge) VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        TRAINER_BADGES,
    )
    await db.execute_many(
        "INSERT INTO Trainer_Items (name, username, quantity) VALUES ($1, $2, $3) ON CONFLICT DO NOTHING",
        TRAINER_ITEMS,
    )
    # Battles are only seeded into an empty table; ids are generated
    existing = await db.fetch_val("SELECT COUNT(*) FROM Battle")
    if existing:
        return
    for battle_date, winner, gym, challenger in BATTLES:
        result = await db.execute(
            "INSERT INTO Battle (battle_date, winner) VALUES ($1, $2) RETURNING id",
            battle_date, winner,
        )
        await db.execute(
            "INSERT INTO Gym_Challenges (gym, username, battle_id) VALUES ($1, $2, $3)",
            gym, challenger, result.lastrowid,
        )


async def seed(dsn: str, create_schema: bool = False, reset: bool = False) -> bool:
    pool = DatabasePool(dsn=dsn, min_size=1, max_size=1)
    if not await pool.open():
        print("Could not connect to the database.")
        return False
    try:
        async with pool.connection() as db:
            if reset:
                print("Dropping tables...")
                await drop_schema(db)
            if create_schema or reset:
                print("Creating tables...")
                await ensure_schema(db)
            print("Loading reference data...")
            await seed_reference_data(db)
            print("Loading demo trainers...")
            await seed_trainers(db)
    except StoreError as e:
        print(f"Seed failed [{e.kind.value}]: {e.message}")
        return False
    finally:
        await pool.close()
    print("Seed complete.")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the TrainerDex database.")
    parser.add_argument("--dsn", default=DATABASE_URL, help="PostgreSQL connection string")
    parser.add_argument("--schema", action="store_true", help="create tables before seeding")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args(argv)

    ok = asyncio.run(seed(args.dsn, create_schema=args.schema, reset=args.reset))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
