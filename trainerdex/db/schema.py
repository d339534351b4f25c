"""PostgreSQL schema definitions for the single application database."""

SCHEMA = """
CREATE TABLE IF NOT EXISTS Timezone (
    zip_postal_code VARCHAR(10) PRIMARY KEY,
    timezone VARCHAR(50) NOT NULL
);

CREATE TABLE IF NOT EXISTS Trainer (
    username VARCHAR(30) PRIMARY KEY,
    name VARCHAR(50) NOT NULL,
    password TEXT NOT NULL,
    start_date DATE NOT NULL DEFAULT CURRENT_DATE,
    zip_postal_code VARCHAR(10) REFERENCES Timezone(zip_postal_code)
);

CREATE TABLE IF NOT EXISTS Types (
    type VARCHAR(20) PRIMARY KEY
);

CREATE TABLE IF NOT EXISTS Pokemon (
    name VARCHAR(30) PRIMARY KEY,
    hp INTEGER NOT NULL,
    attack INTEGER NOT NULL,
    defence INTEGER NOT NULL,
    speed INTEGER NOT NULL,
    generation INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS Pokemon_Type (
    name VARCHAR(30) REFERENCES Pokemon(name) ON DELETE CASCADE,
    type VARCHAR(20) REFERENCES Types(type),
    PRIMARY KEY (name, type)
);

CREATE TABLE IF NOT EXISTS Type_Versus (
    attack_type VARCHAR(20) REFERENCES Types(type),
    defense_type VARCHAR(20) REFERENCES Types(type),
    effect_multiplier NUMERIC(3, 2) NOT NULL,
    PRIMARY KEY (attack_type, defense_type)
);

CREATE TABLE IF NOT EXISTS Moves (
    name VARCHAR(30) PRIMARY KEY,
    type VARCHAR(20) REFERENCES Types(type),
    power INTEGER,
    accuracy INTEGER
);

CREATE TABLE IF NOT EXISTS Can_Learn (
    pokemon VARCHAR(30) REFERENCES Pokemon(name) ON DELETE CASCADE,
    move VARCHAR(30) REFERENCES Moves(name),
    PRIMARY KEY (pokemon, move)
);

CREATE TABLE IF NOT EXISTS Evolutions (
    pre_evolution VARCHAR(30) REFERENCES Pokemon(name) ON DELETE CASCADE,
    post_evolution VARCHAR(30) REFERENCES Pokemon(name) ON DELETE CASCADE,
    method VARCHAR(30) NOT NULL DEFAULT 'level',
    min_level INTEGER,
    PRIMARY KEY (pre_evolution, post_evolution)
);

CREATE TABLE IF NOT EXISTS Player_Pokemon (
    name VARCHAR(30) REFERENCES Pokemon(name),
    nickname VARCHAR(30),
    tr_username VARCHAR(30) REFERENCES Trainer(username) ON DELETE CASCADE,
    pp_level INTEGER NOT NULL DEFAULT 1 CHECK (pp_level BETWEEN 1 AND 100),
    PRIMARY KEY (name, nickname, tr_username)
);
CREATE INDEX IF NOT EXISTS idx_player_pokemon_trainer ON Player_Pokemon(tr_username);

CREATE TABLE IF NOT EXISTS Learned_Moves (
    move VARCHAR(30) REFERENCES Moves(name),
    name VARCHAR(30),
    nickname VARCHAR(30),
    tr_username VARCHAR(30),
    PRIMARY KEY (move, name, nickname, tr_username),
    FOREIGN KEY (name, nickname, tr_username)
        REFERENCES Player_Pokemon(name, nickname, tr_username) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS Gym (
    name VARCHAR(30) PRIMARY KEY,
    location VARCHAR(50) NOT NULL,
    leader VARCHAR(30) NOT NULL,
    type VARCHAR(20) REFERENCES Types(type)
);

CREATE TABLE IF NOT EXISTS Badge (
    name VARCHAR(30) PRIMARY KEY,
    gym_name VARCHAR(30) NOT NULL REFERENCES Gym(name) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS Trainer_Badges (
    gym VARCHAR(30) REFERENCES Gym(name),
    username VARCHAR(30) REFERENCES Trainer(username) ON DELETE CASCADE,
    badge VARCHAR(30) REFERENCES Badge(name),
    PRIMARY KEY (username, badge)
);

CREATE TABLE IF NOT EXISTS Battle (
    id SERIAL PRIMARY KEY,
    battle_date DATE NOT NULL,
    winner VARCHAR(30) NOT NULL
);

CREATE TABLE IF NOT EXISTS Gym_Challenges (
    gym VARCHAR(30) REFERENCES Gym(name),
    username VARCHAR(30) REFERENCES Trainer(username) ON DELETE CASCADE,
    battle_id INTEGER REFERENCES Battle(id),
    PRIMARY KEY (gym, username, battle_id)
);

CREATE TABLE IF NOT EXISTS Items (
    name VARCHAR(30) PRIMARY KEY,
    effect TEXT NOT NULL,
    price INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS Berries (
    name VARCHAR(30) PRIMARY KEY REFERENCES Items(name) ON DELETE CASCADE,
    flavour VARCHAR(20),
    firmness VARCHAR(20)
);

CREATE TABLE IF NOT EXISTS Medicine (
    name VARCHAR(30) PRIMARY KEY REFERENCES Items(name) ON DELETE CASCADE,
    heal_amount INTEGER,
    cures VARCHAR(30)
);

CREATE TABLE IF NOT EXISTS Trainer_Items (
    name VARCHAR(30) REFERENCES Items(name),
    username VARCHAR(30) REFERENCES Trainer(username) ON DELETE CASCADE,
    quantity INTEGER NOT NULL CHECK (quantity >= 0),
    PRIMARY KEY (name, username)
);
"""

# Drop order: dependents first
TABLES = [
    "Trainer_Items",
    "Medicine",
    "Berries",
    "Items",
    "Gym_Challenges",
    "Battle",
    "Trainer_Badges",
    "Badge",
    "Gym",
    "Learned_Moves",
    "Player_Pokemon",
    "Evolutions",
    "Can_Learn",
    "Moves",
    "Type_Versus",
    "Pokemon_Type",
    "Pokemon",
    "Types",
    "Trainer",
    "Timezone",
    "DemoTable",
]


async def ensure_schema(db) -> None:
    """Create all tables if they don't exist."""
    await db.execute_script(SCHEMA)


async def drop_schema(db) -> None:
    """Drop every application table."""
    await db.execute_script(
        "\n".join(f"DROP TABLE IF EXISTS {table} CASCADE;" for table in TABLES)
    )
