"""
Application entry point.

Builds the FastAPI app, opens the connection pool for the lifetime of the
process and mounts every router. uvicorn turns SIGINT/SIGTERM into a lifespan
shutdown, which drains the pool; ``run()`` exits non-zero if the drain had to
be cut short.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from trainerdex import __version__
from trainerdex.config import (
    AUTO_CREATE_SCHEMA,
    CORS_ORIGINS,
    HOST,
    LOG_LEVEL,
    PORT,
    SHUTDOWN_GRACE_SECONDS,
)
from trainerdex.db import DatabasePool, ensure_schema
from trainerdex.db.dependencies import PoolDep
from trainerdex.demotable import demotable_router
from trainerdex.errors import StoreError, setup_exception_handlers
from trainerdex.explorer import explorer_router
from trainerdex.gyms import gyms_router
from trainerdex.leaderboards import leaderboards_router
from trainerdex.player_pokemon import player_pokemon_router
from trainerdex.pokedex import pokedex_router
from trainerdex.store import store_router
from trainerdex.trainers import trainers_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    pool = DatabasePool()
    app.state.pool = pool
    app.state.pool_drained = True

    # A failed open leaves the app up; requests answer backend_unavailable
    if await pool.open() and AUTO_CREATE_SCHEMA:
        try:
            await pool.run(ensure_schema)
            logger.info("Schema ready")
        except StoreError as e:
            logger.error(f"Schema creation failed: {e.message}")

    yield

    logger.info("Terminating")
    app.state.pool_drained = await pool.close(SHUTDOWN_GRACE_SECONDS)


app = FastAPI(
    title="TrainerDex API",
    description="Pokémon trainer management: party, gyms, store and Pokédex",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(demotable_router)
app.include_router(trainers_router)
app.include_router(player_pokemon_router)
app.include_router(gyms_router)
app.include_router(store_router)
app.include_router(pokedex_router)
app.include_router(leaderboards_router)
app.include_router(explorer_router)


@app.get("/check-db-connection", response_class=PlainTextResponse)
async def check_db_connection(pool: PoolDep):
    if await pool.ping():
        return "connected"
    return "unable to connect"


def run():
    uvicorn.run(app, host=HOST, port=PORT)
    sys.exit(0 if getattr(app.state, "pool_drained", True) else 1)


if __name__ == "__main__":
    run()
