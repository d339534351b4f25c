"""PostgreSQL connection management. One pool per process, injected per request."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional, TypeVar

import asyncpg

from trainerdex.config import (
    COMMAND_TIMEOUT,
    DATABASE_URL,
    POOL_MAX,
    POOL_MIN,
    POOL_TIMEOUT,
    SHUTDOWN_GRACE_SECONDS,
)
from trainerdex.errors import ErrorKind, StoreError, translate_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Exceptions the driver (or the socket under it) can raise mid-request
DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
    ValueError,
)

# ---------------------------------------------------------------------------
# Result wrapper
# ---------------------------------------------------------------------------

class Result:
    """Wraps execute() results to provide lastrowid and rowcount."""
    __slots__ = ("lastrowid", "rowcount")

    def __init__(self, lastrowid: Optional[int], rowcount: int):
        self.lastrowid = lastrowid
        self.rowcount = rowcount


# ---------------------------------------------------------------------------
# Database wrapper
# ---------------------------------------------------------------------------

class Database:
    """Thin async wrapper over an asyncpg connection."""

    def __init__(self, conn: asyncpg.Connection, pool: asyncpg.Pool):
        self._conn = conn
        self._pool = pool

    async def execute(self, query: str, *args) -> Result:
        """Execute a write query (INSERT/UPDATE/DELETE). A query with a
        RETURNING id clause reports the generated key as lastrowid."""
        if "RETURNING" in query.upper():
            row = await self._conn.fetchrow(query, *args)
            return Result(lastrowid=row["id"] if row else None, rowcount=1 if row else 0)
        status = await self._conn.execute(query, *args)
        # asyncpg returns e.g. "INSERT 0 1" or "UPDATE 3"
        rowcount = 0
        if status:
            parts = status.split()
            if len(parts) >= 2 and parts[-1].isdigit():
                rowcount = int(parts[-1])
        return Result(lastrowid=None, rowcount=rowcount)

    async def execute_many(self, query: str, args: List[tuple]) -> None:
        """Execute one write query for each argument tuple."""
        await self._conn.executemany(query, args)

    async def fetch_one(self, query: str, *args) -> Optional[dict]:
        """Fetch a single row as a dict, or None."""
        row = await self._conn.fetchrow(query, *args)
        return dict(row) if row else None

    async def fetch_all(self, query: str, *args) -> List[dict]:
        """Fetch all rows as a list of dicts."""
        rows = await self._conn.fetch(query, *args)
        return [dict(r) for r in rows]

    async def fetch_val(self, query: str, *args) -> Any:
        """Fetch the first column of the first row."""
        return await self._conn.fetchval(query, *args)

    def transaction(self):
        """Async context manager wrapping the block in one transaction."""
        return self._conn.transaction()

    async def execute_script(self, sql: str) -> None:
        """Execute multi-statement DDL (no parameters)."""
        await self._conn.execute(sql)

    async def close(self) -> None:
        """Release connection back to its pool."""
        await self._pool.release(self._conn)


# ---------------------------------------------------------------------------
# Connection pool
# ---------------------------------------------------------------------------

class DatabasePool:
    """Process-lifetime pool handle.

    Created and opened by the app lifespan, stored on ``app.state.pool`` and
    handed to route handlers through :func:`trainerdex.db.dependencies.get_pool`.
    If opening fails the handle stays unusable and every acquisition raises
    ``StoreError(BACKEND_UNAVAILABLE)``.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_size: int = POOL_MIN,
        max_size: int = POOL_MAX,
        idle_timeout: float = POOL_TIMEOUT,
        command_timeout: float = COMMAND_TIMEOUT,
    ):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.idle_timeout = idle_timeout
        self.command_timeout = command_timeout
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> bool:
        """Create the pool. Failure is logged, not raised."""
        if self._pool is not None:
            return True
        try:
            self._pool = await asyncpg.create_pool(
                self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                max_inactive_connection_lifetime=self.idle_timeout,
                command_timeout=self.command_timeout,
            )
        except DRIVER_ERRORS as e:
            logger.error(f"Initialization error: {e}")
            self._pool = None
            return False
        logger.info("DB pool created")
        return True

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[Database]:
        """Acquire one connection for the duration of the block.

        The connection goes back to the pool on every exit path. Driver
        errors raised inside the block surface as StoreError.
        """
        if self._pool is None:
            raise StoreError(ErrorKind.BACKEND_UNAVAILABLE, "connection pool is not available")
        pool = self._pool
        try:
            conn = await pool.acquire()
        except DRIVER_ERRORS as e:
            raise translate_error(e) from e

        db = Database(conn=conn, pool=pool)
        try:
            yield db
        except DRIVER_ERRORS as e:
            raise translate_error(e) from e
        finally:
            try:
                await db.close()
            except DRIVER_ERRORS as e:
                logger.error(f"Failed to release connection: {e}")

    async def run(self, action: Callable[[Database], Awaitable[T]]) -> T:
        """Run one unit of work on a freshly acquired connection."""
        async with self.connection() as db:
            return await action(db)

    async def ping(self) -> bool:
        """True when a connection can be acquired and used."""
        try:
            await self.run(lambda db: db.fetch_val("SELECT 1"))
        except StoreError as e:
            logger.error(f"Connection check failed: {e.message}")
            return False
        return True

    async def close(self, grace: float = SHUTDOWN_GRACE_SECONDS) -> bool:
        """Drain the pool, waiting up to ``grace`` seconds for in-flight
        connections. Returns False when the pool had to be terminated."""
        if self._pool is None:
            return True
        pool, self._pool = self._pool, None
        try:
            await asyncio.wait_for(pool.close(), timeout=grace)
        except asyncio.TimeoutError:
            logger.error(f"Pool did not drain within {grace}s, terminating connections")
            pool.terminate()
            return False
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to close pool: {e}")
            pool.terminate()
            return False
        logger.info("DB pool closed")
        return True
