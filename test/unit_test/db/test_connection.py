"""
Unit tests for the pooled query executor.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import asyncpg
import pytest

from trainerdex.db.connection import Database, DatabasePool
from trainerdex.errors import ErrorKind, StoreError

pytestmark = pytest.mark.asyncio


class TestDatabase:
    """Tests for the per-connection wrapper."""

    async def test_execute_parses_rowcount_from_status(self, pg_pool, conn):
        conn.respond("UPDATE", "UPDATE 3")
        db = Database(conn, pg_pool)

        result = await db.execute("UPDATE DemoTable SET name = $1", "x")

        assert result.rowcount == 3
        assert result.lastrowid is None

    async def test_execute_returning_reports_generated_id(self, pg_pool, conn):
        conn.respond("RETURNING id", {"id": 42})
        db = Database(conn, pg_pool)

        result = await db.execute("INSERT INTO Battle (battle_date, winner) VALUES ($1, $2) RETURNING id")

        assert result.lastrowid == 42
        assert result.rowcount == 1
        assert conn.calls[-1][0] == "fetchrow"

    async def test_fetch_helpers_return_plain_dicts(self, pg_pool, conn):
        conn.respond("LIMIT 1", {"name": "Pewter Gym"})
        conn.respond("FROM Gym", [{"name": "Pewter Gym"}])
        db = Database(conn, pg_pool)

        assert await db.fetch_all("SELECT name FROM Gym") == [{"name": "Pewter Gym"}]
        assert await db.fetch_one("SELECT name FROM Gym LIMIT 1") == {"name": "Pewter Gym"}
        assert await db.fetch_one("SELECT name FROM Badge") is None

    async def test_close_releases_connection(self, pg_pool, conn):
        await Database(conn, pg_pool).close()
        assert pg_pool.released == 1


class TestDatabasePoolLifecycle:
    """Tests for opening and draining the pool."""

    async def test_open_creates_driver_pool(self, pg_pool):
        pool = DatabasePool(dsn="postgresql://localhost/x", min_size=1, max_size=3)
        with patch("trainerdex.db.connection.asyncpg.create_pool", new=AsyncMock(return_value=pg_pool)) as create:
            assert await pool.open() is True

        assert pool.is_open
        kwargs = create.call_args.kwargs
        assert kwargs["min_size"] == 1
        assert kwargs["max_size"] == 3

    async def test_open_failure_is_logged_not_raised(self):
        pool = DatabasePool(dsn="postgresql://localhost/x")
        with patch("trainerdex.db.connection.asyncpg.create_pool", new=AsyncMock(side_effect=OSError("refused"))):
            assert await pool.open() is False

        assert not pool.is_open
        with pytest.raises(StoreError) as exc_info:
            async with pool.connection():
                pass
        assert exc_info.value.kind is ErrorKind.BACKEND_UNAVAILABLE

    async def test_close_drains_within_grace(self, pool, pg_pool):
        assert await pool.close(grace=1) is True
        assert pg_pool.closed
        assert not pg_pool.terminated
        assert not pool.is_open

    async def test_close_terminates_when_grace_expires(self, pool, pg_pool):
        pg_pool.close_delay = 5

        assert await pool.close(grace=0.01) is False
        assert pg_pool.terminated

    async def test_close_without_pool_is_a_noop(self, closed_pool):
        assert await closed_pool.close() is True


class TestDatabasePoolConnections:
    """Tests for acquisition, release and error translation."""

    async def test_connection_released_after_success(self, pool, pg_pool):
        async with pool.connection() as db:
            await db.fetch_all("SELECT name FROM Items")

        assert pg_pool.acquired == 1
        assert pg_pool.released == 1

    async def test_connection_released_after_driver_error(self, pool, pg_pool, conn):
        conn.respond("INSERT", asyncpg.UniqueViolationError("duplicate key"))

        with pytest.raises(StoreError) as exc_info:
            await pool.run(lambda db: db.execute("INSERT INTO Types (type) VALUES ($1)", "fire"))

        assert exc_info.value.kind is ErrorKind.CONSTRAINT_VIOLATION
        assert pg_pool.released == 1

    async def test_connection_released_after_store_error(self, pool, pg_pool):
        with pytest.raises(StoreError):
            async with pool.connection():
                raise StoreError(ErrorKind.NOT_FOUND, "missing")

        assert pg_pool.released == 1

    async def test_acquire_timeout_is_backend_unavailable(self, pool, pg_pool):
        pg_pool.acquire_error = asyncio.TimeoutError()

        with pytest.raises(StoreError) as exc_info:
            async with pool.connection():
                pass

        assert exc_info.value.kind is ErrorKind.BACKEND_UNAVAILABLE
        assert pg_pool.released == 0

    async def test_run_returns_action_result(self, pool, conn):
        conn.respond("COUNT", 7)
        assert await pool.run(lambda db: db.fetch_val("SELECT COUNT(*) FROM Items")) == 7

    async def test_ping(self, pool, closed_pool, pg_pool):
        assert await pool.ping() is True
        assert await closed_pool.ping() is False

        pg_pool.acquire_error = OSError("connection reset")
        assert await pool.ping() is False
