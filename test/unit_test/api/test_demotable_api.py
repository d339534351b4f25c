"""
Unit tests for the demo table endpoints.
"""

import asyncpg
import pytest

pytestmark = pytest.mark.asyncio


class TestDemoTable:
    async def test_list_rows(self, client, conn):
        conn.respond("FROM DemoTable", [{"id": 1, "name": "alpha"}])

        response = await client.get("/demotable")

        assert response.status_code == 200
        assert response.json() == {"data": [{"id": 1, "name": "alpha"}]}

    async def test_initiate_recreates_table(self, client, conn):
        response = await client.post("/initiate-demotable")

        assert response.json() == {"success": True}
        script = conn.queries("execute")[0]
        assert script.index("DROP TABLE IF EXISTS DemoTable") < script.index("CREATE TABLE DemoTable")

    async def test_insert(self, client, conn):
        response = await client.post("/insert-demotable", json={"id": 7, "name": "gamma"})

        assert response.json() == {"success": True}
        assert conn.last_args() == (7, "gamma")

    async def test_insert_duplicate_id(self, client, conn):
        conn.respond("INSERT INTO DemoTable", asyncpg.UniqueViolationError("duplicate key"))

        response = await client.post("/insert-demotable", json={"id": 7, "name": "gamma"})

        assert response.status_code == 409
        assert response.json()["success"] is False

    async def test_rename(self, client, conn):
        conn.respond("UPDATE DemoTable", "UPDATE 2")

        response = await client.post("/update-name-demotable", json={"oldName": "alpha", "newName": "beta"})

        assert response.json() == {"success": True}
        assert conn.last_args() == ("beta", "alpha")

    async def test_rename_missing_row(self, client, conn):
        conn.respond("UPDATE DemoTable", "UPDATE 0")

        response = await client.post("/update-name-demotable", json={"oldName": "zeta", "newName": "beta"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "not_found"}

    async def test_count(self, client, conn):
        conn.respond("COUNT(*)", 3)

        response = await client.get("/count-demotable")

        assert response.json() == {"success": True, "count": 3}

    async def test_count_failure_reports_sentinel(self, client, conn):
        conn.respond("COUNT(*)", asyncpg.UndefinedTableError('relation "demotable" does not exist'))

        response = await client.get("/count-demotable")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "query_failed", "count": -1}
