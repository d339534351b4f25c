"""
Unit tests for a trainer's Pokémon endpoints.
"""

import asyncpg
import pytest

pytestmark = pytest.mark.asyncio

SUICUNE7 = {"username": "Suicune7"}


class TestPartyQueries:
    async def test_list_party(self, client, conn):
        party = [{"nickname": "Sui", "name": "suicune", "pp_level": 50}]
        conn.respond("FROM Player_Pokemon", party)

        response = await client.get("/player-pokemon", headers=SUICUNE7)

        assert response.json() == {"data": party}
        assert conn.last_args() == ("Suicune7",)

    async def test_username_header_required(self, client, conn):
        response = await client.get("/player-pokemon")

        assert response.status_code == 422
        assert response.json() == {"success": False, "error": "invalid_input", "data": []}
        assert conn.calls == []

    async def test_count(self, client, conn):
        conn.respond("COUNT(*)", 3)

        response = await client.get("/player-pokemon/count", headers=SUICUNE7)

        assert response.json() == {"success": True, "count": 3}

    async def test_count_by_type(self, client, conn):
        rows = [{"type": "fire", "count": 1}, {"type": "water", "count": 1}]
        conn.respond("GROUP BY pt.type", rows)

        response = await client.get("/player-pokemon/count-by-type", headers=SUICUNE7)

        assert response.json() == {"data": rows}

    async def test_learned_moves(self, client, conn):
        conn.respond("FROM Learned_Moves", [{"move": "aurora beam"}, {"move": "surf"}])

        response = await client.get(
            "/player-pokemon/learned-moves",
            headers=SUICUNE7,
            params={"name": "suicune", "nickname": "Sui"},
        )

        assert response.json() == {"data": [{"move": "aurora beam"}, {"move": "surf"}]}
        assert conn.last_args() == ("suicune", "Sui", "Suicune7")


class TestPartyWrites:
    async def test_catch_defaults_to_level_one(self, client, conn):
        response = await client.post(
            "/player-pokemon/catch",
            json={"name": "caterpie", "nickname": "Cat", "tr_username": "Suicune7"},
        )

        assert response.json() == {"success": True}
        assert conn.last_args() == ("caterpie", "Cat", "Suicune7", 1)

    async def test_catch_duplicate_nickname(self, client, conn):
        conn.respond("INSERT INTO Player_Pokemon", asyncpg.UniqueViolationError("duplicate key"))

        response = await client.post(
            "/player-pokemon/catch",
            json={"name": "suicune", "nickname": "Sui", "tr_username": "Suicune7", "pp_level": 50},
        )

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "constraint_violation"}

    async def test_level_out_of_range_rejected_before_query(self, client, conn):
        response = await client.post(
            "/player-pokemon/level",
            json={"name": "suicune", "nickname": "Sui", "tr_username": "Suicune7", "pp_level": 101},
        )

        assert response.status_code == 422
        assert response.json() == {"success": False, "error": "invalid_input"}
        assert conn.calls == []

    async def test_level_up(self, client, conn):
        conn.respond("UPDATE Player_Pokemon", "UPDATE 1")

        response = await client.post(
            "/player-pokemon/level",
            json={"name": "suicune", "nickname": "Sui", "tr_username": "Suicune7", "pp_level": 51},
        )

        assert response.json() == {"success": True}
        assert conn.last_args() == (51, "suicune", "Sui", "Suicune7")

    async def test_release_missing_pokemon(self, client, conn):
        conn.respond("DELETE FROM Player_Pokemon", "DELETE 0")

        response = await client.post(
            "/player-pokemon/release",
            json={"name": "mew", "nickname": "Ghost", "tr_username": "Suicune7"},
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "not_found"}

    async def test_release(self, client, conn):
        conn.respond("DELETE FROM Player_Pokemon", "DELETE 1")

        response = await client.post(
            "/player-pokemon/release",
            json={"name": "charizard", "nickname": "Blaze", "tr_username": "Suicune7"},
        )

        assert response.json() == {"success": True}
        assert conn.last_args() == ("Suicune7", "charizard", "Blaze")

    async def test_learn_move_not_owned(self, client, conn):
        conn.respond("INSERT INTO Learned_Moves", asyncpg.ForeignKeyViolationError("missing parent"))

        response = await client.post(
            "/player-pokemon/learned-move",
            json={"move": "surf", "name": "suicune", "nickname": "Nope", "tr_username": "Suicune7"},
        )

        assert response.status_code == 409
