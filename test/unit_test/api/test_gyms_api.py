"""
Unit tests for gym, badge and battle endpoints.
"""

from datetime import date

import asyncpg
import pytest

from trainerdex.gyms.models import BattleCreate


@pytest.mark.asyncio
class TestGymQueries:
    async def test_list_gyms(self, client, conn):
        gyms = [{"name": "Pewter Gym", "location": "Pewter City", "leader": "Brock", "type": "rock"}]
        conn.respond("FROM Gym", gyms)

        response = await client.get("/gym")

        assert response.json() == {"data": gyms}

    async def test_badges_for_gym(self, client, conn):
        conn.respond("FROM Badge", [{"name": "Boulder Badge"}])

        response = await client.get("/badges/Pewter Gym")

        assert response.json() == {"data": [{"name": "Boulder Badge"}]}
        assert conn.last_args() == ("Pewter Gym",)

    async def test_player_badges(self, client, conn):
        conn.respond("FROM Trainer_Badges", [{"badge": "Boulder Badge", "gym": "Pewter Gym"}])

        response = await client.get("/player-badges", headers={"username": "Suicune7"})

        assert response.json()["data"][0]["badge"] == "Boulder Badge"

    async def test_remaining_badges_uses_set_difference(self, client, conn):
        conn.respond("EXCEPT", [{"badge": "Cascade Badge"}])

        response = await client.get("/player-badges/Cerulean Gym", headers={"username": "Suicune7"})

        assert response.json() == {"data": [{"badge": "Cascade Badge"}]}
        assert conn.last_args() == ("Cerulean Gym", "Suicune7")


@pytest.mark.asyncio
class TestGymWrites:
    async def test_award_badge(self, client, conn):
        response = await client.post(
            "/player-badges",
            json={"gym": "Cerulean Gym", "username": "Suicune7", "badge": "Cascade Badge"},
        )

        assert response.json() == {"success": True}
        assert conn.last_args() == ("Cerulean Gym", "Suicune7", "Cascade Badge")

    async def test_award_badge_twice(self, client, conn):
        conn.respond("INSERT INTO Trainer_Badges", asyncpg.UniqueViolationError("duplicate key"))

        response = await client.post(
            "/player-badges",
            json={"gym": "Pewter Gym", "username": "Suicune7", "badge": "Boulder Badge"},
        )

        assert response.status_code == 409

    async def test_insert_battle_returns_generated_id(self, client, conn):
        conn.respond("RETURNING id", {"id": 5})

        response = await client.post("/insert-battle", json={"date": "12/01/2024", "winner": "Suicune7"})

        assert response.json() == {"success": True, "id": 5}
        assert conn.last_args() == (date(2024, 1, 12), "Suicune7")

    async def test_insert_battle_failure_reports_sentinel(self, client, conn):
        conn.respond("RETURNING id", ConnectionResetError("server closed the connection"))

        response = await client.post("/insert-battle", json={"date": "12/01/2024", "winner": "Suicune7"})

        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "backend_unavailable", "id": -1}

    async def test_insert_battle_bad_date(self, client, conn):
        response = await client.post("/insert-battle", json={"date": "2024-01-12", "winner": "Suicune7"})

        assert response.status_code == 422
        assert response.json() == {"success": False, "error": "invalid_input", "id": -1}
        assert conn.calls == []

    async def test_challenge_gym(self, client, conn):
        response = await client.post(
            "/challenge-gym", json={"gym": "Pewter Gym", "username": "Suicune7", "battle": 5}
        )

        assert response.json() == {"success": True}
        assert conn.last_args() == ("Pewter Gym", "Suicune7", 5)

    async def test_challenge_unknown_battle(self, client, conn):
        conn.respond("INSERT INTO Gym_Challenges", asyncpg.ForeignKeyViolationError("battle_id"))

        response = await client.post(
            "/challenge-gym", json={"gym": "Pewter Gym", "username": "Suicune7", "battle": 999}
        )

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "constraint_violation"}


class TestBattleCreate:
    def test_parses_day_month_year(self):
        assert BattleCreate(date="05/09/2023", winner="Misty").battle_date == date(2023, 9, 5)

    def test_accepts_date_instance(self):
        assert BattleCreate(battle_date=date(2023, 9, 5), winner="Misty").battle_date == date(2023, 9, 5)

    def test_rejects_impossible_date(self):
        with pytest.raises(ValueError):
            BattleCreate(date="31/02/2024", winner="Misty")
