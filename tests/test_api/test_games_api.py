"""Tests for the games REST API."""

import pytest
from fastapi.testclient import TestClient

from scorebook.api.main import app
from scorebook.api.services.session_manager import session_manager

ROSTER = [
    {"id": "P1", "name": "Sam Reed", "jersey_number": 12, "position": "QB"},
    {"id": "P2", "name": "Cole Hart", "jersey_number": 81, "position": "WR"},
    {"id": "D1", "name": "Owen Price", "jersey_number": 44, "position": "LB"},
]


@pytest.fixture
def client(fast_config):
    with TestClient(app) as client:
        yield client
    session_manager.close_all()


@pytest.fixture
def game_id(client) -> str:
    response = client.post(
        "/api/v1/games",
        json={"game_id": "g1", "my_team_id": "eagles", "opponent_name": "Hawks", "roster": ROSTER},
    )
    assert response.status_code == 201
    return response.json()["game"]["id"]


def record(client, game_id, **play):
    response = client.post(f"/api/v1/games/{game_id}/plays", json=play)
    assert response.status_code == 201, response.text
    return response.json()


class TestAppInfo:
    def test_root(self, client):
        assert client.get("/").json()["name"] == "Scorebook API"

    def test_health_counts_games(self, client, game_id):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["active_games"] == 1


class TestGames:
    """Tests for game lifecycle endpoints."""

    def test_create_game(self, client, game_id):
        body = client.get(f"/api/v1/games/{game_id}").json()
        assert body["game"]["home_score"] == 0
        assert [p["id"] for p in body["game"]["roster"]] == ["P1", "P2", "D1"]
        assert body["game"]["rules"]["quarter_length_minutes"] == 12
        assert body["clock"] == {"time_remaining": 720, "running": False, "display": "12:00"}
        assert body["possession"]["down_display"] == "1st & 10"

    def test_create_game_with_rules(self, client):
        response = client.post(
            "/api/v1/games",
            json={"rules": {"quarter_length_minutes": 10, "scoring": {"extra_point_kick": 2}}},
        )
        body = response.json()
        assert body["clock"]["time_remaining"] == 600
        assert body["game"]["rules"]["scoring"]["extra_point_kick"] == 2

    def test_unknown_game(self, client):
        response = client.get("/api/v1/games/nope")
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_delete_game(self, client, game_id):
        assert client.delete(f"/api/v1/games/{game_id}").status_code == 204
        assert client.get(f"/api/v1/games/{game_id}").status_code == 404
        assert client.delete(f"/api/v1/games/{game_id}").status_code == 404


class TestPlays:
    """Tests for recording, editing and undoing plays."""

    def test_record_fallback_rush(self, client, game_id):
        body = record(client, game_id, type="rush", yards=7, player_id="P1")
        p1 = next(p for p in body["game"]["roster"] if p["id"] == "P1")
        assert p1["stats"]["rushing_attempts"] == 1
        assert p1["stats"]["rushing_yards"] == 7

    def test_record_completion_with_participants(self, client, game_id):
        body = record(
            client,
            game_id,
            type="pass_td",
            yards=12,
            participants=[
                {"player_id": "P1", "role": "passer"},
                {"player_id": "P2", "role": "receiver"},
            ],
        )
        assert body["game"]["home_score"] == 6
        stats = client.get(f"/api/v1/games/{game_id}/stats").json()
        assert stats["players"]["P1"]["completions"] == 1
        assert stats["players"]["P1"]["receptions"] == 0
        assert stats["players"]["P2"]["receiving_yards"] == 12
        assert stats["home"]["passing_tds"] == 1

    def test_away_tackle_credits_home_defender(self, client, game_id):
        record(client, game_id, type="tackle", yards=3, team_side="away",
               participants=[{"player_id": "D1", "role": "tackler"}])
        stats = client.get(f"/api/v1/games/{game_id}/stats").json()
        assert stats["home"]["tackles"] == 1
        assert stats["players"]["D1"]["tackles"] == 1
        assert stats["home"]["rushing_attempts"] == 0

    def test_invalid_play_type(self, client, game_id):
        response = client.post(f"/api/v1/games/{game_id}/plays", json={"type": "teleport"})
        assert response.status_code == 422

    def test_undo(self, client, game_id):
        record(client, game_id, type="field_goal_made", yards=30)
        body = client.post(f"/api/v1/games/{game_id}/plays/undo").json()
        assert body["game"]["plays"] == []
        assert body["game"]["home_score"] == 0

    def test_undo_empty_log(self, client, game_id):
        response = client.post(f"/api/v1/games/{game_id}/plays/undo")
        assert response.status_code == 200
        assert response.json()["game"]["plays"] == []

    def test_edit_play(self, client, game_id):
        body = record(client, game_id, type="rush", yards=4, player_id="P1")
        play_id = body["game"]["plays"][0]["id"]

        response = client.patch(
            f"/api/v1/games/{game_id}/plays/{play_id}", json={"type": "rush_td", "yards": 9}
        )
        body = response.json()
        assert body["game"]["home_score"] == 6
        assert body["game"]["plays"][0]["id"] == play_id
        assert body["game"]["plays"][0]["yards"] == 9

    def test_edit_ignores_null_for_required_fields(self, client, game_id):
        body = record(client, game_id, type="rush", yards=4, player_id="P1")
        play_id = body["game"]["plays"][0]["id"]

        body = client.patch(
            f"/api/v1/games/{game_id}/plays/{play_id}", json={"type": None, "player_id": None}
        ).json()
        play = body["game"]["plays"][0]
        assert play["type"] == "rush"
        assert play["player_id"] is None

    def test_edit_unknown_play(self, client, game_id):
        response = client.patch(f"/api/v1/games/{game_id}/plays/missing", json={"yards": 1})
        assert response.status_code == 404

    def test_score_timeline(self, client, game_id):
        record(client, game_id, type="rush_td", yards=3)
        record(client, game_id, type="extra_point_kick_made")
        record(client, game_id, type="safety", team_side="home")
        timeline = client.get(f"/api/v1/games/{game_id}/score-timeline").json()
        assert [(t["home_score"], t["opp_score"]) for t in timeline] == [(6, 0), (7, 0), (7, 2)]


class TestClockEndpoints:
    def test_start_and_stop(self, client, game_id):
        assert client.post(f"/api/v1/games/{game_id}/clock/start").json()["running"] is True
        assert client.post(f"/api/v1/games/{game_id}/clock/stop").json()["running"] is False

    def test_reset_and_adjust(self, client, game_id):
        body = client.post(f"/api/v1/games/{game_id}/clock/reset", json={"time_remaining": 300}).json()
        assert body == {"time_remaining": 300, "running": False, "display": "5:00"}

        body = client.post(f"/api/v1/games/{game_id}/clock/adjust", json={"delta": -400}).json()
        assert body["time_remaining"] == 0

    def test_reset_defaults_to_quarter(self, client, game_id):
        client.post(f"/api/v1/games/{game_id}/clock/adjust", json={"delta": -60})
        body = client.post(f"/api/v1/games/{game_id}/clock/reset", json={}).json()
        assert body["time_remaining"] == 720

    def test_negative_reset_rejected(self, client, game_id):
        response = client.post(f"/api/v1/games/{game_id}/clock/reset", json={"time_remaining": -5})
        assert response.status_code == 422


class TestPossessionEndpoints:
    def test_change_possession_credits_time(self, client, game_id):
        client.post(f"/api/v1/games/{game_id}/clock/reset", json={"time_remaining": 600})
        client.post(f"/api/v1/games/{game_id}/clock/adjust", json={"delta": -20})
        body = client.post(f"/api/v1/games/{game_id}/possession/change", json={}).json()
        assert body["home_top_seconds"] == 20
        assert body["possession_side"] == "away"
        assert body["attack_direction"] == "right-to-left"

    def test_move_ball(self, client, game_id):
        client.post(f"/api/v1/games/{game_id}/possession/advance")
        body = client.post(f"/api/v1/games/{game_id}/possession/advance").json()
        assert body["field_position"] == 27
        body = client.post(f"/api/v1/games/{game_id}/possession/retreat").json()
        assert body["field_position"] == 26

    def test_swap_direction_and_down(self, client, game_id):
        body = client.post(f"/api/v1/games/{game_id}/possession/swap-direction").json()
        assert body["attack_direction"] == "right-to-left"
        body = client.post(
            f"/api/v1/games/{game_id}/possession/down", json={"down": 4, "yards_to_go": 1}
        ).json()
        assert body["down_display"] == "4th & 1"
        assert client.get(f"/api/v1/games/{game_id}/possession").json()["down"] == 4

    def test_bad_down_rejected(self, client, game_id):
        response = client.post(
            f"/api/v1/games/{game_id}/possession/down", json={"down": 5, "yards_to_go": 1}
        )
        assert response.status_code == 422
