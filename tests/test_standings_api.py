"""Tests for leaderboards."""

from app.db.models.bet import Bet

from conftest import make_race, make_user


def scored_bet(db, user, race, score):
    bet = Bet(user_id=user.id, race_id=race.id, predictions={"positions": []}, score=score)
    db.add(bet)
    db.commit()
    return bet


class TestSeasonStandings:
    def test_points_summed_per_user(self, client, db):
        alice, bob, carol = (make_user(db, name) for name in ("alice", "bob", "carol"))
        round_1 = make_race(db, season=2025, round_number=1)
        round_2 = make_race(db, season=2025, round_number=2)
        old = make_race(db, season=2024, round_number=1)

        scored_bet(db, alice, round_1, 50)
        scored_bet(db, alice, round_2, 30)
        scored_bet(db, bob, round_1, 105)
        scored_bet(db, carol, round_1, 80)
        scored_bet(db, carol, old, 400)
        # Not scored yet: ignored
        db.add(Bet(user_id=bob.id, race_id=round_2.id, predictions={"positions": []}))
        db.commit()

        response = client.get("/standings/season/2025")

        assert response.status_code == 200
        table = response.json()
        assert [(r["username"], r["points"], r["bets"]) for r in table] == [
            ("bob", 105, 1),
            ("alice", 80, 2),
            ("carol", 80, 1),
        ]
        assert [r["position"] for r in table] == [1, 2, 3]

    def test_negative_totals_rank_last(self, client, db):
        alice, bob = make_user(db, "alice"), make_user(db, "bob")
        race = make_race(db)
        scored_bet(db, alice, race, -10)
        scored_bet(db, bob, race, 0)

        table = client.get(f"/standings/season/{race.season}").json()

        assert [r["username"] for r in table] == ["bob", "alice"]

    def test_empty_season(self, client):
        assert client.get("/standings/season/1950").json() == []


class TestRaceStandings:
    def test_race_leaderboard(self, client, db, open_race):
        alice, bob = make_user(db, "alice"), make_user(db, "bob")
        scored_bet(db, alice, open_race, 20)
        scored_bet(db, bob, open_race, 45)

        table = client.get(f"/standings/race/{open_race.id}").json()

        assert [(r["username"], r["points"]) for r in table] == [("bob", 45), ("alice", 20)]

    def test_unknown_race(self, client):
        assert client.get("/standings/race/999").status_code == 404


class TestWinners:
    def test_top_ten_scores(self, client, db):
        race = make_race(db)
        for i in range(12):
            scored_bet(db, make_user(db, f"user{i:02d}"), race, i * 10)

        winners = client.get("/winners").json()

        assert len(winners) == 10
        assert winners[0]["score"] == 110
        assert winners[0]["user"]["username"] == "user11"
        assert winners[0]["race"]["id"] == race.id
        assert [w["score"] for w in winners] == sorted((w["score"] for w in winners), reverse=True)
