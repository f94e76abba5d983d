#!/usr/bin/env python3
"""
Tests for logging games, saved bowler specs and dashboard statistics.
"""

import unittest

from tests import ApiTestCase, OTHER_USER_ID


class PerformanceApiTestCase(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.ball = self.create_ball(name="Phaze II")
        self.pattern = self.create_pattern(name="Cheetah", category="pba", length=35)

    def log_game(self, score=200, game_date="2026-03-01T19:00:00", **overrides):
        body = {
            "ball_id": self.ball["id"],
            "pattern_id": self.pattern["id"],
            "venue": "Sunset Lanes",
            "score": score,
            "carry_percentage": 80.0,
            "entry_angle": 5.0,
            "game_date": game_date,
        }
        body.update(overrides)
        return self.client.post("/api/performance", json=body, headers=self.headers())


class TestPerformanceEndpoints(PerformanceApiTestCase, unittest.TestCase):

    def test_log_game(self):
        response = self.log_game(score=245, entry_angle=None)

        self.assertEqual(response.status_code, 200, response.text)
        game = response.json()["game"]
        self.assertEqual(game["score"], 245)
        self.assertEqual(game["ball_id"], self.ball["id"])
        self.assertIsNone(game["entry_angle"])
        self.assertTrue(game["game_date"].startswith("2026-03-01T19:00:00"))

    def test_games_listed_newest_first(self):
        self.log_game(score=180, game_date="2026-01-05T19:00:00")
        self.log_game(score=220, game_date="2026-02-05T19:00:00")

        data = self.client.get("/api/performance", headers=self.headers()).json()

        self.assertEqual(data["count"], 2)
        self.assertEqual([g["score"] for g in data["games"]], [220, 180])

    def test_ball_from_another_arsenal_is_not_found(self):
        theirs = self.create_ball(user_id=OTHER_USER_ID)

        response = self.log_game(ball_id=theirs["id"])

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "BallNotFoundException")

    def test_unknown_pattern_is_not_found(self):
        response = self.log_game(pattern_id="missing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "PatternNotFoundException")

    def test_score_above_perfect_rejected(self):
        self.assertEqual(self.log_game(score=301).status_code, 422)


class TestBowlerSpecsEndpoints(ApiTestCase, unittest.TestCase):

    def test_no_saved_specs(self):
        response = self.client.get("/api/bowler-specs", headers=self.headers())

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "specs": None})

    def test_save_then_replace(self):
        first = self.client.post(
            "/api/bowler-specs",
            json={"speed": 16.5, "rev_rate": 300, "playing_style": "stroker"},
            headers=self.headers()
        )
        self.assertEqual(first.status_code, 200, first.text)

        self.client.post(
            "/api/bowler-specs",
            json={"speed": 18.2, "rev_rate": 425.4, "playing_style": "cranker"},
            headers=self.headers()
        )

        specs = self.client.get("/api/bowler-specs", headers=self.headers()).json()["specs"]
        self.assertAlmostEqual(specs["speed"], 18.2)
        self.assertEqual(specs["rev_rate"], 425)
        self.assertEqual(specs["playing_style"], "cranker")

    def test_specs_are_per_user(self):
        self.client.post(
            "/api/bowler-specs",
            json={"speed": 17, "rev_rate": 350, "playing_style": "tweener"},
            headers=self.headers(OTHER_USER_ID)
        )

        specs = self.client.get("/api/bowler-specs", headers=self.headers()).json()["specs"]

        self.assertIsNone(specs)

    def test_unknown_playing_style_rejected(self):
        response = self.client.post(
            "/api/bowler-specs",
            json={"speed": 17, "rev_rate": 350, "playing_style": "hacker"},
            headers=self.headers()
        )
        self.assertEqual(response.status_code, 422)


class TestStatsEndpoint(PerformanceApiTestCase, unittest.TestCase):

    def test_empty_stats(self):
        response = self.client.get("/api/stats", headers=self.headers())

        self.assertEqual(response.status_code, 200)
        stats = response.json()["stats"]
        self.assertEqual(stats["games_played"], 0)
        self.assertEqual(stats["average_score"], 0)
        self.assertEqual(stats["score_trend"], [])
        self.assertEqual(stats["ball_usage"], [])
        self.assertEqual(stats["recent_games"], [])

    def test_stats_over_logged_games(self):
        second_ball = self.create_ball(name="Idol")
        self.log_game(score=180, game_date="2026-01-01T19:00:00", carry_percentage=70.0, entry_angle=None)
        self.log_game(score=220, game_date="2026-01-02T19:00:00", carry_percentage=90.0, entry_angle=6.0)
        self.log_game(score=200, game_date="2026-01-03T19:00:00", ball_id=second_ball["id"])

        stats = self.client.get("/api/stats", headers=self.headers()).json()["stats"]

        self.assertEqual(stats["games_played"], 3)
        self.assertAlmostEqual(stats["average_score"], 200.0)
        self.assertAlmostEqual(stats["carry_percentage"], 80.0)
        self.assertAlmostEqual(stats["entry_angle"], 5.5)
        self.assertEqual([p["score"] for p in stats["score_trend"]], [180, 220, 200])

        usage = {u["name"]: u for u in stats["ball_usage"]}
        self.assertEqual(usage["Phaze II"]["games"], 2)
        self.assertAlmostEqual(usage["Idol"]["percentage"], 100 / 3)

        recent = stats["recent_games"]
        self.assertEqual([g["score"] for g in recent], [200, 220, 180])
        self.assertEqual(recent[0]["pattern"], "Cheetah")
        self.assertEqual(recent[0]["ball"], "Idol")

    def test_stats_ignore_other_users(self):
        self.log_game(score=250)

        stats = self.client.get("/api/stats", headers=self.headers(OTHER_USER_ID)).json()["stats"]

        self.assertEqual(stats["games_played"], 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
