#!/usr/bin/env python3
"""
Tests for the arsenal endpoints under /api/balls.
"""

import unittest

from tests import ApiTestCase, OTHER_USER_ID, ball_fields


class TestArsenalEndpoints(ApiTestCase, unittest.TestCase):

    def test_add_and_list_balls(self):
        created = self.create_ball(name="Phaze II", surface="2000 Abralon")

        self.assertEqual(created["user_id"], self.user_id)
        self.assertEqual(created["games_played"], 0)
        self.assertIsNone(created["average_score"])

        response = self.client.get("/api/balls", headers=self.headers())
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["balls"][0]["id"], created["id"])
        self.assertEqual(data["balls"][0]["surface"], "2000 Abralon")

    def test_list_only_shows_own_balls(self):
        self.create_ball(name="Mine")
        self.create_ball(user_id=OTHER_USER_ID, name="Theirs")

        data = self.client.get("/api/balls", headers=self.headers()).json()

        self.assertEqual([b["name"] for b in data["balls"]], ["Mine"])

    def test_get_ball(self):
        created = self.create_ball()

        response = self.client.get(f"/api/balls/{created['id']}", headers=self.headers())

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["ball"], created)

    def test_other_users_ball_is_not_found(self):
        created = self.create_ball(user_id=OTHER_USER_ID)

        response = self.client.get(f"/api/balls/{created['id']}", headers=self.headers())

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "BallNotFoundException")

    def test_partial_update_leaves_other_fields(self):
        created = self.create_ball(surface="2000 Abralon", drilling="Pin Up 4.5")

        response = self.client.put(
            f"/api/balls/{created['id']}",
            json={"surface": "500 Abralon"},
            headers=self.headers()
        )

        self.assertEqual(response.status_code, 200, response.text)
        ball = response.json()["ball"]
        self.assertEqual(ball["surface"], "500 Abralon")
        self.assertEqual(ball["drilling"], "Pin Up 4.5")
        self.assertEqual(ball["name"], created["name"])

    def test_update_rejects_invalid_enum(self):
        created = self.create_ball()

        response = self.client.put(
            f"/api/balls/{created['id']}",
            json={"hook_potential": "extreme"},
            headers=self.headers()
        )

        self.assertEqual(response.status_code, 422)

    def test_update_other_users_ball_is_not_found(self):
        created = self.create_ball(user_id=OTHER_USER_ID)

        response = self.client.put(
            f"/api/balls/{created['id']}",
            json={"surface": "Polished"},
            headers=self.headers()
        )

        self.assertEqual(response.status_code, 404)

    def test_delete_ball(self):
        created = self.create_ball()

        response = self.client.delete(f"/api/balls/{created['id']}", headers=self.headers())

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "id": created["id"]})
        self.assertEqual(self.client.get("/api/balls", headers=self.headers()).json()["count"], 0)

    def test_delete_missing_ball_is_not_found(self):
        response = self.client.delete("/api/balls/nope", headers=self.headers())
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()["success"])

    def test_weight_out_of_range_rejected(self):
        response = self.client.post("/api/balls", json=ball_fields(weight=20), headers=self.headers())
        self.assertEqual(response.status_code, 422)

    def test_requires_user(self):
        response = self.client.get("/api/balls")

        self.assertEqual(response.status_code, 401)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["type"], "HTTPException")

    def test_blank_user_header_rejected(self):
        response = self.client.get("/api/balls", headers={"X-User-Id": ""})
        self.assertEqual(response.status_code, 401)


if __name__ == '__main__':
    unittest.main(verbosity=2)
