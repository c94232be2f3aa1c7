# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from uuid import uuid4

from fastapi.testclient import TestClient


class TestApiFlow(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="healthvorsv-test-"))
        data_root = cls._tmp / "data"
        os.environ["HEALTHVORSV_DATA_ROOT"] = str(data_root)
        os.environ["HEALTHVORSV_DB_PATH"] = str(data_root / "healthvorsv.db")
        os.environ["HEALTHVORSV_JWT_SECRET"] = "test-secret"
        os.environ["HEALTHVORSV_TIMEZONE"] = "UTC"
        os.environ["HEALTHVORSV_FRONTEND_DIR"] = str(cls._tmp / "no-frontend")

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "healthvorsv" or name.startswith("healthvorsv."):
                sys.modules.pop(name, None)

        from healthvorsv.api import app  # noqa: WPS433 (import inside test for env control)

        cls.app = app
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _register(self, password: str = "password123") -> tuple[str, dict]:
        email = f"user-{uuid4().hex[:8]}@example.com"
        resp = self.client.post("/api/auth/register", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 201, resp.text)
        payload = resp.json()
        return email, {"Authorization": f"Bearer {payload['token']}"}

    def _custom_food(self, headers: dict, **macros) -> dict:
        body = {
            "name": f"Test Food {uuid4().hex[:8]}",
            "calories_per_100g": 200,
            "protein_g": 10,
            "carbs_g": 20,
            "fats_g": 5,
        }
        body.update(macros)
        resp = self.client.post("/api/foods/custom", json=body, headers=headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_health_is_public(self) -> None:
        resp = TestClient(self.app).get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

    def test_auth_required(self) -> None:
        unauth = TestClient(self.app)
        for path in ("/api/dashboard/today", "/api/history", "/api/user/profile", "/api/foods?q=rice"):
            self.assertEqual(unauth.get(path).status_code, 401, path)
        resp = unauth.get("/api/dashboard/today", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(resp.status_code, 401)
        unauth.close()

    def test_register_duplicate_and_login(self) -> None:
        email, _ = self._register()
        resp = self.client.post("/api/auth/register", json={"email": email.upper(), "password": "password123"})
        self.assertEqual(resp.status_code, 409)

        resp = self.client.post("/api/auth/login", json={"email": email, "password": "wrong-password"})
        self.assertEqual(resp.status_code, 401)

        resp = self.client.post("/api/auth/login", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["email"], email)
        self.assertEqual(user["username"], email.split("@")[0])

        resp = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {resp.json()['token']}"})
        self.assertEqual(resp.status_code, 200)

    def test_profile_defaults_and_update(self) -> None:
        _, headers = self._register()
        resp = self.client.get("/api/user/profile", headers=headers)
        self.assertEqual(resp.status_code, 200)
        profile = resp.json()
        self.assertEqual(profile["calorie_goal"], 2000)
        self.assertEqual(profile["water_goal_ml"], 3000)
        self.assertIsNone(profile["height_cm"])

        resp = self.client.put("/api/user/profile", json={"height_cm": 180, "calorie_goal": 2500}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["height_cm"], 180)
        self.assertEqual(resp.json()["calorie_goal"], 2500)
        self.assertEqual(resp.json()["protein_goal"], 120)

        resp = self.client.put("/api/user/profile", json={"water_goal_ml": 0}, headers=headers)
        self.assertEqual(resp.status_code, 422)

    def test_food_search_and_custom_food(self) -> None:
        _, headers = self._register()
        resp = self.client.get("/api/foods", headers=headers)
        self.assertEqual(resp.status_code, 400)

        food = self._custom_food(headers, name="Grandma's Upma")
        self.assertEqual(food["category"], "Custom")
        self.assertEqual(food["unit"], "100g")

        resp = self.client.post(
            "/api/foods/custom",
            json={"name": "Grandma's Upma", "calories_per_100g": 1, "protein_g": 1, "carbs_g": 1, "fats_g": 1},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 409)

        resp = self.client.get("/api/foods", params={"q": "upma"}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertIn(food["id"], [f["id"] for f in resp.json()])

    def test_dashboard_today_end_to_end(self) -> None:
        _, headers = self._register()
        food = self._custom_food(headers)

        resp = self.client.post("/api/food-logs", json={"food_id": food["id"], "grams": 150}, headers=headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertIn("log_id", resp.json())
        self.assertEqual(self.client.post("/api/water-logs", json={"amount_ml": 500}, headers=headers).status_code, 201)
        self.assertEqual(self.client.post("/api/water-logs", json={"amount_ml": 250}, headers=headers).status_code, 201)
        self.assertEqual(self.client.post("/api/weight-logs", json={"weight_kg": 81.0}, headers=headers).status_code, 201)
        self.client.put("/api/user/profile", json={"height_cm": 180}, headers=headers)

        resp = self.client.get("/api/dashboard/today", headers=headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        data = resp.json()
        self.assertEqual(len(data["food_logs"]), 1)
        self.assertAlmostEqual(data["totals"]["calories"], 300.0)
        self.assertAlmostEqual(data["totals"]["protein"], 15.0)
        self.assertAlmostEqual(data["totals"]["carbs"], 30.0)
        self.assertAlmostEqual(data["totals"]["fats"], 7.5)
        self.assertEqual(data["total_water"], 750)
        self.assertEqual(data["latest_weight"]["weight_kg"], 81.0)
        self.assertEqual(data["bmi"], 25.0)
        self.assertAlmostEqual(data["progress"]["calories"]["ratio"], 0.15)
        self.assertAlmostEqual(data["progress"]["water"]["ratio"], 0.25)

    def test_history_and_range_validation(self) -> None:
        _, headers = self._register()
        food = self._custom_food(headers)
        self.client.post("/api/food-logs", json={"food_id": food["id"], "grams": 100}, headers=headers)
        self.client.post("/api/weight-logs", json={"weight_kg": 70.5}, headers=headers)

        for range_key in ("7", "30", "all"):
            resp = self.client.get("/api/history", params={"range": range_key}, headers=headers)
            self.assertEqual(resp.status_code, 200, resp.text)
            data = resp.json()
            self.assertEqual(len(data["macros_by_date"]), 1)
            (day_totals,) = data["macros_by_date"].values()
            self.assertAlmostEqual(day_totals["calories"], 200.0)
            self.assertEqual([w["weight_kg"] for w in data["weight_series"]], [70.5])

        resp = self.client.get("/api/history", params={"range": "90"}, headers=headers)
        self.assertEqual(resp.status_code, 422)

    def test_history_empty_for_new_user(self) -> None:
        _, headers = self._register()
        resp = self.client.get("/api/history", params={"range": "30"}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["macros_by_date"], {})
        self.assertEqual(resp.json()["weight_series"], [])

    def test_log_validation(self) -> None:
        _, headers = self._register()
        food = self._custom_food(headers)
        resp = self.client.post("/api/food-logs", json={"food_id": food["id"], "grams": 0}, headers=headers)
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post("/api/food-logs", json={"food_id": food["id"], "grams": -50}, headers=headers)
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post("/api/food-logs", json={"food_id": 999999, "grams": 100}, headers=headers)
        self.assertEqual(resp.status_code, 404)
        resp = self.client.post("/api/water-logs", json={"amount_ml": 0}, headers=headers)
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post("/api/weight-logs", json={"weight_kg": -1}, headers=headers)
        self.assertEqual(resp.status_code, 422)

    def test_delete_food_log_is_owner_scoped(self) -> None:
        _, owner = self._register()
        _, other = self._register()
        food = self._custom_food(owner)
        log_id = self.client.post("/api/food-logs", json={"food_id": food["id"], "grams": 100}, headers=owner).json()["log_id"]

        resp = self.client.delete(f"/api/food-logs/{log_id}", headers=other)
        self.assertEqual(resp.status_code, 404)

        resp = self.client.delete(f"/api/food-logs/{log_id}", headers=owner)
        self.assertEqual(resp.status_code, 200)

        resp = self.client.delete(f"/api/food-logs/{log_id}", headers=owner)
        self.assertEqual(resp.status_code, 404)

        data = self.client.get("/api/dashboard/today", headers=owner).json()
        self.assertEqual(data["food_logs"], [])
        self.assertEqual(data["totals"]["calories"], 0.0)


if __name__ == "__main__":
    unittest.main()
