# -*- coding: utf-8 -*-

from __future__ import annotations

import asyncio
import shutil
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from healthvorsv.app_db import db_conn, init_app_db
from healthvorsv.nutrition.service import (
    UnknownUserError,
    get_history_summary,
    get_today_summary,
    history_since,
)

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestNutritionService(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="healthvorsv-test-"))
        cls.db_path = cls._tmp / "service.db"
        init_app_db(cls.db_path)
        with db_conn(cls.db_path) as conn:
            for uid, height in (("u1", 175.0), ("u2", None)):
                conn.execute(
                    "INSERT INTO users (id, email, password_hash, height_cm, created_at) VALUES (?, ?, 'x', ?, ?)",
                    (uid, f"{uid}@example.com", height, "2024-01-01T00:00:00Z"),
                )
            conn.execute(
                "INSERT INTO foods (id, name, category, unit, calories_per_100g, protein_g, carbs_g, fats_g)"
                " VALUES (1, 'Test Curry', 'Test', '100g', 200, 10, 20, 5)"
            )
            conn.execute(
                "INSERT INTO foods (id, name, category, unit, calories_per_100g, protein_g, carbs_g, fats_g)"
                " VALUES (2, 'Mystery Snack', 'Test', '100g', 100, NULL, NULL, NULL)"
            )
            conn.executemany(
                "INSERT INTO food_logs (user_id, food_id, grams, timestamp) VALUES (?, ?, ?, ?)",
                [
                    ("u1", 1, 150, "2024-03-10T08:00:00.000Z"),
                    ("u1", 2, 50, "2024-03-10T09:00:00.000Z"),
                    ("u1", 1, 100, "2024-03-09T23:00:00.000Z"),
                    ("u1", 1, 300, "2024-02-01T12:00:00.000Z"),
                    ("u2", 1, 500, "2024-03-10T08:30:00.000Z"),
                ],
            )
            conn.executemany(
                "INSERT INTO water_logs (user_id, amount_ml, timestamp) VALUES (?, ?, ?)",
                [
                    ("u1", 500, "2024-03-10T07:00:00.000Z"),
                    ("u1", 750, "2024-03-10T10:00:00.000Z"),
                    ("u1", 1000, "2024-03-09T10:00:00.000Z"),
                    ("u2", 400, "2024-03-10T10:00:00.000Z"),
                ],
            )
            conn.executemany(
                "INSERT INTO weight_logs (user_id, weight_kg, timestamp) VALUES (?, ?, ?)",
                [
                    ("u1", 80.0, "2024-03-01T07:00:00.000Z"),
                    ("u1", 79.0, "2024-03-09T07:00:00.000Z"),
                    ("u2", 55.0, "2024-03-10T07:00:00.000Z"),
                ],
            )

    @classmethod
    def tearDownClass(cls) -> None:
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _today(self, user_id: str):
        return asyncio.run(get_today_summary(user_id, db_path=self.db_path, now=NOW, tz="UTC"))

    def _history(self, user_id: str, range_key: str):
        return asyncio.run(get_history_summary(user_id, range_key, db_path=self.db_path, now=NOW, tz="UTC"))

    def test_today_summary_totals_and_water(self) -> None:
        summary = self._today("u1")
        self.assertEqual(summary.date, "2024-03-10")
        self.assertEqual(len(summary.food_logs), 2)
        # Newest first.
        self.assertEqual(summary.food_logs[0].name, "Mystery Snack")
        self.assertAlmostEqual(summary.totals.calories, 350.0)
        self.assertAlmostEqual(summary.totals.protein, 15.0)
        self.assertAlmostEqual(summary.totals.carbs, 30.0)
        self.assertAlmostEqual(summary.totals.fats, 7.5)
        self.assertEqual(summary.total_water, 1250)

    def test_today_summary_weight_bmi_and_progress(self) -> None:
        summary = self._today("u1")
        assert summary.latest_weight is not None
        self.assertEqual(summary.latest_weight.weight_kg, 79.0)
        self.assertEqual(summary.bmi, 25.8)
        self.assertAlmostEqual(summary.progress.calories.ratio, 350.0 / 2000)
        self.assertAlmostEqual(summary.progress.water.ratio, 1250 / 3000)
        self.assertEqual(summary.goals.water_goal_ml, 3000)

    def test_bmi_omitted_without_height(self) -> None:
        summary = self._today("u2")
        assert summary.latest_weight is not None
        self.assertIsNone(summary.bmi)
        self.assertAlmostEqual(summary.totals.calories, 1000.0)
        self.assertEqual(summary.progress.calories.display_ratio, 0.5)

    def test_unknown_user(self) -> None:
        with self.assertRaises(UnknownUserError):
            self._today("nobody")

    def test_history_seven_days(self) -> None:
        history = self._history("u1", "7")
        self.assertEqual(history.since, "2024-03-03T12:00:00.000Z")
        self.assertEqual(list(history.macros_by_date), ["2024-03-09", "2024-03-10"])
        self.assertAlmostEqual(history.macros_by_date["2024-03-09"].calories, 200.0)
        self.assertAlmostEqual(history.macros_by_date["2024-03-10"].calories, 350.0)
        self.assertEqual([w.weight_kg for w in history.weight_series], [79.0])

    def test_history_all_time(self) -> None:
        history = self._history("u1", "all")
        self.assertIsNone(history.since)
        self.assertEqual(list(history.macros_by_date), ["2024-02-01", "2024-03-09", "2024-03-10"])
        self.assertAlmostEqual(history.macros_by_date["2024-02-01"].calories, 600.0)
        self.assertEqual([w.weight_kg for w in history.weight_series], [80.0, 79.0])

    def test_history_for_user_without_logs_is_empty(self) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(
                "INSERT OR IGNORE INTO users (id, email, password_hash, created_at) VALUES ('u3', 'u3@example.com', 'x', '2024-01-01T00:00:00Z')"
            )
        history = self._history("u3", "30")
        self.assertEqual(history.macros_by_date, {})
        self.assertEqual(history.weight_series, [])

    def test_history_range_validation(self) -> None:
        self.assertIsNone(history_since("all", NOW))
        self.assertEqual(history_since("30", NOW), datetime(2024, 2, 9, 12, 0, tzinfo=timezone.utc))
        with self.assertRaises(ValueError):
            history_since("90", NOW)


if __name__ == "__main__":
    unittest.main()
