# -*- coding: utf-8 -*-
"""Nutrition — read-side queries over the log store.

Every function takes an open connection so one summary request reads a single
snapshot.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from .models import FoodLogWithNutrition, GoalProfile, WeightLog


def fetch_food_logs_since(
    conn: sqlite3.Connection,
    user_id: str,
    since: Optional[str],
) -> List[FoodLogWithNutrition]:
    rows = conn.execute(
        """
        SELECT fl.id, fl.user_id, fl.food_id, fl.grams, fl.timestamp,
               f.name, f.unit, f.calories_per_100g, f.protein_g, f.carbs_g, f.fats_g
        FROM food_logs fl
        JOIN foods f ON fl.food_id = f.id
        WHERE fl.user_id = ? AND fl.timestamp >= ?
        ORDER BY fl.timestamp DESC, fl.id DESC
        """,
        (user_id, since or ""),
    ).fetchall()
    return [FoodLogWithNutrition.model_validate(dict(r)) for r in rows]


def fetch_latest_weight(conn: sqlite3.Connection, user_id: str) -> Optional[WeightLog]:
    row = conn.execute(
        """
        SELECT id, user_id, weight_kg, timestamp
        FROM weight_logs
        WHERE user_id = ?
        ORDER BY timestamp DESC, id DESC
        LIMIT 1
        """,
        (user_id,),
    ).fetchone()
    return WeightLog.model_validate(dict(row)) if row else None


def fetch_weight_series(
    conn: sqlite3.Connection,
    user_id: str,
    since: Optional[str],
) -> List[WeightLog]:
    rows = conn.execute(
        """
        SELECT id, user_id, weight_kg, timestamp
        FROM weight_logs
        WHERE user_id = ? AND timestamp >= ?
        ORDER BY timestamp ASC, id ASC
        """,
        (user_id, since or ""),
    ).fetchall()
    return [WeightLog.model_validate(dict(r)) for r in rows]


def fetch_water_total(conn: sqlite3.Connection, user_id: str, since: Optional[str]) -> int:
    row = conn.execute(
        "SELECT COALESCE(SUM(amount_ml), 0) AS total_water FROM water_logs WHERE user_id = ? AND timestamp >= ?",
        (user_id, since or ""),
    ).fetchone()
    return int(row["total_water"] or 0)


def fetch_goal_profile(conn: sqlite3.Connection, user_id: str) -> Optional[GoalProfile]:
    row = conn.execute(
        """
        SELECT calorie_goal, protein_goal, carbs_goal, fats_goal, water_goal_ml, height_cm
        FROM users
        WHERE id = ?
        """,
        (user_id,),
    ).fetchone()
    if not row:
        return None
    data = {k: v for k, v in dict(row).items() if v is not None}
    return GoalProfile.model_validate(data)
