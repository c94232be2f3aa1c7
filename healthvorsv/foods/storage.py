# -*- coding: utf-8 -*-
"""Foods — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..app_db import db_conn
from ..config import settings

CUSTOM_CATEGORY = "Custom"
SEARCH_LIMIT = 20


def search_foods(query: str, limit: int = SEARCH_LIMIT) -> List[Dict[str, Any]]:
    pattern = f"%{query.strip()}%"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM foods WHERE name LIKE ? ORDER BY name ASC LIMIT ?",
            (pattern, int(limit)),
        ).fetchall()
        return [dict(r) for r in rows]


def get_food(food_id: int) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM foods WHERE id = ?", (food_id,)).fetchone()
        return dict(row) if row else None


def create_custom_food(
    *,
    name: str,
    calories_per_100g: float,
    protein_g: float,
    carbs_g: float,
    fats_g: float,
) -> Dict[str, Any]:
    """Insert a user-defined food; raises sqlite3.IntegrityError on a duplicate name."""
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            INSERT INTO foods (name, category, unit, calories_per_100g, protein_g, carbs_g, fats_g)
            VALUES (?, ?, '100g', ?, ?, ?, ?)
            """,
            (name.strip(), CUSTOM_CATEGORY, calories_per_100g, protein_g, carbs_g, fats_g),
        )
        row = conn.execute("SELECT * FROM foods WHERE id = ?", (cur.lastrowid,)).fetchone()
        return dict(row)
