# -*- coding: utf-8 -*-
"""Logs — DB storage helpers (append + owner-scoped delete)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..app_db import db_conn
from ..config import settings
from ..nutrition.aggregation import format_timestamp


def _utc_now() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def _insert(sql: str, params: tuple) -> int:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(sql, params)
        return int(cur.lastrowid)


def create_food_log(*, user_id: str, food_id: int, grams: int, timestamp: Optional[str] = None) -> int:
    return _insert(
        "INSERT INTO food_logs (user_id, food_id, grams, timestamp) VALUES (?, ?, ?, ?)",
        (user_id, food_id, grams, timestamp or _utc_now()),
    )


def create_water_log(*, user_id: str, amount_ml: int, timestamp: Optional[str] = None) -> int:
    return _insert(
        "INSERT INTO water_logs (user_id, amount_ml, timestamp) VALUES (?, ?, ?)",
        (user_id, amount_ml, timestamp or _utc_now()),
    )


def create_weight_log(*, user_id: str, weight_kg: float, timestamp: Optional[str] = None) -> int:
    return _insert(
        "INSERT INTO weight_logs (user_id, weight_kg, timestamp) VALUES (?, ?, ?)",
        (user_id, weight_kg, timestamp or _utc_now()),
    )


def delete_food_log(*, user_id: str, log_id: int) -> bool:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM food_logs WHERE id = ? AND user_id = ?", (log_id, user_id))
        return cur.rowcount > 0
