# -*- coding: utf-8 -*-
"""Profile — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..app_db import db_conn
from ..config import settings

_PROFILE_COLUMNS = (
    "id",
    "email",
    "username",
    "height_cm",
    "calorie_goal",
    "protein_goal",
    "carbs_goal",
    "fats_goal",
    "water_goal_ml",
)
_UPDATABLE = set(_PROFILE_COLUMNS) - {"id", "email"}


def get_profile(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            f"SELECT {', '.join(_PROFILE_COLUMNS)} FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        return dict(row) if row else None


def update_profile(user_id: str, changes: Dict[str, Any]) -> bool:
    fields = {k: v for k, v in changes.items() if k in _UPDATABLE}
    if not fields:
        return get_profile(user_id) is not None
    assignments = ", ".join(f"{k} = ?" for k in fields)
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            f"UPDATE users SET {assignments} WHERE id = ?",
            (*fields.values(), user_id),
        )
        return cur.rowcount > 0
