# -*- coding: utf-8 -*-
"""Nutrition — today / history summaries.

Reads run in a worker thread and hand back a snapshot; the aggregation itself
is synchronous and operates on that snapshot only. Logs written after the
snapshot was taken are not reflected.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from ..app_db import db_conn
from ..config import settings
from .aggregation import (
    compute_bmi,
    compute_daily_history,
    compute_today_totals,
    format_timestamp,
    log_date,
    parse_timestamp,
    progress_ratio,
    start_of_day,
)
from .models import (
    FoodLogWithNutrition,
    GoalProfile,
    HistorySummary,
    TodayProgress,
    TodaySummary,
    WeightLog,
)
from .storage import (
    fetch_food_logs_since,
    fetch_goal_profile,
    fetch_latest_weight,
    fetch_water_total,
    fetch_weight_series,
)

HISTORY_RANGES = {"7": 7, "30": 30, "all": None}


class UnknownUserError(LookupError):
    pass


@dataclass
class _TodaySnapshot:
    goals: GoalProfile
    food_logs: List[FoodLogWithNutrition] = field(default_factory=list)
    total_water: int = 0
    latest_weight: Optional[WeightLog] = None


@dataclass
class _HistorySnapshot:
    food_logs: List[FoodLogWithNutrition] = field(default_factory=list)
    weight_series: List[WeightLog] = field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _load_today(db_path: Path, user_id: str, since: str) -> _TodaySnapshot:
    with db_conn(db_path) as conn:
        goals = fetch_goal_profile(conn, user_id)
        if goals is None:
            raise UnknownUserError(user_id)
        return _TodaySnapshot(
            goals=goals,
            food_logs=fetch_food_logs_since(conn, user_id, since),
            total_water=fetch_water_total(conn, user_id, since),
            latest_weight=fetch_latest_weight(conn, user_id),
        )


def _load_history(db_path: Path, user_id: str, since: Optional[str]) -> _HistorySnapshot:
    with db_conn(db_path) as conn:
        return _HistorySnapshot(
            food_logs=fetch_food_logs_since(conn, user_id, since),
            weight_series=fetch_weight_series(conn, user_id, since),
        )


def history_since(range_key: str, now: datetime) -> Optional[datetime]:
    if range_key not in HISTORY_RANGES:
        raise ValueError(f"range must be one of {sorted(HISTORY_RANGES)}")
    days = HISTORY_RANGES[range_key]
    if days is None:
        return None
    return now - timedelta(days=days)


async def get_today_summary(
    user_id: str,
    *,
    db_path: Optional[Path] = None,
    now: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> TodaySummary:
    tz = tz or settings.timezone
    now = now or _utc_now()
    day_start = start_of_day(now, tz)
    snapshot = await asyncio.to_thread(
        _load_today, db_path or settings.app_db_path, user_id, format_timestamp(day_start)
    )

    totals = compute_today_totals(snapshot.food_logs)
    goals = snapshot.goals
    for log in snapshot.food_logs:
        log.log_date = log_date(log.timestamp, tz)

    bmi = None
    if snapshot.latest_weight is not None:
        bmi = compute_bmi(snapshot.latest_weight.weight_kg, goals.height_cm)

    return TodaySummary(
        date=log_date(format_timestamp(now), tz),
        food_logs=snapshot.food_logs,
        total_water=snapshot.total_water,
        latest_weight=snapshot.latest_weight,
        totals=totals,
        goals=goals,
        progress=TodayProgress(
            calories=progress_ratio(totals.calories, goals.calorie_goal),
            protein=progress_ratio(totals.protein, goals.protein_goal),
            carbs=progress_ratio(totals.carbs, goals.carbs_goal),
            fats=progress_ratio(totals.fats, goals.fats_goal),
            water=progress_ratio(snapshot.total_water, goals.water_goal_ml),
        ),
        bmi=round(bmi, 1) if bmi is not None else None,
    )


async def get_history_summary(
    user_id: str,
    range_key: str = "all",
    *,
    db_path: Optional[Path] = None,
    now: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> HistorySummary:
    tz = tz or settings.timezone
    since_dt = history_since(range_key, now or _utc_now())
    since = format_timestamp(since_dt) if since_dt is not None else None
    range_start = parse_timestamp(since) if since else None
    snapshot = await asyncio.to_thread(_load_history, db_path or settings.app_db_path, user_id, since)

    for log in snapshot.food_logs:
        log.log_date = log_date(log.timestamp, tz)

    return HistorySummary(
        range=range_key,
        since=since,
        macros_by_date=compute_daily_history(snapshot.food_logs, range_start, tz),
        weight_series=snapshot.weight_series,
    )
