# -*- coding: utf-8 -*-
"""Nutrition aggregation — pure functions over an already-fetched log snapshot.

Food macro values are always per 100 g; a log of ``grams`` contributes
``value * grams / 100``. The food's ``unit`` string is display-only and never
enters the math.
"""

from __future__ import annotations

from datetime import datetime, time, timezone, tzinfo
from typing import Dict, Iterable, Optional, Union
from zoneinfo import ZoneInfo

from .models import FoodLogWithNutrition, MacroTotals, Progress, WeightLog

TzLike = Union[str, tzinfo]


def _zone(tz: TzLike) -> tzinfo:
    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(tz)


def format_timestamp(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix.

    Stored timestamps all share this shape so lexicographic order matches
    chronological order in SQL range filters.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    utc = dt.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    raw = (value or "").strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def log_date(timestamp: str, tz: TzLike = "UTC") -> str:
    """Calendar date (YYYY-MM-DD) of ``timestamp`` in the reference timezone."""
    return parse_timestamp(timestamp).astimezone(_zone(tz)).date().isoformat()


def start_of_day(now: datetime, tz: TzLike = "UTC") -> datetime:
    """Midnight of ``now``'s calendar day in ``tz``, returned in UTC."""
    zone = _zone(tz)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local_day = now.astimezone(zone).date()
    return datetime.combine(local_day, time(0, 0), tzinfo=zone).astimezone(timezone.utc)


def _accumulate(acc: MacroTotals, log: FoodLogWithNutrition) -> None:
    ratio = log.grams / 100
    acc.calories += (log.calories_per_100g or 0.0) * ratio
    acc.protein += (log.protein_g or 0.0) * ratio
    acc.carbs += (log.carbs_g or 0.0) * ratio
    acc.fats += (log.fats_g or 0.0) * ratio


def compute_today_totals(logs: Iterable[FoodLogWithNutrition]) -> MacroTotals:
    totals = MacroTotals()
    for log in logs:
        _accumulate(totals, log)
    return totals


def compute_daily_history(
    logs: Iterable[FoodLogWithNutrition],
    range_start: Optional[datetime] = None,
    tz: TzLike = "UTC",
) -> Dict[str, MacroTotals]:
    """Group logs by calendar date and total each bucket.

    Logs older than ``range_start`` are skipped (``None`` means all time).
    Logs without a ``log_date`` get one derived from their timestamp in ``tz``.
    Only dates that have at least one log appear; keys come back in ascending
    order.
    """
    if range_start is not None and range_start.tzinfo is None:
        range_start = range_start.replace(tzinfo=timezone.utc)
    per_day: Dict[str, MacroTotals] = {}
    for log in logs:
        if range_start is not None and parse_timestamp(log.timestamp) < range_start:
            continue
        day = log.log_date or log_date(log.timestamp, tz)
        if day not in per_day:
            per_day[day] = MacroTotals()
        _accumulate(per_day[day], log)
    return {day: per_day[day] for day in sorted(per_day.keys())}


def select_latest_weight(
    logs: Iterable[WeightLog],
    user_id: Optional[str] = None,
) -> Optional[WeightLog]:
    latest: Optional[WeightLog] = None
    latest_at: Optional[datetime] = None
    for log in logs:
        if user_id is not None and log.user_id != user_id:
            continue
        at = parse_timestamp(log.timestamp)
        if latest_at is None or at > latest_at:
            latest, latest_at = log, at
    return latest


def compute_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def progress_ratio(value: float, goal: Optional[float]) -> Progress:
    value = float(value or 0.0)
    if not goal or goal <= 0:
        return Progress(value=value, goal=float(goal or 0.0), ratio=0.0, display_ratio=0.0)
    ratio = value / goal
    return Progress(
        value=value,
        goal=float(goal),
        ratio=ratio,
        display_ratio=max(0.0, min(ratio, 1.0)),
    )
