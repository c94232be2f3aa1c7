# -*- coding: utf-8 -*-
"""Nutrition — API endpoints (today dashboard + history)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from .models import HistorySummary, TodaySummary
from .service import UnknownUserError, get_history_summary, get_today_summary

router = APIRouter(prefix="/api", tags=["Nutrition"])


@router.get("/dashboard/today", response_model=TodaySummary, summary="Today's totals against goals")
async def dashboard_today(user: dict = Depends(get_current_user)):
    try:
        return await get_today_summary(user["id"])
    except UnknownUserError as exc:
        raise HTTPException(status_code=404, detail="User not found.") from exc


@router.get("/history", response_model=HistorySummary, summary="Per-day macros and weight series")
async def history(
    range: str = Query(default="all", pattern="^(7|30|all)$", description="7 | 30 | all"),  # noqa: A002
    user: dict = Depends(get_current_user),
):
    return await get_history_summary(user["id"], range)
