# -*- coding: utf-8 -*-
"""Nutrition — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class MacroTotals(BaseModel):
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fats: float = Field(0.0, ge=0)


class FoodLogWithNutrition(BaseModel):
    """A food log joined with its food's per-100g macro values."""

    id: Optional[int] = None
    user_id: Optional[str] = None
    food_id: Optional[int] = None
    name: Optional[str] = None
    unit: Optional[str] = None
    grams: float = Field(..., ge=0)
    timestamp: str
    log_date: Optional[str] = Field(None, description="YYYY-MM-DD in the reference timezone")
    calories_per_100g: Optional[float] = Field(None, ge=0)
    protein_g: Optional[float] = Field(None, ge=0)
    carbs_g: Optional[float] = Field(None, ge=0)
    fats_g: Optional[float] = Field(None, ge=0)


class WeightLog(BaseModel):
    id: Optional[int] = None
    user_id: Optional[str] = None
    weight_kg: float = Field(..., gt=0)
    timestamp: str


class GoalProfile(BaseModel):
    calorie_goal: float = Field(2000, gt=0)
    protein_goal: float = Field(120, gt=0)
    carbs_goal: float = Field(250, gt=0)
    fats_goal: float = Field(60, gt=0)
    water_goal_ml: int = Field(3000, gt=0)
    height_cm: Optional[float] = Field(None, gt=0)


class Progress(BaseModel):
    value: float
    goal: float
    ratio: float = Field(..., description="value / goal, unclamped")
    display_ratio: float = Field(..., ge=0, le=1, description="ratio clamped to [0, 1]")


class TodayProgress(BaseModel):
    calories: Progress
    protein: Progress
    carbs: Progress
    fats: Progress
    water: Progress


class TodaySummary(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    food_logs: List[FoodLogWithNutrition] = []
    total_water: int = Field(0, ge=0)
    latest_weight: Optional[WeightLog] = None
    totals: MacroTotals = MacroTotals()
    goals: GoalProfile = GoalProfile()
    progress: TodayProgress
    bmi: Optional[float] = None


class HistorySummary(BaseModel):
    range: str = Field(..., description="7 | 30 | all")
    since: Optional[str] = None
    macros_by_date: Dict[str, MacroTotals] = Field(default_factory=dict)
    weight_series: List[WeightLog] = []
