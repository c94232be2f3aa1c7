# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    id: str
    email: str
    username: Optional[str] = None
    height_cm: Optional[float] = None
    calorie_goal: float
    protein_goal: float
    carbs_goal: float
    fats_goal: float
    water_goal_ml: int


class ProfileUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    username: Optional[str] = Field(None, min_length=1, max_length=64)
    height_cm: Optional[float] = Field(None, gt=0, le=300)
    calorie_goal: Optional[float] = Field(None, gt=0)
    protein_goal: Optional[float] = Field(None, gt=0)
    carbs_goal: Optional[float] = Field(None, gt=0)
    fats_goal: Optional[float] = Field(None, gt=0)
    water_goal_ml: Optional[int] = Field(None, gt=0)
