# -*- coding: utf-8 -*-
"""Foods — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Food(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    unit: str = "100g"
    calories_per_100g: Optional[float] = Field(None, ge=0)
    protein_g: Optional[float] = Field(None, ge=0)
    carbs_g: Optional[float] = Field(None, ge=0)
    fats_g: Optional[float] = Field(None, ge=0)


class CustomFoodRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    calories_per_100g: float = Field(..., ge=0)
    protein_g: float = Field(..., ge=0)
    carbs_g: float = Field(..., ge=0)
    fats_g: float = Field(..., ge=0)
