# -*- coding: utf-8 -*-
"""Logs — Pydantic models for the write boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FoodLogCreateRequest(BaseModel):
    food_id: int = Field(..., gt=0)
    grams: int = Field(..., gt=0, le=100_000)


class WaterLogCreateRequest(BaseModel):
    amount_ml: int = Field(..., gt=0, le=100_000)


class WeightLogCreateRequest(BaseModel):
    weight_kg: float = Field(..., gt=0, le=1000)


class LogCreatedResponse(BaseModel):
    message: str
    log_id: int
