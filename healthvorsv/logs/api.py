# -*- coding: utf-8 -*-
"""Logs — API endpoints for food, water and weight logging."""

from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..foods.storage import get_food
from .models import FoodLogCreateRequest, LogCreatedResponse, WaterLogCreateRequest, WeightLogCreateRequest
from .storage import create_food_log, create_water_log, create_weight_log, delete_food_log

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Logs"])


@router.post("/food-logs", response_model=LogCreatedResponse, status_code=201, summary="Log a food")
def log_food(request: FoodLogCreateRequest, user: dict = Depends(get_current_user)):
    if not get_food(request.food_id):
        raise HTTPException(status_code=404, detail="Food not found.")
    try:
        log_id = create_food_log(user_id=user["id"], food_id=request.food_id, grams=request.grams)
    except sqlite3.IntegrityError as exc:
        # Food removed between the lookup and the insert.
        raise HTTPException(status_code=404, detail="Food not found.") from exc
    logger.debug("User %s logged %sg of food %s (log %s)", user["id"], request.grams, request.food_id, log_id)
    return LogCreatedResponse(message="Food logged successfully.", log_id=log_id)


@router.delete("/food-logs/{log_id}", summary="Delete one of your food logs")
def remove_food_log(log_id: int, user: dict = Depends(get_current_user)):
    if not delete_food_log(user_id=user["id"], log_id=log_id):
        raise HTTPException(status_code=404, detail="Log not found or user not authorized.")
    logger.debug("User %s deleted food log %s", user["id"], log_id)
    return {"message": "Food log deleted successfully.", "log_id": log_id}


@router.post("/water-logs", response_model=LogCreatedResponse, status_code=201, summary="Log water intake")
def log_water(request: WaterLogCreateRequest, user: dict = Depends(get_current_user)):
    log_id = create_water_log(user_id=user["id"], amount_ml=request.amount_ml)
    return LogCreatedResponse(message="Water logged successfully.", log_id=log_id)


@router.post("/weight-logs", response_model=LogCreatedResponse, status_code=201, summary="Log body weight")
def log_weight(request: WeightLogCreateRequest, user: dict = Depends(get_current_user)):
    log_id = create_weight_log(user_id=user["id"], weight_kg=request.weight_kg)
    return LogCreatedResponse(message="Weight logged successfully.", log_id=log_id)
