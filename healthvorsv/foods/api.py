# -*- coding: utf-8 -*-
"""Foods — API endpoints (catalog search + custom foods)."""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from .models import CustomFoodRequest, Food
from .storage import SEARCH_LIMIT, create_custom_food, search_foods

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/foods", tags=["Foods"])


@router.get("", response_model=List[Food], summary="Search foods by name")
def search(
    q: Optional[str] = Query(default=None, description="Substring of the food name"),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="A search query 'q' is required.")
    return [Food.model_validate(r) for r in search_foods(q, limit=SEARCH_LIMIT)]


@router.post("/custom", response_model=Food, status_code=201, summary="Create a custom food")
def create_custom(request: CustomFoodRequest, user: dict = Depends(get_current_user)):
    try:
        row = create_custom_food(
            name=request.name,
            calories_per_100g=request.calories_per_100g,
            protein_g=request.protein_g,
            carbs_g=request.carbs_g,
            fats_g=request.fats_g,
        )
    except sqlite3.IntegrityError as exc:
        raise HTTPException(status_code=409, detail=f"A food named '{request.name}' already exists.") from exc
    logger.info("User %s created custom food %s (%s)", user["id"], row["id"], row["name"])
    return Food.model_validate(row)
