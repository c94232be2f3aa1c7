# -*- coding: utf-8 -*-
"""Profile — API endpoints (username, height and daily goals)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from .models import ProfileResponse, ProfileUpdateRequest
from .storage import get_profile, update_profile

router = APIRouter(prefix="/api/user", tags=["Profile"])


@router.get("/profile", response_model=ProfileResponse, summary="Get profile and goals")
def read_profile(user: dict = Depends(get_current_user)):
    row = get_profile(user["id"])
    if not row:
        raise HTTPException(status_code=404, detail="User not found.")
    return ProfileResponse.model_validate(row)


@router.put("/profile", response_model=ProfileResponse, summary="Update profile and goals")
def write_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    if not update_profile(user["id"], request.model_dump(exclude_none=True)):
        raise HTTPException(status_code=404, detail="User not found.")
    return ProfileResponse.model_validate(get_profile(user["id"]))
