"""Stableford point table endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError
from typing import Optional

from scoring.settings import StablefordSettings, stableford_settings

router = APIRouter()


class UpdateStablefordRequest(BaseModel):
    double_eagle: Optional[int] = None
    eagle: Optional[int] = None
    birdie: Optional[int] = None
    par: Optional[int] = None
    bogey: Optional[int] = None
    double_bogey: Optional[int] = None


@router.get("/stableford", response_model=StablefordSettings)
async def get_stableford_settings():
    return stableford_settings


@router.put("/stableford", response_model=StablefordSettings)
async def update_stableford_settings(req: UpdateStablefordRequest):
    """Change any of the point values; the rest keep their current value."""
    try:
        for name, points in req.model_dump(exclude_none=True).items():
            stableford_settings.set_points(name, points)
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])
    return stableford_settings


@router.post("/stableford/reset", response_model=StablefordSettings)
async def reset_stableford_settings():
    stableford_settings.reset_to_defaults()
    return stableford_settings
