"""Crop suitability reference route."""

from __future__ import annotations

from fastapi import APIRouter

from agriquant.models.crops import CROP_SUITABILITY
from agriquant.schemas.crops import CropListRead, CropSuitabilityRead

router = APIRouter(prefix="/crops", tags=["crops"])


@router.get("", response_model=CropListRead)
async def list_crops() -> CropListRead:
	return CropListRead(items=[CropSuitabilityRead.model_validate(entry) for entry in CROP_SUITABILITY])
