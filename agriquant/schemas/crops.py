"""Pydantic schemas for the crop suitability reference table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from agriquant.models.enums import CropTypeEnum


class CropSuitabilityRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	crop_name: CropTypeEnum
	suitable: bool
	note: str


class CropListRead(BaseModel):
	items: list[CropSuitabilityRead]
