"""Pydantic schemas for treatment inputs, plans and the estimate endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agriquant.models.enums import CropTypeEnum, GrowthStageEnum
from agriquant.schemas.alerts import Alert

MIN_AREA_ACRES = 0.1


class TreatmentInput(BaseModel):
	"""Parameters handed to the plan engine.

	Unlike :class:`TreatmentRequest` this model does not reject anything:
	unknown crops and stages are kept as plain strings so the engine can apply
	its baseline values, and a missing area becomes ``MIN_AREA_ACRES``.
	"""

	model_config = ConfigDict(frozen=True)

	area_acres: float = Field(default=MIN_AREA_ACRES, allow_inf_nan=False)
	crop_type: CropTypeEnum | str = Field(default=CropTypeEnum.rice, union_mode="left_to_right")
	growth_stage: GrowthStageEnum | str = Field(default=GrowthStageEnum.vegetative, union_mode="left_to_right")
	place: str = ""

	@field_validator("area_acres", mode="before")
	@classmethod
	def _absent_area(cls, value: Any) -> Any:
		if value is None or value == "":
			return MIN_AREA_ACRES
		return value


class TreatmentPlan(BaseModel):
	model_config = ConfigDict(frozen=True)

	concentration_ppm: float = Field(ge=0)
	total_volume_l: int = Field(ge=0)
	pressure_bar: float = Field(ge=0)
	frequency_days: int = Field(gt=0)
	frequency_label: str
	best_time_label: str


class TreatmentRequest(BaseModel):
	"""Planner form payload, validated before it reaches the engine."""

	area_acres: float = Field(gt=0, allow_inf_nan=False)
	crop_type: CropTypeEnum = CropTypeEnum.rice
	growth_stage: GrowthStageEnum = GrowthStageEnum.vegetative
	place: str = Field(min_length=1, max_length=200)

	@field_validator("place")
	@classmethod
	def _place_not_blank(cls, value: str) -> str:
		stripped = value.strip()
		if not stripped:
			raise ValueError("place must not be blank")
		return stripped

	def to_input(self) -> TreatmentInput:
		return TreatmentInput(
			area_acres=self.area_acres,
			crop_type=self.crop_type,
			growth_stage=self.growth_stage,
			place=self.place,
		)


class EstimateResponse(BaseModel):
	session_id: str
	input: TreatmentInput
	plan: TreatmentPlan
	alert: Alert
