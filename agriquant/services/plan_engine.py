"""Deterministic HRW treatment plan computation.

``compute_plan`` is a pure function of (area, crop, growth stage).  Crops or
stages outside the enumerations are not errors: they get the baseline
concentration, volume and pressure and the default spray interval.
"""

from __future__ import annotations

import math

import structlog

from agriquant.models.enums import CropTypeEnum, GrowthStageEnum
from agriquant.schemas.plan import MIN_AREA_ACRES, TreatmentInput, TreatmentPlan

logger = structlog.get_logger("agriquant.plan")

BASE_CONCENTRATION_PPM = 1.0
BASE_VOLUME_L_PER_ACRE = 200
BASE_PRESSURE_BAR = 2.5
DEFAULT_FREQUENCY_DAYS = 7
BEST_TIME_LABEL = "Early morning (5–8 AM) or late afternoon (4–6 PM)"

_CROP_CONCENTRATION_PPM: dict[str, float] = {
	CropTypeEnum.rice: 1.2,
	CropTypeEnum.tomato: 0.8,
}

_STAGE_MULTIPLIER: dict[str, float] = {
	GrowthStageEnum.seedling: 0.8,
	GrowthStageEnum.flowering: 1.1,
}

_CROP_VOLUME_L_PER_ACRE: dict[str, int] = {
	CropTypeEnum.tomato: 400,
	CropTypeEnum.wheat: 150,
}

_CROP_PRESSURE_BAR: dict[str, float] = {
	CropTypeEnum.rice: 3.0,
}

FREQUENCY_TABLE: dict[str, dict[str, int]] = {
	CropTypeEnum.rice: {
		GrowthStageEnum.seedling: 3,
		GrowthStageEnum.vegetative: 3,
		GrowthStageEnum.flowering: 4,
		GrowthStageEnum.maturity: 5,
	},
	CropTypeEnum.wheat: {
		GrowthStageEnum.seedling: 6,
		GrowthStageEnum.vegetative: 5,
		GrowthStageEnum.flowering: 5,
		GrowthStageEnum.maturity: 6,
	},
	CropTypeEnum.cotton: {
		GrowthStageEnum.seedling: 7,
		GrowthStageEnum.vegetative: 6,
		GrowthStageEnum.flowering: 5,
		GrowthStageEnum.maturity: 7,
	},
	CropTypeEnum.tomato: {
		GrowthStageEnum.seedling: 3,
		GrowthStageEnum.vegetative: 4,
		GrowthStageEnum.flowering: 3,
		GrowthStageEnum.maturity: 5,
	},
	CropTypeEnum.potato: {
		GrowthStageEnum.seedling: 4,
		GrowthStageEnum.vegetative: 4,
		GrowthStageEnum.flowering: 3,
		GrowthStageEnum.maturity: 5,
	},
}


def _round_half_up(value: float) -> int:
	return math.floor(value + 0.5)


def frequency_days(crop_type: str, growth_stage: str) -> int:
	return FREQUENCY_TABLE.get(crop_type, {}).get(growth_stage, DEFAULT_FREQUENCY_DAYS)


def frequency_label(days: int) -> str:
	return f"Every {days} days"


def compute_plan(treatment: TreatmentInput) -> TreatmentPlan:
	crop = treatment.crop_type
	stage = treatment.growth_stage

	concentration = _CROP_CONCENTRATION_PPM.get(crop, BASE_CONCENTRATION_PPM)
	concentration *= _STAGE_MULTIPLIER.get(stage, 1.0)

	area = treatment.area_acres if math.isfinite(treatment.area_acres) else MIN_AREA_ACRES
	area = max(MIN_AREA_ACRES, area)
	volume_per_acre = _CROP_VOLUME_L_PER_ACRE.get(crop, BASE_VOLUME_L_PER_ACRE)
	pressure = _CROP_PRESSURE_BAR.get(crop, BASE_PRESSURE_BAR)
	days = frequency_days(crop, stage)

	plan = TreatmentPlan(
		concentration_ppm=round(concentration, 2),
		total_volume_l=_round_half_up(area * volume_per_acre),
		pressure_bar=round(pressure, 2),
		frequency_days=days,
		frequency_label=frequency_label(days),
		best_time_label=BEST_TIME_LABEL,
	)
	logger.debug(
		"plan_computed",
		crop=str(crop),
		stage=str(stage),
		area_acres=treatment.area_acres,
		frequency_days=days,
	)
	return plan
