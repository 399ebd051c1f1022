from __future__ import annotations

import pytest
from pydantic import ValidationError

from agriquant.models.enums import CropTypeEnum, GrowthStageEnum
from agriquant.schemas.plan import TreatmentInput
from agriquant.services.plan_engine import BEST_TIME_LABEL, FREQUENCY_TABLE, compute_plan

EXPECTED_FREQUENCY_DAYS = {
    "Rice": {"Seedling": 3, "Vegetative": 3, "Flowering": 4, "Maturity": 5},
    "Wheat": {"Seedling": 6, "Vegetative": 5, "Flowering": 5, "Maturity": 6},
    "Cotton": {"Seedling": 7, "Vegetative": 6, "Flowering": 5, "Maturity": 7},
    "Tomato": {"Seedling": 3, "Vegetative": 4, "Flowering": 3, "Maturity": 5},
    "Potato": {"Seedling": 4, "Vegetative": 4, "Flowering": 3, "Maturity": 5},
}


def test_rice_vegetative_plan() -> None:
    plan = compute_plan(TreatmentInput(area_acres=1, crop_type="Rice", growth_stage="Vegetative"))

    assert plan.concentration_ppm == 1.2
    assert plan.total_volume_l == 200
    assert plan.pressure_bar == 3.0
    assert plan.frequency_days == 3
    assert plan.frequency_label == "Every 3 days"
    assert plan.best_time_label == BEST_TIME_LABEL


def test_tomato_flowering_applies_stage_multiplier_after_crop_override() -> None:
    plan = compute_plan(TreatmentInput(area_acres=2, crop_type="Tomato", growth_stage="Flowering"))

    assert plan.concentration_ppm == 0.88
    assert plan.total_volume_l == 800
    assert plan.pressure_bar == 2.5
    assert plan.frequency_label == "Every 3 days"


def test_zero_area_is_floored_before_volume() -> None:
    plan = compute_plan(TreatmentInput(area_acres=0, crop_type="Potato", growth_stage="Maturity"))

    assert plan.total_volume_l == 20
    assert plan.concentration_ppm == 1.0
    assert plan.frequency_label == "Every 5 days"


def test_negative_and_missing_area_use_minimum() -> None:
    negative = compute_plan(TreatmentInput(area_acres=-4, crop_type="Wheat", growth_stage="Seedling"))
    missing = compute_plan(TreatmentInput(area_acres=None, crop_type="Wheat", growth_stage="Seedling"))

    assert negative.total_volume_l == 15
    assert missing.total_volume_l == 15
    assert negative.concentration_ppm == 0.8


def test_volume_rounds_half_up() -> None:
    plan = compute_plan(TreatmentInput(area_acres=1.0625, crop_type="Cotton", growth_stage="Vegetative"))
    assert plan.total_volume_l == 213


def test_seedling_and_flowering_multipliers() -> None:
    rice_seedling = compute_plan(TreatmentInput(area_acres=1, crop_type="Rice", growth_stage="Seedling"))
    rice_flowering = compute_plan(TreatmentInput(area_acres=1, crop_type="Rice", growth_stage="Flowering"))
    wheat_flowering = compute_plan(TreatmentInput(area_acres=3, crop_type="Wheat", growth_stage="Flowering"))

    assert rice_seedling.concentration_ppm == 0.96
    assert rice_flowering.concentration_ppm == 1.32
    assert wheat_flowering.concentration_ppm == 1.1
    assert wheat_flowering.total_volume_l == 450


def test_unknown_crop_falls_back_to_baseline_and_weekly_frequency() -> None:
    treatment = TreatmentInput(area_acres=1, crop_type="Sorghum", growth_stage="Vegetative")
    plan = compute_plan(treatment)

    assert treatment.crop_type == "Sorghum"
    assert plan.concentration_ppm == 1.0
    assert plan.total_volume_l == 200
    assert plan.pressure_bar == 2.5
    assert plan.frequency_days == 7
    assert plan.frequency_label == "Every 7 days"


def test_unknown_stage_keeps_crop_override_without_multiplier() -> None:
    plan = compute_plan(TreatmentInput(area_acres=1, crop_type="Rice", growth_stage="Dormant"))

    assert plan.concentration_ppm == 1.2
    assert plan.frequency_label == "Every 7 days"


@pytest.mark.parametrize("crop", [crop.value for crop in CropTypeEnum])
def test_frequency_table_is_reproduced_for_every_stage(crop: str) -> None:
    for stage in GrowthStageEnum:
        plan = compute_plan(TreatmentInput(area_acres=1, crop_type=crop, growth_stage=stage.value))
        assert plan.frequency_days == EXPECTED_FREQUENCY_DAYS[crop][stage.value]
        assert plan.frequency_label == f"Every {EXPECTED_FREQUENCY_DAYS[crop][stage.value]} days"


def test_frequency_table_covers_every_crop() -> None:
    assert set(FREQUENCY_TABLE) == set(CropTypeEnum)


def test_compute_plan_is_deterministic() -> None:
    treatment = TreatmentInput(area_acres=7.3, crop_type="Tomato", growth_stage="Seedling", place="Punjab")
    assert compute_plan(treatment) == compute_plan(treatment)
    assert compute_plan(treatment).model_dump() == compute_plan(treatment.model_copy()).model_dump()


def test_place_does_not_affect_plan() -> None:
    first = compute_plan(TreatmentInput(area_acres=2, crop_type="Wheat", growth_stage="Maturity", place="Punjab"))
    second = compute_plan(TreatmentInput(area_acres=2, crop_type="Wheat", growth_stage="Maturity", place="Kansas"))
    assert first == second


def test_non_finite_area_is_rejected_by_input() -> None:
    with pytest.raises(ValidationError):
        TreatmentInput(area_acres=float("inf"), crop_type="Rice", growth_stage="Vegetative")
    with pytest.raises(ValidationError):
        TreatmentInput(area_acres=float("nan"), crop_type="Rice", growth_stage="Vegetative")


def test_non_finite_area_bypassing_validation_uses_minimum() -> None:
    treatment = TreatmentInput.model_construct(
        area_acres=float("inf"), crop_type="Rice", growth_stage="Vegetative", place=""
    )
    assert compute_plan(treatment).total_volume_l == 20
