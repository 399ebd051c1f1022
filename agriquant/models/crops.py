"""Crop suitability reference table for hydrogen-rich water treatment.

Read-only at runtime.  The planner shows it next to the plan results and
the plan engine shares its crop enumeration.
"""

from __future__ import annotations

from dataclasses import dataclass

from agriquant.models.enums import CropTypeEnum


@dataclass(frozen=True, slots=True)
class CropSuitabilityEntry:
    """Whether HRW treatment is known to work for a crop, with a short note."""

    crop_name: CropTypeEnum
    suitable: bool
    note: str


CROP_SUITABILITY: tuple[CropSuitabilityEntry, ...] = (
    CropSuitabilityEntry(CropTypeEnum.rice, True, "Improves seedling vigour"),
    CropSuitabilityEntry(CropTypeEnum.wheat, True, "Helps drought stress"),
    CropSuitabilityEntry(CropTypeEnum.tomato, True, "Enhances growth"),
    CropSuitabilityEntry(CropTypeEnum.potato, False, "Limited evidence"),
    CropSuitabilityEntry(CropTypeEnum.cotton, True, "Reduces stress"),
)
