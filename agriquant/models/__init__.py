"""Domain enumerations and static reference tables.

Application code can import everything from here::

    from agriquant.models import CropTypeEnum, GrowthStageEnum, CROP_SUITABILITY
"""

# ── Enums ───────────────────────────────────────────────────────────────────
# ── Crop reference ──────────────────────────────────────────────────────────
from agriquant.models.crops import CROP_SUITABILITY, CropSuitabilityEntry
from agriquant.models.enums import (
    CropTypeEnum,
    GrowthStageEnum,
    SpeakerEnum,
    TopicEnum,
)

__all__ = [
    "CROP_SUITABILITY",
    "CropSuitabilityEntry",
    "CropTypeEnum",
    "GrowthStageEnum",
    "SpeakerEnum",
    "TopicEnum",
]
