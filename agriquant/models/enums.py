"""Enumerations shared by the advisory core and the HTTP schemas.

Member order is meaningful: ``CropTypeEnum`` order is the display order of
the crop suitability table, ``GrowthStageEnum`` follows the crop life cycle.
"""

from enum import StrEnum

# ── Treatment input enums ───────────────────────────────────────────────────


class CropTypeEnum(StrEnum):
    """Crops with a dedicated row in the spray frequency table."""

    rice = "Rice"
    wheat = "Wheat"
    tomato = "Tomato"
    potato = "Potato"
    cotton = "Cotton"


class GrowthStageEnum(StrEnum):
    """Crop growth stage selected by the farmer."""

    seedling = "Seedling"
    vegetative = "Vegetative"
    flowering = "Flowering"
    maturity = "Maturity"


# ── Chat enums ──────────────────────────────────────────────────────────────


class SpeakerEnum(StrEnum):
    """Author of a chat transcript message."""

    user = "user"
    assistant = "assistant"


class TopicEnum(StrEnum):
    """Knowledge base topic keys resolved by the intent classifier."""

    what_is_hrw = "what-is-hrw"
    mechanism = "mechanism"
    benefits = "benefits"
    application = "application"
    concentration = "concentration"
    timing = "timing"
    equipment = "equipment"
    crops = "crops"
    cost = "cost"
    safety = "safety"
    storage = "storage"
    science = "science"
    fertilizer = "fertilizer"
    drought = "drought"
    organic = "organic"
    fallback = "fallback"
