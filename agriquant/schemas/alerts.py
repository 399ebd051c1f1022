"""Pydantic schemas for spray reminder alerts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Alert(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: int
	message: str = Field(min_length=1)
	scheduled_at: datetime


class AlertListRead(BaseModel):
	items: list[Alert]
