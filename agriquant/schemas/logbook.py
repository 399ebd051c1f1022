"""Pydantic schemas for logbook entries and the logbook endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from agriquant.schemas.plan import TreatmentInput, TreatmentPlan


class LogEntry(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: int
	input: TreatmentInput
	plan: TreatmentPlan
	created_at: datetime


class LogSaveResponse(BaseModel):
	saved: bool
	entry: LogEntry | None = None


class LogbookRead(BaseModel):
	items: list[LogEntry]
