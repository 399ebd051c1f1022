"""Pydantic schemas for session lifecycle and the yield projection."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from agriquant.schemas.plan import TreatmentInput, TreatmentPlan


class SessionRead(BaseModel):
	session_id: str
	created_at: datetime
	current_input: TreatmentInput | None = None
	current_plan: TreatmentPlan | None = None
	alert_count: int = 0
	logbook_count: int = 0
	transcript_length: int = 0


class ProjectionPoint(BaseModel):
	month: str
	value: int = Field(ge=0, le=100)


class ProjectionRead(BaseModel):
	session_id: str
	has_plan: bool
	points: list[ProjectionPoint]
