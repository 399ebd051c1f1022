"""Treatment plan estimation and spray alert routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from agriquant.dependencies import get_registry
from agriquant.schemas.alerts import AlertListRead
from agriquant.schemas.plan import EstimateResponse, TreatmentPlan, TreatmentRequest
from agriquant.services.session_service import SessionRegistry

router = APIRouter(prefix="/sessions", tags=["planner"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="planner failure")


@router.post("/{session_id}/plans", response_model=EstimateResponse)
async def estimate_plan(
	session_id: uuid.UUID,
	payload: TreatmentRequest,
	registry: SessionRegistry = Depends(get_registry),
) -> EstimateResponse:
	try:
		service = registry.service(str(session_id))
		treatment = payload.to_input()
		plan, alert = service.estimate(treatment)
	except Exception as exc:
		raise _map_error(exc) from exc
	return EstimateResponse(session_id=service.session.session_id, input=treatment, plan=plan, alert=alert)


@router.get("/{session_id}/plans/current", response_model=TreatmentPlan)
async def get_current_plan(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> TreatmentPlan:
	try:
		session = registry.get(str(session_id))
		if session.current_plan is None:
			raise LookupError("No plan has been estimated in this session")
	except Exception as exc:
		raise _map_error(exc) from exc
	return session.current_plan


@router.get("/{session_id}/alerts", response_model=AlertListRead)
async def list_alerts(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> AlertListRead:
	try:
		session = registry.get(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return AlertListRead(items=session.alerts.items)
