"""Advisory session lifecycle routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from agriquant.dependencies import get_registry
from agriquant.schemas.session import ProjectionPoint, ProjectionRead, SessionRead
from agriquant.services.session_service import AdvisorySession, SessionRegistry

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="session failure")


def _to_session_read(session: AdvisorySession) -> SessionRead:
	return SessionRead(
		session_id=session.session_id,
		created_at=session.created_at,
		current_input=session.current_input,
		current_plan=session.current_plan,
		alert_count=len(session.alerts),
		logbook_count=len(session.logbook),
		transcript_length=len(session.transcript),
	)


@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
async def create_session(registry: SessionRegistry = Depends(get_registry)) -> SessionRead:
	try:
		session = await registry.create()
	except Exception as exc:
		raise _map_error(exc) from exc
	return _to_session_read(session)


@router.get("/{session_id}", response_model=SessionRead)
async def get_session(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> SessionRead:
	try:
		session = registry.get(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return _to_session_read(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> None:
	try:
		registry.close(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{session_id}/projection", response_model=ProjectionRead)
async def get_projection(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> ProjectionRead:
	try:
		service = registry.service(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return ProjectionRead(
		session_id=service.session.session_id,
		has_plan=service.session.current_plan is not None,
		points=[ProjectionPoint(month=month, value=value) for month, value in service.projection()],
	)
