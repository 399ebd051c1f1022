"""Logbook save, listing and CSV export routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from agriquant.dependencies import get_registry
from agriquant.schemas.logbook import LogbookRead, LogSaveResponse
from agriquant.services.session_service import SessionRegistry

router = APIRouter(prefix="/sessions", tags=["logbook"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="logbook failure")


@router.post("/{session_id}/logbook", response_model=LogSaveResponse)
async def save_log_entry(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> LogSaveResponse:
	try:
		entry = await registry.service(str(session_id)).save_log()
	except Exception as exc:
		raise _map_error(exc) from exc
	return LogSaveResponse(saved=entry is not None, entry=entry)


@router.get("/{session_id}/logbook", response_model=LogbookRead)
async def list_log_entries(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> LogbookRead:
	try:
		session = registry.get(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return LogbookRead(items=session.logbook.entries)


@router.get("/{session_id}/logbook/export", response_class=PlainTextResponse)
async def export_logbook(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> PlainTextResponse:
	try:
		session = registry.get(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return PlainTextResponse(
		session.logbook.to_csv(),
		media_type="text/csv",
		headers={"content-disposition": 'attachment; filename="hrw_logbook.csv"'},
	)
