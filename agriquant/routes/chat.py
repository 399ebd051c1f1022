"""Chat assistant routes and the stateless knowledge base query."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from agriquant.dependencies import get_registry
from agriquant.schemas.chat import AskRequest, AskResponse, ChatRequest, TranscriptRead
from agriquant.services import intent_service
from agriquant.services.session_service import SessionRegistry

router = APIRouter(tags=["chat"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="chat failure")


@router.post("/sessions/{session_id}/chat", response_model=TranscriptRead, status_code=status.HTTP_202_ACCEPTED)
async def send_chat(
	session_id: uuid.UUID,
	payload: ChatRequest,
	registry: SessionRegistry = Depends(get_registry),
) -> TranscriptRead:
	try:
		service = registry.service(str(session_id))
		service.send_chat(payload.question)
	except Exception as exc:
		raise _map_error(exc) from exc
	session = service.session
	return TranscriptRead(items=list(session.transcript), pending_replies=len(session.pending_replies))


@router.get("/sessions/{session_id}/chat", response_model=TranscriptRead)
async def get_transcript(session_id: uuid.UUID, registry: SessionRegistry = Depends(get_registry)) -> TranscriptRead:
	try:
		session = registry.get(str(session_id))
	except Exception as exc:
		raise _map_error(exc) from exc
	return TranscriptRead(items=list(session.transcript), pending_replies=len(session.pending_replies))


@router.post("/ask", response_model=AskResponse)
async def ask(payload: AskRequest) -> AskResponse:
	topic, answer = intent_service.answer(payload.question)
	return AskResponse(question=payload.question, topic=topic, answer=answer)
