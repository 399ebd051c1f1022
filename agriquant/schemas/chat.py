"""Pydantic schemas for the chat transcript and the stateless /ask endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agriquant.models.enums import SpeakerEnum, TopicEnum


class ChatMessage(BaseModel):
	model_config = ConfigDict(frozen=True)

	speaker: SpeakerEnum
	text: str


class ChatRequest(BaseModel):
	question: str = Field(max_length=2000)


class TranscriptRead(BaseModel):
	items: list[ChatMessage]
	pending_replies: int = 0


class AskRequest(BaseModel):
	question: str = Field(min_length=1, max_length=2000)


class AskResponse(BaseModel):
	question: str
	topic: TopicEnum
	answer: str
