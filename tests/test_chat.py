from __future__ import annotations

import asyncio

import pytest

from agriquant.config import ChatReplyMode, Settings
from agriquant.models.enums import SpeakerEnum, TopicEnum
from agriquant.schemas.plan import TreatmentInput
from agriquant.services.chat_service import GREETING, summarize_plan
from agriquant.services.knowledge_base import FALLBACK_ANSWER, KNOWLEDGE_BASE
from agriquant.services.session_service import AdvisoryService, SessionRegistry


@pytest.mark.asyncio
async def test_new_session_starts_with_greeting(registry: SessionRegistry) -> None:
	session = await registry.create()
	assert [(m.speaker, m.text) for m in session.transcript] == [(SpeakerEnum.assistant, GREETING)]


@pytest.mark.asyncio
async def test_user_message_is_immediate_and_reply_is_delayed(fake_redis: object) -> None:
	registry = SessionRegistry(fake_redis, Settings(chat_reply_delay_seconds=0.05))  # type: ignore[arg-type]
	session = await registry.create()
	service = registry.service(session.session_id)

	message = service.send_chat("What is HRW?")

	assert message is not None
	assert session.transcript[-1].speaker == SpeakerEnum.user
	assert len(session.transcript) == 2
	assert len(session.pending_replies) == 1

	await session.wait_for_replies()

	assert session.transcript[-1].speaker == SpeakerEnum.assistant
	assert session.transcript[-1].text == KNOWLEDGE_BASE[TopicEnum.what_is_hrw]
	assert not session.pending_replies


@pytest.mark.asyncio
async def test_replies_keep_question_order(registry: SessionRegistry) -> None:
	session = await registry.create()
	service = registry.service(session.session_id)

	service.send_chat("when should I spray")
	service.send_chat("good morning")
	await session.wait_for_replies()

	texts = [message.text for message in session.transcript[1:]]
	assert texts == [
		"when should I spray",
		"good morning",
		KNOWLEDGE_BASE[TopicEnum.application],
		FALLBACK_ANSWER,
	]


@pytest.mark.asyncio
async def test_blank_question_is_ignored(registry: SessionRegistry) -> None:
	session = await registry.create()
	assert registry.service(session.session_id).send_chat("   ") is None
	assert len(session.transcript) == 1
	assert not session.pending_replies


@pytest.mark.asyncio
async def test_closing_session_cancels_pending_reply(fake_redis: object) -> None:
	registry = SessionRegistry(fake_redis, Settings(chat_reply_delay_seconds=30))  # type: ignore[arg-type]
	session = await registry.create()
	registry.service(session.session_id).send_chat("Is it safe?")
	task = next(iter(session.pending_replies))

	closed = registry.close(session.session_id)
	await asyncio.gather(task, return_exceptions=True)

	assert closed.closed is True
	assert task.cancelled()
	assert [message.speaker for message in session.transcript] == [SpeakerEnum.assistant, SpeakerEnum.user]
	with pytest.raises(LookupError):
		registry.get(session.session_id)


@pytest.mark.asyncio
async def test_plan_summary_mode_references_current_plan(fake_redis: object) -> None:
	settings = Settings(chat_reply_delay_seconds=0.0, chat_reply_mode=ChatReplyMode.plan_summary)
	registry = SessionRegistry(fake_redis, settings)  # type: ignore[arg-type]
	session = await registry.create()
	service = AdvisoryService(session, registry.repository, settings)

	service.send_chat("what is hrw")
	await session.wait_for_replies()
	assert session.transcript[-1].text == KNOWLEDGE_BASE[TopicEnum.what_is_hrw]

	plan, _alert = service.estimate(TreatmentInput(area_acres=2, crop_type="Tomato", growth_stage="Flowering"))
	service.send_chat("what is hrw")
	await session.wait_for_replies()

	reply = session.transcript[-1].text
	assert reply == summarize_plan(plan, "Tomato")
	assert "0.88 ppm" in reply
	assert "every 3 days" in reply
