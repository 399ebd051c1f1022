"""Chat transcript handling with a delayed, cancellable assistant reply."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from agriquant.config import ChatReplyMode
from agriquant.models.enums import SpeakerEnum, TopicEnum
from agriquant.schemas.chat import ChatMessage
from agriquant.schemas.plan import TreatmentPlan
from agriquant.services import intent_service

if TYPE_CHECKING:
	from agriquant.services.session_service import AdvisorySession

logger = structlog.get_logger("agriquant.chat")

GREETING = "Hi! Ask me about HRW - application, benefits, timing, equipment, costs, or any crop questions!"


def summarize_plan(plan: TreatmentPlan, crop_type: str | None = None) -> str:
	subject = f"your {crop_type} plan" if crop_type else "your current plan"
	return (
		f"Based on {subject}: spray {plan.concentration_ppm} ppm H2 water, "
		f"{plan.total_volume_l} L at {plan.pressure_bar} bar, {plan.frequency_label.lower()}. "
		f"Best time: {plan.best_time_label}."
	)


def compose_reply(session: AdvisorySession, question: str, mode: ChatReplyMode) -> tuple[TopicEnum | None, str]:
	if mode == ChatReplyMode.plan_summary and session.current_plan is not None:
		crop = session.current_input.crop_type if session.current_input is not None else None
		return None, summarize_plan(session.current_plan, crop)
	return intent_service.answer(question)


class ChatService:
	def __init__(self, session: AdvisorySession, *, delay_seconds: float, mode: ChatReplyMode):
		self.session = session
		self.delay_seconds = delay_seconds
		self.mode = mode

	def send(self, question: str) -> ChatMessage | None:
		"""Append the user message now and schedule the assistant reply.

		Blank questions are ignored.  Must be called from a running event loop.
		"""
		if not question.strip():
			return None
		message = ChatMessage(speaker=SpeakerEnum.user, text=question)
		self.session.transcript.append(message)

		topic, reply = compose_reply(self.session, question, self.mode)
		task = asyncio.get_running_loop().create_task(self._deliver(reply))
		self.session.track_reply(task)
		logger.info(
			"chat_question_received",
			session_id=self.session.session_id,
			topic=topic.value if topic is not None else "plan_summary",
		)
		return message

	async def _deliver(self, text: str) -> None:
		try:
			await asyncio.sleep(self.delay_seconds)
		except asyncio.CancelledError:
			logger.info("chat_reply_cancelled", session_id=self.session.session_id)
			raise
		if self.session.closed:
			return
		self.session.transcript.append(ChatMessage(speaker=SpeakerEnum.assistant, text=text))
