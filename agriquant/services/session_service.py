"""Per-session advisory state and the registry that owns it.

All mutable state (current plan, alerts, logbook, chat transcript) lives on
an :class:`AdvisorySession`.  Services operate on a session passed to them;
nothing is module-global apart from the registry stored on ``app.state``.
"""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from agriquant.config import Settings, get_settings
from agriquant.models.enums import SpeakerEnum
from agriquant.schemas.alerts import Alert
from agriquant.schemas.chat import ChatMessage
from agriquant.schemas.logbook import LogEntry
from agriquant.schemas.plan import TreatmentInput, TreatmentPlan
from agriquant.services.chat_service import GREETING, ChatService
from agriquant.services.logbook_service import LogbookRepository, LogStore
from agriquant.services.plan_engine import compute_plan
from agriquant.services.scheduler import AlertHistory, TokenSource, schedule_alert

logger = structlog.get_logger("agriquant.session")

PROJECTION_MONTHS = 6
PROJECTION_STEP = 15
PROJECTION_CAP = 100


@dataclass(slots=True)
class AdvisorySession:
	session_id: str
	created_at: datetime
	alerts: AlertHistory
	logbook: LogStore
	transcript: list[ChatMessage] = field(default_factory=list)
	current_input: TreatmentInput | None = None
	current_plan: TreatmentPlan | None = None
	tokens: TokenSource = field(default_factory=TokenSource)
	pending_replies: set[asyncio.Task] = field(default_factory=set)
	closed: bool = False

	def track_reply(self, task: asyncio.Task) -> None:
		self.pending_replies.add(task)
		task.add_done_callback(self.pending_replies.discard)

	async def wait_for_replies(self) -> None:
		if self.pending_replies:
			await asyncio.gather(*list(self.pending_replies), return_exceptions=True)

	def close(self) -> int:
		"""Mark closed and cancel replies that have not fired yet."""
		self.closed = True
		cancelled = 0
		for task in list(self.pending_replies):
			if not task.done():
				task.cancel()
				cancelled += 1
		return cancelled


class AdvisoryService:
	"""Estimate, save and chat actions against one session."""

	def __init__(self, session: AdvisorySession, repository: LogbookRepository | None = None, settings: Settings | None = None):
		self.session = session
		self.repository = repository
		self.settings = settings or get_settings()

	def estimate(self, treatment: TreatmentInput, now: datetime | None = None) -> tuple[TreatmentPlan, Alert]:
		now = now or datetime.now(UTC)
		plan = compute_plan(treatment)
		self.session.current_input = treatment
		self.session.current_plan = plan
		alert = schedule_alert(plan, treatment.crop_type, now, self.session.tokens.next_token())
		self.session.alerts.push(alert)
		return plan, alert

	async def save_log(self, now: datetime | None = None) -> LogEntry | None:
		"""Snapshot the current plan into the logbook; no-op without a plan."""
		if self.session.current_plan is None:
			logger.info("logbook_save_skipped", session_id=self.session.session_id, reason="no_plan")
			return None
		entry = self.session.logbook.append(
			self.session.current_input,
			self.session.current_plan,
			now or datetime.now(UTC),
			self.session.tokens.next_token(),
		)
		if entry is not None and self.repository is not None:
			try:
				await self.repository.save(self.session.logbook)
			except RedisError as exc:
				# kept in memory; the next successful save writes the whole store
				logger.warning("logbook_persist_failed", entry_id=entry.id, error=str(exc))
		return entry

	def send_chat(self, question: str) -> ChatMessage | None:
		service = ChatService(
			self.session,
			delay_seconds=self.settings.chat_reply_delay_seconds,
			mode=self.settings.chat_reply_mode,
		)
		return service.send(question)

	def projection(self) -> list[tuple[str, int]]:
		has_plan = self.session.current_plan is not None
		return [
			(f"M{month}", min(PROJECTION_CAP, month * PROJECTION_STEP) if has_plan else 0)
			for month in range(1, PROJECTION_MONTHS + 1)
		]


class SessionRegistry:
	"""Creates, looks up and closes sessions for the hosting application."""

	def __init__(
		self,
		redis_client: Redis | None = None,
		settings: Settings | None = None,
		tokens: TokenSource | None = None,
	):
		self.settings = settings or get_settings()
		self.redis_client = redis_client if self.settings.logbook_persistence_enabled else None
		self.repository = LogbookRepository(self.redis_client, self.settings.logbook_storage_key)
		self.tokens = tokens or TokenSource()
		self.logbook: LogStore | None = None
		self._sessions: dict[str, AdvisorySession] = {}

	async def _shared_logbook(self) -> LogStore:
		"""Load the persisted logbook once; every session appends to the same store."""
		if self.logbook is None:
			self.logbook = await self.repository.load()
			self.tokens.advance_past(self.logbook.max_id())
		return self.logbook

	async def create(self) -> AdvisorySession:
		logbook = await self._shared_logbook()
		session = AdvisorySession(
			session_id=str(uuid.uuid4()),
			created_at=datetime.now(UTC),
			alerts=AlertHistory(self.settings.alert_history_limit),
			logbook=logbook,
			transcript=[ChatMessage(speaker=SpeakerEnum.assistant, text=GREETING)],
			tokens=self.tokens,
		)
		self._sessions[session.session_id] = session
		logger.info("session_created", session_id=session.session_id, logbook_size=len(logbook))
		return session

	def get(self, session_id: str) -> AdvisorySession:
		session = self._sessions.get(session_id)
		if session is None:
			raise LookupError(f"Session {session_id} not found")
		return session

	def service(self, session_id: str) -> AdvisoryService:
		return AdvisoryService(self.get(session_id), self.repository, self.settings)

	def close(self, session_id: str) -> AdvisorySession:
		session = self._sessions.pop(session_id, None)
		if session is None:
			raise LookupError(f"Session {session_id} not found")
		cancelled = session.close()
		logger.info("session_closed", session_id=session_id, cancelled_replies=cancelled)
		return session

	def close_all(self) -> None:
		for session_id in list(self._sessions):
			self.close(session_id)

	def __len__(self) -> int:
		return len(self._sessions)
