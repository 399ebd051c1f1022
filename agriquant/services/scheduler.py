"""Spray reminder scheduling and the bounded alert history."""

from __future__ import annotations

import time
from datetime import datetime, timedelta

import structlog

from agriquant.schemas.alerts import Alert
from agriquant.schemas.plan import TreatmentPlan

logger = structlog.get_logger("agriquant.scheduler")

DEFAULT_ALERT_HISTORY_LIMIT = 10


class TokenSource:
	"""Creation-time ids in epoch milliseconds, strictly increasing per source."""

	def __init__(self, clock=time.time_ns):
		self._clock = clock
		self._last = 0

	def next_token(self) -> int:
		token = max(self._clock() // 1_000_000, self._last + 1)
		self._last = token
		return token

	def advance_past(self, token: int) -> None:
		"""Guarantee later tokens are greater than ``token``."""
		self._last = max(self._last, token)


def schedule_alert(plan: TreatmentPlan, crop_type: str, now: datetime, token: int) -> Alert:
	return Alert(
		id=token,
		message=f"Next spray for {crop_type}: {plan.frequency_label}",
		scheduled_at=now + timedelta(days=plan.frequency_days),
	)


class AlertHistory:
	"""Newest-first alert list; inserting past ``limit`` drops the oldest."""

	def __init__(self, limit: int = DEFAULT_ALERT_HISTORY_LIMIT):
		if limit < 1:
			raise ValueError("alert history limit must be at least 1")
		self.limit = limit
		self._items: list[Alert] = []

	def push(self, alert: Alert) -> Alert:
		self._items.insert(0, alert)
		del self._items[self.limit :]
		logger.info(
			"alert_scheduled",
			alert_id=alert.id,
			scheduled_at=alert.scheduled_at.isoformat(),
			history_size=len(self._items),
		)
		return alert

	@property
	def items(self) -> list[Alert]:
		return list(self._items)

	def __len__(self) -> int:
		return len(self._items)
