"""Append-only treatment logbook with CSV export and key-value persistence."""

from __future__ import annotations

import io
from datetime import datetime

import structlog
from pydantic import TypeAdapter, ValidationError
from redis.asyncio import Redis

from agriquant.schemas.logbook import LogEntry
from agriquant.schemas.plan import TreatmentInput, TreatmentPlan

logger = structlog.get_logger("agriquant.logbook")

CSV_HEADER = (
	"id",
	"createdAt",
	"crop",
	"area",
	"concentration_l",
	"volume_l",
	"pressure_bar",
	"frequency",
	"place",
)

_ENTRIES_ADAPTER = TypeAdapter(list[LogEntry])


class LogStore:
	"""Newest-first list of saved plans.  Entries are never mutated or removed."""

	def __init__(self, entries: list[LogEntry] | None = None):
		self._entries: list[LogEntry] = list(entries or [])

	def append(
		self,
		treatment: TreatmentInput | None,
		plan: TreatmentPlan | None,
		now: datetime,
		token: int,
	) -> LogEntry | None:
		if plan is None or treatment is None:
			return None
		entry = LogEntry(id=token, input=treatment, plan=plan, created_at=now)
		self._entries.insert(0, entry)
		logger.info("logbook_entry_saved", entry_id=entry.id, size=len(self._entries))
		return entry

	@property
	def entries(self) -> list[LogEntry]:
		return list(self._entries)

	def __len__(self) -> int:
		return len(self._entries)

	def max_id(self) -> int:
		return max((entry.id for entry in self._entries), default=0)

	def dumps(self) -> str:
		return _ENTRIES_ADAPTER.dump_json(self._entries).decode("utf-8")

	@classmethod
	def loads(cls, raw: str | bytes | None) -> LogStore:
		"""Restore a store; anything that does not validate yields an empty store."""
		if not raw:
			return cls()
		try:
			entries = _ENTRIES_ADAPTER.validate_json(raw)
		except ValidationError as exc:
			logger.warning("logbook_restore_failed", error_count=exc.error_count())
			return cls()
		except UnicodeDecodeError:
			logger.warning("logbook_restore_failed", reason="undecodable")
			return cls()
		return cls(entries)

	def to_csv(self) -> str:
		buffer = io.StringIO()
		buffer.write(",".join(CSV_HEADER) + "\n")
		for entry in self._entries:
			row = [
				_csv_field(entry.id),
				_csv_field(entry.created_at.isoformat()),
				_csv_field(entry.input.crop_type),
				_csv_field(entry.input.area_acres),
				_csv_field(entry.plan.concentration_ppm),
				_csv_field(entry.plan.total_volume_l),
				_csv_field(entry.plan.pressure_bar),
				_csv_field(entry.plan.frequency_label, always_quote=True),
				_csv_field(entry.input.place),
			]
			buffer.write(",".join(row) + "\n")
		return buffer.getvalue()


def _csv_field(value: object, always_quote: bool = False) -> str:
	if isinstance(value, float) and value.is_integer():
		value = int(value)
	text = str(value)
	if always_quote or any(char in text for char in (",", '"', "\n", "\r")):
		return '"' + text.replace('"', '""') + '"'
	return text


class LogbookRepository:
	"""Reads and writes the serialized logbook under a single fixed key."""

	def __init__(self, redis_client: Redis | None, key: str):
		self.redis_client = redis_client
		self.key = key

	async def load(self) -> LogStore:
		if self.redis_client is None:
			return LogStore()
		try:
			raw = await self.redis_client.get(self.key)
		except UnicodeDecodeError:
			logger.warning("logbook_restore_failed", reason="undecodable")
			return LogStore()
		return LogStore.loads(raw)

	async def save(self, store: LogStore) -> None:
		if self.redis_client is None:
			return
		await self.redis_client.set(self.key, store.dumps())

