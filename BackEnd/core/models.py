"""Records shared by the repositories and services."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Tuple, Union

from BackEnd.core.clock import parse_iso, to_iso


def split_list(value: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
	"""Normalize a comma-separated string (or a sequence) into trimmed, non-empty items."""
	if not value:
		return ()
	if isinstance(value, str):
		items = value.split(",")
	else:
		items = value
	return tuple(str(item).strip() for item in items if str(item).strip())


def _text(value) -> str:
	if value is None:
		return ""
	return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class StudySession:
	subject: str
	duration: int
	started_at: datetime
	notes: str = ""
	links: Tuple[str, ...] = field(default_factory=tuple)
	footnote: str = ""
	images: Tuple[str, ...] = field(default_factory=tuple)

	def __post_init__(self):
		if not isinstance(self.subject, str) or not self.subject:
			raise ValueError(f"subject must be a non-empty string, got {self.subject!r}")
		if self.duration < 0:
			raise ValueError(f"duration must be >= 0, got {self.duration}")
		# Accept raw strings or lists from callers and storage.
		object.__setattr__(self, "links", split_list(self.links))
		object.__setattr__(self, "images", split_list(self.images))

	@property
	def minutes(self) -> int:
		return round_minutes(self.duration)

	def to_dict(self):
		return {
			"subject": self.subject,
			"duration": self.duration,
			"startedAt": to_iso(self.started_at),
			"notes": self.notes,
			"links": list(self.links),
			"footnote": self.footnote,
			"images": list(self.images),
		}

	@classmethod
	def from_dict(cls, data):
		"""Build a session from its stored form. Older records carry `date` instead of `startedAt`."""
		started = data.get("startedAt") or data.get("date")
		if not isinstance(data.get("subject"), str) or not isinstance(started, str):
			raise ValueError(f"malformed session record: {data!r}")
		duration = data.get("duration")
		if isinstance(duration, bool) or not isinstance(duration, (int, float)):
			raise ValueError(f"malformed session duration: {duration!r}")
		return cls(
			subject=data["subject"],
			duration=int(duration),
			started_at=parse_iso(started),
			notes=_text(data.get("notes")),
			links=data.get("links") or (),
			footnote=_text(data.get("footnote")),
			images=data.get("images") or (),
		)


@dataclass(frozen=True)
class ReportRow:
	subject: str
	total_minutes: int


def round_minutes(seconds: int) -> int:
	"""Seconds to whole minutes, rounding halves up (150s -> 3)."""
	return (int(seconds) + 30) // 60
