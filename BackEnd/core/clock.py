from datetime import datetime, timezone

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def local_now():
	"""Return the current local time as an aware datetime."""
	return datetime.now().astimezone()

def from_timestamp(ts: float) -> datetime:
	"""Convert epoch seconds to an aware UTC datetime (no microseconds)."""
	return datetime.fromtimestamp(ts, tz=timezone.utc).replace(microsecond=0)

def to_iso(dt: datetime) -> str:
	"""Serialize an aware datetime as ISO8601 in UTC."""
	return dt.astimezone(timezone.utc).isoformat()

def parse_iso(value: str) -> datetime:
	"""Parse an ISO8601 string; naive values and a trailing Z are read as UTC."""
	if value.endswith("Z"):
		value = value[:-1] + "+00:00"
	dt = datetime.fromisoformat(value)
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt

def to_local(dt: datetime) -> datetime:
	"""Return dt in the local timezone."""
	return dt.astimezone()

def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS."""
	m = seconds // 60
	s = seconds % 60
	return f"{m:02}:{s:02}"
