"""Key-value persistence port: one JSON document per key."""

import json
import logging
import sqlite3

from BackEnd.core.paths import db_path
from BackEnd.core.clock import utc_now_iso

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
	key TEXT PRIMARY KEY,
	value TEXT NOT NULL,
	updated_at TEXT NOT NULL
);
"""


class StorageError(RuntimeError):
	"""Raised when a value cannot be written to storage."""


class SqliteStorage:
	"""Stores JSON values in the `kv` table of the per-user study.db."""

	def __init__(self, path=None):
		self.path = path or db_path()

	def connect(self):
		"""Open SQLite connection and ensure schema is applied."""
		conn = sqlite3.connect(self.path)
		conn.row_factory = sqlite3.Row
		conn.executescript(SCHEMA)
		return conn

	def load(self, key):
		"""Return the decoded value for key, or None if missing or unreadable."""
		try:
			conn = self.connect()
			try:
				row = conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
			finally:
				conn.close()
		except sqlite3.Error as e:
			logger.warning(f"Failed to read '{key}' from {self.path}: {e}")
			return None
		if row is None:
			return None
		try:
			return json.loads(row["value"])
		except json.JSONDecodeError as e:
			logger.warning(f"Stored value for '{key}' is not valid JSON: {e}")
			return None

	def save(self, key, value):
		"""Write value under key; raises StorageError on failure."""
		try:
			payload = json.dumps(value)
			conn = self.connect()
			try:
				with conn:
					conn.execute(
						"""
						INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
						ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
						""",
						(key, payload, utc_now_iso())
					)
			finally:
				conn.close()
		except (sqlite3.Error, TypeError, ValueError) as e:
			logger.error(f"Failed to save '{key}' to {self.path}: {e}")
			raise StorageError(f"could not save '{key}'") from e

	def delete(self, key):
		"""Remove key if present. Returns True when a row was deleted."""
		try:
			conn = self.connect()
			try:
				with conn:
					cur = conn.execute("DELETE FROM kv WHERE key=?", (key,))
			finally:
				conn.close()
		except sqlite3.Error as e:
			logger.error(f"Failed to delete '{key}' from {self.path}: {e}")
			raise StorageError(f"could not delete '{key}'") from e
		return cur.rowcount > 0


class MemoryStorage:
	"""In-process storage holding raw JSON text, so values round-trip like SqliteStorage."""

	def __init__(self, initial=None):
		self.data = dict(initial or {})
		self.fail_writes = False

	def load(self, key):
		raw = self.data.get(key)
		if raw is None:
			return None
		try:
			return json.loads(raw)
		except json.JSONDecodeError as e:
			logger.warning(f"Stored value for '{key}' is not valid JSON: {e}")
			return None

	def save(self, key, value):
		if self.fail_writes:
			raise StorageError(f"could not save '{key}'")
		try:
			self.data[key] = json.dumps(value)
		except (TypeError, ValueError) as e:
			raise StorageError(f"could not save '{key}'") from e

	def delete(self, key):
		return self.data.pop(key, None) is not None
