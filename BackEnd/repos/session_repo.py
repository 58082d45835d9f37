import logging
from BackEnd.core import config
from BackEnd.core.models import StudySession

logger = logging.getLogger(__name__)


class SessionStore:
	"""Append-only list of completed study sessions, persisted in full on every append."""

	def __init__(self, storage):
		self.storage = storage
		self._sessions = []

	def load(self):
		"""Read sessions from storage. Missing or malformed data yields an empty list."""
		data = self.storage.load(config.SESSIONS_KEY)
		self._sessions = []
		if data is None:
			return self
		if not isinstance(data, list):
			logger.warning(f"Ignoring stored sessions: expected a list, got {type(data).__name__}")
			return self
		skipped = 0
		for record in data:
			try:
				self._sessions.append(StudySession.from_dict(record))
			except (AttributeError, TypeError, ValueError) as e:
				skipped += 1
				logger.debug(f"Skipping stored session: {e}")
		if skipped:
			logger.warning(f"Skipped {skipped} malformed stored session(s)")
		logger.debug(f"Loaded {len(self._sessions)} session(s)")
		return self

	def append(self, session: StudySession):
		"""Append session and persist the whole list. Raises StorageError if the write fails."""
		self._sessions.append(session)
		self.storage.save(config.SESSIONS_KEY, [s.to_dict() for s in self._sessions])
		logger.info(f"Recorded {session.duration}s of '{session.subject}'")

	def all(self):
		return tuple(self._sessions)

	def __len__(self):
		return len(self._sessions)
