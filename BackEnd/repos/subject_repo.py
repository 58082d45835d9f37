import logging
from BackEnd.core import config

logger = logging.getLogger(__name__)


class SubjectRegistry:
	"""Ordered set of subject names, written through to storage on every add."""

	def __init__(self, storage):
		self.storage = storage
		self._subjects = []

	def load(self):
		"""Read subjects from storage; malformed data leaves the registry empty."""
		data = self.storage.load(config.SUBJECTS_KEY)
		self._subjects = []
		if data is None:
			return self
		if not isinstance(data, list):
			logger.warning(f"Ignoring stored subjects: expected a list, got {type(data).__name__}")
			return self
		for name in data:
			if isinstance(name, str) and name and name not in self._subjects:
				self._subjects.append(name)
		return self

	def add(self, name):
		"""Add name unless it is empty or already known. Returns True if added."""
		if not name or name in self._subjects:
			return False
		self._subjects.append(name)
		self.storage.save(config.SUBJECTS_KEY, list(self._subjects))
		logger.info(f"Added subject '{name}'")
		return True

	def list(self):
		return tuple(self._subjects)

	def __contains__(self, name):
		return name in self._subjects

	def __len__(self):
		return len(self._subjects)
