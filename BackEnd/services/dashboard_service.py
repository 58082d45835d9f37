import logging
import time
from PySide6.QtCore import QObject, Signal
from BackEnd.core import config
from BackEnd.core.clock import to_local
from BackEnd.repos.session_repo import SessionStore
from BackEnd.repos.subject_repo import SubjectRegistry
from BackEnd.services import report_service
from BackEnd.services.timer_service import TimerService

logger = logging.getLogger(__name__)


class StudyDashboard(QObject):
	"""Render-free dashboard state: subject input, timer controls, draft session form and report window.

	A presentation layer binds its widgets to the attributes here and listens to
	the signals (plus those of `self.timer`) to redraw.
	"""
	subjects_changed = Signal()
	sessions_changed = Signal()

	def __init__(self, storage, clock=None):
		super().__init__()
		self.subjects = SubjectRegistry(storage).load()
		self.sessions = SessionStore(storage).load()
		self.timer = TimerService(sink=self.sessions.append, clock=clock or time.time)
		self.current_subject = ""
		self.report_window = config.DEFAULT_REPORT_WINDOW
		self.clear_draft()

	def clear_draft(self):
		self.notes = ""
		self.links = ""
		self.footnote = ""
		self.images = ""

	def select_subject(self, name):
		self.current_subject = name or ""
		self.timer.select_subject(self.current_subject)

	def add_subject(self):
		"""Add the typed subject; the input is cleared once it is added."""
		if not self.subjects.add(self.current_subject):
			return False
		self.current_subject = ""
		self.subjects_changed.emit()
		return True

	def can_start(self):
		return bool(self.current_subject)

	def start_pause(self):
		if self.timer.running:
			self.timer.pause()
		elif self.can_start():
			self.timer.start(self.current_subject)

	def reset(self):
		self.timer.reset()

	def end(self):
		"""Stop the timer, recording the draft fields with the session, then clear the draft."""
		before = len(self.sessions)
		try:
			session = self.timer.stop(
				notes=self.notes,
				links=self.links,
				footnote=self.footnote,
				images=self.images,
			)
		finally:
			self.clear_draft()
			# The store keeps the session even when writing it failed.
			if len(self.sessions) > before:
				self.sessions_changed.emit()
		if session is None:
			logger.debug("Ended with no elapsed time; nothing recorded")
		return session

	def set_report_window(self, window):
		self.report_window = window

	def report(self, now=None):
		return report_service.generate_report(
			self.report_window, self.sessions.all(), self.subjects.list(), now=now
		)

	def session_label(self, session):
		started = to_local(session.started_at).strftime("%Y-%m-%d %H:%M:%S")
		return f"{started} - {session.subject} ({session.minutes} minutes)"

	def session_details(self, session):
		return {
			'title': f"{session.subject} - {to_local(session.started_at).strftime('%Y-%m-%d %H:%M:%S')}",
			'duration': f"{session.minutes} minutes",
			'notes': session.notes or "No notes added",
			'links': list(session.links) or "No links added",
			'footnote': session.footnote or "No footnote added",
			'images': list(session.images),
		}
