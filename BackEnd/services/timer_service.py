import logging
import time
from PySide6.QtCore import QObject, Signal, QTimer
from BackEnd.core import config
from BackEnd.core.clock import fmt_mmss, from_timestamp
from BackEnd.core.models import StudySession

logger = logging.getLogger(__name__)

IDLE = 'idle'
RUNNING = 'running'
PAUSED = 'paused'


class TimerService(QObject):
	tick = Signal(int)  # emits elapsed seconds
	state_changed = Signal(str)  # emits 'idle', 'running', 'paused'
	cap_reached = Signal(int)  # emits elapsed seconds when the cap pauses the timer
	session_completed = Signal(object)  # emits the recorded StudySession

	def __init__(self, sink=None, clock=time.time, cap_sec=config.SESSION_CAP_SEC,
			tick_interval_ms=config.TICK_INTERVAL_MS):
		"""`sink` receives each completed StudySession (usually SessionStore.append)."""
		super().__init__()
		self.sink = sink
		self.clock = clock
		self.cap_sec = cap_sec
		self.phase = IDLE
		self.active_subject = None
		self.elapsed_sec = 0
		self.start_ts = None
		self._timer = QTimer(self)
		self._timer.setInterval(tick_interval_ms)
		self._timer.timeout.connect(self._on_tick)

	@property
	def running(self):
		return self.phase == RUNNING

	@property
	def paused(self):
		return self.phase == PAUSED

	def state(self):
		"""Snapshot of the timer state."""
		return {
			'phase': self.phase,
			'active_subject': self.active_subject,
			'elapsed_sec': self.elapsed_sec,
			'start_ts': self.start_ts,
		}

	def _set_phase(self, phase):
		# Leaving RUNNING always cancels the pending tick first.
		if phase != RUNNING:
			self._timer.stop()
		if phase == self.phase:
			return
		self.phase = phase
		self.state_changed.emit(phase)

	def select_subject(self, subject):
		# A session in progress always keeps a subject to record under.
		if not subject and self.phase != IDLE:
			logger.debug("Keeping subject of the session in progress")
			return
		self.active_subject = subject or None

	def start(self, subject=None):
		if subject:
			self.active_subject = subject
		if not self.active_subject:
			logger.debug("start ignored: no subject selected")
			return
		if self.phase == RUNNING:
			return
		if self.elapsed_sec >= self.cap_sec:
			logger.debug("start ignored: session cap already reached")
			return
		self.start_ts = self.clock() - self.elapsed_sec
		self._set_phase(RUNNING)
		self._timer.start()

	def pause(self):
		if self.phase != RUNNING:
			return
		self._set_phase(PAUSED)

	def toggle(self, subject=None):
		"""Start when not running, pause when running."""
		if self.phase == RUNNING:
			self.pause()
		else:
			self.start(subject)

	def reset(self):
		self._set_phase(IDLE)
		self.elapsed_sec = 0
		self.start_ts = None
		self.tick.emit(0)

	def stop(self, notes="", links="", footnote="", images=""):
		"""End the session. Records it when any time elapsed; returns the session or None."""
		self._timer.stop()
		if self.elapsed_sec <= 0:
			self.reset()
			return None
		session = StudySession(
			subject=self.active_subject,
			duration=self.elapsed_sec,
			started_at=from_timestamp(self.start_ts),
			notes=notes,
			links=links,
			footnote=footnote,
			images=images,
		)
		try:
			if self.sink is not None:
				self.sink(session)
		finally:
			self.reset()
		self.session_completed.emit(session)
		return session

	def remaining(self):
		return max(self.cap_sec - self.elapsed_sec, 0)

	def display(self):
		"""Remaining time as MM:SS."""
		return fmt_mmss(self.remaining())

	def _on_tick(self):
		if self.phase != RUNNING:
			return
		elapsed = int(self.clock() - self.start_ts)
		self.elapsed_sec = min(max(elapsed, 0), self.cap_sec)
		self.tick.emit(self.elapsed_sec)
		if self.elapsed_sec >= self.cap_sec:
			logger.info(f"Session cap of {self.cap_sec}s reached for '{self.active_subject}'")
			self._set_phase(PAUSED)
			self.cap_reached.emit(self.elapsed_sec)
