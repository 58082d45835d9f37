"""Report aggregation over recorded study sessions.

Windows are evaluated against "now" in local time:

- ``day``: the session started on today's local calendar date.
- ``week``: the session started within the last 7*24 hours (rolling, not calendar-aligned).
- ``month``: the session started in the current local calendar month and year.
- ``all`` or any other selector: every session.

Totals are converted to minutes rounding halves up, so 150 seconds counts as 3 minutes.
"""

import datetime
import logging
from BackEnd.core import config
from BackEnd.core.clock import local_now, to_local
from BackEnd.core.models import ReportRow, round_minutes

logger = logging.getLogger(__name__)

WEEK = datetime.timedelta(days=7)


def in_window(session, window, now):
	started = to_local(session.started_at)
	if window == config.WINDOW_DAY:
		return started.date() == now.date()
	if window == config.WINDOW_WEEK:
		return session.started_at >= now - WEEK
	if window == config.WINDOW_MONTH:
		return started.year == now.year and started.month == now.month
	return True


def filter_sessions(sessions, window, now=None):
	"""Return the sessions that fall inside window."""
	now = to_local(now) if now else local_now()
	if window not in config.REPORT_WINDOWS:
		logger.debug(f"Unknown report window '{window}', reporting all sessions")
	return [s for s in sessions if in_window(s, window, now)]


def generate_report(window, sessions, subjects, now=None):
	"""One ReportRow per known subject (zero totals included), in registry order."""
	totals = dict.fromkeys(subjects, 0)
	for session in filter_sessions(sessions, window, now):
		if session.subject in totals:
			totals[session.subject] += session.duration
	return [ReportRow(subject, round_minutes(seconds)) for subject, seconds in totals.items()]


def today_total_seconds(sessions, now=None):
	"""Sum of durations for sessions started today (local date)."""
	return sum(s.duration for s in filter_sessions(sessions, config.WINDOW_DAY, now))


def _studied_dates(sessions):
	return {to_local(s.started_at).date() for s in sessions if s.duration > 0}


def daily_streak(sessions, today=None):
	"""
	Calculate the current daily streak - consecutive days with study sessions.
	Returns 0 if nothing was studied today.
	"""
	today = today or datetime.date.today()
	dates = _studied_dates(sessions)
	streak = 0
	current_date = today
	while current_date in dates:
		streak += 1
		current_date -= datetime.timedelta(days=1)
	return streak


def total_days_studied(sessions):
	"""Number of distinct local dates with any study time."""
	return len(_studied_dates(sessions))


def total_hours_studied(sessions):
	"""Total study time across all sessions, in hours."""
	return sum(s.duration for s in sessions if s.duration > 0) / 3600.0
