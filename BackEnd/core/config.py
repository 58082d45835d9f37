"""Application constants and environment overrides."""

import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = "StudyDashboard"

# Timer
SESSION_CAP_SEC = 25 * 60
TICK_INTERVAL_MS = 1000

# Storage keys
SUBJECTS_KEY = "subjects"
SESSIONS_KEY = "studySessions"

# Report windows
WINDOW_DAY = "day"
WINDOW_WEEK = "week"
WINDOW_MONTH = "month"
WINDOW_ALL = "all"
REPORT_WINDOWS = (WINDOW_DAY, WINDOW_WEEK, WINDOW_MONTH, WINDOW_ALL)
DEFAULT_REPORT_WINDOW = WINDOW_DAY

DATA_DIR = os.environ.get("STUDY_DASHBOARD_DATA_DIR", "")
LOG_LEVEL = os.environ.get("STUDY_DASHBOARD_LOG_LEVEL", "INFO").upper()
