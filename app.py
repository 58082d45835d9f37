import sys
import logging
from PySide6.QtCore import QCoreApplication
from BackEnd.core import config
from BackEnd.repos.storage import SqliteStorage
from BackEnd.services import report_service
from BackEnd.services.dashboard_service import StudyDashboard

logger = logging.getLogger(__name__)

def configure_logging(level=None):
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def create_dashboard(storage=None, clock=None):
    """Build the dashboard over the per-user SQLite store unless a storage is given."""
    return StudyDashboard(storage or SqliteStorage(), clock=clock)

def main(storage=None):
    """Load the dashboard headlessly and log today's summary; a presentation layer builds on create_dashboard()."""
    configure_logging()
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    dashboard = create_dashboard(storage)
    sessions = dashboard.sessions.all()
    logger.info(
        f"{len(dashboard.subjects)} subject(s), {len(sessions)} session(s); "
        f"today {report_service.today_total_seconds(sessions)}s, "
        f"streak {report_service.daily_streak(sessions)} day(s)"
    )
    for row in dashboard.report():
        logger.info(f"{row.subject}: {row.total_minutes} min today")
    return 0

if __name__ == "__main__":
    sys.exit(main())
