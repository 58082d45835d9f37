"""
Reset all study dashboard data.
This deletes the recorded session history and, optionally, the subject list.
"""

import logging
from BackEnd.core import config
from BackEnd.repos.storage import SqliteStorage, StorageError

logger = logging.getLogger(__name__)

def reset_all_stats(storage=None, ask=input):
    """Delete stored sessions (and subjects, if confirmed). Returns the keys removed."""
    storage = storage or SqliteStorage()
    removed = []

    confirm = ask("Are you sure you want to delete all study sessions? This cannot be undone. (yes/no): ")
    if confirm.lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return removed

    try:
        if storage.delete(config.SESSIONS_KEY):
            removed.append(config.SESSIONS_KEY)
            print("✓ Study sessions deleted. All stats have been reset to 0")
        else:
            print("No study sessions found. Stats are already at 0.")

        confirm_subjects = ask("\nAlso delete your subject list? (yes/no): ")
        if confirm_subjects.lower() in ['yes', 'y']:
            if storage.delete(config.SUBJECTS_KEY):
                removed.append(config.SUBJECTS_KEY)
                print("✓ Subject list deleted successfully!")
    except StorageError as e:
        logger.error(f"Reset failed: {e}")
        print(f"✗ Error resetting data: {e}")
    return removed

if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    print("=" * 50)
    print("Study Dashboard - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
    print("\nPress Enter to exit...")
    input()
