"""Unit tests for the subject registry and session store."""

import json
import unittest
from datetime import datetime, timezone
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from BackEnd.core import config
from BackEnd.core.models import StudySession
from BackEnd.repos.storage import MemoryStorage, StorageError
from BackEnd.repos.subject_repo import SubjectRegistry
from BackEnd.repos.session_repo import SessionStore


class TestSubjectRegistry(unittest.TestCase):
    """Test cases for SubjectRegistry."""

    def setUp(self):
        self.storage = MemoryStorage()
        self.registry = SubjectRegistry(self.storage).load()

    def test_add_is_idempotent(self):
        """Adding the same subject twice keeps one entry."""
        self.assertTrue(self.registry.add("Math"))
        self.assertFalse(self.registry.add("Math"))
        self.assertEqual(self.registry.list(), ("Math",))

    def test_match_is_case_sensitive(self):
        """'math' and 'Math' are different subjects."""
        self.registry.add("Math")
        self.registry.add("math")
        self.assertEqual(self.registry.list(), ("Math", "math"))

    def test_empty_name_ignored(self):
        """Empty names are not added."""
        self.assertFalse(self.registry.add(""))
        self.assertFalse(self.registry.add(None))
        self.assertEqual(len(self.registry), 0)

    def test_writes_through(self):
        """Every add is persisted and reloads in order."""
        self.registry.add("Math")
        self.registry.add("Art")
        self.assertEqual(self.storage.load(config.SUBJECTS_KEY), ["Math", "Art"])
        reloaded = SubjectRegistry(self.storage).load()
        self.assertEqual(reloaded.list(), ("Math", "Art"))

    def test_malformed_data_loads_empty(self):
        """Corrupt or wrongly shaped data yields an empty registry."""
        for raw in ("not json", json.dumps({"a": 1}), json.dumps("Math")):
            storage = MemoryStorage({config.SUBJECTS_KEY: raw})
            self.assertEqual(SubjectRegistry(storage).load().list(), ())

    def test_bad_entries_dropped(self):
        """Non-strings, empties and duplicates in stored data are skipped."""
        storage = MemoryStorage({config.SUBJECTS_KEY: json.dumps(["Math", 3, "", "Math", "Art"])})
        self.assertEqual(SubjectRegistry(storage).load().list(), ("Math", "Art"))

    def test_write_failure_raises(self):
        """A failed write surfaces as StorageError."""
        self.storage.fail_writes = True
        with self.assertRaises(StorageError):
            self.registry.add("Math")


class TestSessionStore(unittest.TestCase):
    """Test cases for SessionStore."""

    def setUp(self):
        self.storage = MemoryStorage()
        self.store = SessionStore(self.storage).load()
        self.started = datetime(2026, 3, 15, 10, 30, tzinfo=timezone.utc)

    def make_session(self, subject="Math", duration=130):
        return StudySession(
            subject=subject,
            duration=duration,
            started_at=self.started,
            notes="notes",
            links="https://a.example, https://b.example",
            footnote="fn",
            images=["https://img.example/1.png"],
        )

    def test_missing_data_loads_empty(self):
        """No stored sessions means an empty store."""
        self.assertEqual(self.store.all(), ())

    def test_malformed_data_loads_empty(self):
        """Corrupt or wrongly shaped data yields an empty store."""
        for raw in ("[{", json.dumps({"subject": "Math"}), json.dumps(42)):
            storage = MemoryStorage({config.SESSIONS_KEY: raw})
            self.assertEqual(SessionStore(storage).load().all(), ())

    def test_append_preserves_order_and_persists(self):
        """Sessions are appended in order and written through."""
        first = self.make_session("Math")
        second = self.make_session("Art", 60)
        self.store.append(first)
        self.store.append(second)
        self.assertEqual(self.store.all(), (first, second))
        stored = self.storage.load(config.SESSIONS_KEY)
        self.assertEqual([s["subject"] for s in stored], ["Math", "Art"])
        self.assertEqual(stored[0]["links"], ["https://a.example", "https://b.example"])
        self.assertEqual(stored[0]["startedAt"], "2026-03-15T10:30:00+00:00")

    def test_round_trip(self):
        """Reloading yields an equal sequence."""
        sessions = [self.make_session("Math"), self.make_session("Art", 0)]
        for s in sessions:
            self.store.append(s)
        reloaded = SessionStore(self.storage).load()
        self.assertEqual(reloaded.all(), tuple(sessions))

    def test_malformed_records_skipped(self):
        """Bad records are dropped, good ones kept."""
        good = self.make_session().to_dict()
        raw = json.dumps([good, {"subject": "Art"}, "junk", {"subject": "Art", "duration": "5", "startedAt": "2026-03-15T10:30:00Z"}])
        store = SessionStore(MemoryStorage({config.SESSIONS_KEY: raw})).load()
        self.assertEqual(len(store), 1)
        self.assertEqual(store.all()[0].subject, "Math")

    def test_legacy_record_shape(self):
        """Records with `date` and comma-separated links load normalised."""
        raw = json.dumps([{
            "subject": "Math",
            "duration": 90,
            "date": "2026-03-15T10:30:00.000Z",
            "notes": "",
            "links": "https://a.example, ,https://b.example",
            "footnote": "",
            "images": ["https://img.example/1.png"],
        }])
        store = SessionStore(MemoryStorage({config.SESSIONS_KEY: raw})).load()
        session = store.all()[0]
        self.assertEqual(session.started_at, self.started)
        self.assertEqual(session.links, ("https://a.example", "https://b.example"))
        self.assertEqual(session.images, ("https://img.example/1.png",))

    def test_write_failure_raises_and_keeps_memory(self):
        """A failed write raises StorageError; the in-memory append stays."""
        self.storage.fail_writes = True
        session = self.make_session()
        with self.assertRaises(StorageError):
            self.store.append(session)
        self.assertEqual(self.store.all(), (session,))

    def test_sessions_are_immutable(self):
        """Recorded sessions cannot be edited."""
        session = self.make_session()
        with self.assertRaises(AttributeError):
            session.duration = 5

    def test_subject_required(self):
        """A session without a subject cannot be built."""
        for subject in (None, "", 3):
            with self.assertRaises(ValueError):
                StudySession(subject=subject, duration=10, started_at=self.started)

    def test_text_fields_coerced_on_load(self):
        """Non-string notes and footnotes load as strings."""
        record = self.make_session().to_dict()
        record["notes"] = 5
        record["footnote"] = None
        session = StudySession.from_dict(record)
        self.assertEqual(session.notes, "5")
        self.assertEqual(session.footnote, "")

    def test_negative_duration_rejected(self):
        """Durations below zero are invalid."""
        with self.assertRaises(ValueError):
            self.make_session(duration=-1)


if __name__ == '__main__':
    unittest.main()
