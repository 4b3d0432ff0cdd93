"""
Event log storage for the Mental Wellness API

The recommendation and stats code only sees the EventLog interface. Two
stores implement it: MemoryEventLog (process-local, used when no database
is configured and in tests) and MongoEventLog (pymongo).
"""
import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, List, Optional

from pymongo import DESCENDING, MongoClient
from pymongo.errors import PyMongoError

from config import settings
from schemas import (
    BreathingSession,
    FavoriteAffirmation,
    Hobby,
    JournalEntry,
    JournalEntryUpdate,
    MoodLog,
    UserProfile,
)

logger = logging.getLogger(__name__)


class EventLogUnavailable(RuntimeError):
    """The backing store could not be reached."""


class EventLog(ABC):
    """Per-user access to wellness events. All list_* methods return newest first."""

    @abstractmethod
    def upsert_profile(self, profile: UserProfile) -> bool:
        """Store the profile; returns True if it already existed."""

    @abstractmethod
    def get_profile(self, anonymous_id: str) -> Optional[UserProfile]: ...

    def user_exists(self, anonymous_id: str) -> bool:
        return self.get_profile(anonymous_id) is not None

    @abstractmethod
    def add_mood_log(self, log: MoodLog) -> MoodLog: ...

    @abstractmethod
    def list_mood_logs(self, anonymous_id: str) -> List[MoodLog]: ...

    @abstractmethod
    def add_journal_entry(self, entry: JournalEntry) -> JournalEntry: ...

    @abstractmethod
    def get_journal_entry(self, entry_id: str) -> Optional[JournalEntry]: ...

    @abstractmethod
    def update_journal_entry(self, entry_id: str, changes: JournalEntryUpdate) -> Optional[JournalEntry]: ...

    @abstractmethod
    def delete_journal_entry(self, entry_id: str) -> bool: ...

    @abstractmethod
    def list_journal_entries(self, anonymous_id: str) -> List[JournalEntry]: ...

    @abstractmethod
    def add_breathing_session(self, session: BreathingSession) -> BreathingSession: ...

    @abstractmethod
    def list_breathing_sessions(self, anonymous_id: str) -> List[BreathingSession]: ...

    @abstractmethod
    def add_hobby(self, hobby: Hobby) -> Hobby: ...

    @abstractmethod
    def list_hobbies(self, anonymous_id: str) -> List[Hobby]: ...

    @abstractmethod
    def add_favorite_affirmation(self, favorite: FavoriteAffirmation) -> FavoriteAffirmation: ...

    @abstractmethod
    def list_favorite_affirmations(self, anonymous_id: str) -> List[FavoriteAffirmation]: ...

    @abstractmethod
    def delete_favorite_affirmation(self, favorite_id: str) -> bool: ...


class MemoryEventLog(EventLog):
    """Volatile store. Everything is lost when the process exits."""

    def __init__(self):
        self._lock = threading.Lock()
        self._profiles: Dict[str, UserProfile] = {}
        self._moods: Dict[str, MoodLog] = {}
        self._journal: Dict[str, JournalEntry] = {}
        self._breathing: Dict[str, BreathingSession] = {}
        self._hobbies: Dict[str, Hobby] = {}
        self._favorites: Dict[str, FavoriteAffirmation] = {}

    def upsert_profile(self, profile):
        with self._lock:
            existed = profile.anonymous_id in self._profiles
            self._profiles[profile.anonymous_id] = profile
        return existed

    def get_profile(self, anonymous_id):
        return self._profiles.get(anonymous_id)

    def add_mood_log(self, log):
        with self._lock:
            self._moods[log.id] = log
        return log

    def list_mood_logs(self, anonymous_id):
        with self._lock:
            items = [m for m in self._moods.values() if m.anonymous_id == anonymous_id]
        return sorted(items, key=lambda m: m.logged_at, reverse=True)

    def add_journal_entry(self, entry):
        with self._lock:
            self._journal[entry.id] = entry
        return entry

    def get_journal_entry(self, entry_id):
        return self._journal.get(entry_id)

    def update_journal_entry(self, entry_id, changes):
        with self._lock:
            existing = self._journal.get(entry_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=changes.model_dump(exclude_none=True))
            self._journal[entry_id] = updated
        return updated

    def delete_journal_entry(self, entry_id):
        with self._lock:
            return self._journal.pop(entry_id, None) is not None

    def list_journal_entries(self, anonymous_id):
        with self._lock:
            items = [j for j in self._journal.values() if j.anonymous_id == anonymous_id]
        return sorted(items, key=lambda j: j.created_at, reverse=True)

    def add_breathing_session(self, session):
        with self._lock:
            self._breathing[session.id] = session
        return session

    def list_breathing_sessions(self, anonymous_id):
        with self._lock:
            items = [b for b in self._breathing.values() if b.anonymous_id == anonymous_id]
        return sorted(items, key=lambda b: b.created_at, reverse=True)

    def add_hobby(self, hobby):
        with self._lock:
            self._hobbies[hobby.id] = hobby
        return hobby

    def list_hobbies(self, anonymous_id):
        with self._lock:
            return [h for h in self._hobbies.values() if h.anonymous_id == anonymous_id]

    def add_favorite_affirmation(self, favorite):
        with self._lock:
            self._favorites[favorite.id] = favorite
        return favorite

    def list_favorite_affirmations(self, anonymous_id):
        with self._lock:
            items = [f for f in self._favorites.values() if f.anonymous_id == anonymous_id]
        return sorted(items, key=lambda f: f.created_at, reverse=True)

    def delete_favorite_affirmation(self, favorite_id):
        with self._lock:
            return self._favorites.pop(favorite_id, None) is not None


@contextmanager
def _guard(action: str):
    try:
        yield
    except PyMongoError as e:
        raise EventLogUnavailable(f"{action} failed: {e}") from e


class MongoEventLog(EventLog):
    """Event log backed by MongoDB. Collection name = lowercase of the record class."""

    def __init__(self, url: str, name: str):
        self.client = MongoClient(url, tz_aware=True)
        self.db = self.client[name]

    def _insert(self, collection: str, record):
        with _guard(f"insert into {collection}"):
            self.db[collection].insert_one(record.model_dump())
        return record

    def _find(self, collection: str, anonymous_id: str, sort_field: Optional[str] = None) -> List[dict]:
        with _guard(f"read {collection}"):
            cursor = self.db[collection].find({"anonymous_id": anonymous_id}, {"_id": 0})
            if sort_field:
                cursor = cursor.sort(sort_field, DESCENDING)
            return list(cursor)

    def upsert_profile(self, profile):
        data = profile.model_dump()
        data["updated_at"] = datetime.now().astimezone()
        with _guard("upsert userprofile"):
            result = self.db["userprofile"].update_one(
                {"anonymous_id": profile.anonymous_id}, {"$set": data}, upsert=True
            )
        return result.upserted_id is None

    def get_profile(self, anonymous_id):
        with _guard("read userprofile"):
            doc = self.db["userprofile"].find_one({"anonymous_id": anonymous_id}, {"_id": 0})
        return UserProfile.model_validate(doc) if doc else None

    def add_mood_log(self, log):
        return self._insert("moodlog", log)

    def list_mood_logs(self, anonymous_id):
        return [MoodLog.model_validate(d) for d in self._find("moodlog", anonymous_id, "logged_at")]

    def add_journal_entry(self, entry):
        return self._insert("journalentry", entry)

    def get_journal_entry(self, entry_id):
        with _guard("read journalentry"):
            doc = self.db["journalentry"].find_one({"id": entry_id}, {"_id": 0})
        return JournalEntry.model_validate(doc) if doc else None

    def update_journal_entry(self, entry_id, changes):
        data = changes.model_dump(exclude_none=True)
        with _guard("update journalentry"):
            if data:
                self.db["journalentry"].update_one({"id": entry_id}, {"$set": data})
        return self.get_journal_entry(entry_id)

    def delete_journal_entry(self, entry_id):
        with _guard("delete journalentry"):
            result = self.db["journalentry"].delete_one({"id": entry_id})
        return result.deleted_count > 0

    def list_journal_entries(self, anonymous_id):
        return [JournalEntry.model_validate(d) for d in self._find("journalentry", anonymous_id, "created_at")]

    def add_breathing_session(self, session):
        return self._insert("breathingsession", session)

    def list_breathing_sessions(self, anonymous_id):
        return [BreathingSession.model_validate(d) for d in self._find("breathingsession", anonymous_id, "created_at")]

    def add_hobby(self, hobby):
        return self._insert("hobby", hobby)

    def list_hobbies(self, anonymous_id):
        return [Hobby.model_validate(d) for d in self._find("hobby", anonymous_id)]

    def add_favorite_affirmation(self, favorite):
        return self._insert("favoriteaffirmation", favorite)

    def list_favorite_affirmations(self, anonymous_id):
        return [FavoriteAffirmation.model_validate(d)
                for d in self._find("favoriteaffirmation", anonymous_id, "created_at")]

    def delete_favorite_affirmation(self, favorite_id):
        with _guard("delete favoriteaffirmation"):
            result = self.db["favoriteaffirmation"].delete_one({"id": favorite_id})
        return result.deleted_count > 0


_event_log: Optional[EventLog] = None
_event_log_lock = threading.Lock()


def get_event_log() -> EventLog:
    """FastAPI dependency returning the process-wide event log."""
    global _event_log
    if _event_log is None:
        with _event_log_lock:
            if _event_log is None:
                if settings.DATABASE_URL:
                    logger.info("Using MongoDB event log (database %s)", settings.DATABASE_NAME)
                    _event_log = MongoEventLog(settings.DATABASE_URL, settings.DATABASE_NAME)
                else:
                    logger.info("DATABASE_URL not set, using in-memory event log")
                    _event_log = MemoryEventLog()
    return _event_log
