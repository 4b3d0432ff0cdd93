from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Set

from database import EventLog
from schemas import UserStats


def local_day(ts: datetime) -> date:
    """Calendar day of ts in local time. Naive timestamps are taken as local."""
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return ts.date()


def current_streak(timestamps: Iterable[datetime], today: date) -> int:
    """Consecutive days with activity, counting back from today.

    A day without any event ends the streak; no event today means 0.
    """
    active_days: Set[date] = {local_day(ts) for ts in timestamps}
    streak = 0
    d = today
    while d in active_days:
        streak += 1
        d = d - timedelta(days=1)
    return streak


def compute_stats(log: EventLog, anonymous_id: str, now: Optional[datetime] = None) -> UserStats:
    moods = log.list_mood_logs(anonymous_id)
    journals = log.list_journal_entries(anonymous_id)
    breathing = log.list_breathing_sessions(anonymous_id)
    hobbies = log.list_hobbies(anonymous_id)

    today = local_day(now) if now is not None else datetime.now().date()
    timestamps = (
        [m.logged_at for m in moods]
        + [j.created_at for j in journals]
        + [b.created_at for b in breathing]
    )

    return UserStats(
        current_streak=current_streak(timestamps, today),
        total_sessions=len(breathing) + len(journals) + len(moods),
        breathing_total=len(breathing),
        journal_total=len(journals),
        mood_total=len(moods),
        hobby_total=len(hobbies),
    )
