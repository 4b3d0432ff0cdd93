from datetime import datetime, timedelta, timezone

from database import MemoryEventLog
from stats import compute_stats, current_streak, local_day
from tests.factories import USER, breathing, hobby, journal, mood


def test_empty_history_gives_zeros(log, now):
    stats = compute_stats(log, USER, now=now)
    assert stats.current_streak == 0
    assert stats.total_sessions == 0
    assert stats.mood_total == stats.journal_total == stats.breathing_total == 0


def test_totals_count_every_log(log, now):
    for i in range(3):
        log.add_mood_log(mood(4, days_ago=i * 10))
    log.add_journal_entry(journal())
    log.add_journal_entry(journal(days_ago=40))
    log.add_breathing_session(breathing(days_ago=2))

    stats = compute_stats(log, USER, now=now)
    assert stats.total_sessions == 6
    assert stats.mood_total == 3
    assert stats.journal_total == 2
    assert stats.breathing_total == 1


def test_streak_mixes_event_types(log, now):
    log.add_mood_log(mood(3, days_ago=0))
    log.add_journal_entry(journal(days_ago=1))
    log.add_breathing_session(breathing(days_ago=2))
    log.add_mood_log(mood(3, days_ago=4))

    assert compute_stats(log, USER, now=now).current_streak == 3


def test_no_event_today_means_no_streak(log, now):
    log.add_mood_log(mood(3, days_ago=1))
    log.add_mood_log(mood(3, days_ago=2))

    assert compute_stats(log, USER, now=now).current_streak == 0


def test_several_events_on_one_day_count_once(log, now):
    log.add_mood_log(mood(3))
    log.add_journal_entry(journal())
    log.add_breathing_session(breathing())

    assert compute_stats(log, USER, now=now).current_streak == 1


def test_day_boundaries():
    today = datetime(2026, 10, 18).date()
    stamps = [
        datetime(2026, 10, 18, 0, 0, 0),
        datetime(2026, 10, 17, 23, 59, 59, 999000),
    ]
    assert current_streak(stamps, today) == 2
    assert current_streak([datetime(2026, 10, 19, 0, 0)], today) == 0


def test_aware_timestamps_use_local_day():
    ts = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    assert local_day(ts) == ts.astimezone().date()


def test_other_users_are_ignored(log, now):
    log.add_mood_log(mood(3, user="someone-else"))
    stats = compute_stats(log, USER, now=now)
    assert stats.mood_total == 0
    assert stats.current_streak == 0


def test_hobbies_are_counted_separately(log, now):
    log.add_hobby(hobby("Music Therapy"))
    stats = compute_stats(log, USER, now=now)
    assert stats.hobby_total == 1
    assert stats.total_sessions == 0


def test_repeated_calls_are_identical(log, now):
    for i in range(5):
        log.add_mood_log(mood(2 + i % 3, days_ago=i))
    first = compute_stats(log, USER, now=now)
    second = compute_stats(log, USER, now=now)
    assert first.model_dump_json() == second.model_dump_json()


def test_long_streak():
    store = MemoryEventLog()
    now = datetime(2026, 10, 18, 9, 30)
    for i in range(30):
        store.add_breathing_session(breathing(days_ago=i, at=now))
    assert compute_stats(store, USER, now=now).current_streak == 30
