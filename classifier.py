from collections import Counter
from typing import Iterable

from schemas import EmotionalContext, JournalEntry, MoodLog

MOOD_WINDOW = 14
JOURNAL_WINDOW = 10
NEUTRAL_MOOD = 3.0

STRESS_EMOTIONS = ('anxious', 'stressed', 'overwhelmed')


def recent_moods(mood_logs: Iterable[MoodLog], n: int = MOOD_WINDOW):
    return sorted(mood_logs, key=lambda m: m.logged_at, reverse=True)[:n]


def recent_journals(entries: Iterable[JournalEntry], n: int = JOURNAL_WINDOW):
    return sorted(entries, key=lambda j: j.created_at, reverse=True)[:n]


def classify(mood_logs: Iterable[MoodLog], journal_entries: Iterable[JournalEntry]) -> EmotionalContext:
    """Infer the user's emotional state from their latest moods and journal tags.

    Uses the 14 most recent mood logs and the 10 most recent journal entries,
    whatever order they are passed in. Labels are checked in priority order:
    crisis, high-stress, moderate, good.
    """
    moods = recent_moods(mood_logs)
    journals = recent_journals(journal_entries)

    avg = sum(m.mood for m in moods) / len(moods) if moods else NEUTRAL_MOOD

    patterns = Counter()
    for entry in journals:
        patterns.update(entry.emotions)

    low_mood_count = sum(1 for m in moods if m.mood <= 2)
    stress_count = sum(patterns[e] for e in STRESS_EMOTIONS)

    if avg < 2 or low_mood_count > 5:
        label = 'crisis'
    elif stress_count > 3 or avg < 2.5:
        label = 'high-stress'
    elif avg < 3.5:
        label = 'moderate'
    else:
        label = 'good'

    return EmotionalContext(
        average_mood=avg,
        mood_context=label,
        emotional_patterns=dict(patterns),
        needs_connection=patterns['sad'] > 2 or patterns['lonely'] > 1,
    )
