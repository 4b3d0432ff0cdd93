import random

from classifier import classify
from schemas import EMOTION_TAGS
from tests.factories import journal, mood


def test_cold_start_is_neutral():
    ctx = classify([], [])
    assert ctx.average_mood == 3
    assert ctx.mood_context == 'moderate'
    assert ctx.emotional_patterns == {}
    assert not ctx.needs_connection


def test_all_lowest_moods_is_crisis():
    ctx = classify([mood(1, days_ago=i) for i in range(14)], [])
    assert ctx.average_mood == 1
    assert ctx.mood_context == 'crisis'


def test_many_low_moods_is_crisis_even_with_decent_average():
    # six lows (2) and eight highs (5): average 3.71
    moods = [mood(2, days_ago=i) for i in range(6)] + [mood(5, days_ago=6 + i) for i in range(8)]
    ctx = classify(moods, [])
    assert ctx.average_mood > 3.5
    assert ctx.mood_context == 'crisis'


def test_five_low_moods_is_not_crisis():
    moods = [mood(2, days_ago=i) for i in range(5)] + [mood(5, days_ago=5 + i) for i in range(9)]
    assert classify(moods, []).mood_context == 'good'


def test_crisis_wins_over_stress_tags():
    journals = [journal(['anxious', 'stressed', 'overwhelmed'], days_ago=i) for i in range(5)]
    ctx = classify([mood(1), mood(2, days_ago=1)], journals)
    assert ctx.average_mood < 2
    assert ctx.mood_context == 'crisis'


def test_stress_tags_give_high_stress():
    journals = [journal(['anxious', 'stressed']), journal(['overwhelmed', 'tired'], days_ago=1)]
    assert classify([mood(4)], journals).mood_context == 'good'

    journals.append(journal(['anxious'], days_ago=2))
    ctx = classify([mood(4)], journals)
    assert ctx.emotional_patterns['anxious'] == 2
    assert ctx.mood_context == 'high-stress'


def test_low_average_gives_high_stress():
    ctx = classify([mood(2), mood(3, days_ago=1)], [])
    assert ctx.average_mood == 2.5
    assert ctx.mood_context == 'moderate'

    ctx = classify([mood(2), mood(2, days_ago=1), mood(3, days_ago=2)], [])
    assert ctx.mood_context == 'high-stress'


def test_moderate_and_good_threshold():
    assert classify([mood(3), mood(4, days_ago=1)], []).mood_context == 'good'
    assert classify([mood(3), mood(3, days_ago=1), mood(4, days_ago=2)], []).mood_context == 'moderate'


def test_only_latest_fourteen_moods_count():
    recent = [mood(5, days_ago=i) for i in range(14)]
    old = [mood(1, days_ago=30 + i) for i in range(20)]
    moods = recent + old
    random.Random(7).shuffle(moods)
    ctx = classify(moods, [])
    assert ctx.average_mood == 5
    assert ctx.mood_context == 'good'


def test_only_latest_ten_journals_count():
    recent = [journal(['calm'], days_ago=i) for i in range(10)]
    old = [journal(['sad', 'lonely'], days_ago=20 + i) for i in range(5)]
    ctx = classify([], old + recent)
    assert ctx.emotional_patterns == {'calm': 10}
    assert not ctx.needs_connection


def test_tags_counted_per_occurrence():
    ctx = classify([], [journal(['sad', 'tired']), journal(['sad'], days_ago=1), journal([], days_ago=2)])
    assert ctx.emotional_patterns == {'sad': 2, 'tired': 1}


def test_needs_connection():
    assert not classify([], [journal(['sad']), journal(['sad'], days_ago=1)]).needs_connection
    assert classify([], [journal(['sad'], days_ago=i) for i in range(3)]).needs_connection
    assert classify([], [journal(['lonely']), journal(['lonely'], days_ago=1)]).needs_connection


def test_journal_vocabulary_includes_peaceful():
    assert 'peaceful' in EMOTION_TAGS
    ctx = classify([mood(4)], [journal(['peaceful', 'calm'])])
    assert ctx.emotional_patterns == {'peaceful': 1, 'calm': 1}
    assert ctx.mood_context == 'good'
