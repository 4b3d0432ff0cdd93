"""
Activity suggestions personalised to the user's recent emotional state.

select_candidates() filters the catalog, rank() orders and truncates it,
recommend() adds guidance and support resources, and
build_recommendations() runs the whole pipeline against an event log.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from catalog import ACTIVITY_CATALOG, SUPPORT_RESOURCES
from classifier import classify
from database import EventLog
from guidance import StaticGuidance
from schemas import ActivitySuggestion, EmotionalContext, Hobby, Recommendations

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 6

_default_guidance = StaticGuidance()


def _is_crisis_support(s: ActivitySuggestion) -> bool:
    return s.crisis_support is True


# Filters per branch. suggestion_branch() decides which one applies.
def _stress_filter(s):
    return s.stress_level in ('high', 'moderate') or _is_crisis_support(s)


def _connection_filter(s):
    return s.social_support is True or s.category == "Connection" or s.mood_boost >= 4


def _moderate_filter(s):
    return s.mood_boost >= 3 and s.difficulty != "Hard"


def _good_filter(s):
    return s.mood_boost >= 3


def suggestion_branch(context: EmotionalContext) -> str:
    if context.mood_context == 'crisis':
        return 'crisis'
    if context.mood_context == 'high-stress':
        return 'high-stress'
    if context.needs_connection:
        return 'connection'
    if context.mood_context == 'moderate':
        return 'moderate'
    return 'good'


_BRANCH_FILTERS = {
    'crisis': _is_crisis_support,
    'high-stress': _stress_filter,
    'connection': _connection_filter,
    'moderate': _moderate_filter,
    'good': _good_filter,
}


def select_candidates(
    catalog: Iterable[ActivitySuggestion],
    context: EmotionalContext,
    adopted: Iterable[Hobby] = (),
) -> Tuple[str, List[ActivitySuggestion]]:
    """Drop already adopted activities and keep those fitting the user's state.

    Returns the branch that decided the filter and the candidates in catalog
    order. An empty candidate list is a valid answer.
    """
    taken = {h.name.lower() for h in adopted}
    available = [s for s in catalog if s.name.lower() not in taken]
    branch = suggestion_branch(context)
    keep = _BRANCH_FILTERS[branch]
    return branch, [s for s in available if keep(s)]


def rank(
    candidates: Sequence[ActivitySuggestion],
    context: EmotionalContext,
    limit: int = MAX_SUGGESTIONS,
) -> List[ActivitySuggestion]:
    # sorted() is stable, so equal keys keep catalog order
    if context.mood_context == 'crisis':
        key = lambda s: (not _is_crisis_support(s), -s.mood_boost)
    else:
        key = lambda s: -s.mood_boost
    return sorted(candidates, key=key)[:limit]


def recommend(
    catalog: Iterable[ActivitySuggestion],
    context: EmotionalContext,
    adopted: Iterable[Hobby] = (),
    guidance: Optional[StaticGuidance] = None,
) -> dict:
    if guidance is None:
        guidance = _default_guidance
    branch, candidates = select_candidates(catalog, context, adopted)
    suggestions = rank(candidates, context)
    urgent = context.mood_context in ('crisis', 'high-stress')
    logger.debug("branch=%s candidates=%d returned=%d", branch, len(candidates), len(suggestions))
    return {
        "suggestions": suggestions,
        "recommendations": guidance.for_branch(branch),
        "support_resources": list(SUPPORT_RESOURCES) if urgent else [],
    }


def build_recommendations(
    log: EventLog,
    anonymous_id: str,
    catalog: Sequence[ActivitySuggestion] = ACTIVITY_CATALOG,
    guidance: Optional[StaticGuidance] = None,
) -> Recommendations:
    context = classify(log.list_mood_logs(anonymous_id), log.list_journal_entries(anonymous_id))
    result = recommend(catalog, context, log.list_hobbies(anonymous_id), guidance)
    return Recommendations(
        suggestions=result["suggestions"],
        average_mood=context.average_mood,
        mood_context=context.mood_context,
        recommendations=result["recommendations"],
        emotional_patterns=context.emotional_patterns,
        support_resources=result["support_resources"],
    )
