"""
Schemas for the Mental Wellness API

Records (MoodLog, JournalEntry, ...) are stored by the event log, one
collection per class: collection name = lowercase of class name
(e.g., MoodLog -> "moodlog"). Response models serialize with camelCase
aliases.
"""
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMOTION_TAGS = [
    'happy', 'calm', 'grateful', 'hopeful', 'excited',
    'peaceful', 'sad', 'lonely', 'anxious', 'stressed', 'overwhelmed', 'angry', 'tired',
]

MoodContext = Literal['crisis', 'high-stress', 'moderate', 'good']


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid4().hex


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Users may be anonymous; anonymous_id is the only user identifier
class UserProfile(BaseModel):
    anonymous_id: str = Field(..., description="Device-scoped anonymous identifier")
    name: Optional[str] = Field(None, description="Display name if provided")
    language: Literal['en', 'ta'] = Field('en', description="Language preference: en (English) or ta (Tamil)")
    goals: List[Literal['stress', 'focus', 'sleep']] = Field(default_factory=list)


# ---------- Event records ----------
class MoodLogCreate(BaseModel):
    anonymous_id: str
    mood: int = Field(..., ge=1, le=5, description="1=Very low, 5=Joyful")
    note: Optional[str] = Field(None, max_length=200)


class MoodLog(MoodLogCreate):
    id: str = Field(default_factory=_new_id)
    logged_at: datetime = Field(default_factory=_now)


class JournalEntryCreate(BaseModel):
    anonymous_id: str
    text: str = Field(..., max_length=1500)
    emotions: List[str] = Field(default_factory=list, description="Emotion tags, see EMOTION_TAGS")

    @field_validator('text')
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text required")
        return v


class JournalEntryUpdate(BaseModel):
    text: Optional[str] = Field(None, max_length=1500)
    emotions: Optional[List[str]] = None

    @field_validator('text')
    @classmethod
    def text_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Text required")
        return v


class JournalEntry(JournalEntryCreate):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_now)


class BreathingSessionCreate(BaseModel):
    anonymous_id: str
    duration: int = Field(..., ge=1, description="Minutes")
    completed: bool = False


class BreathingSession(BreathingSessionCreate):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_now)


class HobbyCreate(BaseModel):
    anonymous_id: str
    name: str = Field(..., min_length=1)
    category: str
    frequency: Literal['daily', 'weekly', 'monthly', 'occasional'] = 'weekly'
    enjoyment_level: int = Field(3, ge=1, le=5)
    is_active: bool = True


class Hobby(HobbyCreate):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_now)


class FavoriteAffirmationCreate(BaseModel):
    anonymous_id: str
    affirmation: str = Field(..., min_length=1, max_length=500)


class FavoriteAffirmation(FavoriteAffirmationCreate):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_now)


# ---------- Catalog ----------
class ActivitySuggestion(CamelModel):
    """A curated wellness activity. Catalog entries never change after import."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    category: str
    description: str
    mood_boost: int = Field(..., ge=1, le=5)
    difficulty: Literal['Easy', 'Medium', 'Hard']
    time_commitment: str
    therapeutic_benefit: str
    crisis_support: Optional[bool] = None
    stress_level: Optional[Literal['emergency', 'high', 'moderate']] = None
    social_support: Optional[bool] = None


class SupportResource(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    contact: str
    description: str


# ---------- Derived ----------
class EmotionalContext(BaseModel):
    average_mood: float
    mood_context: MoodContext
    emotional_patterns: Dict[str, int] = Field(default_factory=dict)
    needs_connection: bool = False


class UserStats(CamelModel):
    current_streak: int = 0
    total_sessions: int = 0
    breathing_total: int = 0
    journal_total: int = 0
    mood_total: int = 0
    hobby_total: int = 0


class Recommendations(CamelModel):
    suggestions: List[ActivitySuggestion] = Field(default_factory=list)
    average_mood: float
    mood_context: MoodContext
    recommendations: List[str] = Field(default_factory=list)
    emotional_patterns: Dict[str, int] = Field(default_factory=dict)
    support_resources: List[SupportResource] = Field(default_factory=list)
