import logging
from datetime import datetime
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import EventLog, EventLogUnavailable, MemoryEventLog, get_event_log
from recommender import build_recommendations
from schemas import (
    BreathingSession,
    BreathingSessionCreate,
    FavoriteAffirmation,
    FavoriteAffirmationCreate,
    Hobby,
    HobbyCreate,
    JournalEntry,
    JournalEntryCreate,
    JournalEntryUpdate,
    MoodLog,
    MoodLogCreate,
    Recommendations,
    UserProfile,
    UserStats,
)
from stats import compute_stats

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mental Wellness API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EventLogUnavailable)
async def event_log_unavailable(request, exc):
    logger.error("Event log unavailable on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Event store unavailable"})


def require_user(log: EventLog, anonymous_id: str):
    if not log.user_exists(anonymous_id):
        raise HTTPException(status_code=404, detail="User not found")


def _aware(ts: datetime) -> datetime:
    # naive values are local time
    return ts if ts.tzinfo is not None else ts.astimezone()


@app.get("/")
def read_root():
    return {"message": "Mental Wellness API running"}


# ---------- Profiles ----------
@app.post("/api/profile")
def upsert_profile(payload: UserProfile, log: EventLog = Depends(get_event_log)):
    try:
        existed = log.upsert_profile(payload)
    except EventLogUnavailable:
        logger.exception("Profile upsert failed for %s", payload.anonymous_id)
        raise HTTPException(status_code=500, detail="Failed to save profile")
    return {"status": "updated" if existed else "created"}


@app.get("/api/profile")
def get_profile(anonymous_id: str = Query(...), log: EventLog = Depends(get_event_log)):
    profile = log.get_profile(anonymous_id)
    if profile is None:
        # Return minimal default
        return UserProfile(anonymous_id=anonymous_id)
    return profile


@app.get("/api/user")
def get_user(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    profile = log.get_profile(anonymous_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"id": profile.anonymous_id, "name": profile.name}


# ---------- Mood Logs ----------
@app.post("/api/moodlog", response_model=MoodLog)
def add_mood_log(payload: MoodLogCreate, log: EventLog = Depends(get_event_log)):
    require_user(log, payload.anonymous_id)
    try:
        return log.add_mood_log(MoodLog(**payload.model_dump()))
    except EventLogUnavailable:
        logger.exception("Saving mood log failed")
        raise HTTPException(status_code=500, detail="Failed to save mood entry")


@app.get("/api/moodlog", response_model=List[MoodLog])
def list_mood_logs(anonymous_id: str, limit: Optional[int] = Query(None, ge=1),
                   log: EventLog = Depends(get_event_log)):
    try:
        items = log.list_mood_logs(anonymous_id)
    except EventLogUnavailable:
        logger.exception("Listing mood logs failed")
        raise HTTPException(status_code=500, detail="Failed to fetch mood entries")
    return items[:limit] if limit else items


@app.get("/api/moodlog/range", response_model=List[MoodLog])
def list_mood_logs_in_range(anonymous_id: str, start: datetime, end: datetime,
                            log: EventLog = Depends(get_event_log)):
    start, end = _aware(start), _aware(end)
    try:
        items = log.list_mood_logs(anonymous_id)
    except EventLogUnavailable:
        logger.exception("Listing mood logs failed")
        raise HTTPException(status_code=500, detail="Failed to fetch mood entries for date range")
    in_range = [m for m in items if start <= _aware(m.logged_at) <= end]
    return sorted(in_range, key=lambda m: _aware(m.logged_at))


# ---------- Journal ----------
@app.post("/api/journal", response_model=JournalEntry)
def add_journal(payload: JournalEntryCreate, log: EventLog = Depends(get_event_log)):
    require_user(log, payload.anonymous_id)
    try:
        return log.add_journal_entry(JournalEntry(**payload.model_dump()))
    except EventLogUnavailable:
        logger.exception("Saving journal entry failed")
        raise HTTPException(status_code=500, detail="Failed to save journal entry")


@app.get("/api/journal", response_model=List[JournalEntry])
def list_journal(anonymous_id: str, limit: int = Query(20, ge=1),
                 log: EventLog = Depends(get_event_log)):
    try:
        return log.list_journal_entries(anonymous_id)[:limit]
    except EventLogUnavailable:
        logger.exception("Listing journal entries failed")
        raise HTTPException(status_code=500, detail="Failed to fetch journal entries")


@app.get("/api/journal/{entry_id}", response_model=JournalEntry)
def get_journal(entry_id: str, log: EventLog = Depends(get_event_log)):
    entry = log.get_journal_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return entry


@app.put("/api/journal/{entry_id}", response_model=JournalEntry)
def update_journal(entry_id: str, payload: JournalEntryUpdate, log: EventLog = Depends(get_event_log)):
    entry = log.update_journal_entry(entry_id, payload)
    if entry is None:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return entry


@app.delete("/api/journal/{entry_id}")
def delete_journal(entry_id: str, log: EventLog = Depends(get_event_log)):
    if not log.delete_journal_entry(entry_id):
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return {"success": True}


# ---------- Breathing ----------
@app.post("/api/breathing", response_model=BreathingSession)
def add_breathing_session(payload: BreathingSessionCreate, log: EventLog = Depends(get_event_log)):
    require_user(log, payload.anonymous_id)
    try:
        return log.add_breathing_session(BreathingSession(**payload.model_dump()))
    except EventLogUnavailable:
        logger.exception("Saving breathing session failed")
        raise HTTPException(status_code=500, detail="Failed to save breathing session")


@app.get("/api/breathing", response_model=List[BreathingSession])
def list_breathing_sessions(anonymous_id: str, limit: Optional[int] = Query(None, ge=1),
                            log: EventLog = Depends(get_event_log)):
    try:
        items = log.list_breathing_sessions(anonymous_id)
    except EventLogUnavailable:
        logger.exception("Listing breathing sessions failed")
        raise HTTPException(status_code=500, detail="Failed to fetch breathing sessions")
    return items[:limit] if limit else items


# ---------- Hobbies ----------
@app.post("/api/hobbies", response_model=Hobby, status_code=201)
def add_hobby(payload: HobbyCreate, log: EventLog = Depends(get_event_log)):
    require_user(log, payload.anonymous_id)
    try:
        return log.add_hobby(Hobby(**payload.model_dump()))
    except EventLogUnavailable:
        logger.exception("Saving hobby failed")
        raise HTTPException(status_code=500, detail="Failed to create hobby")


@app.get("/api/hobbies", response_model=List[Hobby])
def list_hobbies(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    try:
        return log.list_hobbies(anonymous_id)
    except EventLogUnavailable:
        logger.exception("Listing hobbies failed")
        raise HTTPException(status_code=500, detail="Failed to fetch hobbies")


# ---------- Favorite affirmations ----------
@app.post("/api/affirmations/favorites", response_model=FavoriteAffirmation)
def add_favorite_affirmation(payload: FavoriteAffirmationCreate, log: EventLog = Depends(get_event_log)):
    require_user(log, payload.anonymous_id)
    try:
        return log.add_favorite_affirmation(FavoriteAffirmation(**payload.model_dump()))
    except EventLogUnavailable:
        logger.exception("Saving favorite affirmation failed")
        raise HTTPException(status_code=500, detail="Failed to save favorite affirmation")


@app.get("/api/affirmations/favorites", response_model=List[FavoriteAffirmation])
def list_favorite_affirmations(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    try:
        require_user(log, anonymous_id)
        return log.list_favorite_affirmations(anonymous_id)
    except EventLogUnavailable:
        logger.exception("Listing favorite affirmations failed")
        raise HTTPException(status_code=500, detail="Failed to fetch favorite affirmations")


@app.delete("/api/affirmations/favorites/{favorite_id}")
def delete_favorite_affirmation(favorite_id: str, log: EventLog = Depends(get_event_log)):
    try:
        deleted = log.delete_favorite_affirmation(favorite_id)
    except EventLogUnavailable:
        logger.exception("Deleting favorite affirmation failed")
        raise HTTPException(status_code=500, detail="Failed to delete favorite affirmation")
    if not deleted:
        raise HTTPException(status_code=404, detail="Favorite affirmation not found")
    return {"success": True}


# ---------- Stats & Suggestions ----------
@app.get("/api/stats", response_model=UserStats)
def user_stats(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    try:
        require_user(log, anonymous_id)
        return compute_stats(log, anonymous_id)
    except EventLogUnavailable:
        logger.exception("Computing stats failed for %s", anonymous_id)
        raise HTTPException(status_code=500, detail="Failed to fetch user stats")


@app.get("/api/suggestions", response_model=Recommendations, response_model_exclude_none=True)
def get_suggestions(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    try:
        require_user(log, anonymous_id)
        return build_recommendations(log, anonymous_id)
    except EventLogUnavailable:
        logger.exception("Generating suggestions failed for %s", anonymous_id)
        raise HTTPException(status_code=500, detail="Failed to generate suggestions")


# ---------- Export ----------
@app.get("/api/export")
def export_data(anonymous_id: str, log: EventLog = Depends(get_event_log)):
    try:
        profile = log.get_profile(anonymous_id)
        return {
            "profile": profile.model_dump() if profile else {},
            "mood_logs": [m.model_dump() for m in log.list_mood_logs(anonymous_id)],
            "journal": [j.model_dump() for j in log.list_journal_entries(anonymous_id)],
            "breathing": [b.model_dump() for b in log.list_breathing_sessions(anonymous_id)],
            "hobbies": [h.model_dump() for h in log.list_hobbies(anonymous_id)],
            "favorite_affirmations": [f.model_dump() for f in log.list_favorite_affirmations(anonymous_id)],
        }
    except EventLogUnavailable:
        logger.exception("Export failed for %s", anonymous_id)
        raise HTTPException(status_code=500, detail="Failed to export data")


@app.get("/health")
def health(log: EventLog = Depends(get_event_log)):
    response = {
        "backend": "running",
        "store": "memory" if isinstance(log, MemoryEventLog) else "mongodb",
        "database_url": "set" if settings.DATABASE_URL else "not set",
        "database_name": settings.DATABASE_NAME,
    }
    try:
        log.get_profile("__health__")
        response["status"] = "ok"
    except EventLogUnavailable as e:
        response["status"] = f"error: {str(e)[:50]}"
    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
