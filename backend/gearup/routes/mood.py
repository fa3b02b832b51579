"""
Mood Routes - Endpoints for the mood journal
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from gearup.core.dependencies import get_record_store
from gearup.core.exceptions import InvalidMoodDataError, StorageError
from gearup.models.mood import MoodEntry, MoodType, SaveMoodRequest
from gearup.services import mood as mood_service
from gearup.storage import RecordStore

router = APIRouter(prefix="/mood", tags=["mood"])


def _present(entry: MoodEntry) -> dict:
    return {
        **entry.model_dump(),
        "display_date": mood_service.display_date(entry.timestamp),
        "display_time": mood_service.display_time(entry.timestamp)
    }


@router.get("")
async def list_moods(store: RecordStore = Depends(get_record_store)):
    """Mood history, newest first"""
    return {"status": "success", "entries": [_present(e) for e in mood_service.list_mood_entries(store)]}


@router.get("/types")
async def list_mood_types():
    """The fixed mood taxonomy"""
    return [
        {"mood": m.value, "emoji": m.emoji, "display_name": m.display_name}
        for m in MoodType.all_moods()
    ]


@router.post("")
async def save_mood(request: SaveMoodRequest, store: RecordStore = Depends(get_record_store)):
    """Save today's mood, overwriting today's entry if there is one"""
    try:
        return mood_service.save_mood(store, request.mood, request.note)
    except InvalidMoodDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/today")
async def get_todays_mood(store: RecordStore = Depends(get_record_store)):
    """Today's entry with the matching mood type for re-selection"""
    entry = mood_service.get_todays_mood(store)
    if entry is None:
        return {"status": "success", "entry": None, "mood": None}
    selected = MoodType.from_emoji(entry.emoji)
    return {
        "status": "success",
        "entry": _present(entry),
        "mood": selected.value if selected else None
    }


@router.get("/range")
async def get_mood_range(start: str = Query(..., description="YYYY-MM-DD"),
                         end: str = Query(..., description="YYYY-MM-DD"),
                         store: RecordStore = Depends(get_record_store)):
    """Entries dated between start and end, inclusive"""
    entries = mood_service.get_mood_entries_for_range(store, start, end)
    return {"status": "success", "entries": [_present(e) for e in entries]}


@router.get("/share/summary", response_class=PlainTextResponse)
async def share_mood_summary(store: RecordStore = Depends(get_record_store)):
    """Plain-text summary of recent moods"""
    summary = mood_service.format_mood_summary(store)
    if summary is None:
        raise HTTPException(status_code=404, detail="No mood entries to share")
    return summary


@router.delete("")
async def clear_moods(store: RecordStore = Depends(get_record_store)):
    """Delete the whole mood history"""
    try:
        return mood_service.clear_moods(store)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
