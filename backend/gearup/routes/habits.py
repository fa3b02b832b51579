"""
Habit Routes - Endpoints for habit management and daily progress
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from gearup.core.dependencies import get_record_store
from gearup.core.exceptions import HabitNotFoundError, InvalidHabitDataError, StorageError
from gearup.models.habit import AddHabitRequest, UpdateHabitRequest
from gearup.services import habits as habit_service
from gearup.storage import RecordStore

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("")
async def list_habits(store: RecordStore = Depends(get_record_store)):
    """List all habits"""
    return {"status": "success", "habits": habit_service.list_habits(store)}


@router.post("")
async def add_habit(request: AddHabitRequest, store: RecordStore = Depends(get_record_store)):
    """Add a new habit"""
    try:
        return habit_service.add_habit(
            store, request.name, request.target_value, request.unit,
            description=request.description, icon=request.icon
        )
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/today")
async def get_today_habits(store: RecordStore = Depends(get_record_store)):
    """Get all habits with today's progress"""
    return habit_service.get_today_habits(store)


@router.get("/summary/today")
async def get_daily_summary(store: RecordStore = Depends(get_record_store)):
    """Get today's completion summary"""
    today = habit_service.get_today_habits(store)
    return {"status": "success", "date": today["date"], "summary": today["summary"]}


@router.get("/share", response_class=PlainTextResponse)
async def share_progress(store: RecordStore = Depends(get_record_store)):
    """Plain-text progress report for sharing"""
    try:
        return habit_service.format_progress_share(store)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/reset")
async def reset_habits(store: RecordStore = Depends(get_record_store)):
    """Delete all habits and progress"""
    try:
        return habit_service.reset_habits(store)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/water/mark")
async def mark_water_habit(store: RecordStore = Depends(get_record_store)):
    """Notification action: log one unit on the water habit"""
    try:
        return habit_service.mark_water_habit(store)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{habit_id}")
async def update_habit(habit_id: str, request: UpdateHabitRequest,
                       store: RecordStore = Depends(get_record_store)):
    """Edit a habit in place"""
    try:
        return habit_service.update_habit(
            store, habit_id, request.name, request.target_value, request.unit,
            description=request.description, icon=request.icon
        )
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{habit_id}")
async def delete_habit(habit_id: str, store: RecordStore = Depends(get_record_store)):
    """Delete a habit and its progress history"""
    try:
        return habit_service.delete_habit(store, habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{habit_id}/increment")
async def increment_habit(habit_id: str, store: RecordStore = Depends(get_record_store)):
    """Add one unit of today's progress to a habit"""
    try:
        return habit_service.mark_habit_progress(store, habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
