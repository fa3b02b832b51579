"""
Settings Routes - Hydration reminder configuration
"""
from fastapi import APIRouter, Depends, HTTPException

from gearup.core.dependencies import get_record_store, get_reminder_scheduler
from gearup.core.exceptions import InvalidReminderSettingsError, SchedulerError, StorageError
from gearup.models.settings import UpdateReminderSettingsRequest
from gearup.services import scheduler as scheduler_service
from gearup.services.scheduler import ReminderScheduler
from gearup.storage import RecordStore

router = APIRouter(prefix="/settings/reminders", tags=["settings"])


@router.get("")
async def get_reminder_settings(store: RecordStore = Depends(get_record_store),
                                scheduler: ReminderScheduler = Depends(get_reminder_scheduler)):
    """Current reminder settings and scheduling state"""
    return {"status": "success", **scheduler_service.get_reminder_status(store, scheduler)}


@router.put("")
async def update_reminder_settings(request: UpdateReminderSettingsRequest,
                                   store: RecordStore = Depends(get_record_store),
                                   scheduler: ReminderScheduler = Depends(get_reminder_scheduler)):
    """Change reminder settings and reschedule"""
    try:
        return scheduler_service.update_reminder_settings(
            store,
            scheduler,
            enabled=request.enabled,
            interval_minutes=request.interval_minutes,
            start_time=request.start_time,
            end_time=request.end_time
        )
    except InvalidReminderSettingsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (SchedulerError, StorageError) as e:
        raise HTTPException(status_code=500, detail=str(e))
