"""
Health Routes - Liveness and reminder scheduler state
"""
from fastapi import APIRouter, Depends

from gearup import __version__
from gearup.core.dependencies import get_reminder_scheduler
from gearup.services.scheduler import ReminderScheduler

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(scheduler: ReminderScheduler = Depends(get_reminder_scheduler)):
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Server is alive",
        "version": __version__,
        "reminders_scheduled": scheduler.is_scheduled()
    }
