"""
Reminder Settings Service - reading and changing the reminder configuration
Every change re-applies the schedule so registration follows the settings
"""
import logging
from datetime import datetime
from typing import Optional, Dict, Any

from gearup.core.exceptions import InvalidReminderSettingsError
from gearup.models.settings import ReminderSettings, parse_clock, format_clock
from gearup.storage import RecordStore
from .policy import next_reminder_time
from .service import ReminderScheduler

logger = logging.getLogger(__name__)


def apply_reminder_settings(store: RecordStore, scheduler: ReminderScheduler,
                            now: Optional[datetime] = None) -> Optional[int]:
    """Schedule or cancel reminders from the persisted settings"""
    return scheduler.schedule(store.get_settings(), now=now)


def update_reminder_settings(store: RecordStore, scheduler: ReminderScheduler,
                             enabled: Optional[bool] = None,
                             interval_minutes: Optional[int] = None,
                             start_time: Optional[str] = None,
                             end_time: Optional[str] = None,
                             now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Persist a partial settings change and reschedule

    Args:
        enabled: New enabled flag
        interval_minutes: New interval, must be positive
        start_time: New window start, HH:MM
        end_time: New window end, HH:MM

    Returns:
        Dict with status, message and the current reminder status

    Raises:
        InvalidReminderSettingsError: If the interval or a time is invalid
    """
    changes: Dict[str, Any] = {}
    if enabled is not None:
        changes["enabled"] = enabled
    if interval_minutes is not None:
        if interval_minutes <= 0:
            raise InvalidReminderSettingsError("Reminder interval must be a positive number of minutes")
        changes["interval_minutes"] = interval_minutes
    try:
        if start_time is not None:
            changes["start_minute"] = parse_clock(start_time)
        if end_time is not None:
            changes["end_minute"] = parse_clock(end_time)
    except ValueError:
        raise InvalidReminderSettingsError("Invalid time format. Use HH:MM (24-hour)")

    if not changes:
        raise InvalidReminderSettingsError("No reminder settings provided")

    updated = store.update_settings(**changes)
    scheduler.schedule(updated, now=now)

    if enabled is True:
        message = "Hydration reminders enabled! 💧"
    elif enabled is False:
        message = "Hydration reminders disabled"
    else:
        message = "Reminder settings updated"
    logger.info(f"Reminder settings updated: {changes}")

    return {
        "status": "success",
        "message": message,
        **get_reminder_status(store, scheduler, now=now)
    }


def describe_settings(reminder_settings: ReminderSettings) -> Dict[str, Any]:
    return {
        "enabled": reminder_settings.enabled,
        "interval_minutes": reminder_settings.interval_minutes,
        "start_time": format_clock(reminder_settings.start_minute),
        "end_time": format_clock(reminder_settings.end_minute)
    }


def get_reminder_status(store: RecordStore, scheduler: ReminderScheduler,
                        now: Optional[datetime] = None) -> Dict[str, Any]:
    """Current settings, registration state and the next reminder time"""
    reminder_settings = store.get_settings()
    next_fire = scheduler.next_fire_time()
    return {
        "settings": describe_settings(reminder_settings),
        "scheduled": scheduler.is_scheduled(),
        "next_fire_time": next_fire.isoformat() if next_fire else None,
        "next_reminder": next_reminder_time(reminder_settings, now)
    }
