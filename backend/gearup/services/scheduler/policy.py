"""
Reminder Policy - when hydration reminders fire
Pure functions of the settings record and a minute-of-day clock
"""
from datetime import datetime, timedelta
from typing import Optional

from gearup.core.constants import MINUTES_PER_DAY, DISPLAY_TIME_FORMAT, REMINDERS_DISABLED_DISPLAY
from gearup.models.settings import ReminderSettings
from gearup.utils.timezone import get_local_now


def compute_initial_delay(start_minute: int, current_minute: int) -> int:
    """
    Minutes until the next occurrence of the window start

    Before the start today -> wait until today's start.
    At or after it -> wait until tomorrow's start.
    """
    if current_minute < start_minute:
        return start_minute - current_minute
    return (MINUTES_PER_DAY - current_minute) + start_minute


def should_notify_now(reminder_settings: ReminderSettings, now_minute: int) -> bool:
    """
    enabled and start <= now <= end (inclusive).
    A window with start > end wraps midnight and never matches.
    """
    return (
        reminder_settings.enabled
        and reminder_settings.start_minute <= now_minute <= reminder_settings.end_minute
    )


def next_reminder_time(reminder_settings: ReminderSettings, now: Optional[datetime] = None) -> str:
    """'HH:MM' one interval from now, or 'Reminders disabled'"""
    if not reminder_settings.enabled:
        return REMINDERS_DISABLED_DISPLAY
    now = now or get_local_now()
    return (now + timedelta(minutes=reminder_settings.interval_minutes)).strftime(DISPLAY_TIME_FORMAT)
