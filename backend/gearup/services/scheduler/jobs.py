"""
Scheduler Job Definitions
The recurring hydration reminder job
"""
import logging
from datetime import datetime
from functools import partial
from typing import Callable, Optional

from gearup.core.config import settings
from gearup.services.notifications.service import NotificationService
from gearup.storage import RecordStore
from gearup.utils.timezone import minute_of_day
from .policy import should_notify_now

logger = logging.getLogger(__name__)


def send_hydration_reminder(store: RecordStore, notification_service: NotificationService,
                            enforce_window: bool = True, now: Optional[datetime] = None) -> bool:
    """
    One firing of the hydration reminder job

    Args:
        store: Record store holding the reminder settings
        notification_service: Delivery channel
        enforce_window: Skip delivery when the firing lands outside the
            active window (False fires unconditionally once scheduled)
        now: Clock override

    Returns:
        True if a reminder was handed to the channel
    """
    try:
        reminder_settings = store.get_settings()
        now_minute = minute_of_day(now)

        if enforce_window and not should_notify_now(reminder_settings, now_minute):
            logger.info(f"[REMINDER] Outside reminder window at minute {now_minute}, skipping")
            return False

        notification = notification_service.send_hydration_reminder()
        logger.info(f"[REMINDER] Hydration reminder: {notification.message}")
        return True

    except Exception as e:
        logger.error(f"[REMINDER] Error in send_hydration_reminder: {e}", exc_info=True)
        return False


def make_hydration_job(store: RecordStore, notification_service: NotificationService,
                       enforce_window: Optional[bool] = None) -> Callable[[], bool]:
    """Bind the job to its collaborators so the scheduler can call it with no arguments"""
    if enforce_window is None:
        enforce_window = settings.ENFORCE_REMINDER_WINDOW
    return partial(send_hydration_reminder, store, notification_service, enforce_window)
