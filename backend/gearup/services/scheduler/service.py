"""
Reminder Scheduler - hydration reminder lifecycle
Unscheduled -> Scheduled on schedule(enabled); back on cancel() or schedule(disabled)
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from gearup.core.constants import HYDRATION_REMINDER_JOB_ID
from gearup.models.settings import ReminderSettings
from gearup.utils.timezone import get_local_now, minute_of_day
from .policy import compute_initial_delay
from .registry import PeriodicTaskRegistry

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """
    Keeps at most one recurring hydration reminder registered.
    Tracks registration only, not individual firings.
    """

    def __init__(self, registry: PeriodicTaskRegistry, job: Callable[[], bool],
                 task_id: str = HYDRATION_REMINDER_JOB_ID):
        self.registry = registry
        self.job = job
        self.task_id = task_id

    def schedule(self, reminder_settings: ReminderSettings, now: Optional[datetime] = None) -> Optional[int]:
        """
        (Re)register the reminder from the given settings

        Returns:
            Initial delay in minutes, or None when reminders are disabled
        """
        if not reminder_settings.enabled:
            self.cancel()
            return None

        self.cancel()

        now = now or get_local_now()
        delay = compute_initial_delay(reminder_settings.start_minute, minute_of_day(now))
        self.registry.register(
            self.task_id,
            self.job,
            interval_minutes=reminder_settings.interval_minutes,
            initial_delay_minutes=delay,
            name="Hydration reminder",
            now=now
        )
        logger.info(
            f"[SCHEDULER] Hydration reminders every {reminder_settings.interval_minutes} min, "
            f"first in {delay} min"
        )
        return delay

    def cancel(self) -> None:
        """Unregister the reminder; no-op when nothing is registered"""
        if self.registry.cancel(self.task_id):
            logger.info("[SCHEDULER] Hydration reminders cancelled")

    def is_scheduled(self) -> bool:
        return self.registry.is_registered(self.task_id)

    def next_fire_time(self) -> Optional[datetime]:
        return self.registry.next_fire_time(self.task_id)

    def start(self) -> None:
        self.registry.start()
        logger.info("[SCHEDULER] Scheduler started")

    def shutdown(self) -> None:
        self.registry.shutdown()
        logger.info("[SCHEDULER] Scheduler stopped")
