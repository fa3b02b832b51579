"""
Periodic Task Registry - recurring job registration
At most one registration per task id; registering again replaces it
"""
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from gearup.core.exceptions import SchedulerError
from gearup.utils.timezone import get_local_tz, get_local_now

logger = logging.getLogger(__name__)


class PeriodicTaskRegistry:
    """Interface over a recurring-task facility"""

    def register(self, task_id: str, func: Callable, interval_minutes: int,
                 initial_delay_minutes: int, name: Optional[str] = None,
                 now: Optional[datetime] = None) -> None:
        raise NotImplementedError

    def cancel(self, task_id: str) -> bool:
        raise NotImplementedError

    def is_registered(self, task_id: str) -> bool:
        raise NotImplementedError

    def next_fire_time(self, task_id: str) -> Optional[datetime]:
        return None

    def start(self) -> None:
        pass

    def shutdown(self) -> None:
        pass


class APSchedulerRegistry(PeriodicTaskRegistry):
    """
    APScheduler-backed registry. Jobs registered before start() are kept
    pending and begin firing once the scheduler starts.
    """

    def __init__(self, scheduler: Optional[BackgroundScheduler] = None):
        self.scheduler = scheduler or BackgroundScheduler(timezone=get_local_tz())

    def register(self, task_id: str, func: Callable, interval_minutes: int,
                 initial_delay_minutes: int, name: Optional[str] = None,
                 now: Optional[datetime] = None) -> None:
        tz = get_local_tz()
        start_date = tz.normalize((now or get_local_now()) + timedelta(minutes=initial_delay_minutes))
        try:
            self.scheduler.add_job(
                func=func,
                trigger=IntervalTrigger(minutes=interval_minutes, start_date=start_date, timezone=tz),
                id=task_id,
                name=name or task_id,
                replace_existing=True
            )
        except Exception as e:
            logger.error(f"[SCHEDULER] Failed to register {task_id}: {e}")
            raise SchedulerError(f"Failed to register job '{task_id}': {e}")
        logger.info(f"[SCHEDULER] Registered {task_id}: every {interval_minutes} min, first run {start_date}")

    def cancel(self, task_id: str) -> bool:
        try:
            self.scheduler.remove_job(task_id)
        except JobLookupError:
            return False
        logger.info(f"[SCHEDULER] Cancelled {task_id}")
        return True

    def is_registered(self, task_id: str) -> bool:
        return self.scheduler.get_job(task_id) is not None

    def next_fire_time(self, task_id: str) -> Optional[datetime]:
        job = self.scheduler.get_job(task_id)
        if job is None:
            return None
        # Pending jobs have no computed run time until the scheduler starts
        return getattr(job, "next_run_time", None)

    def start(self) -> None:
        if not self.scheduler.running:
            self.scheduler.start()

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
