"""
Scheduler module
Hydration reminder policy, registration and job
"""
from .policy import compute_initial_delay, should_notify_now, next_reminder_time
from .registry import PeriodicTaskRegistry, APSchedulerRegistry
from .service import ReminderScheduler
from .settings import apply_reminder_settings, update_reminder_settings, get_reminder_status
from . import jobs

__all__ = [
    'compute_initial_delay',
    'should_notify_now',
    'next_reminder_time',
    'PeriodicTaskRegistry',
    'APSchedulerRegistry',
    'ReminderScheduler',
    'apply_reminder_settings',
    'update_reminder_settings',
    'get_reminder_status',
    'jobs'
]
