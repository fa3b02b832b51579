"""
Shared fixtures: in-memory store, fake task registry, fixed clock
"""
from datetime import datetime

import pytest

from gearup.services.notifications import NotificationService
from gearup.services.scheduler import PeriodicTaskRegistry, ReminderScheduler
from gearup.storage import MemoryBackend, RecordStore
from gearup.utils.timezone import get_local_tz


class FakeRegistry(PeriodicTaskRegistry):
    """Records registrations instead of running them"""

    def __init__(self):
        self.jobs = {}
        self.register_calls = 0

    def register(self, task_id, func, interval_minutes, initial_delay_minutes, name=None, now=None):
        self.register_calls += 1
        self.jobs[task_id] = {
            "func": func,
            "interval_minutes": interval_minutes,
            "initial_delay_minutes": initial_delay_minutes,
            "now": now
        }

    def cancel(self, task_id):
        return self.jobs.pop(task_id, None) is not None

    def is_registered(self, task_id):
        return task_id in self.jobs


def local_time(year, month, day, hour=0, minute=0, second=0):
    return get_local_tz().localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def store():
    return RecordStore(MemoryBackend())


@pytest.fixture
def now():
    return local_time(2026, 5, 12, 9, 30)


@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def sent_messages():
    return []


@pytest.fixture
def notification_service(sent_messages):
    def send(message):
        sent_messages.append(message)
        return True
    return NotificationService(send)


@pytest.fixture
def reminder_scheduler(registry):
    return ReminderScheduler(registry, job=lambda: True)
