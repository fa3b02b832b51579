"""
Dependency injection for shared clients and resources
"""
from gearup.core.config import settings
from gearup.services.external.whatsapp import is_twilio_configured, send_to_recipient
from gearup.services.notifications.service import NotificationService
from gearup.services.scheduler.jobs import make_hydration_job
from gearup.services.scheduler.registry import APSchedulerRegistry
from gearup.services.scheduler.service import ReminderScheduler
from gearup.storage import JsonFileBackend, RecordStore


def create_record_store() -> RecordStore:
    """Record store on the configured data directory"""
    return RecordStore(JsonFileBackend(settings.DATA_DIR))


def create_notification_service() -> NotificationService:
    """Notification service delivering over WhatsApp when Twilio is configured"""
    return NotificationService(send_to_recipient if is_twilio_configured() else None)


def create_reminder_scheduler(store: RecordStore, notification_service: NotificationService) -> ReminderScheduler:
    """APScheduler-backed reminder scheduler running the hydration job"""
    return ReminderScheduler(APSchedulerRegistry(), make_hydration_job(store, notification_service))


# Create singleton instances for internal use
record_store = create_record_store()
notification_service = create_notification_service()
reminder_scheduler = create_reminder_scheduler(record_store, notification_service)


def get_record_store() -> RecordStore:
    """FastAPI dependency: the process-wide record store"""
    return record_store


def get_reminder_scheduler() -> ReminderScheduler:
    """FastAPI dependency: the process-wide reminder scheduler"""
    return reminder_scheduler
