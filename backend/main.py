"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from gearup import __version__
from gearup.core.dependencies import record_store, reminder_scheduler
from gearup.routes import habits, health, mood, settings, widget
from gearup.services.habits import ensure_defaults_seeded
from gearup.services.scheduler import apply_reminder_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)
logging.getLogger('twilio.http_client').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    # Startup
    ensure_defaults_seeded(record_store)
    try:
        reminder_scheduler.start()
        apply_reminder_settings(record_store, reminder_scheduler)
        logger.info("✓ Hydration reminder scheduler started")
    except Exception as e:
        logger.warning(f"Could not start scheduler: {e}")

    yield

    # Shutdown
    try:
        reminder_scheduler.shutdown()
        logger.info("✓ Hydration reminder scheduler stopped")
    except Exception as e:
        logger.warning(f"Error stopping scheduler: {e}")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="GearUp Wellness API",
    version=__version__,
    lifespan=lifespan
)

# Register routes
app.include_router(health.router)
app.include_router(habits.router)
app.include_router(mood.router)
app.include_router(settings.router)
app.include_router(widget.router)
